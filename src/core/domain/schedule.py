"""
Schedule — модели производственного расписания

Immutable Pydantic модели, которыми scheduler и planner обмениваются с
внешними сервисами (order/batch management):
- StageDurations: длительности стадий для продукта/маршрута
- SchedulePlan: backward-расписание от дедлайна доставки
- ProductProfile: параметры изотопного продукта
- ScheduleRequest: запрос на планирование производства под заказ
- ProductionPlan: расписание + активность, которую нужно произвести
"""

from datetime import datetime
from typing import Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from src.core.math.decay import elapsed_minutes


# =============================================================================
# STAGE DURATIONS
# =============================================================================


class StageDurations(BaseModel):
    """
    Длительности стадий производственной цепочки (минуты, >= 0).

    Задаются конфигурацией продукта (packaging, qc, synthesis) и
    маршрута доставки (travel) вне core.
    """

    travel_minutes: float = Field(..., ge=0, description="Время в пути до клиента")
    packaging_minutes: float = Field(..., ge=0, description="Упаковка")
    qc_minutes: float = Field(..., ge=0, description="Контроль качества")
    synthesis_minutes: float = Field(..., ge=0, description="Синтез")

    model_config = {"frozen": True}

    @property
    def total_minutes(self) -> float:
        """Полная длительность цепочки от начала синтеза до доставки."""
        return (
            self.travel_minutes
            + self.packaging_minutes
            + self.qc_minutes
            + self.synthesis_minutes
        )


# =============================================================================
# SCHEDULE PLAN
# =============================================================================


class SchedulePlan(BaseModel):
    """
    Backward-расписание одного заказа.

    Инвариант: synthesis_start <= qc_start <= packaging_start <= dispatch <= delivery.
    Создаётся заново на каждый запрос, не мутируется.
    """

    synthesis_start: datetime
    qc_start: datetime
    packaging_start: datetime
    dispatch: datetime
    delivery: datetime

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_stage_order(self) -> "SchedulePlan":
        """Проверка монотонности instant'ов по стадиям."""
        stages = self.stages()
        for (prev_name, prev_ts), (name, ts) in zip(stages, stages[1:]):
            if prev_ts > ts:
                raise ValueError(
                    f"{prev_name} ({prev_ts.isoformat()}) must not be later than "
                    f"{name} ({ts.isoformat()})"
                )
        return self

    def stages(self) -> Tuple[Tuple[str, datetime], ...]:
        """Упорядоченные пары (стадия, instant) от синтеза до доставки."""
        return (
            ("synthesis_start", self.synthesis_start),
            ("qc_start", self.qc_start),
            ("packaging_start", self.packaging_start),
            ("dispatch", self.dispatch),
            ("delivery", self.delivery),
        )

    @property
    def lead_time_minutes(self) -> float:
        """Минуты от начала синтеза до доставки."""
        return elapsed_minutes(self.synthesis_start, self.delivery)


# =============================================================================
# PRODUCT / REQUEST
# =============================================================================


class ProductProfile(BaseModel):
    """
    Параметры радиофармпрепарата, нужные для планирования.

    half_life_minutes — свойство изотопа (F-18: 109.8, Tc-99m: 360.6).
    """

    name: str = Field(..., min_length=1, description="Название продукта")
    half_life_minutes: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Период полураспада (минуты)"
    )
    shelf_life_minutes: float = Field(
        ..., ge=0, description="Срок годности от начала синтеза (минуты)"
    )
    overage_percent: float = Field(
        0.0, ge=0, description="Запас активности на потери (проценты)"
    )
    packaging_minutes: float = Field(..., ge=0)
    qc_minutes: float = Field(..., ge=0)
    synthesis_minutes: float = Field(..., ge=0)

    model_config = {"frozen": True}


class ScheduleRequest(BaseModel):
    """
    Запрос на планирование производства под один заказ.

    injection_time не задан → целевая активность считается на delivery_time.
    """

    product: ProductProfile
    delivery_time: datetime
    travel_minutes: float = Field(..., ge=0, description="Время в пути (маршрут клиента)")
    requested_activity: float = Field(..., ge=0, description="Активность на target_time")
    injection_time: Optional[datetime] = None

    model_config = {"frozen": True}

    @property
    def target_time(self) -> datetime:
        """Момент, на который требуется requested_activity."""
        return self.injection_time if self.injection_time is not None else self.delivery_time


# =============================================================================
# PRODUCTION PLAN
# =============================================================================


class ProductionPlan(BaseModel):
    """
    Результат планирования: когда начинать синтез и сколько производить.
    """

    schedule: SchedulePlan
    requested_activity: float = Field(..., ge=0)
    production_activity: float = Field(..., ge=0)
    target_time: datetime
    within_shelf_life: bool

    model_config = {"frozen": True}
