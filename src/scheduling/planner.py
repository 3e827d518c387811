"""
Production Planner — когда начинать синтез и сколько производить

Комбинирует backward scheduler (КОГДА) и decay/overage (СКОЛЬКО):
1. Backward-расписание от delivery_time (travel маршрута + стадии продукта)
2. Активность на synthesis_start, покрывающая распад до target_time и overage
3. Проверка shelf life: synthesis_start → delivery_time

Feasibility (конвенция InfeasibleSchedule):
- У core нет часов: `now` всегда передаётся вызывающим
- synthesis_start раньше now + min_lead_minutes → план невыполним
- план вне shelf life → невыполним (если enforce_shelf_life)

Связь feasibility с переходами статусов (например, SCHEDULED → IN_PRODUCTION
только при выполнимом плане) — политика внешнего orchestrator'а, не core.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional

from src.core.domain.schedule import ProductionPlan, ScheduleRequest
from src.core.errors import InfeasibleSchedule
from src.core.math.decay import elapsed_minutes, is_within_shelf_life
from src.core.math.overage import production_activity_with_overage
from src.scheduling.backward_scheduler import backward_schedule

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG / RESULT
# =============================================================================


@dataclass(frozen=True)
class FeasibilityConfig:
    """
    Конфигурация проверки выполнимости плана.

    - min_lead_minutes: минимальный запас между now и началом синтеза
    - enforce_shelf_life: план вне shelf life считается невыполнимым
    """

    min_lead_minutes: float = 0.0
    enforce_shelf_life: bool = True


@dataclass(frozen=True)
class FeasibilityResult:
    """Результат проверки выполнимости плана."""

    feasible: bool
    reason: str
    slack_minutes: float

    # Для отладки / ответа API
    details: Dict[str, Any] = field(default_factory=dict)


REASON_FEASIBLE = "feasible"
REASON_START_IN_PAST = "synthesis_start_in_past"
REASON_SHELF_LIFE_EXCEEDED = "shelf_life_exceeded"


# =============================================================================
# PLANNING
# =============================================================================


def plan_production(request: ScheduleRequest) -> ProductionPlan:
    """
    Производственный план под один заказ.

    Args:
        request: Продукт, дедлайн доставки, маршрут и требуемая активность

    Returns:
        ProductionPlan: расписание, активность на synthesis_start, флаг shelf life

    Raises:
        NegativeDuration: если длительность стадии < 0
        DurationOutOfRange: если расписание выходит за диапазон datetime
        InvalidHalfLife: если half-life продукта <= 0
        InvalidOveragePercent: если overage продукта < 0
    """
    product = request.product
    schedule = backward_schedule(
        request.delivery_time,
        request.travel_minutes,
        product.packaging_minutes,
        product.qc_minutes,
        product.synthesis_minutes,
    )

    production_activity = production_activity_with_overage(
        request.requested_activity,
        product.half_life_minutes,
        request.target_time,
        schedule.synthesis_start,
        product.overage_percent,
    )

    within_shelf_life = is_within_shelf_life(
        schedule.synthesis_start, request.delivery_time, product.shelf_life_minutes
    )

    logger.debug(
        "Planned %s: synthesis_start=%s production_activity=%.4f within_shelf_life=%s",
        product.name,
        schedule.synthesis_start.isoformat(),
        production_activity,
        within_shelf_life,
    )

    return ProductionPlan(
        schedule=schedule,
        requested_activity=request.requested_activity,
        production_activity=production_activity,
        target_time=request.target_time,
        within_shelf_life=within_shelf_life,
    )


# =============================================================================
# FEASIBILITY
# =============================================================================


def check_feasibility(
    plan: ProductionPlan,
    now: datetime,
    config: Optional[FeasibilityConfig] = None,
) -> FeasibilityResult:
    """
    Проверка выполнимости плана относительно переданного now.

    Args:
        plan: Производственный план
        now: Текущее время (передаётся вызывающим)
        config: Конфигурация проверки (default: FeasibilityConfig())

    Returns:
        FeasibilityResult; slack_minutes < 0 означает опоздание со стартом синтеза
    """
    config = config or FeasibilityConfig()
    synthesis_start = plan.schedule.synthesis_start
    slack = elapsed_minutes(now, synthesis_start) - config.min_lead_minutes

    details: Dict[str, Any] = {
        "now": now.isoformat(),
        "synthesis_start": synthesis_start.isoformat(),
        "min_lead_minutes": config.min_lead_minutes,
    }

    if slack < 0:
        result = FeasibilityResult(
            feasible=False,
            reason=REASON_START_IN_PAST,
            slack_minutes=slack,
            details=details,
        )
    elif config.enforce_shelf_life and not plan.within_shelf_life:
        details["delivery"] = plan.schedule.delivery.isoformat()
        details["lead_time_minutes"] = plan.schedule.lead_time_minutes
        result = FeasibilityResult(
            feasible=False,
            reason=REASON_SHELF_LIFE_EXCEEDED,
            slack_minutes=slack,
            details=details,
        )
    else:
        result = FeasibilityResult(
            feasible=True,
            reason=REASON_FEASIBLE,
            slack_minutes=slack,
            details=details,
        )

    if not result.feasible:
        logger.warning(
            "Infeasible production plan: reason=%s slack_minutes=%.1f synthesis_start=%s",
            result.reason,
            slack,
            synthesis_start.isoformat(),
        )
    return result


def ensure_feasible(
    plan: ProductionPlan,
    now: datetime,
    config: Optional[FeasibilityConfig] = None,
) -> ProductionPlan:
    """
    Возвращает plan, если он выполним; иначе поднимает InfeasibleSchedule.

    Raises:
        InfeasibleSchedule: если check_feasibility вернул feasible=False
    """
    result = check_feasibility(plan, now, config)
    if not result.feasible:
        if result.reason == REASON_SHELF_LIFE_EXCEEDED:
            message = "Order not feasible: delivery time exceeds product shelf life"
        else:
            message = (
                f"Order not feasible: synthesis must start at "
                f"{plan.schedule.synthesis_start.isoformat()}, "
                f"{-result.slack_minutes:.1f} minutes too late"
            )
        raise InfeasibleSchedule(
            result.reason,
            message,
            details=dict(result.details, slack_minutes=result.slack_minutes),
        )
    return plan
