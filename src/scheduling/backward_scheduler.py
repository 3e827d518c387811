"""
Backward Scheduler — расписание стадий от дедлайна доставки

Чистая арифметика времени: от delivery_time последовательно вычитаются
длительности стадий (travel → packaging → qc → synthesis).

ФОРМУЛЫ:
    dispatch         = delivery         - travel
    packaging_start  = dispatch         - packaging
    qc_start         = packaging_start  - qc
    synthesis_start  = qc_start         - synthesis

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любая длительность < 0 (или NaN/Inf) → NegativeDuration;
   стадии вне диапазона datetime (year 1..9999) → DurationOutOfRange
2. synthesis_start <= qc_start <= packaging_start <= dispatch <= delivery
3. Нет понятия "now": synthesis_start в прошлом — не ошибка scheduler'а
   (feasibility проверяет planner.check_feasibility с явным now)
"""

from datetime import datetime, timedelta

from src.core.domain.schedule import SchedulePlan, StageDurations
from src.core.errors import DurationOutOfRange, NegativeDuration
from src.core.math.numerical_safeguards import validate_non_negative


def backward_schedule(
    delivery_time: datetime,
    travel_minutes: float,
    packaging_minutes: float,
    qc_minutes: float,
    synthesis_minutes: float,
) -> SchedulePlan:
    """
    Backward-расписание от delivery_time.

    Args:
        delivery_time: Дедлайн доставки
        travel_minutes: Время в пути (минуты)
        packaging_minutes: Упаковка (минуты)
        qc_minutes: Контроль качества (минуты)
        synthesis_minutes: Синтез (минуты)

    Returns:
        SchedulePlan с instant'ами всех стадий

    Raises:
        NegativeDuration: если любая длительность < 0
        DurationOutOfRange: если instant стадии выходит за диапазон datetime

    Examples:
        >>> plan = backward_schedule(datetime(2024, 1, 1, 12, 0), 30, 20, 45, 90)
        >>> plan.synthesis_start
        datetime.datetime(2024, 1, 1, 8, 55)
    """
    for name, value in (
        ("travel_minutes", travel_minutes),
        ("packaging_minutes", packaging_minutes),
        ("qc_minutes", qc_minutes),
        ("synthesis_minutes", synthesis_minutes),
    ):
        validate_non_negative(value, name, NegativeDuration)

    try:
        dispatch = delivery_time - timedelta(minutes=travel_minutes)
        packaging_start = dispatch - timedelta(minutes=packaging_minutes)
        qc_start = packaging_start - timedelta(minutes=qc_minutes)
        synthesis_start = qc_start - timedelta(minutes=synthesis_minutes)
    except OverflowError as e:
        raise DurationOutOfRange(
            f"Schedule for delivery at {delivery_time.isoformat()} "
            f"falls outside the supported datetime range: {e}",
            details={
                "delivery_time": delivery_time.isoformat(),
                "travel_minutes": travel_minutes,
                "packaging_minutes": packaging_minutes,
                "qc_minutes": qc_minutes,
                "synthesis_minutes": synthesis_minutes,
            },
        ) from e

    return SchedulePlan(
        synthesis_start=synthesis_start,
        qc_start=qc_start,
        packaging_start=packaging_start,
        dispatch=dispatch,
        delivery=delivery_time,
    )


def schedule_from_durations(delivery_time: datetime, durations: StageDurations) -> SchedulePlan:
    """Backward-расписание по StageDurations продукта/маршрута."""
    return backward_schedule(
        delivery_time,
        durations.travel_minutes,
        durations.packaging_minutes,
        durations.qc_minutes,
        durations.synthesis_minutes,
    )
