"""
Overage — активность, которую нужно произвести с учётом распада и потерь

Производство предшествует введению: к моменту injection_time активность
распадается, плюс часть теряется на QC sampling и упаковке. Модуль считает
активность на момент production_time:

    t = elapsed_minutes(production_time, injection_time)
    A_production = required_initial_activity(A_requested, T½, t) × (1 + overage% / 100)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. overage_percent < 0 или NaN/Inf → InvalidOveragePercent
2. InvalidHalfLife пропагирует из decay
3. overage_percent = 0 → чистая decay-коррекция
"""

from datetime import datetime

from src.core.errors import InvalidOveragePercent
from src.core.math.decay import elapsed_minutes, required_initial_activity
from src.core.math.numerical_safeguards import validate_non_negative


def overage_multiplier(overage_percent: float) -> float:
    """
    Множитель overage: 1 + overage_percent / 100.

    Raises:
        InvalidOveragePercent: если overage_percent < 0 или NaN/Inf

    Examples:
        >>> overage_multiplier(15.0)
        1.15
        >>> overage_multiplier(0.0)
        1.0
    """
    validate_non_negative(overage_percent, "overage_percent", InvalidOveragePercent)
    return 1.0 + overage_percent / 100.0


def production_activity_with_overage(
    requested_activity: float,
    half_life_minutes: float,
    injection_time: datetime,
    production_time: datetime,
    overage_percent: float,
) -> float:
    """
    Активность на момент production_time, покрывающая распад и overage.

    Args:
        requested_activity: Активность, требуемая на injection_time
        half_life_minutes: Период полураспада (минуты)
        injection_time: Момент введения (administration)
        production_time: Момент производства (обычно synthesis start)
        overage_percent: Запас на потери (проценты, >= 0)

    Returns:
        Активность, которую нужно произвести

    Raises:
        InvalidHalfLife: если half_life_minutes <= 0
        InvalidOveragePercent: если overage_percent < 0
    """
    multiplier = overage_multiplier(overage_percent)

    elapsed = elapsed_minutes(production_time, injection_time)
    required_at_production = required_initial_activity(
        requested_activity, half_life_minutes, elapsed
    )
    return required_at_production * multiplier
