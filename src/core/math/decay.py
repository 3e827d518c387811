"""
Decay — непрерывный радиоактивный распад

Модуль конвертирует активность между моментом производства и моментом
введения (administration) через экспоненциальный закон распада:
- Константа распада λ = ln(2) / T½
- Активность после распада A(t) = A0 × exp(-λ t)
- Требуемая начальная активность A0 = A(t) × exp(λ t)
- Elapsed minutes между двумя instant'ами
- Проверка shelf life

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. T½ <= 0 или NaN/Inf → InvalidHalfLife (и T½, при котором λ не finite)
2. t = 0 → identity (A(0) == A0)
3. t < 0 допустимо: распад "назад во времени" (рост), вызывающие используют симметрично
4. Никакого округления внутри — округление только при отображении
5. Единицы активности не конвертируются (mCi/MBq — на стороне вызывающего)
6. exp(±λ t) вне диапазона double: рост → inf, распад → 0.0 (без OverflowError)

ФОРМУЛЫ:
    λ = ln(2) / T½
    A(t) = A0 × exp(-λ × t)
    A0 = A(t) × exp(λ × t)

Пример (F-18, T½ = 109.8 мин):
    A(109.8) = 0.5 × A0
    A(120)   ≈ 0.4687 × A0
"""

import math
from datetime import datetime
from typing import Final

from src.core.errors import InvalidHalfLife
from src.core.math.numerical_safeguards import is_valid_float, validate_positive

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

LN2: Final[float] = math.log(2.0)

SECONDS_PER_MINUTE: Final[float] = 60.0


# =============================================================================
# DECAY ARITHMETIC
# =============================================================================


def decay_constant(half_life_minutes: float) -> float:
    """
    Константа распада λ = ln(2) / T½ (1/мин).

    Args:
        half_life_minutes: Период полураспада (минуты), > 0

    Returns:
        λ > 0, finite

    Raises:
        InvalidHalfLife: если half_life_minutes <= 0, NaN/Inf или настолько
            мал (subnormal), что ln(2) / T½ не finite

    Examples:
        >>> round(decay_constant(109.8), 5)  # F-18
        0.00631
        >>> round(decay_constant(360.6), 5)  # Tc-99m
        0.00192
    """
    validate_positive(half_life_minutes, "half_life_minutes", InvalidHalfLife)

    decay_const = LN2 / half_life_minutes
    if not is_valid_float(decay_const):
        raise InvalidHalfLife(
            f"half_life_minutes is too small: ln(2) / {half_life_minutes} is not finite"
        )
    return decay_const


def _scale_by_exp(activity: float, exponent: float) -> float:
    """activity × exp(exponent); переполнение exp → ±inf, нулевая активность → 0.0."""
    try:
        return activity * math.exp(exponent)
    except OverflowError:
        return math.copysign(math.inf, activity) if activity else 0.0


def decay_factor(half_life_minutes: float, elapsed_minutes: float) -> float:
    """
    Множитель распада exp(-λ t) за elapsed_minutes.

    Для t > 0 результат в [0, 1), для t < 0 — больше 1 (inf при переполнении).
    """
    return _scale_by_exp(1.0, -decay_constant(half_life_minutes) * elapsed_minutes)


def decayed_activity(
    initial_activity: float,
    half_life_minutes: float,
    elapsed_minutes: float,
) -> float:
    """
    Активность после распада за elapsed_minutes.

    A(t) = A0 × exp(-λ t)

    Args:
        initial_activity: Начальная активность A0 (>= 0, единицы вызывающего)
        half_life_minutes: Период полураспада (минуты)
        elapsed_minutes: Прошедшее время (минуты); отрицательное → рост

    Returns:
        Активность в момент t; inf, если рост выходит за диапазон double

    Raises:
        InvalidHalfLife: если half_life_minutes <= 0

    Examples:
        >>> decayed_activity(100.0, 109.8, 0.0)
        100.0
        >>> round(decayed_activity(100.0, 109.8, 109.8), 6)
        50.0
    """
    return _scale_by_exp(initial_activity, -decay_constant(half_life_minutes) * elapsed_minutes)


def required_initial_activity(
    target_activity: float,
    half_life_minutes: float,
    elapsed_minutes: float,
) -> float:
    """
    Начальная активность, которая распадётся до target_activity за elapsed_minutes.

    A0 = A(t) × exp(λ t) — алгебраическая инверсия decayed_activity.
    Если A0 выходит за диапазон double (очень короткий T½ и длинный lead time),
    результат inf: произвести такую активность невозможно.

    Raises:
        InvalidHalfLife: если half_life_minutes <= 0

    Examples:
        >>> round(required_initial_activity(50.0, 109.8, 109.8), 6)
        100.0
    """
    return _scale_by_exp(target_activity, decay_constant(half_life_minutes) * elapsed_minutes)


# =============================================================================
# ВРЕМЯ
# =============================================================================


def elapsed_minutes(start: datetime, end: datetime) -> float:
    """
    Прошедшее время (end - start) в минутах.

    Может быть отрицательным, если end раньше start: интерпретация знака
    на стороне вызывающего. Смешивание naive и aware datetime → TypeError.

    Examples:
        >>> elapsed_minutes(datetime(2024, 1, 1, 8, 0), datetime(2024, 1, 1, 10, 30))
        150.0
    """
    return (end - start).total_seconds() / SECONDS_PER_MINUTE


def is_within_shelf_life(
    production_time: datetime,
    target_time: datetime,
    shelf_life_minutes: float,
) -> bool:
    """
    True если 0 <= elapsed_minutes(production_time, target_time) <= shelf_life_minutes.

    target_time раньше production_time → False.
    """
    elapsed = elapsed_minutes(production_time, target_time)
    return 0.0 <= elapsed <= shelf_life_minutes


def activity_at_time(
    initial_activity: float,
    calibration_time: datetime,
    target_time: datetime,
    half_life_minutes: float,
) -> float:
    """
    Активность в абсолютный момент target_time по калиброванной активности.

    Используется логистикой: активность партии на момент отправки/доставки
    по измеренной активности на calibration_time.

    Args:
        initial_activity: Активность на calibration_time
        calibration_time: Момент калибровки
        target_time: Момент, на который нужна активность
        half_life_minutes: Период полураспада (минуты)

    Returns:
        Активность на target_time (больше initial, если target раньше калибровки)
    """
    elapsed = elapsed_minutes(calibration_time, target_time)
    return decayed_activity(initial_activity, half_life_minutes, elapsed)
