"""
Numerical Safeguards — проверки входов для decay-арифметики

Модуль содержит примитивы, которыми decay/overage/scheduler проверяют
входные значения до вычислений:
- Проверка float на NaN/Inf
- Epsilon-сравнения для активности (round-trip decay ↔ required activity)
- Валидаторы positive / non-negative с доменным типом исключения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не проходят валидацию (ни как half-life, ни как длительность)
2. Внутри вычислений нет округления: толерантности используются только в сравнениях
"""

import math
from typing import Final, Type

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность сравнения активностей.
# exp/log в double precision дают ошибку порядка 1e-15 на операцию;
# round-trip decay → required_initial_activity укладывается в 1e-9 с запасом
# для elapsed до ~десятков half-life.
EPS_ACTIVITY_REL: Final[float] = 1e-9

# Абсолютная толерантность сравнения активностей (около нуля)
EPS_ACTIVITY_ABS: Final[float] = 1e-12

# Толерантность сравнения длительностей в минутах.
# timedelta хранит микросекунды: 1 мкс = 1/60e6 мин ≈ 1.7e-8 мин
EPS_MINUTES: Final[float] = 1e-6


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close_activity(
    a: float,
    b: float,
    rel_tol: float = EPS_ACTIVITY_REL,
    abs_tol: float = EPS_ACTIVITY_ABS,
) -> bool:
    """
    Сравнение активностей с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close_activity(100.0, 100.0 + 1e-8)
        True
        >>> is_close_activity(100.0, 100.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_close_minutes(a: float, b: float, tol: float = EPS_MINUTES) -> bool:
    """Сравнение длительностей (минуты) с абсолютной толерантностью."""
    return abs(a - b) <= tol


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(
    value: float,
    name: str,
    error_cls: Type[ValueError] = ValueError,
) -> None:
    """
    Валидация, что значение finite и строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        error_cls: Класс исключения (доменная ошибка, например InvalidHalfLife)

    Raises:
        error_cls: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise error_cls(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise error_cls(f"{name} must be positive (> 0), got {value}")


def validate_non_negative(
    value: float,
    name: str,
    error_cls: Type[ValueError] = ValueError,
) -> None:
    """
    Валидация, что значение finite и неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        error_cls: Класс исключения (доменная ошибка, например NegativeDuration)

    Raises:
        error_cls: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise error_cls(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise error_cls(f"{name} must be non-negative, got {value}")
