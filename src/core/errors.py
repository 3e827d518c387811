"""
Errors — таксономия ошибок production core

Все ошибки детерминированы (валидация входов), не transient и не retryable:
повтор с теми же входами даёт ту же ошибку. Ошибки поднимаются там, где
обнаружен невалидный вход, и пропагируют к непосредственному вызывающему.

Каждый класс несёт `code` из каталога ошибок API, чтобы граница API могла
отдать клиенту стабильный код без знания внутренних классов.
"""

from typing import Any, Dict, FrozenSet, Optional


class ProductionCoreError(Exception):
    """
    Базовая ошибка production core.

    Attributes:
        code: Стабильный код ошибки для API boundary
        details: Структурированный контекст (значения, которые привели к ошибке)
    """

    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в plain dict: {code, message, details}."""
        return {"code": self.code, "message": self.message, "details": self.details}


class InvalidHalfLife(ProductionCoreError, ValueError):
    """Период полураспада <= 0 (или NaN/Inf) передан в decay-функцию."""

    code = "VALIDATION_ERROR"


class InvalidOveragePercent(ProductionCoreError, ValueError):
    """Отрицательный (или NaN/Inf) процент overage."""

    code = "VALIDATION_ERROR"


class NegativeDuration(ProductionCoreError, ValueError):
    """Длительность стадии < 0 (или NaN/Inf) передана в backward scheduler."""

    code = "VALIDATION_ERROR"


class DurationOutOfRange(ProductionCoreError, ValueError):
    """Длительности finite, но расписание выходит за диапазон datetime."""

    code = "VALIDATION_ERROR"


class InvalidTransition(ProductionCoreError):
    """
    Переход статуса отсутствует в таблице переходов.

    `can_transition` возвращает False без исключения; этот класс
    используется вызывающими, которым нужна ошибка вместо bool
    (см. LifecycleStateMachine.require_transition).
    """

    code = "INVALID_STATUS_TRANSITION"

    def __init__(
        self,
        lifecycle: str,
        current_status: Any,
        requested_status: Any,
        allowed_statuses: FrozenSet[Any],
    ):
        self.lifecycle = lifecycle
        self.current_status = current_status
        self.requested_status = requested_status
        self.allowed_statuses = allowed_statuses
        allowed = sorted(s.value for s in allowed_statuses)
        super().__init__(
            f"Invalid {lifecycle} status transition from "
            f"{current_status.value} to {requested_status.value}",
            details={
                "current_status": current_status.value,
                "requested_status": requested_status.value,
                "allowed_statuses": allowed,
            },
        )


class InfeasibleSchedule(ProductionCoreError):
    """
    План производства невыполним относительно переданного `now`.

    Никогда не поднимается backward_schedule (у core нет часов);
    только ensure_feasible с явно переданным текущим временем.
    """

    code = "ORDER_TIME_NOT_FEASIBLE"

    def __init__(self, reason: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.reason = reason
        super().__init__(message, details=details)
