"""
Тесты для таксономии ошибок production core

Проверяет коды ошибок API, сериализацию to_dict и иерархию классов.
"""

import pytest

from src.core.domain.status import OrderStatus
from src.core.errors import (
    DurationOutOfRange,
    InfeasibleSchedule,
    InvalidHalfLife,
    InvalidOveragePercent,
    InvalidTransition,
    NegativeDuration,
    ProductionCoreError,
)


class TestErrorCodes:
    """Коды ошибок для API boundary"""

    @pytest.mark.parametrize(
        "error_cls", [InvalidHalfLife, InvalidOveragePercent, NegativeDuration, DurationOutOfRange]
    )
    def test_validation_errors(self, error_cls) -> None:
        error = error_cls("bad input")
        assert error.code == "VALIDATION_ERROR"
        assert isinstance(error, ValueError)
        assert isinstance(error, ProductionCoreError)

    def test_invalid_transition(self) -> None:
        error = InvalidTransition(
            "order",
            OrderStatus.DELIVERED,
            OrderStatus.DRAFT,
            frozenset(),
        )
        assert error.code == "INVALID_STATUS_TRANSITION"
        assert not isinstance(error, ValueError)
        assert error.details["allowed_statuses"] == []

    def test_infeasible_schedule(self) -> None:
        error = InfeasibleSchedule("synthesis_start_in_past", "too late", {"slack_minutes": -3.0})
        assert error.code == "ORDER_TIME_NOT_FEASIBLE"
        assert error.reason == "synthesis_start_in_past"


class TestToDict:
    """Сериализация ошибок"""

    def test_without_details(self) -> None:
        assert NegativeDuration("qc_minutes must be non-negative, got -1").to_dict() == {
            "code": "VALIDATION_ERROR",
            "message": "qc_minutes must be non-negative, got -1",
            "details": {},
        }

    def test_details_copied(self) -> None:
        details = {"slack_minutes": -3.0}
        error = InfeasibleSchedule("synthesis_start_in_past", "too late", details)
        details["slack_minutes"] = 0.0
        assert error.to_dict()["details"] == {"slack_minutes": -3.0}
