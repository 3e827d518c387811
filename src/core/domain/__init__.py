"""
Domain models and value objects.

Contains lifecycle statuses and the production schedule models exchanged
with the order/batch management services.
"""

from src.core.domain.schedule import (
    ProductionPlan,
    ProductProfile,
    SchedulePlan,
    ScheduleRequest,
    StageDurations,
)
from src.core.domain.status import BatchStatus, OrderStatus

__all__ = [
    # Status enums
    "OrderStatus",
    "BatchStatus",
    # Schedule models
    "StageDurations",
    "SchedulePlan",
    "ProductProfile",
    "ScheduleRequest",
    "ProductionPlan",
]
