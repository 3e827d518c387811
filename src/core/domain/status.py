"""
Статусы жизненного цикла заказа и производственной партии.

Значения enum совпадают с именами статусов во внешнем API и БД.
"""

from enum import Enum


class OrderStatus(str, Enum):
    """
    Статус заказа.

    Initial: DRAFT. Terminal: DELIVERED, CANCELLED.
    """

    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    VALIDATED = "VALIDATED"
    SCHEDULED = "SCHEDULED"
    IN_PRODUCTION = "IN_PRODUCTION"
    QC_PENDING = "QC_PENDING"
    RELEASED = "RELEASED"
    DISPATCHED = "DISPATCHED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    REJECTED = "REJECTED"
    FAILED_QC = "FAILED_QC"
    REWORK = "REWORK"


class BatchStatus(str, Enum):
    """
    Статус производственной партии.

    Initial: PLANNED. Terminal: RELEASED, CANCELLED.
    """

    PLANNED = "PLANNED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    QC_PENDING = "QC_PENDING"
    QC_IN_PROGRESS = "QC_IN_PROGRESS"
    QC_PASSED = "QC_PASSED"
    QC_FAILED = "QC_FAILED"
    RELEASED = "RELEASED"
    CANCELLED = "CANCELLED"
