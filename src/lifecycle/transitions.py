"""
Transitions — таблицы переходов заказов и партий

Таблицы — единственный источник правды о разрешённых переходах.
Создаются один раз при импорте, не мутируются.

Order:  DRAFT → ... → DELIVERED (terminal), CANCELLED (terminal)
        REJECTED → DRAFT (возврат на доработку)
        FAILED_QC → REWORK → IN_PRODUCTION

Batch:  PLANNED → IN_PROGRESS → COMPLETED → QC_PENDING → QC_IN_PROGRESS
        → QC_PASSED → RELEASED (terminal)
        QC_FAILED → CANCELLED (terminal)
"""

from typing import Union

from src.core.domain.status import BatchStatus, OrderStatus
from src.lifecycle.state_machine import LifecycleStateMachine

# =============================================================================
# ORDER
# =============================================================================

_ORDER_TABLE = {
    OrderStatus.DRAFT: {OrderStatus.SUBMITTED, OrderStatus.CANCELLED},
    OrderStatus.SUBMITTED: {
        OrderStatus.VALIDATED,
        OrderStatus.REJECTED,
        OrderStatus.CANCELLED,
    },
    OrderStatus.VALIDATED: {OrderStatus.SCHEDULED, OrderStatus.CANCELLED},
    OrderStatus.SCHEDULED: {OrderStatus.IN_PRODUCTION, OrderStatus.CANCELLED},
    OrderStatus.IN_PRODUCTION: {OrderStatus.QC_PENDING, OrderStatus.CANCELLED},
    OrderStatus.QC_PENDING: {OrderStatus.RELEASED, OrderStatus.FAILED_QC},
    OrderStatus.RELEASED: {OrderStatus.DISPATCHED},
    OrderStatus.DISPATCHED: {OrderStatus.DELIVERED},
    OrderStatus.DELIVERED: set(),
    OrderStatus.CANCELLED: set(),
    OrderStatus.REJECTED: {OrderStatus.DRAFT},
    OrderStatus.FAILED_QC: {OrderStatus.REWORK, OrderStatus.CANCELLED},
    OrderStatus.REWORK: {OrderStatus.IN_PRODUCTION, OrderStatus.CANCELLED},
}

ORDER_LIFECYCLE: LifecycleStateMachine[OrderStatus] = LifecycleStateMachine(
    name="order",
    status_type=OrderStatus,
    transitions=_ORDER_TABLE,
    initial_status=OrderStatus.DRAFT,
)

# Read-only: MappingProxyType[OrderStatus, frozenset]
ORDER_TRANSITIONS = ORDER_LIFECYCLE.transitions


# =============================================================================
# BATCH
# =============================================================================

_BATCH_TABLE = {
    BatchStatus.PLANNED: {BatchStatus.IN_PROGRESS, BatchStatus.CANCELLED},
    BatchStatus.IN_PROGRESS: {BatchStatus.COMPLETED, BatchStatus.CANCELLED},
    BatchStatus.COMPLETED: {BatchStatus.QC_PENDING},
    BatchStatus.QC_PENDING: {BatchStatus.QC_IN_PROGRESS},
    BatchStatus.QC_IN_PROGRESS: {BatchStatus.QC_PASSED, BatchStatus.QC_FAILED},
    BatchStatus.QC_PASSED: {BatchStatus.RELEASED},
    BatchStatus.QC_FAILED: {BatchStatus.CANCELLED},
    BatchStatus.RELEASED: set(),
    BatchStatus.CANCELLED: set(),
}

BATCH_LIFECYCLE: LifecycleStateMachine[BatchStatus] = LifecycleStateMachine(
    name="batch",
    status_type=BatchStatus,
    transitions=_BATCH_TABLE,
    initial_status=BatchStatus.PLANNED,
)

BATCH_TRANSITIONS = BATCH_LIFECYCLE.transitions


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def can_transition_order(
    current: Union[OrderStatus, str], requested: Union[OrderStatus, str]
) -> bool:
    return ORDER_LIFECYCLE.can_transition(current, requested)


def next_order_statuses(current: Union[OrderStatus, str]) -> frozenset:
    return ORDER_LIFECYCLE.next_allowed_statuses(current)


def can_transition_batch(
    current: Union[BatchStatus, str], requested: Union[BatchStatus, str]
) -> bool:
    return BATCH_LIFECYCLE.can_transition(current, requested)


def next_batch_statuses(current: Union[BatchStatus, str]) -> frozenset:
    return BATCH_LIFECYCLE.next_allowed_statuses(current)
