"""Lifecycle — валидация переходов статусов заказов и партий.

- Table-driven state machine, одна реализация для обоих жизненных циклов
- Таблицы переходов — immutable константы уровня процесса
"""

from .state_machine import LifecycleStateMachine, TransitionResult
from .transitions import (
    BATCH_LIFECYCLE,
    BATCH_TRANSITIONS,
    ORDER_LIFECYCLE,
    ORDER_TRANSITIONS,
    can_transition_batch,
    can_transition_order,
    next_batch_statuses,
    next_order_statuses,
)

__all__ = [
    "LifecycleStateMachine",
    "TransitionResult",
    "ORDER_LIFECYCLE",
    "ORDER_TRANSITIONS",
    "BATCH_LIFECYCLE",
    "BATCH_TRANSITIONS",
    "can_transition_order",
    "next_order_statuses",
    "can_transition_batch",
    "next_batch_statuses",
]
