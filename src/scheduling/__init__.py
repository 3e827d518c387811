"""Scheduling — backward-расписание и производственное планирование.

- backward_schedule: instant'ы стадий от дедлайна доставки
- plan_production: расписание + активность с учётом распада и overage
- check_feasibility / ensure_feasible: конвенция InfeasibleSchedule с явным now
"""

from .backward_scheduler import backward_schedule, schedule_from_durations
from .planner import (
    REASON_FEASIBLE,
    REASON_SHELF_LIFE_EXCEEDED,
    REASON_START_IN_PAST,
    FeasibilityConfig,
    FeasibilityResult,
    check_feasibility,
    ensure_feasible,
    plan_production,
)

__all__ = [
    "backward_schedule",
    "schedule_from_durations",
    "plan_production",
    "check_feasibility",
    "ensure_feasible",
    "FeasibilityConfig",
    "FeasibilityResult",
    "REASON_FEASIBLE",
    "REASON_START_IN_PAST",
    "REASON_SHELF_LIFE_EXCEEDED",
]
