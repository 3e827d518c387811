"""
Core math modules для production core

Decay-арифметика и расчёт производственной активности с overage.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_ACTIVITY_ABS,
    EPS_ACTIVITY_REL,
    EPS_MINUTES,
    is_close_activity,
    is_close_minutes,
    is_valid_float,
    validate_non_negative,
    validate_positive,
)

# Decay
from src.core.math.decay import (
    LN2,
    activity_at_time,
    decay_constant,
    decay_factor,
    decayed_activity,
    elapsed_minutes,
    is_within_shelf_life,
    required_initial_activity,
)

# Overage
from src.core.math.overage import (
    overage_multiplier,
    production_activity_with_overage,
)

__all__ = [
    # Numerical Safeguards
    "EPS_ACTIVITY_ABS",
    "EPS_ACTIVITY_REL",
    "EPS_MINUTES",
    "is_close_activity",
    "is_close_minutes",
    "is_valid_float",
    "validate_non_negative",
    "validate_positive",
    # Decay
    "LN2",
    "activity_at_time",
    "decay_constant",
    "decay_factor",
    "decayed_activity",
    "elapsed_minutes",
    "is_within_shelf_life",
    "required_initial_activity",
    # Overage
    "overage_multiplier",
    "production_activity_with_overage",
]
