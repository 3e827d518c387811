"""
Property-Based Testing for decay and overage math

Hypothesis генерирует half-life, активности и интервалы и проверяет
инварианты модели распада:
- identity при t = 0
- строго монотонное убывание активности во времени (t < 0 → рост)
- round trip decayed_activity(required_initial_activity(A)) == A, до сотен half-life
- λt вне диапазона double → inf / 0.0, без исключений и NaN
- overage никогда не уменьшает активность
"""

import math
from datetime import datetime, timedelta

import pytest
from hypothesis import given, settings, strategies as st

from src.core.errors import InvalidHalfLife
from src.core.math import (
    activity_at_time,
    decayed_activity,
    is_close_activity,
    production_activity_with_overage,
    required_initial_activity,
)

half_lives = st.floats(min_value=6.0, max_value=1e5, allow_nan=False, allow_infinity=False)
activities = st.floats(min_value=1e-3, max_value=1e6, allow_nan=False, allow_infinity=False)
elapsed = st.floats(min_value=0.0, max_value=1440.0, allow_nan=False, allow_infinity=False)
overages = st.floats(min_value=0.0, max_value=200.0, allow_nan=False, allow_infinity=False)


class TestDecayProperties:
    """Инварианты модели распада"""

    @given(activity=activities, half_life=half_lives)
    @settings(max_examples=100)
    def test_zero_elapsed_is_identity(self, activity: float, half_life: float) -> None:
        assert decayed_activity(activity, half_life, 0.0) == activity
        assert required_initial_activity(activity, half_life, 0.0) == activity

    @given(
        activity=activities,
        half_life=st.floats(min_value=6.0, max_value=1e4, allow_nan=False, allow_infinity=False),
        t1=st.floats(min_value=-1440.0, max_value=1440.0, allow_nan=False, allow_infinity=False),
        gap=st.floats(min_value=1e-3, max_value=1440.0, allow_nan=False, allow_infinity=False),
    )
    @settings(max_examples=200)
    def test_decay_is_strictly_monotonic(
        self, activity: float, half_life: float, t1: float, gap: float
    ) -> None:
        """t1 < t2 → A(t2) < A(t1), включая отрицательные t (рост)"""
        t2 = t1 + gap
        assert decayed_activity(activity, half_life, t2) < decayed_activity(
            activity, half_life, t1
        )

    @given(activity=activities, half_life=half_lives, t=elapsed)
    @settings(max_examples=100)
    def test_decay_never_exceeds_initial(self, activity: float, half_life: float, t: float) -> None:
        assert decayed_activity(activity, half_life, t) <= activity

    @given(activity=activities, half_life=half_lives, t=elapsed)
    @settings(max_examples=100)
    def test_negative_elapsed_is_growth(self, activity: float, half_life: float, t: float) -> None:
        """Распад "назад во времени" совпадает с требуемой начальной активностью"""
        grown = decayed_activity(activity, half_life, -t)
        assert grown >= activity
        assert grown == required_initial_activity(activity, half_life, t)

    @given(activity=activities, half_life=half_lives, t=elapsed)
    @settings(max_examples=200)
    def test_round_trip(self, activity: float, half_life: float, t: float) -> None:
        initial = required_initial_activity(activity, half_life, t)
        assert initial >= activity
        assert is_close_activity(decayed_activity(initial, half_life, t), activity)

    @given(half_life=st.floats(max_value=0.0, allow_nan=False))
    @settings(max_examples=50)
    def test_non_positive_half_life_rejected(self, half_life: float) -> None:
        with pytest.raises(InvalidHalfLife):
            decayed_activity(1.0, half_life, 10.0)

    @given(
        activity=activities,
        half_life=half_lives,
        minutes=st.integers(min_value=0, max_value=1440),
    )
    @settings(max_examples=100)
    def test_activity_at_time_matches_decayed_activity(
        self, activity: float, half_life: float, minutes: int
    ) -> None:
        calibration = datetime(2024, 1, 1, 6, 0)
        target = calibration + timedelta(minutes=minutes)
        assert is_close_activity(
            activity_at_time(activity, calibration, target, half_life),
            decayed_activity(activity, half_life, float(minutes)),
        )


@st.composite
def decay_spans(draw):
    """(T½, t) с t кратным T½: λt = n × ln2, n до 800 (exp(λt) ещё finite)."""
    half_life = draw(
        st.floats(min_value=1e-2, max_value=1e5, allow_nan=False, allow_infinity=False)
    )
    n_half_lives = draw(
        st.floats(min_value=0.0, max_value=800.0, allow_nan=False, allow_infinity=False)
    )
    return half_life, n_half_lives * half_life


class TestExtremeDecayProperties:
    """Короткие T½ и длинные интервалы: без исключений, без NaN"""

    @given(
        activity=st.floats(min_value=0.0, max_value=1e6, allow_nan=False, allow_infinity=False),
        half_life=st.floats(min_value=1e-3, max_value=1e5, allow_nan=False, allow_infinity=False),
        t=st.floats(min_value=-1e7, max_value=1e7, allow_nan=False, allow_infinity=False),
    )
    @settings(max_examples=300)
    def test_any_span_yields_non_negative_activity(
        self, activity: float, half_life: float, t: float
    ) -> None:
        decayed = decayed_activity(activity, half_life, t)
        required = required_initial_activity(activity, half_life, t)

        assert not math.isnan(decayed) and decayed >= 0.0
        assert not math.isnan(required) and required >= 0.0

    @given(activity=activities, span=decay_spans())
    @settings(max_examples=200)
    def test_round_trip_over_hundreds_of_half_lives(self, activity: float, span) -> None:
        half_life, t = span
        initial = required_initial_activity(activity, half_life, t)
        assert math.isfinite(initial)
        assert is_close_activity(decayed_activity(initial, half_life, t), activity)

    @given(
        half_life=st.floats(min_value=1e-3, max_value=1.0, allow_nan=False, allow_infinity=False),
        n_half_lives=st.floats(min_value=1100.0, max_value=1e6, allow_nan=False),
    )
    @settings(max_examples=100)
    def test_overflowing_span_is_inf(self, half_life: float, n_half_lives: float) -> None:
        """λt > ~745: производство недостижимо (inf), рост → inf, распад → 0"""
        t = n_half_lives * half_life
        assert required_initial_activity(1.0, half_life, t) == math.inf
        assert decayed_activity(1.0, half_life, -t) == math.inf
        assert decayed_activity(1.0, half_life, t) == 0.0


class TestOverageProperties:
    """Overage только увеличивает производимую активность"""

    @given(
        activity=activities,
        half_life=half_lives,
        minutes=st.integers(min_value=0, max_value=1440),
        overage=overages,
    )
    @settings(max_examples=100)
    def test_overage_never_reduces_activity(
        self, activity: float, half_life: float, minutes: int, overage: float
    ) -> None:
        production_time = datetime(2024, 1, 1, 6, 0)
        injection_time = production_time + timedelta(minutes=minutes)

        without = production_activity_with_overage(
            activity, half_life, injection_time, production_time, 0.0
        )
        with_overage = production_activity_with_overage(
            activity, half_life, injection_time, production_time, overage
        )
        assert with_overage >= without
        assert is_close_activity(with_overage, without * (1 + overage / 100))
