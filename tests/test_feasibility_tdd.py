from __future__ import annotations

from hypothesis import given, strategies as st

from bingo_strips.feasibility import attempt_budget, check_code_capacity, clamp_quantity


@given(count=st.integers(min_value=0, max_value=200_000), digits=st.integers(min_value=1, max_value=6))
def test_code_capacity_property(count, digits):
    result = check_code_capacity(count=count, digits=digits)
    assert result.feasible == (count <= 10**digits)
    assert bool(result.reasons) != result.feasible


def test_attempt_budget_floor_and_rate():
    assert attempt_budget(1) == 2000
    assert attempt_budget(10) == 2000
    assert attempt_budget(11) == 2200
    assert attempt_budget(9999) == 1_999_800
    assert attempt_budget(5, floor=0, per_strip=3) == 15


def test_clamp_quantity():
    assert clamp_quantity(None) == 1
    assert clamp_quantity(0) == 1
    assert clamp_quantity(-4) == 1
    assert clamp_quantity(3.7) == 3
    assert clamp_quantity("12") == 12
    assert clamp_quantity("abc") == 1
    assert clamp_quantity(10**6) == 9999
