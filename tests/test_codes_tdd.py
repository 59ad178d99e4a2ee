from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from bingo_strips.codes import assign_codes, generate_unique_codes
from bingo_strips.feasibility import InfeasibleRequestError
from bingo_strips.rng import create_rng

from .fakes import IdentityRandom


def test_five_four_digit_codes():
    codes = generate_unique_codes(5, 4, create_rng("py_random", 1))
    assert len(codes) == 5
    assert len(set(codes)) == 5
    assert all(len(c) == 4 and c.isdigit() for c in codes)


def test_more_codes_than_digit_space_is_infeasible():
    with pytest.raises(InfeasibleRequestError):
        generate_unique_codes(10001, 4)


def test_whole_space_can_be_drawn():
    codes = generate_unique_codes(100, 2, create_rng("py_random", 4))
    assert sorted(codes) == [f"{i:02d}" for i in range(100)]


def test_repeated_draws_skipped_and_zero_padded_in_draw_order():
    rng = IdentityRandom(draws=[7, 7, 42, 9999, 7, 123])
    assert generate_unique_codes(4, 4, rng) == ["0007", "0042", "9999", "0123"]


def test_invalid_arguments():
    with pytest.raises(ValueError):
        generate_unique_codes(-1, 4)
    with pytest.raises(ValueError):
        generate_unique_codes(1, 0)


@given(count=st.integers(min_value=0, max_value=300), digits=st.integers(min_value=3, max_value=6))
def test_codes_distinct_and_fixed_width(count, digits):
    codes = generate_unique_codes(count, digits, create_rng("py_random", count))
    assert len(codes) == count
    assert len(set(codes)) == count
    assert all(len(c) == digits for c in codes)


def test_assign_codes_groups_per_strip():
    strips = [[[1]] * 6, [[2]] * 6, [[3]] * 6]
    grouped = assign_codes(strips, 4, create_rng("py_random", 9))
    assert [len(g) for g in grouped] == [6, 6, 6]
    flat = [c for g in grouped for c in g]
    assert len(set(flat)) == 18
