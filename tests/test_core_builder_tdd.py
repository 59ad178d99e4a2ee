from __future__ import annotations

import pytest

from bingo_strips.core import BuildParams, StripBatchBuilder
from bingo_strips.feasibility import InfeasibleRequestError
from bingo_strips.uniqueness import card_signature


def test_build_is_reproducible_with_seed():
    params = BuildParams(count=3, seed=42)
    a = StripBatchBuilder().build(params)
    b = StripBatchBuilder().build(params)
    assert a.strips == b.strips
    assert a.codes == b.codes


def test_codes_do_not_change_strips():
    with_codes = StripBatchBuilder().build(BuildParams(count=2, seed=42, with_codes=True))
    without = StripBatchBuilder().build(BuildParams(count=2, seed=42, with_codes=False))
    assert with_codes.strips == without.strips
    assert without.codes is None


def test_build_result_is_valid_and_coded():
    result = StripBatchBuilder().build(BuildParams(count=4, seed=1, validity_date="2025-06-30"))
    assert result.complete
    assert result.ok
    assert len(result.validations) == 4
    assert [len(c) for c in result.codes] == [6, 6, 6, 6]
    assert len({c for group in result.codes for c in group}) == 24
    assert len({card_signature(card) for s in result.strips for card in s}) == 24
    assert result.validity_date == "2025-06-30"
    assert result.metrics.attempts >= 4
    assert not result.metrics.fallback


def test_empty_batch_falls_back_to_single_strip():
    params = BuildParams(count=2, seed=3, attempt_floor=0, attempts_per_strip=0)
    result = StripBatchBuilder().build(params)
    assert result.metrics.fallback
    assert len(result.strips) == 1
    assert result.ok
    assert not result.complete
    assert result.warnings


def test_codes_wider_than_space_fail_hard():
    with pytest.raises(InfeasibleRequestError):
        StripBatchBuilder().build(BuildParams(count=2, seed=3, code_digits=1))
