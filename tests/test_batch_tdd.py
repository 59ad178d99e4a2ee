from __future__ import annotations

import logging

import pytest

from bingo_strips.builder.batch import generate_unique_strips
from bingo_strips.rng import create_rng
from bingo_strips.uniqueness import card_signature
from bingo_strips.verify import validate_strip

from .fakes import IdentityRandom


def test_three_strips_valid_and_eighteen_distinct_cards():
    result = generate_unique_strips(3, create_rng("py_random", 20250824))
    assert result.complete
    assert len(result.strips) == 3
    for strip in result.strips:
        assert validate_strip(strip).ok
    signatures = {card_signature(card) for strip in result.strips for card in strip}
    assert len(signatures) == 18


def test_larger_batch_has_no_repeated_card():
    result = generate_unique_strips(200, create_rng("py_random", 5))
    signatures = [card_signature(card) for strip in result.strips for card in strip]
    assert len(result.strips) == 200
    assert len(signatures) == len(set(signatures))


def test_default_budget_follows_count():
    assert generate_unique_strips(1, create_rng("py_random", 1)).budget == 2000
    assert generate_unique_strips(20, create_rng("py_random", 1)).budget == 4000


def test_repeated_strip_is_rejected_until_budget_runs_out(caplog):
    # an unshuffled source deals the same strip every time
    with caplog.at_level(logging.WARNING, logger="bingo_strips.builder.batch"):
        result = generate_unique_strips(3, IdentityRandom(), max_attempts=10)
    assert len(result.strips) == 1
    assert result.attempts == 10
    assert result.rejected == 9
    assert not result.complete
    assert result.shortfall == 2
    assert "Attempt budget exhausted" in caplog.text


def test_tunable_floor_and_rate():
    result = generate_unique_strips(
        2, IdentityRandom(), attempt_floor=3, attempts_per_strip=1
    )
    assert result.budget == 3
    assert result.attempts == 3
    assert len(result.strips) == 1


def test_zero_count_is_empty_and_complete():
    result = generate_unique_strips(0, create_rng("py_random", 1))
    assert result.strips == []
    assert result.attempts == 0
    assert result.complete


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        generate_unique_strips(-1, create_rng("py_random", 1))
