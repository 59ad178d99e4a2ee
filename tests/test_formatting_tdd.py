from __future__ import annotations

from bingo_strips.formatting import format_date


def test_iso_to_day_first():
    assert format_date("2025-12-31") == "31/12/2025"


def test_empty_and_malformed_passthrough():
    assert format_date("") == ""
    assert format_date(None) == ""
    assert format_date("31/12/2025") == "31/12/2025"
    assert format_date("2025--31") == "2025--31"
