from __future__ import annotations

from rich.console import Console

from bingo_strips.builder.strip import generate_balanced_strip
from bingo_strips.render import card_table, strip_panel
from bingo_strips.rng import create_rng
from bingo_strips.verify import validate_strip


def test_card_table_is_three_by_nine():
    card = [1, 7, 10, 19, 20, 30, 37, 40, 49, 50, 60, 67, 70, 79, 80]
    table = card_table(card, code="0042", expires="2025-03-01")
    assert table.row_count == 3
    assert len(table.columns) == 9
    assert table.caption == "Valid until 01/03/2025"


def test_strip_panel_prints_numbers_and_status():
    strip = generate_balanced_strip(create_rng("py_random", 2))
    panel = strip_panel(strip, index=1, validation=validate_strip(strip), codes=["0001"] * 6)
    console = Console(width=120, record=True, no_color=True)
    console.print(panel)
    text = console.export_text()
    assert "Strip #1" in text
    assert "OK" in text
    assert "90" in text


def test_card_that_does_not_fit_grid_shows_flat_row():
    table = card_table([1, 2, 3, 4], code="0007")
    assert len(table.columns) == 1
    assert table.row_count == 2
    console = Console(width=120, record=True, no_color=True)
    console.print(table)
    text = console.export_text()
    assert "1 2 3 4" in text
    assert "0007" in text
