from __future__ import annotations

from typing import Dict, List, Optional, Sequence

MIN_NUMBER = 1
MAX_NUMBER = 90
CARDS_PER_STRIP = 6
NUMBERS_PER_CARD = 15
COLUMNS = 9
ROWS = 3
ROW_CAPACITY = 5


def column_of(number: int) -> int:
    """Column index 0..8 of a number: 1-9 -> 0, 10-19 -> 1, ..., 80-90 -> 8."""
    return 8 if number == MAX_NUMBER else number // 10


def column_range(column: int) -> List[int]:
    if not 0 <= column < COLUMNS:
        raise ValueError(f"column must be in 0..{COLUMNS - 1}, got {column}")
    start = MIN_NUMBER if column == 0 else column * 10
    end = MAX_NUMBER if column == COLUMNS - 1 else column * 10 + 9
    return list(range(start, end + 1))


def column_counts(card: Sequence[int]) -> Dict[int, int]:
    """How many numbers of the card fall in each column (all 9 keys present).

    Numbers outside 1..90 belong to no column and are not counted.
    """
    counts = {c: 0 for c in range(COLUMNS)}
    for x in card:
        if MIN_NUMBER <= x <= MAX_NUMBER:
            counts[column_of(x)] += 1
    return counts


def card_to_grid(card: Sequence[int]) -> List[List[Optional[int]]]:
    """Lay a card out on the 3x9 ticket grid, five numbers per row.

    Columns are walked left to right and each column ascending; every number
    goes to the least-filled row (lowest index on ties) that still has
    capacity and a free cell in its column.
    """
    buckets: List[List[int]] = [[] for _ in range(COLUMNS)]
    for x in card:
        if not MIN_NUMBER <= x <= MAX_NUMBER:
            raise ValueError(f"number out of range 1..90: {x}")
        buckets[column_of(x)].append(x)

    grid: List[List[Optional[int]]] = [[None] * COLUMNS for _ in range(ROWS)]
    row_counts = [0] * ROWS

    for c, values in enumerate(buckets):
        for value in sorted(values):
            open_rows = [
                r for r in range(ROWS) if row_counts[r] < ROW_CAPACITY and grid[r][c] is None
            ]
            if not open_rows:
                raise ValueError(f"cannot place {value}: no free cell in column {c}")
            target = min(open_rows, key=lambda r: (row_counts[r], r))
            grid[target][c] = value
            row_counts[target] += 1

    return grid
