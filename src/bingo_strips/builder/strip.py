from __future__ import annotations

from typing import List

from ..layout import CARDS_PER_STRIP, COLUMNS, column_range
from ..rng import RandomSource


def generate_balanced_strip(rng: RandomSource) -> List[List[int]]:
    """Deal 1..90 over six cards of fifteen numbers each.

    Every column hands one number to each card, then its leftovers go out one
    per card on a cursor that keeps rotating across columns. Thirty-six
    leftovers over six cards means six extras per card, never two from the
    same column, so a card holds one or two numbers of any column.
    """
    per_card: List[List[int]] = [[] for _ in range(CARDS_PER_STRIP)]
    cursor = 0

    for c in range(COLUMNS):
        pool = column_range(c)
        rng.shuffle(pool)
        base = min(CARDS_PER_STRIP, len(pool))

        for t in range(base):
            per_card[t].append(pool[t])

        for p in range(base, len(pool)):
            per_card[cursor % CARDS_PER_STRIP].append(pool[p])
            cursor += 1

    return [sorted(numbers) for numbers in per_card]
