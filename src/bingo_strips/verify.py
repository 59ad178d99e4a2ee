from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .layout import (
    CARDS_PER_STRIP,
    MAX_NUMBER,
    MIN_NUMBER,
    NUMBERS_PER_CARD,
    column_counts,
)
from .uniqueness import card_signature


@dataclass
class StripValidation:
    ok: bool
    missing: List[int] = field(default_factory=list)
    duplicates: List[int] = field(default_factory=list)

    def as_dict(self) -> Dict[str, object]:
        return {"ok": self.ok, "missing": list(self.missing), "duplicates": list(self.duplicates)}


def validate_strip(strip: Sequence[Sequence[int]]) -> StripValidation:
    """Check that the strip's numbers are exactly 1..90, each once.

    Never raises on malformed input; gaps and repeats show up in
    ``missing`` and ``duplicates``.
    """
    counts: Counter[int] = Counter()
    total = 0
    for card in strip or []:
        for x in card or []:
            counts[x] += 1
            total += 1

    missing: List[int] = []
    duplicates: List[int] = []
    for x in range(MIN_NUMBER, MAX_NUMBER + 1):
        if counts[x] == 0:
            missing.append(x)
        elif counts[x] > 1:
            duplicates.append(x)

    ok = not missing and not duplicates and total == MAX_NUMBER
    return StripValidation(ok=ok, missing=missing, duplicates=duplicates)


def check_card_shapes(strip: Sequence[Sequence[int]]) -> bool:
    if len(strip) != CARDS_PER_STRIP:
        return False
    return all(len(card) == NUMBERS_PER_CARD for card in strip)


def check_column_bound(card: Sequence[int], limit: int = 2) -> bool:
    """At most ``limit`` numbers of the card share a column."""
    return max(column_counts(card).values()) <= limit


def count_signature_collisions(strips: Sequence[Sequence[Sequence[int]]]) -> int:
    seen: Counter[str] = Counter()
    for strip in strips:
        for card in strip:
            seen[card_signature(card)] += 1
    return sum(c - 1 for c in seen.values() if c > 1)


def count_code_collisions(codes: Sequence[Sequence[Optional[str]]]) -> int:
    seen: Counter[str] = Counter(
        code for group in codes for code in group if code is not None
    )
    return sum(c - 1 for c in seen.values() if c > 1)


def verify_batch(
    strips: Sequence[Sequence[Sequence[int]]],
    *,
    codes: Optional[Sequence[Sequence[Optional[str]]]] = None,
) -> Dict[str, object]:
    """Audit report for a whole batch: per-strip validity plus batch-wide uniqueness."""
    validations = [validate_strip(strip) for strip in strips]
    ok_shapes = all(check_card_shapes(strip) for strip in strips)
    ok_columns = all(check_column_bound(card) for strip in strips for card in strip)
    card_collisions = count_signature_collisions(strips)

    report: Dict[str, object] = {
        "strips": [
            {"id": str(idx), **validation.as_dict()}
            for idx, validation in enumerate(validations, start=1)
        ],
        "counts": {
            "strips": len(strips),
            "cards": sum(len(strip) for strip in strips),
        },
        "uniqueness": {
            "card_collisions": card_collisions,
            "set_representation": "sorted_csv",
        },
        "ok_strips_valid": all(v.ok for v in validations),
        "ok_card_shapes": ok_shapes,
        "ok_column_bound": ok_columns,
        "ok_no_identical_cards": card_collisions == 0,
    }
    if codes is not None:
        code_collisions = count_code_collisions(codes)
        report["uniqueness"]["code_collisions"] = code_collisions  # type: ignore[index]
        report["ok_unique_codes"] = code_collisions == 0
    report["ok"] = all(v for k, v in report.items() if k.startswith("ok_"))
    return report
