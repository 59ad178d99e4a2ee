from __future__ import annotations

from dataclasses import dataclass
from typing import List

MAX_QUANTITY = 9999


class InfeasibleRequestError(ValueError):
    """Raised when a request cannot be met even in principle."""


@dataclass
class Feasibility:
    feasible: bool
    reasons: List[str]


def code_space(digits: int) -> int:
    if digits < 1:
        raise ValueError(f"digits must be >= 1, got {digits}")
    return 10**digits


def check_code_capacity(*, count: int, digits: int) -> Feasibility:
    space = code_space(digits)
    ok = count <= space
    reasons = [] if ok else [f"{count} unique codes requested but only {space} exist with {digits} digits"]
    return Feasibility(feasible=ok, reasons=reasons)


def attempt_budget(count: int, *, floor: int = 2000, per_strip: int = 200) -> int:
    """Candidate strips a batch may draw before giving up: ``max(floor, count * per_strip)``."""
    return max(floor, count * per_strip)


def clamp_quantity(value: object, *, upper: int = MAX_QUANTITY) -> int:
    """Normalize a user-entered strip quantity to an integer in [1, upper]."""
    try:
        number = int(float(value or 1))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        number = 1
    return max(1, min(upper, number))
