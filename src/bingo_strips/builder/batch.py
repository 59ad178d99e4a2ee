from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set

from ..feasibility import attempt_budget
from ..rng import RandomSource
from ..uniqueness import strip_signatures
from .strip import generate_balanced_strip

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Strips accepted by one batch run plus how the attempt budget was spent."""

    requested: int
    strips: List[List[List[int]]] = field(default_factory=list)
    attempts: int = 0
    rejected: int = 0
    budget: int = 0

    @property
    def complete(self) -> bool:
        return len(self.strips) >= self.requested

    @property
    def shortfall(self) -> int:
        return max(0, self.requested - len(self.strips))


def generate_unique_strips(
    count: int,
    rng: RandomSource,
    *,
    max_attempts: Optional[int] = None,
    attempt_floor: int = 2000,
    attempts_per_strip: int = 200,
) -> BatchResult:
    """Generate up to ``count`` strips with no card repeated anywhere in the batch.

    A candidate strip is dropped whole when any of its cards was already seen,
    so every accepted strip keeps the column balance it was dealt with.
    Stops after ``max_attempts`` candidates (default ``max(2000, count * 200)``)
    and returns whatever was accepted, logging a warning on shortfall.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    budget = (
        max_attempts
        if max_attempts is not None
        else attempt_budget(count, floor=attempt_floor, per_strip=attempts_per_strip)
    )

    result = BatchResult(requested=count, budget=budget)
    seen: Set[str] = set()

    while len(result.strips) < count and result.attempts < budget:
        result.attempts += 1
        strip = generate_balanced_strip(rng)
        signatures = strip_signatures(strip)
        if any(sig in seen for sig in signatures):
            result.rejected += 1
            logger.debug("Rejected strip at attempt %d: repeated card", result.attempts)
            continue
        seen.update(signatures)
        result.strips.append(strip)

    if not result.complete:
        logger.warning(
            "Attempt budget exhausted: generated %d of %d unique strips in %d attempts",
            len(result.strips),
            count,
            result.attempts,
        )
    else:
        logger.debug(
            "Generated %d unique strips in %d attempts (%d rejected)",
            len(result.strips),
            result.attempts,
            result.rejected,
        )
    return result
