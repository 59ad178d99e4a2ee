from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .feasibility import InfeasibleRequestError, check_code_capacity, code_space
from .rng import RandomSource, create_rng

logger = logging.getLogger(__name__)


def generate_unique_codes(
    count: int, digits: int = 4, rng: Optional[RandomSource] = None
) -> List[str]:
    """Draw ``count`` distinct zero-padded numeric codes of ``digits`` width.

    Raises InfeasibleRequestError when ``count`` exceeds ``10 ** digits``.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    capacity = check_code_capacity(count=count, digits=digits)
    if not capacity.feasible:
        raise InfeasibleRequestError("; ".join(capacity.reasons))

    rng = rng or create_rng("py_random")
    space = code_space(digits)
    # dict keeps draw order
    codes: Dict[str, None] = {}
    draws = 0
    while len(codes) < count:
        draws += 1
        codes[str(rng.randrange(space)).zfill(digits)] = None
    logger.debug("Drew %d codes of %d digits in %d samples", count, digits, draws)
    return list(codes)


def assign_codes(
    strips: Sequence[Sequence[Sequence[int]]],
    digits: int = 4,
    rng: Optional[RandomSource] = None,
) -> List[List[str]]:
    """One code per card, unique over the whole batch, grouped per strip in card order."""
    total = sum(len(strip) for strip in strips)
    codes = generate_unique_codes(total, digits, rng)
    out: List[List[str]] = []
    cursor = 0
    for strip in strips:
        out.append(codes[cursor : cursor + len(strip)])
        cursor += len(strip)
    return out
