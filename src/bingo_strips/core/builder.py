"""Batch builder tying generation, codes and validation together."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..builder.batch import generate_unique_strips
from ..builder.strip import generate_balanced_strip
from ..codes import assign_codes
from ..rng import create_rng, derive_seed
from ..verify import StripValidation, validate_strip

logger = logging.getLogger(__name__)


@dataclass
class BuildParams:
    """Parameters for one generation request."""

    count: int
    seed: Optional[int] = None
    rng_engine: str = "py_random"
    with_codes: bool = True
    code_digits: int = 4
    attempt_floor: int = 2000
    attempts_per_strip: int = 200
    validity_date: Optional[str] = None


@dataclass
class BuildMetrics:
    """Metrics for one generation request."""

    total_time: float
    attempts: int
    rejected: int
    budget: int
    fallback: bool = False

    @property
    def attempts_per_strip(self) -> float:
        return 0.0 if self.attempts == 0 else self.attempts / max(1, self.attempts - self.rejected)


@dataclass
class BuildResult:
    """Result of one generation request."""

    strips: List[List[List[int]]]
    codes: Optional[List[List[str]]]
    validations: List[StripValidation]
    metrics: BuildMetrics
    requested: int
    validity_date: Optional[str] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return len(self.strips) >= self.requested

    @property
    def ok(self) -> bool:
        return all(v.ok for v in self.validations)


class StripBatchBuilder:
    """Builds a batch of unique strips, codes them and validates them."""

    def build(self, params: BuildParams) -> BuildResult:
        start = time.perf_counter()
        strips_rng = create_rng(params.rng_engine, params.seed)
        batch = generate_unique_strips(
            params.count,
            strips_rng,
            attempt_floor=params.attempt_floor,
            attempts_per_strip=params.attempts_per_strip,
        )

        warnings: List[str] = []
        strips = list(batch.strips)
        if not batch.complete:
            warnings.append(
                f"generated {len(strips)} of {params.count} strips before the attempt budget ran out"
            )
        fallback = False
        if not strips:
            # a lone strip cannot repeat a card within itself
            logger.warning("Batch came back empty; falling back to a single fresh strip")
            strips = [generate_balanced_strip(strips_rng)]
            fallback = True

        codes = None
        if params.with_codes:
            codes_seed = None if params.seed is None else derive_seed(params.seed, 0, "codes")
            codes = assign_codes(
                strips, params.code_digits, create_rng(params.rng_engine, codes_seed)
            )

        validations = [validate_strip(strip) for strip in strips]
        for idx, validation in enumerate(validations, start=1):
            if not validation.ok:
                logger.error(
                    "Strip #%d invalid: missing=%s duplicates=%s",
                    idx,
                    validation.missing,
                    validation.duplicates,
                )

        metrics = BuildMetrics(
            total_time=time.perf_counter() - start,
            attempts=batch.attempts,
            rejected=batch.rejected,
            budget=batch.budget,
            fallback=fallback,
        )
        logger.info(
            "Built %d strips (%d cards) in %.3fs, %d attempts",
            len(strips),
            sum(len(s) for s in strips),
            metrics.total_time,
            metrics.attempts,
        )
        return BuildResult(
            strips=strips,
            codes=codes,
            validations=validations,
            metrics=metrics,
            requested=params.count,
            validity_date=params.validity_date,
            warnings=warnings,
        )
