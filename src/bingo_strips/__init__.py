"""Balanced 1-90 bingo strip generator."""

from .builder.batch import BatchResult, generate_unique_strips
from .builder.strip import generate_balanced_strip
from .codes import assign_codes, generate_unique_codes
from .feasibility import InfeasibleRequestError
from .layout import card_to_grid
from .verify import StripValidation, validate_strip
from .version import __version__

__all__ = [
    "BatchResult",
    "InfeasibleRequestError",
    "StripValidation",
    "__version__",
    "assign_codes",
    "card_to_grid",
    "generate_balanced_strip",
    "generate_unique_codes",
    "generate_unique_strips",
    "validate_strip",
]
