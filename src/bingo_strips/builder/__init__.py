"""Strip construction: single balanced strips and unique batches."""

from .batch import BatchResult, generate_unique_strips
from .strip import generate_balanced_strip

__all__ = ["BatchResult", "generate_balanced_strip", "generate_unique_strips"]
