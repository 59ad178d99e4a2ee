"""Core module for strip batch generation."""

from .builder import BuildMetrics, BuildParams, BuildResult, StripBatchBuilder

__all__ = ["BuildMetrics", "BuildParams", "BuildResult", "StripBatchBuilder"]
