"""Evaluation module for the project."""

from .metrics import (
    extract_aligned_pairs,
    gap_count,
    percent_identity,
    rescore,
    similarity,
    summarize,
)

__all__ = [
    "extract_aligned_pairs",
    "gap_count",
    "percent_identity",
    "rescore",
    "similarity",
    "summarize",
    "metrics",
]
