"""Evaluation result data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AlignmentSummary:
    """Column statistics for a single pairwise alignment."""

    columns: int
    identities: int
    positives: int
    gaps: int
    identity: float
    similarity: float
    score: int


__all__ = ["AlignmentSummary"]
