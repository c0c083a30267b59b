"""Algorithms for the project."""

from .base import PairwiseAligner
from .matrix import Direction, DPMatrix
from .smith_waterman import LocalAligner
from .batch import BestMatch, best_match, score_all


__all__ = [
    "PairwiseAligner",
    "Direction",
    "DPMatrix",
    "LocalAligner",
    "BestMatch",
    "best_match",
    "score_all",
]
