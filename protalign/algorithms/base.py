"""Shared interfaces for pairwise alignment algorithms."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from protalign.types import AlignmentResult, PenaltyTable, SequenceType


class PairwiseAligner(ABC):
    """Abstract base class for pairwise alignment algorithms."""

    @abstractmethod
    def align(
        self,
        x_seq: Union[SequenceType, str],
        y_seq: Union[SequenceType, str],
        table: PenaltyTable,
    ) -> AlignmentResult:
        """Align two sequences scored with the provided penalty table."""
        raise NotImplementedError


__all__ = ["PairwiseAligner"]
