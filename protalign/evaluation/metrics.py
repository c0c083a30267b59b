"""Alignment evaluation metrics and helpers."""

from __future__ import annotations

from typing import Set, Tuple

from protalign.types import Alignment, AlignmentResult, PenaltyTable, SequenceType
from protalign.types.evaluation import AlignmentSummary
from protalign.types.sequence import GAP_CHARACTERS


def _aligned_pair(alignment: Alignment) -> Tuple[SequenceType, SequenceType]:
    seq_x, seq_y = alignment.aligned_sequences
    return seq_x, seq_y


def _safe_divide(numerator: float, denominator: float) -> float:
    """Divide with zero-denominator protection."""
    return numerator / denominator if denominator else 0.0


def extract_aligned_pairs(alignment: Alignment) -> Set[Tuple[int, int]]:
    """Return 0-based (i, j) residue index pairs aligned without a gap.

    Indices are relative to the aligned substretches, not the full inputs.
    """
    seq_x, seq_y = _aligned_pair(alignment)
    pairs: Set[Tuple[int, int]] = set()
    cur_i = 0
    cur_j = 0
    for c1, c2 in zip(seq_x.residues, seq_y.residues):
        is_res1 = c1 not in GAP_CHARACTERS
        is_res2 = c2 not in GAP_CHARACTERS
        if is_res1 and is_res2:
            pairs.add((cur_i, cur_j))
        if is_res1:
            cur_i += 1
        if is_res2:
            cur_j += 1
    return pairs


def gap_count(alignment: Alignment) -> int:
    """Number of columns with a gap in either sequence."""
    seq_x, seq_y = _aligned_pair(alignment)
    return sum(
        1
        for a, b in zip(seq_x.residues, seq_y.residues)
        if a in GAP_CHARACTERS or b in GAP_CHARACTERS
    )


def identity_count(alignment: Alignment) -> int:
    seq_x, seq_y = _aligned_pair(alignment)
    return sum(
        1
        for a, b in zip(seq_x.residues, seq_y.residues)
        if a == b and a not in GAP_CHARACTERS
    )


def percent_identity(alignment: Alignment) -> float:
    """Fraction of alignment columns holding identical residues."""
    return _safe_divide(identity_count(alignment), alignment.columns)


def positive_count(alignment: Alignment, table: PenaltyTable) -> int:
    """Number of gap-free columns with a positive substitution score."""
    seq_x, seq_y = _aligned_pair(alignment)
    return sum(
        1
        for a, b in zip(seq_x.residues, seq_y.residues)
        if a not in GAP_CHARACTERS
        and b not in GAP_CHARACTERS
        and (a == b or table.get(a, b) > 0)
    )


def similarity(alignment: Alignment, table: PenaltyTable) -> float:
    """Fraction of alignment columns that are identical or score positively."""
    return _safe_divide(positive_count(alignment, table), alignment.columns)


def rescore(alignment: Alignment, table: PenaltyTable) -> int:
    """Sum the table scores along the alignment columns.

    The aligner emits ``table.gap`` for gap positions, so a column is looked
    up exactly as the recurrence scored it.
    """
    seq_x, seq_y = _aligned_pair(alignment)
    return sum(table.get(a, b) for a, b in zip(seq_x.residues, seq_y.residues))


def summarize(result: AlignmentResult, table: PenaltyTable) -> AlignmentSummary:
    """Collect column statistics for an alignment result."""
    alignment = result.alignment
    return AlignmentSummary(
        columns=alignment.columns,
        identities=identity_count(alignment),
        positives=positive_count(alignment, table),
        gaps=gap_count(alignment),
        identity=percent_identity(alignment),
        similarity=similarity(alignment, table),
        score=result.score,
    )


__all__ = [
    "extract_aligned_pairs",
    "gap_count",
    "identity_count",
    "percent_identity",
    "positive_count",
    "similarity",
    "rescore",
    "summarize",
]
