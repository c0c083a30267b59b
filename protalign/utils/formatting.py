"""Human-readable rendering of pairwise alignments."""

from __future__ import annotations

from typing import List, Optional

from protalign.errors import MissingPenaltyError
from protalign.types import AlignmentResult, PenaltyTable
from protalign.types.sequence import GAP_CHARACTERS


def match_line(
    aligned_x: str, aligned_y: str, table: Optional[PenaltyTable] = None
) -> str:
    """Return the marker line drawn between two aligned strings.

    '|' marks identical residues, ':' a positive substitution score (only
    when ``table`` is given) and a space everything else, gaps included.
    """
    markers = []
    for a, b in zip(aligned_x, aligned_y):
        if a in GAP_CHARACTERS or b in GAP_CHARACTERS:
            markers.append(" ")
        elif a == b:
            markers.append("|")
        elif table is not None and _positive(table, a, b):
            markers.append(":")
        else:
            markers.append(" ")
    return "".join(markers)


def _positive(table: PenaltyTable, a: str, b: str) -> bool:
    try:
        return table.get(a, b) > 0
    except MissingPenaltyError:
        return False


def _residues_before(aligned: str, column: int) -> int:
    return sum(1 for ch in aligned[:column] if ch not in GAP_CHARACTERS)


def format_alignment(
    result: AlignmentResult,
    table: Optional[PenaltyTable] = None,
    width: int = 60,
) -> str:
    """Render an alignment result in blocks of ``width`` columns.

    Each block shows the 1-based position of its first residue in the
    original sequences.
    """
    if width < 1:
        raise ValueError("width must be positive")

    x_seq, y_seq = result.alignment.original_sequences
    label_width = max(len(x_seq.identifier), len(y_seq.identifier), 1)
    aligned_x = result.aligned_x
    aligned_y = result.aligned_y
    markers = match_line(aligned_x, aligned_y, table)

    lines: List[str] = [f"Score: {result.score}"]
    for start in range(0, len(aligned_x), width):
        end = start + width
        x_pos = result.start_x + _residues_before(aligned_x, start) + 1
        y_pos = result.start_y + _residues_before(aligned_y, start) + 1
        lines.append("")
        lines.append(
            f"{x_seq.identifier:>{label_width}} {x_pos:>6} {aligned_x[start:end]}"
        )
        lines.append(f"{'':>{label_width}} {'':>6} {markers[start:end]}")
        lines.append(
            f"{y_seq.identifier:>{label_width}} {y_pos:>6} {aligned_y[start:end]}"
        )
    return "\n".join(lines)


__all__ = ["match_line", "format_alignment"]
