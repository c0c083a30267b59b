"""Unit tests for alignment metrics and formatting."""

from __future__ import annotations

import pytest

from protalign.algorithms import LocalAligner
from protalign.evaluation import (
    extract_aligned_pairs,
    gap_count,
    percent_identity,
    rescore,
    similarity,
    summarize,
)
from protalign.types import Alignment, AlignmentResult, PenaltyTable, ProteinSequence
from protalign.utils import format_alignment, load_blosum62, match_line


def _gapped_alignment() -> Alignment:
    """AWGHE aligned against AW*HE."""
    return Alignment(
        name="toy",
        aligned_sequences=[
            ProteinSequence(identifier="x", residues=list("AWGHE"), aligned=True),
            ProteinSequence(identifier="y", residues=list("AW*HE"), aligned=True),
        ],
        original_sequences=[
            ProteinSequence(identifier="x", residues=list("HEAGAWGHEE")),
            ProteinSequence(identifier="y", residues=list("PAWHEAE")),
        ],
    )


def _unit_table() -> PenaltyTable:
    return PenaltyTable.simple("HEAGWP", match=1, mismatch=-1, gap_penalty=-1)


def test_column_counts_on_gapped_alignment():
    alignment = _gapped_alignment()

    assert gap_count(alignment) == 1
    assert percent_identity(alignment) == pytest.approx(0.8)
    assert similarity(alignment, _unit_table()) == pytest.approx(0.8)
    assert extract_aligned_pairs(alignment) == {(0, 0), (1, 1), (3, 2), (4, 3)}


def test_rescore_matches_column_sum():
    """A + W - gap + H + E = 3 under the unit table."""
    assert rescore(_gapped_alignment(), _unit_table()) == 3


def test_similarity_counts_positive_substitutions():
    """S/T scores +1 in BLOSUM62, so it counts as similar but not identical."""
    table = load_blosum62()
    result = LocalAligner().align("WSW", "WTW", table)

    assert result.aligned_x == "WSW"
    summary = summarize(result, table)
    assert summary.identities == 2
    assert summary.positives == 3
    assert summary.similarity == pytest.approx(1.0)
    assert summary.identity == pytest.approx(2 / 3)
    assert summary.score == 11 + 1 + 11


def test_empty_alignment_metrics_are_zero():
    result = LocalAligner().align("", "HEA", _unit_table())
    summary = summarize(result, _unit_table())

    assert summary.columns == 0
    assert summary.identity == 0.0
    assert summary.similarity == 0.0


def test_match_line_markers():
    table = load_blosum62()
    assert match_line("AWGHE", "AW*HE") == "|| ||"
    assert match_line("AS", "AT", table) == "|:"
    assert match_line("AS", "AT") == "| "


def test_format_alignment_blocks_and_positions():
    """Blocks are labelled with 1-based positions in the original sequences."""
    result = AlignmentResult(
        alignment=_gapped_alignment(), score=3, start_x=4, end_x=9, start_y=1, end_y=5
    )
    text = format_alignment(result, _unit_table(), width=3)
    lines = text.splitlines()

    assert lines[0] == "Score: 3"
    assert lines[2] == "x      5 AWG"
    assert lines[3] == "         || "
    assert lines[4] == "y      2 AW*"
    assert lines[6] == "x      8 HE"
    assert lines[8] == "y      4 HE"

    with pytest.raises(ValueError):
        format_alignment(result, width=0)
