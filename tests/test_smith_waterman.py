"""Unit tests for LocalAligner (Smith-Waterman local alignment)."""

from __future__ import annotations

import random

import numpy as np
import pytest

from protalign.algorithms.matrix import Direction
from protalign.algorithms.smith_waterman import LocalAligner
from protalign.errors import InvalidInput, MissingPenaltyError
from protalign.evaluation import rescore
from protalign.types import PenaltyTable, ProteinSequence
from protalign.utils import load_blosum62

DEMO_X = "HEAGAWGHEE"
DEMO_Y = "PAWHEAE"


def _unit_table(gap: str = "*") -> PenaltyTable:
    """match = +1, mismatch = -1, gap = -1 over the demo alphabet."""
    return PenaltyTable.simple(
        set(DEMO_X) | set(DEMO_Y), match=1, mismatch=-1, gap_penalty=-1, gap=gap
    )


@pytest.fixture(scope="module")
def blosum62() -> PenaltyTable:
    return load_blosum62()


def test_demo_pair_optimum_score_and_tie_break():
    """The demo pair scores 3; the first optimum cell in row-major order wins."""
    result = LocalAligner().align(DEMO_X, DEMO_Y, _unit_table())

    assert result.score == 3
    assert result.aligned_x == "HEA"
    assert result.aligned_y == "HEA"
    assert (result.start_x, result.end_x) == (0, 3)
    assert (result.start_y, result.end_y) == (3, 6)


def test_demo_pair_optimum_cells():
    """Three cells tie at the optimum, including ones off the last row."""
    scores = LocalAligner().score_matrix(DEMO_X, DEMO_Y, _unit_table())

    assert scores.shape == (11, 8)
    assert scores.max() == 3
    optimum_cells = [tuple(int(v) for v in cell) for cell in np.argwhere(scores == 3)]
    assert optimum_cells == [(3, 6), (9, 5), (10, 7)]


def test_demo_pair_traceback_through_awghe():
    """Tracing back from (9, 5) recovers the gapped AWGHE / AW-HE alignment."""
    aligner = LocalAligner()
    table = _unit_table(gap="-")
    x = list(DEMO_X)
    y = list(DEMO_Y)

    scores, trace = aligner._fill(
        ProteinSequence(identifier="x", residues=x),
        ProteinSequence(identifier="y", residues=y),
        table,
    )
    aligned_x, aligned_y, start_i, start_j = aligner._traceback(
        trace, x, y, table.gap, 9, 5
    )

    assert scores[9, 5] == 3
    assert "".join(aligned_x) == "AWGHE"
    assert "".join(aligned_y) == "AW-HE"
    assert (start_i, start_j) == (4, 1)


def test_fill_prefers_diagonal_then_up_then_left():
    """Equal predecessors resolve DIAGONAL > UP > LEFT."""
    aligner = LocalAligner()

    # (5, 6) of the demo pair: diagonal and up both give 1
    _, trace = aligner._fill(
        ProteinSequence(identifier="x", residues=list(DEMO_X)),
        ProteinSequence(identifier="y", residues=list(DEMO_Y)),
        _unit_table(),
    )
    assert trace[5, 6] == Direction.DIAGONAL

    # (2, 2) of AB vs BA: up and left both give 1, diagonal is negative
    table = PenaltyTable.simple("AB", match=2, mismatch=-3, gap_penalty=-1)
    scores, trace = aligner._fill(
        ProteinSequence(identifier="x", residues=list("AB")),
        ProteinSequence(identifier="y", residues=list("BA")),
        table,
    )
    assert scores[2, 2] == 1
    assert trace[2, 2] == Direction.UP


def test_clamped_cells_carry_no_direction():
    """Cells clamped to zero and the boundary are NONE."""
    _, trace = LocalAligner()._fill(
        ProteinSequence(identifier="x", residues=list("AB")),
        ProteinSequence(identifier="y", residues=list("BA")),
        PenaltyTable.simple("AB", match=2, mismatch=-3, gap_penalty=-1),
    )
    assert trace[1, 1] == Direction.NONE
    assert trace[0, 2] == Direction.NONE
    assert trace[2, 0] == Direction.NONE


def test_optimum_is_found_outside_last_row():
    """A strong match early in x must not be missed by a last-row scan."""
    table = PenaltyTable.simple("ACDEFGHIKLMNPQRSTVWY")
    result = LocalAligner().align("WWWWKKKKKKKK", "PWWWWP", table)

    assert result.score == 4
    assert result.aligned_x == "WWWW"
    assert (result.start_x, result.end_x) == (0, 4)
    assert (result.start_y, result.end_y) == (1, 5)


@pytest.mark.parametrize(
    "x, y",
    [("", ""), ("", "HEAGAWGHEE"), ("PAWHEAE", "")],
)
def test_empty_sequences_yield_empty_alignment(x, y):
    """An empty input gives score 0 and two empty aligned outputs."""
    table = _unit_table()
    result = LocalAligner().align(x, y, table)

    assert result.score == 0
    assert result.aligned_x == ""
    assert result.aligned_y == ""
    assert result.alignment.columns == 0


def test_no_positive_pair_gives_empty_alignment():
    """Nothing scores above zero, so the local alignment is empty."""
    table = PenaltyTable.simple("AC", match=1, mismatch=-1, gap_penalty=-1)
    result = LocalAligner().align("AAA", "CCC", table)

    assert result.score == 0
    assert result.aligned_x == result.aligned_y == ""


def test_self_alignment_scores_sum_of_self_matches(blosum62):
    """Identical symbols positive and all else negative: self-score is the diagonal sum."""
    seq = "MKTAYIAKQRQISFVKSHFSRQ"
    table = PenaltyTable()
    for a in set(seq):
        for b in set(seq):
            table.set(a, b, blosum62.get(a, a) if a == b else -2)
        table.set(a, "*", -4)
        table.set("*", a, -4)

    result = LocalAligner().align(seq, seq, table)

    assert result.score == sum(blosum62.get(ch, ch) for ch in seq)
    assert result.aligned_x == seq
    assert result.aligned_y == seq


def test_properties_hold_on_random_pairs(blosum62):
    """Non-negative scores, equal-length outputs, symmetry and rescoring."""
    rng = random.Random(4775)
    residues = "ACDEFGHIKLMNPQRSTVWY"
    aligner = LocalAligner()

    for _ in range(15):
        x = "".join(rng.choice(residues) for _ in range(rng.randint(0, 25)))
        y = "".join(rng.choice(residues) for _ in range(rng.randint(0, 25)))

        forward = aligner.align(x, y, blosum62)
        backward = aligner.align(y, x, blosum62)

        assert forward.score >= 0
        assert len(forward.aligned_x) == len(forward.aligned_y)
        assert forward.score == backward.score
        assert rescore(forward.alignment, blosum62) == forward.score

        gapless_x = forward.aligned_x.replace("*", "")
        gapless_y = forward.aligned_y.replace("*", "")
        assert gapless_x == x[forward.start_x : forward.end_x]
        assert gapless_y == y[forward.start_y : forward.end_y]


def test_residue_outside_table_alphabet_raises_invalid_input():
    """Validation happens before any matrix work."""
    with pytest.raises(InvalidInput):
        LocalAligner().align("HEAK", "PAWHEAE", _unit_table())


def test_missing_penalty_propagates_lookup_error():
    """An incomplete table surfaces the offending pair."""
    table = PenaltyTable()
    table.set("A", "A", 1)

    with pytest.raises(LookupError) as excinfo:
        LocalAligner().align("A", "A", table)

    assert isinstance(excinfo.value, MissingPenaltyError)
    assert excinfo.value.pair == ("A", "*")


def test_alignment_wraps_original_sequences():
    """The result keeps identifiers and original inputs."""
    x_seq = ProteinSequence(identifier="hba", residues=list(DEMO_X), description="x")
    y_seq = ProteinSequence(identifier="hbb", residues=list(DEMO_Y))

    result = LocalAligner().align(x_seq, y_seq, _unit_table())
    aligned_x, aligned_y = result.alignment.aligned_sequences

    assert result.alignment.name == "SW_hba_vs_hbb"
    assert result.alignment.original_sequences == [x_seq, y_seq]
    assert aligned_x.aligned and aligned_y.aligned
    assert aligned_x.identifier == "hba"
    assert aligned_x.description == "x"
