"""Smith-Waterman local alignment with a linear gap penalty."""

from __future__ import annotations

import logging
from typing import List, Tuple, Union

import numpy as np

from protalign.algorithms.base import PairwiseAligner
from protalign.algorithms.matrix import Direction, DPMatrix
from protalign.errors import InvalidInput
from protalign.types import (
    Alignment,
    AlignmentResult,
    PenaltyTable,
    SequenceType,
    as_sequence,
)

logger = logging.getLogger(__name__)


class LocalAligner(PairwiseAligner):
    """Highest-scoring local alignment between two sequences.

    Each cell (i, j) of the score matrix holds the best score of an alignment
    ending at x[i-1], y[j-1], clamped at zero. Cells clamped to zero, and the
    row/column 0 boundary, carry Direction.NONE and terminate the traceback.

    Tie-breaks:
        - Equal predecessor scores resolve DIAGONAL > UP > LEFT.
        - Equal optimum cells resolve to the first in row-major order
          (smallest i, then smallest j).
    """

    def _validate_inputs(
        self,
        x_seq: SequenceType,
        y_seq: SequenceType,
        table: PenaltyTable,
    ) -> None:
        """Reject residues the table has no scores for."""
        alphabet = table.alphabet
        for seq in (x_seq, y_seq):
            invalid = {res for res in seq.residues if res not in alphabet}
            if invalid:
                raise InvalidInput(
                    f"Sequence '{seq.identifier}' has residues outside the "
                    f"penalty table alphabet: {sorted(invalid)}"
                )

    def _initialize_dp_matrices(self, n: int, m: int) -> Tuple[DPMatrix, DPMatrix]:
        """Allocate score and trace matrices with an explicit zero boundary."""
        scores = DPMatrix(n + 1, m + 1, dtype=np.int64)
        trace = DPMatrix(n + 1, m + 1, dtype=np.int8)
        scores.fill_boundary(0)
        trace.fill_boundary(Direction.NONE)
        return scores, trace

    def _fill_interior(
        self,
        scores: DPMatrix,
        trace: DPMatrix,
        x: List[str],
        y: List[str],
        table: PenaltyTable,
    ) -> None:
        """Run the local-alignment recurrence over cells (1..n, 1..m)."""
        gap = table.gap
        for i in range(1, len(x) + 1):
            for j in range(1, len(y) + 1):
                # Order matters: earlier entries win ties.
                candidates = (
                    (
                        scores[i - 1, j - 1] + table.get(x[i - 1], y[j - 1]),
                        Direction.DIAGONAL,
                    ),
                    (scores[i - 1, j] + table.get(x[i - 1], gap), Direction.UP),
                    (scores[i, j - 1] + table.get(gap, y[j - 1]), Direction.LEFT),
                )

                best_score, best_move = candidates[0]
                for score, move in candidates[1:]:
                    if score > best_score:
                        best_score = score
                        best_move = move

                if best_score <= 0:
                    best_score = 0
                    best_move = Direction.NONE

                scores[i, j] = best_score
                trace[i, j] = best_move

    def _find_optimum(self, scores: DPMatrix) -> Tuple[int, int, int]:
        """Return (score, i, j) of the best cell anywhere in the matrix."""
        i, j = scores.argmax()
        return scores[i, j], i, j

    def _traceback(
        self,
        trace: DPMatrix,
        x: List[str],
        y: List[str],
        gap: str,
        i: int,
        j: int,
    ) -> Tuple[List[str], List[str], int, int]:
        """Follow trace tags from (i, j) until a NONE cell.

        Returns the aligned residue lists and the (i, j) cell where the walk
        stopped, i.e. the 0-based start of the aligned substretches.
        """
        aligned_x: List[str] = []
        aligned_y: List[str] = []

        while True:
            move = trace[i, j]
            if move == Direction.DIAGONAL:
                aligned_x.append(x[i - 1])
                aligned_y.append(y[j - 1])
                i -= 1
                j -= 1
            elif move == Direction.UP:
                aligned_x.append(x[i - 1])
                aligned_y.append(gap)
                i -= 1
            elif move == Direction.LEFT:
                aligned_x.append(gap)
                aligned_y.append(y[j - 1])
                j -= 1
            else:
                break

        aligned_x.reverse()
        aligned_y.reverse()

        return aligned_x, aligned_y, i, j

    def _build_alignment(
        self,
        x_seq: SequenceType,
        y_seq: SequenceType,
        aligned_x: List[str],
        aligned_y: List[str],
    ) -> Alignment:
        """Wrap aligned residue lists in an Alignment object."""
        aligned_x_seq = type(x_seq)(
            identifier=x_seq.identifier,
            residues=aligned_x,
            description=x_seq.description,
            aligned=True,
        )
        aligned_y_seq = type(y_seq)(
            identifier=y_seq.identifier,
            residues=aligned_y,
            description=y_seq.description,
            aligned=True,
        )

        return Alignment(
            name=f"SW_{x_seq.identifier}_vs_{y_seq.identifier}",
            aligned_sequences=[aligned_x_seq, aligned_y_seq],
            original_sequences=[x_seq, y_seq],
        )

    def _fill(
        self,
        x_seq: SequenceType,
        y_seq: SequenceType,
        table: PenaltyTable,
    ) -> Tuple[DPMatrix, DPMatrix]:
        self._validate_inputs(x_seq, y_seq, table)
        n = len(x_seq)
        m = len(y_seq)
        scores, trace = self._initialize_dp_matrices(n, m)
        self._fill_interior(scores, trace, x_seq.residues, y_seq.residues, table)
        return scores, trace

    def score_matrix(
        self,
        x_seq: Union[SequenceType, str],
        y_seq: Union[SequenceType, str],
        table: PenaltyTable,
    ) -> np.ndarray:
        """Return a copy of the filled (n+1) x (m+1) score matrix."""
        scores, _ = self._fill(as_sequence(x_seq, "x"), as_sequence(y_seq, "y"), table)
        return scores.to_array()

    def align(
        self,
        x_seq: Union[SequenceType, str],
        y_seq: Union[SequenceType, str],
        table: PenaltyTable,
    ) -> AlignmentResult:
        """Compute the optimal local alignment of the two sequences."""
        x_seq = as_sequence(x_seq, "x")
        y_seq = as_sequence(y_seq, "y")

        scores, trace = self._fill(x_seq, y_seq, table)
        score, end_i, end_j = self._find_optimum(scores)
        aligned_x, aligned_y, start_i, start_j = self._traceback(
            trace, x_seq.residues, y_seq.residues, table.gap, end_i, end_j
        )
        alignment = self._build_alignment(x_seq, y_seq, aligned_x, aligned_y)

        logger.debug(
            "Aligned %s (%d) vs %s (%d): score=%d, x[%d:%d], y[%d:%d]",
            x_seq.identifier,
            len(x_seq),
            y_seq.identifier,
            len(y_seq),
            score,
            start_i,
            end_i,
            start_j,
            end_j,
        )

        return AlignmentResult(
            alignment=alignment,
            score=score,
            start_x=start_i,
            end_x=end_i,
            start_y=start_j,
            end_y=end_j,
        )


__all__ = ["LocalAligner"]
