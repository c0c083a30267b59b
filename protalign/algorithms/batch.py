"""Score one query against a collection of candidate sequences."""

from __future__ import annotations

import logging
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Union

from protalign.algorithms.base import PairwiseAligner
from protalign.algorithms.smith_waterman import LocalAligner
from protalign.types import AlignmentResult, PenaltyTable, SequenceType, as_sequence

logger = logging.getLogger(__name__)

ExecutorKind = Literal["process", "thread"]


@dataclass(frozen=True)
class BestMatch:
    """Winning candidate of a batch search.

    Attributes:
        index: Position of the candidate in the input collection
        candidate: The candidate sequence itself
        result: Alignment of the query against the candidate
    """

    index: int
    candidate: SequenceType
    result: AlignmentResult

    @property
    def score(self) -> int:
        return self.result.score


def _align_one(
    aligner: PairwiseAligner,
    query: SequenceType,
    candidate: SequenceType,
    table: PenaltyTable,
) -> AlignmentResult:
    return aligner.align(query, candidate, table)


def _make_executor(kind: ExecutorKind, max_workers: int) -> Executor:
    if kind == "process":
        return ProcessPoolExecutor(max_workers=max_workers)
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=max_workers)
    raise ValueError(f"Unknown executor kind: {kind}. Choose 'process' or 'thread'.")


def score_all(
    query: Union[SequenceType, str],
    candidates: Sequence[Union[SequenceType, str]],
    table: PenaltyTable,
    aligner: Optional[PairwiseAligner] = None,
    max_workers: Optional[int] = None,
    executor: ExecutorKind = "process",
) -> List[AlignmentResult]:
    """Align ``query`` against every candidate, returning results in input order.

    Alignments are independent and only read ``table``, so with
    ``max_workers`` > 1 they are spread over a process or thread pool. The
    table is frozen first so no worker can observe a mutation.
    """
    aligner = aligner or LocalAligner()
    query_seq = as_sequence(query, "query")
    candidate_seqs = [
        as_sequence(candidate, f"candidate_{idx}")
        for idx, candidate in enumerate(candidates)
    ]
    table.freeze()

    if not max_workers or max_workers <= 1 or len(candidate_seqs) <= 1:
        return [
            _align_one(aligner, query_seq, candidate, table)
            for candidate in candidate_seqs
        ]

    logger.debug(
        "Scoring %d candidates with %d %s workers",
        len(candidate_seqs),
        max_workers,
        executor,
    )
    n = len(candidate_seqs)
    with _make_executor(executor, max_workers) as pool:
        # map() yields in submission order, which preserves the tie-break.
        return list(
            pool.map(
                _align_one,
                [aligner] * n,
                [query_seq] * n,
                candidate_seqs,
                [table] * n,
            )
        )


def best_match(
    query: Union[SequenceType, str],
    candidates: Sequence[Union[SequenceType, str]],
    table: PenaltyTable,
    aligner: Optional[PairwiseAligner] = None,
    max_workers: Optional[int] = None,
    executor: ExecutorKind = "process",
) -> Optional[BestMatch]:
    """Return the candidate with the highest local alignment score.

    Ties go to the earliest candidate in input order. Returns None when
    ``candidates`` is empty.
    """
    results = score_all(
        query,
        candidates,
        table,
        aligner=aligner,
        max_workers=max_workers,
        executor=executor,
    )

    best: Optional[BestMatch] = None
    for idx, result in enumerate(results):
        if best is None or result.score > best.score:
            best = BestMatch(
                index=idx,
                candidate=result.alignment.original_sequences[1],
                result=result,
            )

    if best is not None:
        logger.debug(
            "Best match: candidate %d (%s) with score %d",
            best.index,
            best.candidate.identifier,
            best.score,
        )
    return best


__all__ = ["BestMatch", "score_all", "best_match"]
