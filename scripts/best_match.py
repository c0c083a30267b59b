#!/usr/bin/env python3
"""Find the candidate protein that best matches a query by local alignment."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List

import pandas as pd

from .constants import (
    BEST_MATCH_CSV,
    CANDIDATES_FASTA,
    DEFAULT_PENALTY_TABLE,
    DEFAULT_WORKERS,
    FORMAT_WIDTH,
    QUERY_FASTA,
)

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from protalign.algorithms import score_all
from protalign.evaluation import summarize
from protalign.types import AlignmentResult, PenaltyTable
from protalign.utils import (
    format_alignment,
    load_penalty_table,
    read_protein_fasta,
    result_to_dict,
)


def results_frame(
    results: List[AlignmentResult], table: PenaltyTable
) -> pd.DataFrame:
    """One row per candidate, in input order, with a 'rank' column."""
    rows: List[Dict[str, object]] = []
    for idx, result in enumerate(results):
        row = {"candidate_index": idx}
        row.update(result_to_dict(result, summarize(result, table)))
        rows.append(row)

    df = pd.DataFrame(rows)
    if not df.empty:
        # method="first" ranks equal scores in input order
        df["rank"] = df["score"].rank(method="first", ascending=False).astype(int)
    return df


def main() -> None:
    """Score every candidate against the query and report the best one."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-q", "--query", type=Path, default=QUERY_FASTA)
    parser.add_argument("-c", "--candidates", type=Path, default=CANDIDATES_FASTA)
    parser.add_argument("-t", "--table", type=Path, default=DEFAULT_PENALTY_TABLE)
    parser.add_argument("-o", "--output", type=Path, default=BEST_MATCH_CSV)
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    for path in (args.query, args.candidates, args.table):
        if not path.exists():
            raise FileNotFoundError(f"Input file not found: {path}")

    table = load_penalty_table(args.table)
    queries = read_protein_fasta(str(args.query))
    if not queries:
        raise ValueError(f"No sequences found in {args.query}")
    query = queries[0]
    candidates = read_protein_fasta(str(args.candidates), skip_invalid=True)
    if not candidates:
        raise ValueError(f"No usable sequences found in {args.candidates}")

    print(f"Scoring {len(candidates)} candidates against '{query.identifier}'...")
    results = score_all(query, candidates, table, max_workers=args.workers)
    df = results_frame(results, table)

    best_row = df.loc[df["rank"] == 1].iloc[0]
    best_index = int(best_row["candidate_index"])
    best = candidates[best_index]
    print(f"\nBest match: {best.identifier} {best.description or ''}".rstrip())
    print(format_alignment(results[best_index], table, width=FORMAT_WIDTH))

    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.sort_values("rank").to_csv(args.output, index=False)
    print(f"\nWrote per-candidate scores to {args.output}")


if __name__ == "__main__":
    main()
