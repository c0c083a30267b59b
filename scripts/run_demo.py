#!/usr/bin/env python3
"""Locally align two protein sequences and print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .constants import DEFAULT_PENALTY_TABLE, DEMO_X, DEMO_Y, FORMAT_WIDTH

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from protalign.algorithms import LocalAligner  # pylint: disable=C0413
from protalign.evaluation import summarize  # pylint: disable=C0413
from protalign.types import ProteinSequence  # pylint: disable=C0413
from protalign.utils import format_alignment, load_penalty_table  # pylint: disable=C0413


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Run Smith-Waterman local alignment on two sequences."
    )
    parser.add_argument("-x", "--seq-x", default=DEMO_X, help="First sequence.")
    parser.add_argument("-y", "--seq-y", default=DEMO_Y, help="Second sequence.")
    parser.add_argument(
        "-t",
        "--table",
        type=Path,
        default=DEFAULT_PENALTY_TABLE,
        help="Penalty table (BLOSUM text or YAML).",
    )
    parser.add_argument("-w", "--width", type=int, default=FORMAT_WIDTH)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if not args.table.exists():
        raise FileNotFoundError(f"Penalty table not found: {args.table}")

    table = load_penalty_table(args.table)
    x_seq = ProteinSequence(identifier="x", residues=list(args.seq_x))
    y_seq = ProteinSequence(identifier="y", residues=list(args.seq_y))

    result = LocalAligner().align(x_seq, y_seq, table)
    summary = summarize(result, table)

    print(format_alignment(result, table, width=args.width))
    print(
        f"\nIdentity: {summary.identity:.2%}  "
        f"Similarity: {summary.similarity:.2%}  Gaps: {summary.gaps}"
    )


if __name__ == "__main__":
    main()
