#!/usr/bin/env python3
"""Plot the Smith-Waterman score matrix with the optimal traceback path."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # pylint: disable=C0413
import numpy as np  # pylint: disable=C0413

from .constants import (  # pylint: disable=C0413
    DEFAULT_PENALTY_TABLE,
    DEMO_X,
    DEMO_Y,
    HEATMAP_CMAP,
    PATH_COLOR,
    PLOT_DPI,
    PLOT_TITLE_FONTSIZE,
    PLOT_XLABEL_FONTSIZE,
    PLOT_YLABEL_FONTSIZE,
    SCORE_MATRIX_FIGURES_FOLDER,
)

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from protalign.algorithms import LocalAligner  # pylint: disable=C0413
from protalign.types import AlignmentResult  # pylint: disable=C0413
from protalign.types.sequence import GAP_CHARACTERS  # pylint: disable=C0413
from protalign.utils import load_penalty_table  # pylint: disable=C0413


def traceback_cells(result: AlignmentResult) -> List[Tuple[int, int]]:
    """Matrix cells (i, j) visited by the alignment, from start to optimum."""
    i, j = result.start_x, result.start_y
    cells = []
    for a, b in zip(result.aligned_x, result.aligned_y):
        if a not in GAP_CHARACTERS:
            i += 1
        if b not in GAP_CHARACTERS:
            j += 1
        cells.append((i, j))
    return cells


def plot_score_matrix(
    scores: np.ndarray,
    result: AlignmentResult,
    x_label: str,
    y_label: str,
    out_path: Path,
    dpi: int = PLOT_DPI,
) -> None:
    """Render the (n+1) x (m+1) score matrix as a heatmap and save it."""
    fig, ax = plt.subplots(1, 1, figsize=(7, 6))
    im = ax.imshow(scores, origin="upper", aspect="auto", cmap=HEATMAP_CMAP)
    fig.colorbar(im, ax=ax, fraction=0.046, pad=0.04, label="Local score")

    cells = traceback_cells(result)
    if cells:
        rows, cols = zip(*cells)
        ax.plot(cols, rows, color=PATH_COLOR, linewidth=2, marker="o", markersize=4)

    # Row/column 0 is the boundary; residues start at index 1
    ax.set_xticks(range(1, len(y_label) + 1))
    ax.set_xticklabels(list(y_label))
    ax.set_yticks(range(1, len(x_label) + 1))
    ax.set_yticklabels(list(x_label))
    ax.set_xlabel("Sequence Y", fontsize=PLOT_XLABEL_FONTSIZE)
    ax.set_ylabel("Sequence X", fontsize=PLOT_YLABEL_FONTSIZE)
    ax.set_title(f"Score matrix (best = {result.score})", fontsize=PLOT_TITLE_FONTSIZE)

    plt.tight_layout()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(out_path, dpi=dpi)
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-x", "--seq-x", default=DEMO_X)
    parser.add_argument("-y", "--seq-y", default=DEMO_Y)
    parser.add_argument("-t", "--table", type=Path, default=DEFAULT_PENALTY_TABLE)
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=SCORE_MATRIX_FIGURES_FOLDER / "score_matrix.png",
    )
    args = parser.parse_args()

    table = load_penalty_table(args.table)
    aligner = LocalAligner()
    scores = aligner.score_matrix(args.seq_x, args.seq_y, table)
    result = aligner.align(args.seq_x, args.seq_y, table)

    plot_score_matrix(
        scores, result, args.seq_x.upper(), args.seq_y.upper(), args.output
    )
    print(f"Wrote score matrix heatmap to {args.output}")


if __name__ == "__main__":
    main()
