#!/usr/bin/env python3
"""Run the complete demo workflow."""

import argparse
import subprocess
import sys

STEPS = [
    ("Aligning demo sequences", "scripts.run_demo"),
    ("Plotting score matrix", "scripts.plot_score_matrix"),
]


def run(module: str, args: list[str] | None = None) -> None:
    """Run a script."""
    cmd = [sys.executable, "-m", module] + (args or [])
    subprocess.run(cmd, check=True)


def main() -> None:
    """Run the complete demo workflow."""
    parser = argparse.ArgumentParser(description="Run the complete demo workflow.")
    parser.add_argument(
        "--best-match",
        action="store_true",
        help="Also run the best-match search over data/fasta (default: skip)",
    )
    opts = parser.parse_args()

    for name, module in STEPS:
        print(f"\n=== {name} ===")
        run(module)

    if opts.best_match:
        print("\n=== Searching for best match ===")
        run("scripts.best_match")

    print("\n=== Workflow complete ===")


if __name__ == "__main__":
    main()
