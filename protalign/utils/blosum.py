"""Functions for working with BLOSUM-style penalty matrix files.

Two header styles are accepted::

    $ A R N *           (header line starts with '$')
       A  R  N  *       (NCBI style, header line starts with whitespace)
    A  4 -1 -2 -4
    ...

Lines starting with '#' and blank lines are ignored. Every row starts with
its symbol followed by one integer per header column.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import List, Union

from protalign.types.penalty import DEFAULT_GAP, PenaltyTable

BLOSUM62_RESOURCE = "blosum62.txt"


def _parse_header(line: str) -> List[str]:
    tokens = line.lstrip("$").split()
    symbols = [token[0] for token in tokens]
    if len(set(symbols)) != len(symbols):
        raise ValueError(f"Duplicate column symbols in header: {symbols}")
    return symbols


def parse_penalty_table(text: str, gap: str = DEFAULT_GAP) -> PenaltyTable:
    """Parse BLOSUM matrix text into a frozen PenaltyTable."""
    table = PenaltyTable(gap=gap)
    columns: List[str] = []

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip()
        if not line.strip() or line.lstrip().startswith("#"):
            continue

        if not columns:
            if line.startswith("$") or line[0].isspace():
                columns = _parse_header(line)
                continue
            raise ValueError(f"Line {line_no}: expected a header line, got {raw!r}")

        row_symbol, *cells = line.split()
        if len(row_symbol) != 1:
            raise ValueError(f"Line {line_no}: row symbol must be one character")
        if len(cells) != len(columns):
            raise ValueError(
                f"Line {line_no}: expected {len(columns)} scores for row "
                f"{row_symbol!r}, got {len(cells)}"
            )
        try:
            values = [int(cell) for cell in cells]
        except ValueError:
            raise ValueError(f"Line {line_no}: non-integer score in {raw!r}") from None

        for column_symbol, value in zip(columns, values):
            table.set(row_symbol, column_symbol, value)

    if not columns:
        raise ValueError("Penalty matrix has no header line")
    return table.freeze()


def read_penalty_table(
    file_path: Union[str, Path], gap: str = DEFAULT_GAP
) -> PenaltyTable:
    """Read a BLOSUM matrix file into a frozen PenaltyTable."""
    with open(file_path, "r", encoding="utf-8") as fh:
        return parse_penalty_table(fh.read(), gap=gap)


def load_blosum62() -> PenaltyTable:
    """Return the bundled BLOSUM62 matrix, with '*' as the gap symbol."""
    text = (
        resources.files("protalign.data")
        .joinpath(BLOSUM62_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return parse_penalty_table(text)


__all__ = ["parse_penalty_table", "read_penalty_table", "load_blosum62"]
