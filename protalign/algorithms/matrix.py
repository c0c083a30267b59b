"""Bounds-checked dense matrices for the dynamic-programming aligners."""

from __future__ import annotations

from enum import IntEnum
from typing import Tuple

import numpy as np


class Direction(IntEnum):
    """Predecessor that produced a cell's score."""

    NONE = 0
    UP = 1
    LEFT = 2
    DIAGONAL = 3


class DPMatrix:
    """A rows x cols numpy buffer indexed by validated (row, col) pairs.

    Negative indices are rejected rather than wrapped around, so an
    off-by-one in a recurrence raises IndexError instead of silently reading
    the opposite edge of the matrix.
    """

    def __init__(self, rows: int, cols: int, dtype=np.int64, fill: int = 0) -> None:
        if rows < 1 or cols < 1:
            raise ValueError(f"Matrix dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._data = np.full((rows, cols), fill, dtype=dtype)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def _check(self, key: Tuple[int, int]) -> Tuple[int, int]:
        row, col = key
        if not 0 <= row < self.rows or not 0 <= col < self.cols:
            raise IndexError(
                f"Cell ({row}, {col}) outside matrix of shape {self.shape}"
            )
        return row, col

    def __getitem__(self, key: Tuple[int, int]) -> int:
        return int(self._data[self._check(key)])

    def __setitem__(self, key: Tuple[int, int], value: int) -> None:
        self._data[self._check(key)] = value

    def fill_boundary(self, value: int) -> None:
        """Set every cell of row 0 and column 0 to ``value``."""
        self._data[0, :] = value
        self._data[:, 0] = value

    def argmax(self) -> Tuple[int, int]:
        """Cell holding the maximum value; first in row-major order on ties."""
        flat_index = int(np.argmax(self._data))
        row, col = divmod(flat_index, self.cols)
        return row, col

    def to_array(self) -> np.ndarray:
        """Return a copy of the underlying buffer."""
        return self._data.copy()


__all__ = ["Direction", "DPMatrix"]
