"""Exceptions raised by the alignment engine."""

from __future__ import annotations

from typing import Tuple


class InvalidInput(ValueError):
    """A sequence contains a symbol outside the expected alphabet."""


class MissingPenaltyError(LookupError):
    """A penalty table was queried for a symbol pair it does not define."""

    def __init__(self, pair: Tuple[str, str]) -> None:
        self.pair = pair
        super().__init__(f"No penalty defined for pair {pair[0]!r} -> {pair[1]!r}")


__all__ = ["InvalidInput", "MissingPenaltyError"]
