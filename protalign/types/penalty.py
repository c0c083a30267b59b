"""
Substitution/penalty table used by the aligners.

A table maps an ordered pair of symbols to an integer score. One symbol is
reserved as the gap marker: ``get(a, gap)`` is the score of deleting ``a``
and ``get(gap, b)`` the score of inserting ``b``. Tables are filled once and
then frozen; aligners only ever read them.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Set, Tuple

from protalign.errors import MissingPenaltyError
from protalign.types.sequence import GAP_CHARACTERS

DEFAULT_GAP = "*"


def _check_symbol(symbol: str, arg_name: str) -> None:
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"{arg_name} must be a single character, got {symbol!r}")


class PenaltyTable:
    """Lookup from an ordered (symbol, symbol) pair to an integer score."""

    def __init__(self, gap: str = DEFAULT_GAP) -> None:
        _check_symbol(gap, "gap")
        if gap not in GAP_CHARACTERS:
            raise ValueError(
                f"gap must be one of {sorted(GAP_CHARACTERS)}, got {gap!r}"
            )
        self._gap = gap
        self._scores: Dict[Tuple[str, str], int] = {}
        self._symbols: Set[str] = set()
        self._frozen = False

    @property
    def gap(self) -> str:
        """The reserved gap marker."""
        return self._gap

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def symbols(self) -> Set[str]:
        """Every symbol appearing in at least one defined pair."""
        return set(self._symbols)

    @property
    def alphabet(self) -> Set[str]:
        """Residue symbols the table knows about (gap excluded)."""
        return self._symbols - {self._gap}

    def set(self, a: str, b: str, penalty: int) -> None:
        """Record the score for pairing ``a`` against ``b``."""
        if self._frozen:
            raise RuntimeError("Cannot modify a frozen penalty table.")
        _check_symbol(a, "a")
        _check_symbol(b, "b")
        self._scores[(a, b)] = int(penalty)
        self._symbols.update((a, b))

    def get(self, a: str, b: str) -> int:
        """Return the score for ``a`` against ``b``; MissingPenaltyError if unset."""
        try:
            return self._scores[(a, b)]
        except KeyError:
            raise MissingPenaltyError((a, b)) from None

    def has(self, a: str, b: str) -> bool:
        return (a, b) in self._scores

    def freeze(self) -> "PenaltyTable":
        """Make the table read-only. Returns self for chaining."""
        self._frozen = True
        return self

    def missing_pairs(self, symbols: Iterable[str]) -> List[Tuple[str, str]]:
        """Pairs among ``symbols`` (and the gap) that alignment could need but are unset."""
        residues = sorted(set(symbols) - {self._gap})
        missing = []
        for a in residues:
            for b in residues:
                if (a, b) not in self._scores:
                    missing.append((a, b))
            if (a, self._gap) not in self._scores:
                missing.append((a, self._gap))
            if (self._gap, a) not in self._scores:
                missing.append((self._gap, a))
        return missing

    def is_symmetric(self) -> bool:
        """True when every defined pair (a, b) has a matching (b, a) entry."""
        for (a, b), score in self._scores.items():
            if self._scores.get((b, a)) != score:
                return False
        return True

    def to_nested(self) -> Dict[str, Dict[str, int]]:
        """Return the scores as ``{row: {column: score}}``."""
        nested: Dict[str, Dict[str, int]] = {}
        for (a, b), score in self._scores.items():
            nested.setdefault(a, {})[b] = score
        return nested

    @classmethod
    def from_nested(
        cls, scores: Mapping[str, Mapping[str, int]], gap: str = DEFAULT_GAP
    ) -> "PenaltyTable":
        """Build a frozen table from ``{row: {column: score}}``."""
        table = cls(gap=gap)
        for a, row in scores.items():
            for b, score in row.items():
                table.set(a, b, score)
        return table.freeze()

    @classmethod
    def simple(
        cls,
        alphabet: Iterable[str],
        match: int = 1,
        mismatch: int = -1,
        gap_penalty: int = -1,
        gap: str = DEFAULT_GAP,
    ) -> "PenaltyTable":
        """Build a frozen match/mismatch/linear-gap table over ``alphabet``."""
        table = cls(gap=gap)
        symbols = sorted(set(alphabet))
        for a in symbols:
            for b in symbols:
                table.set(a, b, match if a == b else mismatch)
            table.set(a, gap, gap_penalty)
            table.set(gap, a, gap_penalty)
        return table.freeze()

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, pair: object) -> bool:
        return pair in self._scores

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return iter(self._scores)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(gap={self._gap!r}, "
            f"symbols={len(self._symbols)}, pairs={len(self._scores)}, "
            f"frozen={self._frozen})"
        )


__all__ = ["PenaltyTable", "DEFAULT_GAP"]
