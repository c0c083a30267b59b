"""Sequence types."""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Union
from abc import ABC, abstractmethod

from protalign.errors import InvalidInput

AMINO_ACIDS: FrozenSet[str] = frozenset("ACDEFGHIKLMNPQRSTVWYBZXJUO")
GAP_CHARACTERS: FrozenSet[str] = frozenset("*-.")


@dataclass(frozen=True)
class SequenceType(ABC):
    """Generic biological sequence with an identifier and optional description."""

    identifier: str
    residues: List[str]
    description: Optional[str] = None
    aligned: bool = False

    def __post_init__(self) -> None:
        self._validate()

    def __len__(self) -> int:
        return len(self.residues)

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        joined_residues = "".join(self.residues)
        return (
            f"{class_name} (\n"
            f"   id: {self.identifier} ({'aligned' if self.aligned else 'unaligned'})\n"
            f"   description: {self.description}\n"
            f"   residues: {joined_residues}\n"
            f")"
        )

    @property
    def text(self) -> str:
        """Residues joined into a single string."""
        return "".join(self.residues)

    @property
    @abstractmethod
    def alphabet(self) -> FrozenSet[str]:
        """Residues allowed in an unaligned sequence of this type."""
        raise NotImplementedError

    @abstractmethod
    def _validate(self) -> None:
        """Validate the residues for this sequence type. Raise InvalidInput if invalid."""
        raise NotImplementedError


@dataclass(frozen=True)
class ProteinSequence(SequenceType):
    """Protein sequence; extends SequenceType. Reserved for IUPAC amino-acid letters."""

    def __post_init__(self) -> None:
        # Uppercase all residues on initialization, then validate
        uppercased: List[str] = [r.upper() for r in self.residues]
        object.__setattr__(self, "residues", uppercased)
        super().__post_init__()

    @property
    def alphabet(self) -> FrozenSet[str]:
        return AMINO_ACIDS

    def _validate(self) -> None:
        bad_length = [r for r in self.residues if len(r) != 1]
        if bad_length:
            raise InvalidInput(f"Residues must be single characters, got {bad_length}")

        allowed = AMINO_ACIDS | GAP_CHARACTERS if self.aligned else AMINO_ACIDS
        invalid = {ch for ch in self.residues if ch not in allowed}
        if invalid:
            raise InvalidInput(
                f"Invalid protein residues in '{self.identifier}': {sorted(invalid)}"
            )


def as_sequence(
    value: Union[SequenceType, str], identifier: str = ""
) -> SequenceType:
    """Coerce a plain string to a ProteinSequence; pass SequenceType through."""
    if isinstance(value, SequenceType):
        return value
    if isinstance(value, str):
        return ProteinSequence(identifier=identifier, residues=list(value))
    raise TypeError(f"Expected SequenceType or str, got {type(value).__name__}")


__all__ = [
    "SequenceType",
    "ProteinSequence",
    "AMINO_ACIDS",
    "GAP_CHARACTERS",
    "as_sequence",
]
