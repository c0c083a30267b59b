"""Unit tests for protein sequence types."""

from __future__ import annotations

import pytest

from protalign.errors import InvalidInput
from protalign.types import ProteinSequence, as_sequence


def test_protein_sequence_uppercases_residues():
    """Residues are uppercased on construction."""
    seq = ProteinSequence(identifier="p", residues=list("heaG"))
    assert seq.residues == ["H", "E", "A", "G"]
    assert seq.text == "HEAG"
    assert len(seq) == 4


def test_unaligned_sequence_rejects_gaps_and_symbols():
    """Gap markers and non-letters are invalid in raw input."""
    with pytest.raises(InvalidInput):
        ProteinSequence(identifier="p", residues=list("HE*A"))
    with pytest.raises(InvalidInput):
        ProteinSequence(identifier="p", residues=list("HE1A"))
    with pytest.raises(ValueError):
        ProteinSequence(identifier="p", residues=["HE"])


def test_aligned_sequence_accepts_gap_characters():
    """Aligned sequences may carry any of the gap markers."""
    seq = ProteinSequence(identifier="p", residues=list("AW*H-E."), aligned=True)
    assert seq.text == "AW*H-E."


def test_empty_sequence_is_valid():
    """Sequences may be empty."""
    assert len(ProteinSequence(identifier="empty", residues=[])) == 0


def test_as_sequence_coerces_strings():
    """Strings become ProteinSequence; SequenceType passes through."""
    seq = as_sequence("pawhe", identifier="q")
    assert isinstance(seq, ProteinSequence)
    assert seq.identifier == "q"
    assert seq.text == "PAWHE"
    assert as_sequence(seq) is seq

    with pytest.raises(TypeError):
        as_sequence(42)
