"""Functions for working with FASTA files."""

import logging
from typing import Iterable, List, Optional

import skbio.io
from skbio import Sequence

from protalign.errors import InvalidInput
from protalign.types import ProteinSequence, SequenceType

logger = logging.getLogger(__name__)


def protein_sequence_from_skbio(record: Sequence) -> ProteinSequence:
    """Convert a scikit-bio record to a ProteinSequence."""
    metadata = getattr(record, "metadata", {}) or {}
    identifier = metadata.get("id") or ""
    description = metadata.get("description") or None

    return ProteinSequence(
        identifier=identifier,
        residues=list(str(record)),
        description=description,
    )


def read_protein_fasta(
    file_path: str,
    ids: Optional[List[str]] = None,
    skip_invalid: bool = False,
) -> List[ProteinSequence]:
    """Read a FASTA file and return a list of ProteinSequence.

    Args:
        file_path: Path to the FASTA file.
        ids: Optional identifiers to keep; every record is kept when omitted.
        skip_invalid: Drop records with non amino-acid residues (with a
            warning) instead of raising InvalidInput.
    """
    sequences: List[ProteinSequence] = []
    for record in skbio.io.read(str(file_path), format="fasta"):
        if ids and record.metadata["id"] not in ids:
            continue

        try:
            sequences.append(protein_sequence_from_skbio(record))
        except InvalidInput as exc:
            if not skip_invalid:
                raise
            logger.warning("Skipping record %s: %s", record.metadata.get("id"), exc)
    return sequences


def write_protein_fasta(sequences: Iterable[SequenceType], file_path: str) -> None:
    """Write sequences to a FASTA file, one line per record."""

    def _records():
        for seq in sequences:
            metadata = {"id": seq.identifier, "description": seq.description or ""}
            yield Sequence(seq.text, metadata=metadata)

    skbio.io.write(_records(), format="fasta", into=str(file_path))


__all__ = ["read_protein_fasta", "write_protein_fasta", "protein_sequence_from_skbio"]
