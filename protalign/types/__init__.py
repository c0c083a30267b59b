"""Types for the project."""

from .sequence import SequenceType, ProteinSequence, as_sequence
from .penalty import PenaltyTable
from .alignment import Alignment, AlignmentResult
from .evaluation import AlignmentSummary


__all__ = [
    "SequenceType",
    "ProteinSequence",
    "as_sequence",
    "PenaltyTable",
    "Alignment",
    "AlignmentResult",
    "AlignmentSummary",
]
