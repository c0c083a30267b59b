"""Utility functions for the project."""

from .fasta import read_protein_fasta, write_protein_fasta
from .blosum import parse_penalty_table, read_penalty_table, load_blosum62
from .serialization import (
    penalty_table_to_dict,
    penalty_table_from_dict,
    dump_penalty_table_yaml,
    load_penalty_table_yaml,
    load_penalty_table,
    result_to_dict,
)
from .formatting import format_alignment, match_line

__all__ = [
    "read_protein_fasta",
    "write_protein_fasta",
    "parse_penalty_table",
    "read_penalty_table",
    "load_blosum62",
    "penalty_table_to_dict",
    "penalty_table_from_dict",
    "dump_penalty_table_yaml",
    "load_penalty_table_yaml",
    "load_penalty_table",
    "result_to_dict",
    "format_alignment",
    "match_line",
]
