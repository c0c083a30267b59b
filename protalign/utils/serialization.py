"""Serialization utilities for penalty tables and alignment results (load and save)."""

from __future__ import annotations

from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from protalign.types import AlignmentResult, PenaltyTable
from protalign.types.penalty import DEFAULT_GAP
from protalign.utils.blosum import read_penalty_table

YAML_SUFFIXES = (".yaml", ".yml")


def _convert_values(value: Any) -> Any:
    """
    Recursively convert dataclasses/dicts/lists into plain Python values.
    """
    if is_dataclass(value):
        return _convert_values(asdict(value))
    if isinstance(value, dict):
        return {key: _convert_values(val) for key, val in value.items()}
    if isinstance(value, list):
        return [_convert_values(item) for item in value]
    return value


def penalty_table_to_dict(table: PenaltyTable) -> Dict[str, Any]:
    """
    Convert a PenaltyTable into a plain dictionary suitable for YAML.
    """
    return {"gap": table.gap, "scores": table.to_nested()}


def penalty_table_from_dict(payload: Dict[str, Any]) -> PenaltyTable:
    """Build a frozen PenaltyTable from the dictionary form."""
    if "scores" not in payload:
        raise ValueError("Penalty table payload is missing the 'scores' key")
    scores = payload["scores"]
    if not isinstance(scores, dict):
        raise ValueError("'scores' must map row symbols to {column: score} mappings")
    # YAML loads numeric-looking symbols as ints
    normalized = {
        str(row): {str(col): int(score) for col, score in cols.items()}
        for row, cols in scores.items()
    }
    gap = str(payload.get("gap", DEFAULT_GAP))
    return PenaltyTable.from_nested(normalized, gap=gap)


def dump_penalty_table_yaml(table: PenaltyTable, yaml_path: Path) -> None:
    """Write a PenaltyTable to a YAML file."""
    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with yaml_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(penalty_table_to_dict(table), handle, sort_keys=True)


def load_penalty_table_yaml(yaml_path: Path) -> PenaltyTable:
    """Load a PenaltyTable from a YAML file."""
    with Path(yaml_path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle)

    if not isinstance(payload, dict):
        raise ValueError(
            f"Expected a mapping in {yaml_path}, got {type(payload).__name__}"
        )
    return penalty_table_from_dict(payload.get("penalty_table", payload))


def load_penalty_table(path: Union[str, Path]) -> PenaltyTable:
    """Load a penalty table from YAML or BLOSUM text, chosen by file suffix."""
    path = Path(path)
    if path.suffix.lower() in YAML_SUFFIXES:
        return load_penalty_table_yaml(path)
    return read_penalty_table(path)


def result_to_dict(result: AlignmentResult, summary: Any = None) -> Dict[str, Any]:
    """Flatten an AlignmentResult (and an optional summary dataclass) into one row."""
    x_seq, y_seq = result.alignment.original_sequences
    row: Dict[str, Any] = {
        "x_id": x_seq.identifier,
        "y_id": y_seq.identifier,
        "score": result.score,
        "aligned_x": result.aligned_x,
        "aligned_y": result.aligned_y,
        "start_x": result.start_x,
        "end_x": result.end_x,
        "start_y": result.start_y,
        "end_y": result.end_y,
    }
    if summary is not None:
        row.update(_convert_values(summary))
    return row


__all__ = [
    "penalty_table_to_dict",
    "penalty_table_from_dict",
    "dump_penalty_table_yaml",
    "load_penalty_table_yaml",
    "load_penalty_table",
    "result_to_dict",
]
