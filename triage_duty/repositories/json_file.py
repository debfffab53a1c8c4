# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository helpers: blocking JSON file access shared by every store.
"""

import json
import os
from typing import Any

from triage_duty.core.exceptions import StateFileError

INDENT = 2


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise ValueError(f"duplicate key '{key}'")
        result[key] = value
    return result


def read_json(path: str) -> Any:
    """Parse a JSON file. Raises FileNotFoundError or StateFileError."""
    with open(path, encoding="utf-8") as fh:
        try:
            return json.load(fh, object_pairs_hook=_reject_duplicate_keys)
        except ValueError as exc:
            raise StateFileError(path, str(exc)) from exc


def write_json(path: str, data: Any) -> None:
    """Write ``data`` as indented JSON, creating the parent directory."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=INDENT)
        fh.write("\n")
