#!/usr/bin/env python3
"""
JSON Utilities Module

Reading and writing of message dumps and extraction results, always
pretty-printed so output files stay diffable.
"""

import json
from pathlib import Path
from typing import Any


def write_json(filepath: str | Path, data: Any, ensure_ascii: bool = False, sort_keys: bool = False) -> None:
    """
    Write data to a JSON file with standard pretty-printing.

    Args:
        filepath: Path to the JSON file
        data: Data to write to the file
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys)


def read_json(filepath: str | Path) -> Any:
    """Read data from a JSON file."""
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def format_json(data: Any, ensure_ascii: bool = False, sort_keys: bool = False) -> str:
    """Format data as a pretty-printed JSON string."""
    return json.dumps(data, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys)


def load_message_dump(filepath: str | Path) -> list[dict[str, Any]]:
    """
    Load provider messages from a JSON dump.

    Accepts either a bare list of messages or an object with a ``messages``
    list (the shape of a saved API response).

    Raises:
        ValueError: If the file holds neither shape
    """
    data = read_json(filepath)

    if isinstance(data, dict):
        data = data.get("messages")

    if not isinstance(data, list):
        raise ValueError(f"Expected a list of messages in {filepath}")

    return data
