#!/usr/bin/env python3
"""
JSON Utilities Module

Centralized JSON reading and writing with consistent formatting. Used for the
bundled ISO 4217 table and for exchange-rate snapshots saved by callers.
"""

import json
from importlib import resources
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
    """
    Read data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        The parsed JSON data
    """
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def read_package_json(package: str, name: str) -> Any:
    """
    Read a JSON data file shipped inside a package.

    Args:
        package: Dotted package name holding the file (e.g. "expenses.core.data")
        name: File name inside the package

    Returns:
        The parsed JSON data
    """
    with resources.files(package).joinpath(name).open("r", encoding="utf-8") as f:
        return json.load(f)
