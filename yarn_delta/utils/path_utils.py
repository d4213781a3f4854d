"""Path utilities for locating and reading lockfiles and snapshots."""

import json
import os
from pathlib import Path
from typing import Any, Dict

LOCKFILE_NAME = "yarn.lock"
SNAPSHOT_SUFFIX = ".json"


def resolve_lockfile(path: Path) -> Path:
    """Resolve a path to a lockfile.

    Args:
        path: A lockfile, a JSON snapshot, or a directory containing ``yarn.lock``

    Returns:
        Path of the file to read

    Raises:
        FileNotFoundError: If nothing readable exists at the path
    """
    if path.is_dir():
        path = path / LOCKFILE_NAME

    validate_file(path)
    return path


def validate_file(file_path: Path) -> None:
    """Validate that the file exists and is readable.

    Raises:
        FileNotFoundError: If file doesn't exist
        PermissionError: If file is not readable
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    if not file_path.is_file():
        raise ValueError(f"Path is not a file: {file_path}")

    if not os.access(file_path, os.R_OK):
        raise PermissionError(f"File is not readable: {file_path}")


def is_snapshot(path: Path) -> bool:
    """Check whether a path points at a JSON snapshot rather than a lockfile."""
    return path.suffix == SNAPSHOT_SUFFIX


def read_text(path: Path) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def read_snapshot(path: Path) -> Dict[str, Any]:
    """Load a JSON snapshot written by ``yarn-delta packages --output``."""
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)
