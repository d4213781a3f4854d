"""Utility functions and helpers for yarn-delta."""

from .logging import setup_logging, get_logger
from .path_utils import is_snapshot, read_snapshot, read_text, resolve_lockfile

__all__ = [
    "setup_logging",
    "get_logger",
    "is_snapshot",
    "read_snapshot",
    "read_text",
    "resolve_lockfile",
]
