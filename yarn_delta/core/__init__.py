"""Core lockfile extraction and diffing logic for yarn-delta."""

from .differ import VersionMapDiffer
from .extractor import LockfileExtractor
from .models import (
    BoundaryError,
    ChangedPackagesResult,
    ChangeSet,
    PackageVersionMap,
    ParseError,
    SelectorGrammarError,
)

__all__ = [
    "LockfileExtractor",
    "VersionMapDiffer",
    "PackageVersionMap",
    "ChangeSet",
    "ChangedPackagesResult",
    "ParseError",
    "SelectorGrammarError",
    "BoundaryError",
]
