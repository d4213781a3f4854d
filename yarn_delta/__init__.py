"""yarn-delta - find which packages changed between two Yarn lockfiles."""

__version__ = "0.1.0"

from .api import get_changed_packages, get_packages
from .core import (
    ChangedPackagesResult,
    LockfileExtractor,
    PackageVersionMap,
    ParseError,
    VersionMapDiffer,
)

__all__ = [
    "get_packages",
    "get_changed_packages",
    "LockfileExtractor",
    "VersionMapDiffer",
    "PackageVersionMap",
    "ChangedPackagesResult",
    "ParseError",
]
