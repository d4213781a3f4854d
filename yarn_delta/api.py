"""Host-facing entry points with a strict serialization boundary.

Values crossing this boundary are plain JSON-compatible data: a package
version map is a ``dict`` of package name to a list of version strings, and a
change set is a list of package names.
"""

from collections.abc import Mapping
from typing import Any, Dict, List

from .core.differ import VersionMapDiffer
from .core.extractor import LockfileExtractor
from .core.models import BoundaryError, PackageVersionMap


def get_packages(lockfile_text: str) -> Dict[str, List[str]]:
    """Extract package versions from lockfile text.

    Args:
        lockfile_text: Contents of a ``yarn.lock`` file

    Returns:
        Mapping of package name to its sorted, de-duplicated versions

    Raises:
        ParseError: If the lockfile is malformed; its message starts with
            ``"Failed to parse lockfile:"`` and includes the cause
    """
    if not isinstance(lockfile_text, str):
        raise BoundaryError(f"lockfile text must be a string, got {type(lockfile_text).__name__}")

    return LockfileExtractor().extract(lockfile_text).to_dict()


def get_changed_packages(before: Any, after: Any) -> List[str]:
    """Return the sorted names of packages whose versions differ.

    Args:
        before: Serialized earlier snapshot
        after: Serialized later snapshot

    Raises:
        BoundaryError: If either snapshot does not have the serialized shape
    """
    changed = VersionMapDiffer().diff(
        package_versions_from_host(before, "before"),
        package_versions_from_host(after, "after"),
    )
    return sorted(changed)


def package_versions_from_host(value: Any, label: str = "value") -> PackageVersionMap:
    """Strictly convert a host value to a ``PackageVersionMap``.

    Accepts a mapping of string keys to lists, tuples or sets of strings and
    nothing else.

    Raises:
        BoundaryError: Naming the first part of the value that does not conform
    """
    if not isinstance(value, Mapping):
        raise BoundaryError(f"{label}: expected a mapping of package versions, got {type(value).__name__}")

    versions: Dict[str, frozenset] = {}
    for name, package_versions in value.items():
        if not isinstance(name, str):
            raise BoundaryError(f"{label}: package name {name!r} is not a string")
        versions[name] = change_set_from_host(package_versions, f"{label}[{name!r}]")

    return PackageVersionMap(versions)


def change_set_from_host(value: Any, label: str = "value") -> frozenset:
    """Strictly convert a host value to a set of strings."""
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple, set, frozenset)):
        raise BoundaryError(f"{label}: expected a list of strings, got {type(value).__name__}")

    for item in value:
        if not isinstance(item, str):
            raise BoundaryError(f"{label}: {item!r} is not a string")

    return frozenset(value)
