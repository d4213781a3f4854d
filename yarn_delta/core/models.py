"""Data models and error types shared by the extractor and the differ."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional

ChangeSet = FrozenSet[str]


class ParseError(ValueError):
    """Raised when lockfile text is not a well-formed mapping of entries."""

    def __init__(self, cause: Any) -> None:
        """Initialize the error.

        Args:
            cause: Underlying structural error or a description of it
        """
        self.cause = cause
        super().__init__(f"Failed to parse lockfile: {cause}")


class SelectorGrammarError(RuntimeError):
    """Raised when an entry key does not follow the ``<name>@npm:<range>`` grammar.

    This signals a broken assumption about the lockfile format rather than
    bad user input, so it is deliberately not a ``ParseError``.
    """


class BoundaryError(TypeError):
    """Raised when a host value does not have the expected serialized shape."""


@dataclass(frozen=True, eq=False)
class PackageVersionMap(Mapping):
    """Immutable mapping from package name to the set of resolved versions."""

    versions: Mapping = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze the version sets and drop empty ones."""
        frozen = {
            name: frozenset(values)
            for name, values in self.versions.items()
            if values
        }
        object.__setattr__(self, "versions", frozen)

    def __getitem__(self, name: str) -> FrozenSet[str]:
        return self.versions[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self.versions)

    def __len__(self) -> int:
        return len(self.versions)

    def __repr__(self) -> str:
        return f"PackageVersionMap({self.to_dict()!r})"

    def to_dict(self) -> Dict[str, List[str]]:
        """Serialize to a JSON-friendly dictionary.

        Returns:
            Mapping of package name to a sorted list of versions
        """
        return {name: sorted(self.versions[name]) for name in sorted(self.versions)}

    @classmethod
    def from_dict(cls, data: Mapping) -> "PackageVersionMap":
        """Build a map from a name -> iterable of versions mapping."""
        return cls({name: frozenset(values) for name, values in data.items()})


@dataclass(frozen=True)
class ChangedPackagesResult:
    """Changed package names together with the snapshot they were computed against."""

    changed_packages: ChangeSet
    package_versions: PackageVersionMap
    previous_versions: Optional[PackageVersionMap] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys of the external boundary."""
        return {
            "changedPackages": sorted(self.changed_packages),
            "packageVersions": self.package_versions.to_dict(),
        }

    def versions_before(self, name: str) -> List[str]:
        if self.previous_versions is None:
            return []
        return sorted(self.previous_versions.get(name, ()))

    def versions_after(self, name: str) -> List[str]:
        return sorted(self.package_versions.get(name, ()))


def collect_versions(pairs: Iterable) -> PackageVersionMap:
    """Group ``(name, version)`` pairs into a ``PackageVersionMap``."""
    grouped: Dict[str, set] = {}
    for name, version in pairs:
        grouped.setdefault(name, set()).add(version)
    return PackageVersionMap(grouped)
