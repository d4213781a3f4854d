"""Comparison of two package version snapshots."""

from typing import Dict, Mapping

from ..utils.logging import get_logger
from .models import ChangeSet, ChangedPackagesResult, PackageVersionMap

ADDED = "added"
REMOVED = "removed"
CHANGED = "changed"


class VersionMapDiffer:
    """Computes which packages changed between two ``PackageVersionMap`` snapshots."""

    def __init__(self) -> None:
        self.logger = get_logger("VersionMapDiffer")

    def diff(self, before: Mapping, after: Mapping) -> ChangeSet:
        """Return the names of packages that were added, removed or changed.

        A package is unchanged only when it is present in both snapshots with
        exactly the same set of versions.

        Args:
            before: Earlier snapshot
            after: Later snapshot

        Returns:
            Set of changed package names
        """
        return frozenset(self.describe(before, after))

    def describe(self, before: Mapping, after: Mapping) -> Dict[str, str]:
        """Classify every changed package as added, removed or changed."""
        statuses: Dict[str, str] = {}

        for name, versions in before.items():
            if name not in after:
                statuses[name] = REMOVED
            elif set(versions) != set(after[name]):
                statuses[name] = CHANGED

        for name in after:
            if name not in before:
                statuses[name] = ADDED

        if statuses:
            counts = {status: list(statuses.values()).count(status) for status in (ADDED, REMOVED, CHANGED)}
            self.logger.debug(
                f"{counts[ADDED]} added, {counts[REMOVED]} removed, {counts[CHANGED]} changed"
            )

        return statuses

    def compare(self, before: PackageVersionMap, after: PackageVersionMap) -> ChangedPackagesResult:
        """Diff two snapshots and bundle the result with both of them."""
        return ChangedPackagesResult(
            changed_packages=self.diff(before, after),
            package_versions=after,
            previous_versions=before,
        )


def diff(before: Mapping, after: Mapping) -> ChangeSet:
    """Module-level shortcut for ``VersionMapDiffer().diff``."""
    return VersionMapDiffer().diff(before, after)
