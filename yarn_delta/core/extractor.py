"""Extraction of per-package version sets from Yarn Berry lockfiles."""

from typing import Any, Dict, Iterator, List, Tuple

import yaml

from ..utils.logging import get_logger
from .models import PackageVersionMap, ParseError, SelectorGrammarError, collect_versions

METADATA_KEY = "__metadata"
LOCAL_WORKSPACE_VERSION = "0.0.0-use.local"
NPM_SEPARATOR = "@npm:"


def split_selectors(key: str) -> List[str]:
    """Split an entry key into its comma-separated selectors.

    Args:
        key: Raw entry key, e.g. ``"a@npm:^1.0.0, a@npm:^1.2.0"``

    Returns:
        Selectors with surrounding whitespace removed
    """
    return [selector.strip() for selector in key.split(",") if selector.strip()]


def package_name_from_selector(selector: str) -> str:
    """Return the package name of a ``<name>@npm:<range>`` selector.

    The name may itself contain ``@`` (``@scope/name``), so only the literal
    ``@npm:`` separator is used to split.

    Raises:
        SelectorGrammarError: If the separator does not occur exactly once
    """
    occurrences = selector.count(NPM_SEPARATOR)
    if occurrences != 1:
        raise SelectorGrammarError(
            f"Expected exactly one '{NPM_SEPARATOR}' in selector {selector!r}, "
            f"found {occurrences}"
        )

    name = selector.split(NPM_SEPARATOR, 1)[0]
    if not name:
        raise SelectorGrammarError(f"Selector {selector!r} has an empty package name")
    return name


def package_name_from_key(key: str) -> str:
    """Derive the package name from an entry key.

    Every selector of a key names the same package, so only the first one is
    parsed.
    """
    selectors = split_selectors(key)
    if not selectors:
        raise SelectorGrammarError(f"Entry key {key!r} contains no selectors")
    return package_name_from_selector(selectors[0])


class LockfileExtractor:
    """Parses lockfile text into a ``PackageVersionMap``."""

    def __init__(self) -> None:
        self.logger = get_logger("LockfileExtractor")

    def extract(self, text: str) -> PackageVersionMap:
        """Parse lockfile text.

        Args:
            text: Contents of a ``yarn.lock`` file

        Returns:
            Map of package name to the set of versions resolved for it

        Raises:
            ParseError: If the text is not a mapping of well-formed entries
            SelectorGrammarError: If an entry key breaks the selector grammar
        """
        entries = self._load_entries(text)
        versions = collect_versions(self._iter_resolved(entries))

        self.logger.debug(f"Extracted {len(versions)} packages from {len(entries)} entries")
        return versions

    def _load_entries(self, text: str) -> Dict[str, Any]:
        try:
            # BaseLoader keeps every scalar a string, so "1.10" is not read as a float
            data = yaml.load(text, Loader=yaml.BaseLoader)
        except yaml.YAMLError as e:
            raise ParseError(e) from e

        if not isinstance(data, dict):
            raise ParseError(f"expected a mapping of entries, got {type(data).__name__}")

        return data

    def _iter_resolved(self, entries: Dict[str, Any]) -> Iterator[Tuple[str, str]]:
        skipped_local = 0

        for key, entry in entries.items():
            if key == METADATA_KEY:
                continue

            version = self._entry_version(key, entry)
            if version == LOCAL_WORKSPACE_VERSION:
                skipped_local += 1
                continue

            yield package_name_from_key(key), version

        if skipped_local:
            self.logger.debug(f"Skipped {skipped_local} local workspace entries")

    def _entry_version(self, key: str, entry: Any) -> str:
        if not isinstance(entry, dict):
            raise ParseError(f"entry {key!r} is not a mapping")

        version = entry.get("version")
        if version is None:
            raise ParseError(f"entry {key!r} is missing field 'version'")
        if not isinstance(version, str):
            raise ParseError(f"entry {key!r} has a non-string 'version'")

        return version


def extract(text: str) -> PackageVersionMap:
    """Module-level shortcut for ``LockfileExtractor().extract``."""
    return LockfileExtractor().extract(text)
