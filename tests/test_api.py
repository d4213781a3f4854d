"""Tests for the host-facing entry points."""

import pytest

from yarn_delta import get_changed_packages, get_packages
from yarn_delta.api import change_set_from_host, package_versions_from_host
from yarn_delta.core.models import BoundaryError, ParseError

from .conftest import make_lockfile


class TestGetPackages:
    """Test get_packages."""

    def test_returns_serialized_map(self, word_wrap_entry, local_entry):
        """Test that local workspace entries are left out of the serialized map."""
        assert get_packages(make_lockfile(word_wrap_entry, local_entry)) == {
            "@aashutoshrathi/word-wrap": ["1.2.6"],
        }

    def test_error_message_includes_cause(self):
        """Test that the error message carries the underlying cause."""
        with pytest.raises(ParseError) as excinfo:
            get_packages("invalid")

        message = str(excinfo.value)
        assert message.startswith("Failed to parse lockfile: ")
        assert "str" in message

    def test_rejects_non_string(self):
        """Test that non-string lockfile contents are rejected."""
        with pytest.raises(BoundaryError):
            get_packages(b"__metadata: {}")


class TestGetChangedPackages:
    """Test get_changed_packages."""

    def test_sorted_change_list(self):
        """Test that changed package names come back sorted."""
        before = {"p": ["1.0.0"], "r": ["3.0.0"], "u": ["2.0.0"]}
        after = {"p": ["1.2.3"], "u": ["2.0.0"], "n": ["0.1.0"]}

        assert get_changed_packages(before, after) == ["n", "p", "r"]

    def test_round_trip_with_get_packages(self, word_wrap_entry):
        """Test diffing two maps produced by get_packages."""
        old = get_packages(make_lockfile(word_wrap_entry))
        new = get_packages(make_lockfile(word_wrap_entry, '''\
        "pkg@npm:^1.0.0":
          version: 1.0.0
        '''))

        assert get_changed_packages(old, new) == ["pkg"]
        assert get_changed_packages(new, new) == []

    def test_rejects_non_mapping(self):
        """Test that a snapshot which is not a mapping is rejected."""
        with pytest.raises(BoundaryError, match="before"):
            get_changed_packages(["p"], {})

    def test_rejects_bad_versions(self):
        """Test that a version string instead of a list is rejected."""
        with pytest.raises(BoundaryError, match="after\\['p'\\]"):
            get_changed_packages({}, {"p": "1.0.0"})


class TestBoundaryDeserialization:
    """Test strict conversion of host values."""

    def test_package_versions_from_host(self):
        """Test converting a well-formed host mapping."""
        versions = package_versions_from_host({"a": ["1.0.0", "1.0.0"], "b": ("2.0.0",)})
        assert versions == {"a": {"1.0.0"}, "b": {"2.0.0"}}

    def test_non_string_name(self):
        """Test that non-string package names are rejected."""
        with pytest.raises(BoundaryError, match="not a string"):
            package_versions_from_host({1: ["1.0.0"]})

    def test_non_string_version(self):
        """Test that non-string versions are rejected."""
        with pytest.raises(BoundaryError, match="not a string"):
            change_set_from_host(["1.0.0", 2])

    @pytest.mark.parametrize("value", ["1.0.0", b"1.0.0", None, {"1.0.0": True}])
    def test_not_a_list(self, value):
        """Test that values other than lists of strings are rejected."""
        with pytest.raises(BoundaryError):
            change_set_from_host(value)
