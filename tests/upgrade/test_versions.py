"""Test semantic version ordering."""

import pytest

from upgradepath.errors import InvalidVersion
from upgradepath.utils.versions import is_valid_version, max_version, parse_version, sort_versions


class TestParseVersion:
    def test_parse_valid(self):
        """Test parsing a release version."""
        version = parse_version("4.14.2")
        assert (version.major, version.minor, version.patch) == (4, 14, 2)

    def test_parse_prerelease(self):
        """Test parsing a pre-release version."""
        assert parse_version("4.15.0-ec.3").prerelease == "ec.3"

    def test_parse_invalid(self):
        """Test malformed strings raise InvalidVersion."""
        for value in ("not-a-version", "v4.14.2", "4.14", ""):
            with pytest.raises(InvalidVersion):
                parse_version(value)

    def test_invalid_version_is_value_error(self):
        """Test InvalidVersion can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_version("4")

    def test_is_valid_version(self):
        """Test the boolean validity check."""
        assert is_valid_version("4.14.2") is True
        assert is_valid_version("latest") is False


class TestOrdering:
    def test_numeric_ordering(self):
        """Test minor versions compare numerically."""
        assert [str(v) for v in sort_versions(["4.10.0", "4.9.0", "4.11.1"])] == [
            "4.9.0",
            "4.10.0",
            "4.11.1",
        ]

    def test_prerelease_precedes_release(self):
        """Test pre-releases sort before the release."""
        assert [str(v) for v in sort_versions(["4.15.0", "4.15.0-rc.1", "4.15.0-ec.2"])] == [
            "4.15.0-ec.2",
            "4.15.0-rc.1",
            "4.15.0",
        ]

    def test_max_version(self):
        """Test picking the newest version."""
        assert str(max_version(["4.14.9", "4.14.10", "4.13.40"])) == "4.14.10"

    def test_max_version_empty(self):
        """Test max_version rejects empty input."""
        with pytest.raises(ValueError):
            max_version([])
