"""Semantic version parsing and ordering."""

from typing import Iterable, List, Union

import semver

from ..errors import InvalidVersion

VersionLike = Union[str, semver.Version]


def parse_version(version: VersionLike) -> semver.Version:
    """Parse a release version string using SemVer 2.0 rules."""
    if isinstance(version, semver.Version):
        return version
    try:
        return semver.Version.parse(version)
    except (ValueError, TypeError):
        raise InvalidVersion(str(version)) from None


def is_valid_version(version: str) -> bool:
    """Return ``True`` when ``version`` parses as a semantic version."""
    try:
        parse_version(version)
    except InvalidVersion:
        return False
    return True


def sort_versions(versions: Iterable[VersionLike]) -> List[semver.Version]:
    """Return the parsed versions in ascending precedence order."""
    return sorted(parse_version(v) for v in versions)


def max_version(versions: Iterable[VersionLike]) -> semver.Version:
    """Return the highest version; raises ``ValueError`` on empty input."""
    parsed = sort_versions(versions)
    if not parsed:
        raise ValueError("max_version() arg is an empty sequence")
    return parsed[-1]
