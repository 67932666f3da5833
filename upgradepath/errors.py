"""Exception hierarchy for upgrade path resolution and its collaborators."""

from typing import Optional


class UpgradePathError(Exception):
    """Base class for all upgradepath failures."""


class InvalidVersion(UpgradePathError, ValueError):
    """Raised when a version string is not a valid semantic version."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Invalid semantic version: {version!r}")


class NodeNotFound(UpgradePathError, LookupError):
    """Raised when a required graph node cannot be located."""

    def __init__(self, version: Optional[str] = None, index: Optional[int] = None) -> None:
        self.version = version
        self.index = index
        if version is not None:
            message = f"No graph node with version {version}"
        else:
            message = f"No graph node at index {index}"
        super().__init__(message)


class EmptyGraph(UpgradePathError):
    """Raised when the head version is requested from a graph with no nodes."""

    def __init__(self) -> None:
        super().__init__("Update graph has no nodes")


class GraphDataError(UpgradePathError):
    """Raised when graph JSON does not match the expected document shape."""


class GraphFetchError(UpgradePathError):
    """Raised when the update graph cannot be downloaded."""


class GraphCacheError(UpgradePathError):
    """Raised when the cached update graph cannot be read or written."""


class BuildError(UpgradePathError):
    """Raised when the container build tool fails."""
