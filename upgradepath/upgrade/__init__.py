"""Release upgrade path resolution."""

from .resolver import UpgradePathResolver, resolve

__all__ = ["UpgradePathResolver", "resolve"]
