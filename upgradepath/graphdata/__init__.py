"""Update graph retrieval and caching."""

from .cache import GraphCache
from .client import GraphClient
from .loader import GraphLoader

__all__ = ["GraphCache", "GraphClient", "GraphLoader"]
