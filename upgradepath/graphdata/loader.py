"""Load an update graph from the cache or the graph service."""

from typing import Optional

from ..model.config import ToolConfig
from ..model.graph import Graph
from ..utils.logger import get_logger
from .cache import GraphCache
from .client import GraphClient

logger = get_logger(__name__)


class GraphLoader:
    """Reads graphs through the cache, refreshing from the service on demand."""

    def __init__(
        self,
        config: Optional[ToolConfig] = None,
        client: Optional[GraphClient] = None,
        cache: Optional[GraphCache] = None,
    ):
        self.config = config or ToolConfig()
        self.client = client or GraphClient(
            base_url=self.config.graph_url, timeout=self.config.request_timeout
        )
        self.cache = cache or GraphCache(self.config.cache_dir)

    def refresh(self, channel: str, arch: str, version: str) -> str:
        """Download the graph and store it in the cache."""
        data = self.client.fetch(channel, arch, version)
        self.cache.write(channel, arch, data)
        return data

    def load(self, channel: str, arch: str, version: str, force_update: bool = False) -> Graph:
        """Return the parsed graph for ``(channel, arch)``."""
        if force_update:
            logger.info("force-update detected, requesting graph from the service")
            data = self.refresh(channel, arch, version)
        else:
            logger.info("reading graph from cache")
            data = self.cache.read(channel, arch)

        graph = Graph.from_json(data)
        logger.debug(
            f"graph has {len(graph.nodes)} nodes, {len(graph.edges)} edges, "
            f"{len(graph.conditional_edges)} conditional edge groups"
        )
        return graph
