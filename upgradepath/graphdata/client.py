"""Client for the upgrade graph service."""

from typing import Any, Dict, Optional

import requests

from ..errors import GraphFetchError
from ..model.config import DEFAULT_GRAPH_URL
from ..utils.logger import get_logger

logger = get_logger(__name__)

GRAPH_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class GraphClient:
    """Downloads update graph JSON for a channel and architecture."""

    def __init__(
        self,
        base_url: str = DEFAULT_GRAPH_URL,
        timeout: float = 30.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def build_params(self, channel: str, arch: str, version: str) -> Dict[str, Any]:
        """Query parameters understood by the graph endpoint."""
        return {"arch": arch, "channel": channel, "version": version}

    def fetch(self, channel: str, arch: str, version: str) -> str:
        """Return the raw graph JSON, raising ``GraphFetchError`` on failure."""
        params = self.build_params(channel, arch, version)
        logger.debug(f"Requesting graph from {self.base_url} with {params}")

        try:
            response = self.session.get(
                self.base_url, params=params, headers=GRAPH_HEADERS, timeout=self.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise GraphFetchError(f"Failed to fetch graph for {channel}/{arch}: {e}") from e

        logger.info(f"Fetched graph for channel {channel} ({arch})")
        return response.text
