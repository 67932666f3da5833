"""On-disk cache of update graph documents."""

from pathlib import Path

from ..errors import GraphCacheError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class GraphCache:
    """Stores one graph document per ``(channel, arch)`` pair."""

    def __init__(self, cache_dir: Path):
        self.cache_dir = Path(cache_dir)

    def path_for(self, channel: str, arch: str) -> Path:
        """Cache file for a channel and architecture."""
        return self.cache_dir / f"{channel}_{arch}.json"

    def read(self, channel: str, arch: str) -> str:
        """Read the cached graph JSON."""
        path = self.path_for(channel, arch)
        try:
            with open(path, "r") as f:
                data = f.read()
        except OSError as e:
            raise GraphCacheError(
                f"file not found {path} (use the --force-update flag to download it)"
            ) from e

        logger.info(f"Read graph from cache {path}")
        return data

    def write(self, channel: str, arch: str, data: str) -> Path:
        """Write graph JSON to the cache, creating the directory if needed."""
        path = self.path_for(channel, arch)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            with open(path, "w") as f:
                f.write(data)
        except OSError as e:
            raise GraphCacheError(f"unable to write graph cache {path}: {e}") from e

        logger.info(f"Cached graph to {path}")
        return path
