"""Build local images for each release on a resolved upgrade path."""

from pathlib import Path
from typing import List, Optional

from ..model.upgrade import UpgradePath, UpgradeResult
from ..utils.logger import get_logger
from .podman import PodmanClient

logger = get_logger(__name__)


class ImageMaterializer:
    """Turns resolved release images into locally built (and optionally saved) images."""

    def __init__(self, client: PodmanClient, work_dir: Path, image_prefix: str):
        self.client = client
        self.work_dir = Path(work_dir)
        self.image_prefix = image_prefix

    def tag_for(self, result: UpgradeResult) -> str:
        return f"{self.image_prefix}:{result.version}"

    def container_file(self, result: UpgradeResult) -> Path:
        """Write the Containerfile for one release and return its path."""
        build_dir = self.work_dir / "build" / result.version
        build_dir.mkdir(parents=True, exist_ok=True)
        path = build_dir / "Containerfile"
        path.write_text(f"FROM {result.image}\n")
        return path

    def materialize(self, path: UpgradePath, save_dir: Optional[Path] = None) -> List[str]:
        """Build one image per resolved release, returning the built tags."""
        if not path.found:
            logger.info("No upgrade path, nothing to build")
            return []

        tags = []
        for result in path.images:
            tag = self.tag_for(result)
            self.client.build(tag, self.container_file(result))
            if save_dir is not None:
                self.client.save(tag, Path(save_dir) / result.version)
            tags.append(tag)

        logger.info(f"Built {len(tags)} image(s)")
        return tags
