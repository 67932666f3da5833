"""Base exporter class."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import yaml

from ..model.upgrade import UpgradePath, UpgradeResult
from ..utils.logger import get_logger

logger = get_logger(__name__)

ISC_KIND = "ImageSetConfiguration"


class Exporter(ABC):
    """Base class for image set configuration exporters."""

    filename: str = "imageset-config.yaml"

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    @abstractmethod
    def build(self, path: UpgradePath, channel: str) -> Dict[str, Any]:
        """Build the document for a resolved path."""
        pass

    def render(self, path: UpgradePath, channel: str = "") -> str:
        """Render the document as YAML."""
        return yaml.safe_dump(
            self.build(path, channel), default_flow_style=False, sort_keys=False
        )

    def export(self, path: UpgradePath, channel: str = "") -> Path:
        """Write the document to ``output_dir`` and return the file path."""
        self.output_dir.mkdir(parents=True, exist_ok=True)
        filepath = self.output_dir / self.filename

        with open(filepath, "w") as f:
            f.write(self.render(path, channel))

        logger.info(f"Exported {len(path.images)} release(s) to {filepath}")
        return filepath

    def releases(self, path: UpgradePath) -> List[UpgradeResult]:
        """Resolved releases, empty when no path was found."""
        return list(path.images) if path.found else []
