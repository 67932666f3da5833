"""Tool configuration."""

import json
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel

from ..errors import UpgradePathError
from ..utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_GRAPH_URL = "https://api.openshift.com/api/upgrades_info/v1/graph"


class ToolConfig(BaseModel):
    """Settings shared by the graph client, cache, exporters and builder."""

    graph_url: str = DEFAULT_GRAPH_URL
    cache_dir: Path = Path("cache")
    request_timeout: float = 30.0
    build_tool: str = "podman"
    image_prefix: str = "localhost/openshift-release"
    output_dir: Path = Path("working-dir")

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> "ToolConfig":
        """Load configuration from a YAML or JSON file.

        A missing path yields the defaults; keys the tool does not know are ignored.
        """
        if config_path is None or not config_path.exists():
            return cls()

        try:
            with open(config_path, "r") as f:
                if config_path.suffix in (".yaml", ".yml"):
                    config = yaml.safe_load(f)
                else:
                    config = json.load(f)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise UpgradePathError(f"Failed to load config {config_path}: {e}") from e

        logger.info(f"Loaded config from {config_path}")
        return cls.model_validate(config or {})
