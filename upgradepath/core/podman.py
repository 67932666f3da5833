"""Container tool client for building and saving release images."""

import subprocess
from pathlib import Path
from typing import List, Tuple

from ..errors import BuildError
from ..utils.logger import get_logger

logger = get_logger(__name__)


class PodmanClient:
    """Wrapper around ``podman`` (or a compatible CLI) commands."""

    def __init__(self, tool: str = "podman"):
        self.tool = tool
        self.available = self._check_tool()

    def _check_tool(self) -> bool:
        """Check if the container tool is available."""
        try:
            subprocess.run([self.tool, "--version"], capture_output=True, check=True)
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            logger.warning(f"{self.tool} not available")
            return False

    def _execute(self, args: List[str]) -> Tuple[bool, str, str]:
        """Execute a tool command, returning success, stdout and stderr."""
        if not self.available:
            return False, "", f"{self.tool} not available"

        cmd = [self.tool] + args
        logger.debug(f"Executing: {' '.join(cmd)}")
        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=True)
            return True, result.stdout, result.stderr
        except subprocess.CalledProcessError as e:
            return False, e.stdout or "", e.stderr or ""

    def build(self, image: str, container_file: Path) -> None:
        """Build ``image`` from ``container_file``."""
        success, stdout, stderr = self._execute(["build", "-t", image, "-f", str(container_file)])
        logger.debug(f"stdout: {stdout}")
        if not success:
            logger.error(f"stderr: {stderr}")
            raise BuildError(f"[build] {stderr.strip()}")
        logger.info(f"[build] {image} completed successfully")

    def save(self, image: str, output_dir: Path) -> Path:
        """Save ``image`` to ``output_dir`` in docker-dir format."""
        success, stdout, stderr = self._execute(
            ["save", "--format", "docker-dir", "-o", str(output_dir), image]
        )
        logger.debug(f"stdout: {stdout}")
        if not success:
            logger.error(f"stderr: {stderr}")
            raise BuildError(f"[save] {stderr.strip()}")
        logger.info(f"[save] {image} saved to {output_dir}")
        return Path(output_dir)
