"""Image materialization."""

from .materializer import ImageMaterializer
from .podman import PodmanClient

__all__ = ["ImageMaterializer", "PodmanClient"]
