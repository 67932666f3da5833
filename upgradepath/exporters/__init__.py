"""Image set configuration exporters."""

from .base import Exporter
from .isc_exporter import IscV2Alpha1Exporter, IscV3Alpha1Exporter

__all__ = ["Exporter", "IscV2Alpha1Exporter", "IscV3Alpha1Exporter"]
