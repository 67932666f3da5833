"""ImageSetConfiguration exporters."""

from typing import Any, Dict

from ..model.upgrade import UpgradePath
from .base import ISC_KIND, Exporter


class IscV2Alpha1Exporter(Exporter):
    """``mirror.openshift.io/v2alpha1``: one channel entry per release."""

    api_version = "mirror.openshift.io/v2alpha1"
    filename = "isc-v2alpha1.yaml"

    def build(self, path: UpgradePath, channel: str) -> Dict[str, Any]:
        channels = [
            {"name": channel, "minVersion": release.version, "maxVersion": release.version}
            for release in self.releases(path)
        ]
        return {
            "kind": ISC_KIND,
            "apiVersion": self.api_version,
            "mirror": {
                "platform": {
                    "graph": True,
                    "channels": channels,
                }
            },
        }


class IscV3Alpha1Exporter(Exporter):
    """``mirror.openshift.io/v3alpha1``: releases pinned by image reference."""

    api_version = "mirror.openshift.io/v3alpha1"
    filename = "isc-v3alpha1.yaml"

    def build(self, path: UpgradePath, channel: str) -> Dict[str, Any]:
        # Images are pinned directly, the channel is not needed
        release = [
            {"version": result.version, "image": result.image} for result in self.releases(path)
        ]
        return {
            "kind": ISC_KIND,
            "apiVersion": self.api_version,
            "mirror": {
                "platform": {
                    "release": release,
                }
            },
        }
