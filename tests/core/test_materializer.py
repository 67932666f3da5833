"""Test release image materialization."""

from unittest.mock import MagicMock, call

from upgradepath.core import ImageMaterializer, PodmanClient
from upgradepath.model.upgrade import UpgradePath, UpgradePathStatus, UpgradeResult


def make_path() -> UpgradePath:
    return UpgradePath(
        status=UpgradePathStatus.FOUND,
        from_version="4.13.5",
        to_version="4.14.4",
        images=[
            UpgradeResult(version="4.14.1", image="quay.io/release@sha256:1401"),
            UpgradeResult(version="4.14.2", image="quay.io/release@sha256:1402"),
        ],
    )


class TestImageMaterializer:
    def setup_method(self):
        """Set up test fixtures."""
        self.client = MagicMock(spec=PodmanClient)

    def test_materialize(self, tmp_path):
        """Test one image is built per resolved release."""
        materializer = ImageMaterializer(self.client, tmp_path, "localhost/release")

        tags = materializer.materialize(make_path())

        assert tags == ["localhost/release:4.14.1", "localhost/release:4.14.2"]
        container_file = tmp_path / "build" / "4.14.1" / "Containerfile"
        assert container_file.read_text() == "FROM quay.io/release@sha256:1401\n"
        assert self.client.build.call_args_list[0] == call(
            "localhost/release:4.14.1", container_file
        )
        self.client.save.assert_not_called()

    def test_materialize_and_save(self, tmp_path):
        """Test built images are saved when a save directory is given."""
        materializer = ImageMaterializer(self.client, tmp_path, "localhost/release")

        materializer.materialize(make_path(), tmp_path / "images")

        self.client.save.assert_has_calls(
            [
                call("localhost/release:4.14.1", tmp_path / "images" / "4.14.1"),
                call("localhost/release:4.14.2", tmp_path / "images" / "4.14.2"),
            ]
        )

    def test_materialize_not_found(self, tmp_path):
        """Test nothing is built without a path."""
        materializer = ImageMaterializer(self.client, tmp_path, "localhost/release")

        assert materializer.materialize(UpgradePath.not_found("4.14.4", "4.15.0")) == []
        self.client.build.assert_not_called()
