"""Test the on-disk graph cache."""

import pytest

from upgradepath.errors import GraphCacheError
from upgradepath.graphdata.cache import GraphCache


class TestGraphCache:
    def test_path_for(self, tmp_path):
        """Test cache files are keyed by channel and arch."""
        cache = GraphCache(tmp_path)
        assert cache.path_for("stable-4.14", "amd64") == tmp_path / "stable-4.14_amd64.json"

    def test_write_then_read(self, tmp_path):
        """Test cached data is read back unchanged."""
        cache = GraphCache(tmp_path / "cache")

        path = cache.write("stable-4.14", "arm64", '{"nodes": []}')

        assert path.exists()
        assert path == cache.path_for("stable-4.14", "arm64")
        assert cache.read("stable-4.14", "arm64") == '{"nodes": []}'

    def test_read_missing(self, tmp_path):
        """Test a cache miss tells the user how to download the graph."""
        cache = GraphCache(tmp_path)

        assert not cache.path_for("stable-4.14", "amd64").exists()
        with pytest.raises(GraphCacheError, match="--force-update"):
            cache.read("stable-4.14", "amd64")
