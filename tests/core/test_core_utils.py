"""
Tests for shared utility functions.
"""

from animesources.core.utils import magnet_from_info_hash


class TestMagnetFromInfoHash:
    """Tests for magnet_from_info_hash."""

    def test_builds_magnet(self):
        assert magnet_from_info_hash("abc") == "magnet:?xt=urn:btih:abc"

    def test_empty_hash(self):
        assert magnet_from_info_hash("") == ""
        assert magnet_from_info_hash(None) == ""
