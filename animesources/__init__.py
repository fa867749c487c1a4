"""Anime torrent release sources for media-aggregation hosts."""

__version__ = "0.1.0"
