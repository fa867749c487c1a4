"""Nyaa (nyaa.si) release source. Importing this package registers it as "nyaa"."""

from animesources.release_sources.nyaa.source import NyaaSource, normalize

__all__ = ["NyaaSource", "normalize"]
