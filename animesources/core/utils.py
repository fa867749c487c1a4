"""Shared utility functions."""

from typing import Optional


def magnet_from_info_hash(info_hash: Optional[str]) -> str:
    """Build a bare magnet URI for an info hash, or "" when there is none."""
    if not info_hash:
        return ""
    return f"magnet:?xt=urn:btih:{info_hash}"
