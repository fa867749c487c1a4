"""Data structures shared by release sources and the host."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional, Tuple, Union


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_tuple(values: Optional[Union[str, Iterable[str]]]) -> Tuple[str, ...]:
    """A lone string is one value, not a sequence of characters."""
    if not values:
        return ()
    if isinstance(values, str):
        return (values,)
    return tuple(values)


@dataclass(frozen=True)
class SearchRequest:
    """What the host asks a source to look for.

    Only the first title is used by sources that build a single query string.
    """
    titles: Tuple[str, ...] = ()
    episode: Optional[Union[int, str]] = None
    resolution: Optional[str] = None
    exclusions: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but keep the stored value hashable/immutable.
        object.__setattr__(self, "titles", _as_tuple(self.titles))
        object.__setattr__(self, "exclusions", _as_tuple(self.exclusions))
        if self.resolution is not None:
            object.__setattr__(self, "resolution", str(self.resolution))

    @property
    def first_title(self) -> str:
        return self.titles[0] if self.titles else ""

    @classmethod
    def from_options(
        cls,
        titles: Optional[Union[str, Iterable[str]]] = None,
        episode: Optional[Union[int, str]] = None,
        resolution: Optional[Union[int, str]] = None,
        exclusions: Optional[Union[str, Iterable[str]]] = None,
        **_ignored: Any,
    ) -> "SearchRequest":
        """Build a request from the host's loose keyword options."""
        return cls(
            titles=_as_tuple(titles),
            episode=episode,
            resolution=str(resolution) if resolution not in (None, "") else None,
            exclusions=_as_tuple(exclusions),
        )


@dataclass
class FeedItem:
    """One entry pulled out of a source feed, before normalization."""
    title: str = ""
    link: str = ""
    info_hash: str = ""
    magnet: str = ""
    seeders: int = 0
    leechers: int = 0
    size: int = 0
    created_at: Optional[datetime] = None


@dataclass
class NormalizedResult:
    """A torrent result in the host's common shape."""
    title: str
    info_hash: str
    magnet: str
    seeders: int = 0
    leechers: int = 0
    size: int = 0
    created_at: datetime = field(default_factory=_utc_now)
    downloads: int = 0
    accuracy: str = "high"
    page_url: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Render with the host's camelCase field names."""
        return {
            "title": self.title,
            "infoHash": self.info_hash,
            "magnet": self.magnet,
            "seeders": self.seeders,
            "leechers": self.leechers,
            "size": self.size,
            "createdAt": self.created_at,
            "downloads": self.downloads,
            "accuracy": self.accuracy,
            "pageUrl": self.page_url,
        }
