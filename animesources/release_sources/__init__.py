"""Release source interface and registry.

Sources don't inherit from a base class. Anything that satisfies
``TorrentSource`` can be registered and handed to the host.
"""

from typing import Any, Callable, Dict, List, Protocol, Sequence, runtime_checkable

from animesources.core.logger import setup_logger
from animesources.core.models import FeedItem, NormalizedResult

logger = setup_logger(__name__)


@runtime_checkable
class TorrentSource(Protocol):
    """Capabilities every torrent source exposes to the host."""

    name: str

    async def query(self, request: Any = None, **options: Any) -> str: ...

    async def get_items(self, url: str) -> List[FeedItem]: ...

    def normalize(self, items: Sequence[FeedItem]) -> List[NormalizedResult]: ...

    async def single(self, request: Any = None, **options: Any) -> List[NormalizedResult]: ...

    async def batch(self, request: Any = None, **options: Any) -> List[NormalizedResult]: ...

    async def movie(self, request: Any = None, **options: Any) -> List[NormalizedResult]: ...

    async def test(self) -> bool: ...


_SOURCES: Dict[str, TorrentSource] = {}


def register_source(name: str) -> Callable[[type], type]:
    """Class decorator: instantiate the source once and add it to the registry."""

    def decorator(cls: type) -> type:
        if name in _SOURCES:
            raise ValueError(f"Release source already registered: {name}")
        instance = cls()
        if not isinstance(instance, TorrentSource):
            raise TypeError(f"{cls.__name__} does not implement TorrentSource")
        _SOURCES[name] = instance
        logger.debug(f"Registered release source: {name}")
        return cls

    return decorator


def get_source(name: str) -> TorrentSource:
    """Return the registered source instance for ``name``."""
    try:
        return _SOURCES[name]
    except KeyError:
        raise KeyError(f"Unknown release source: {name}") from None


def list_sources() -> List[str]:
    return sorted(_SOURCES)
