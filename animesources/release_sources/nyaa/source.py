"""Nyaa release source - searches the Nyaa RSS feed for anime torrents."""

from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence

import requests

from animesources.core.config import Config, config
from animesources.core.logger import setup_logger
from animesources.core.models import FeedItem, NormalizedResult, SearchRequest
from animesources.core.utils import magnet_from_info_hash
from animesources.release_sources import register_source
from animesources.release_sources.nyaa import feed
from animesources.release_sources.nyaa.query import build_probe_url, build_query_url

logger = setup_logger(__name__)


def normalize(items: Sequence[FeedItem]) -> List[NormalizedResult]:
    """Map extracted feed items onto the host's result shape, keeping order.

    Nyaa doesn't report completed downloads, so ``downloads`` is always 0.
    """
    results = []
    for item in items:
        results.append(NormalizedResult(
            title=item.title,
            info_hash=item.info_hash,
            magnet=item.magnet or magnet_from_info_hash(item.info_hash),
            seeders=item.seeders or 0,
            leechers=item.leechers or 0,
            size=item.size or 0,
            created_at=item.created_at or datetime.now(timezone.utc),
            downloads=0,
            accuracy="high",
            page_url=item.link,
        ))
    return results


def _as_request(request: Optional[SearchRequest], options: dict) -> SearchRequest:
    if isinstance(request, SearchRequest):
        return request
    if isinstance(request, dict):
        return SearchRequest.from_options(**{**request, **options})
    return SearchRequest.from_options(**options)


@register_source("nyaa")
class NyaaSource:
    """Release source for Nyaa's English-translated anime category.

    Single-episode, batch and movie searches all run the same query.
    """

    name = "nyaa"
    display_name = "Nyaa"

    def __init__(self, settings: Config = config):
        self.settings = settings

    async def query(self, request: Any = None, **options: Any) -> str:
        """Build the RSS URL for a search request (no network access)."""
        return build_query_url(_as_request(request, options), self.settings)

    async def get_items(self, url: str) -> List[FeedItem]:
        return await feed.fetch_items(url, self.settings)

    def normalize(self, items: Sequence[FeedItem]) -> List[NormalizedResult]:
        return normalize(items)

    async def search(self, request: Any = None, **options: Any) -> List[NormalizedResult]:
        """Query, fetch and normalize.

        Returns an empty list when Nyaa answers with a non-success status.
        Transport errors are left to the caller.
        """
        search_request = _as_request(request, options)
        url = build_query_url(search_request, self.settings)
        logger.info(f"Searching Nyaa for: {search_request.first_title!r} episode={search_request.episode!r}")

        results = self.normalize(await self.get_items(url))
        logger.info(f"Found {len(results)} releases from Nyaa")
        return results

    async def single(self, request: Any = None, **options: Any) -> List[NormalizedResult]:
        return await self.search(request, **options)

    async def batch(self, request: Any = None, **options: Any) -> List[NormalizedResult]:
        return await self.search(request, **options)

    async def movie(self, request: Any = None, **options: Any) -> List[NormalizedResult]:
        return await self.search(request, **options)

    async def health_check(self) -> bool:
        """Probe the feed with a fixed query. Never raises."""
        url = build_probe_url(self.settings)
        try:
            response = await feed.fetch(url, self.settings)
        except requests.exceptions.RequestException as e:
            logger.warning(f"Nyaa health check failed: {e}")
            return False

        if not feed.is_success(response):
            logger.warning(f"Nyaa health check failed. Status Code: {response.status_code}")
            return False
        return True

    async def test(self) -> bool:
        return await self.health_check()
