"""
Nyaa RSS fetching and field extraction.

The feed is scanned as text with regular expressions rather than parsed as
XML. Every field falls back to a default when its tag is missing or
malformed, so one odd item never drops the rest of the feed.
"""

import asyncio
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import List, Optional

import requests

from animesources.core.config import Config, config
from animesources.core.logger import setup_logger
from animesources.core.models import FeedItem

logger = setup_logger(__name__)

_ITEM_RE = re.compile(r"<item>(.*?)</item>", re.DOTALL)
_MAGNET_RE = re.compile(r"(magnet:\?xt=urn:[^\"'<\s]+)", re.IGNORECASE)
_SIZE_HINT_RE = re.compile(r"Size:\s*([^<]+)", re.IGNORECASE)
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")

FEED_ACCEPT = "application/rss+xml, application/xml;q=0.9, */*;q=0.8"


def get_tag(raw: str, tag: str, default: str = "") -> str:
    """Text of the first ``<tag>...</tag>`` in ``raw`` (case-insensitive)."""
    name = re.escape(tag)
    match = re.search(rf"<{name}>(.*?)</{name}>", raw, re.IGNORECASE | re.DOTALL)
    return match.group(1) if match else default


def get_ns_tag(raw: str, tag: str, default: str = "") -> str:
    """Like ``get_tag`` but tolerant of prefixes/attributes around the label.

    Matches ``<nyaa:seeders>`` as well as ``<x:nyaa:seeders attr="1">`` since
    the label only has to occur somewhere inside the brackets.
    """
    name = re.escape(tag)
    pattern = rf"<[^>]*{name}[^>]*>(.*?)</[^>]*{name}[^>]*>"
    match = re.search(pattern, raw, re.IGNORECASE | re.DOTALL)
    return match.group(1) if match else default


def _coerce_count(value: Optional[str]) -> int:
    """Leading integer of ``value``; 0 when missing, non-numeric or negative."""
    if not value:
        return 0
    match = _LEADING_INT_RE.match(value)
    if not match:
        return 0
    number = int(match.group(1))
    return number if number > 0 else 0


def _parse_pub_date(value: str) -> datetime:
    value = value.strip()
    if value:
        try:
            parsed = parsedate_to_datetime(value)
        except (TypeError, ValueError, OverflowError):
            logger.debug(f"Unparsable pubDate, using current time: {value!r}")
        else:
            if parsed.tzinfo is None:
                parsed = parsed.replace(tzinfo=timezone.utc)
            return parsed
    return datetime.now(timezone.utc)


def _extract_size(raw: str) -> int:
    size = _coerce_count(get_ns_tag(raw, "torrent:contentLength", "0"))
    if size > 0:
        return size

    # Only a human-readable size is available; bytes aren't estimated from it.
    hint = _SIZE_HINT_RE.search(get_tag(raw, "description"))
    if hint:
        logger.debug(f"Ignoring textual size hint: {hint.group(1).strip()}")
    return 0


def parse_item(raw: str) -> FeedItem:
    """Extract one FeedItem from the inner text of an ``<item>`` block."""
    magnet_match = _MAGNET_RE.search(raw)
    return FeedItem(
        title=get_tag(raw, "title"),
        link=get_tag(raw, "link"),
        info_hash=get_ns_tag(raw, "nyaa:infoHash"),
        magnet=magnet_match.group(1) if magnet_match else "",
        seeders=_coerce_count(get_ns_tag(raw, "nyaa:seeders", "0")),
        leechers=_coerce_count(get_ns_tag(raw, "nyaa:leechers", "0")),
        size=_extract_size(raw),
        created_at=_parse_pub_date(get_tag(raw, "pubDate")),
    )


def parse_items(xml_text: str) -> List[FeedItem]:
    """Parse every ``<item>`` of an RSS document, in feed order."""
    if not xml_text:
        return []
    return [parse_item(match.group(1)) for match in _ITEM_RE.finditer(xml_text)]


def is_success(response: requests.Response) -> bool:
    """2xx only. ``Response.ok`` also accepts redirects and 304s."""
    return 200 <= response.status_code < 300


def _get(url: str, settings: Config) -> requests.Response:
    headers = {
        "User-Agent": settings.get("REQUEST_USER_AGENT"),
        "Accept": FEED_ACCEPT,
    }
    return requests.get(url, headers=headers, timeout=settings.get("NYAA_TIMEOUT", 30))


async def fetch(url: str, settings: Config = config) -> requests.Response:
    """Issue a single GET off the event loop.

    Transport errors (``requests.RequestException``) propagate.
    """
    logger.debug(f"Nyaa RSS: GET {url}")
    return await asyncio.to_thread(_get, url, settings)


async def fetch_items(url: str, settings: Config = config) -> List[FeedItem]:
    """Fetch the feed at ``url`` and extract its items.

    A non-success status yields an empty list; nothing is retried.
    """
    response = await fetch(url, settings)
    if not is_success(response):
        logger.warning(f"Nyaa RSS request failed. Status Code: {response.status_code}")
        return []

    items = parse_items(response.text)
    logger.debug(f"Parsed {len(items)} items from Nyaa RSS")
    return items
