"""Search URL construction for the Nyaa RSS feed."""

from typing import Iterable, Optional, Union
from urllib.parse import quote

from animesources.core.config import Config, config
from animesources.core.models import SearchRequest

# Quality labels Nyaa uploaders put in release names
QUALITIES = ("1080", "720", "540", "480")

# Characters encodeURIComponent leaves alone on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!~*'()"


def build_filter_clause(
    resolution: Optional[Union[int, str]] = None,
    exclusions: Optional[Iterable[str]] = None,
) -> str:
    """Build the negated-keyword suffix appended to a Nyaa search.

    Nyaa's search syntax excludes anything matching ``-(a|b)``. Exclusions go
    first, followed by every quality label other than the requested one.

    The clause always starts with a space. With a resolution but no exclusions
    that leaves two spaces before the quality group, matching the URLs other
    Nyaa clients send.

    Returns:
        "" when neither argument is set, otherwise the clause.
    """
    excluded = [term for term in (exclusions or ()) if term]
    if not excluded and not resolution:
        return ""

    clause = " "
    if excluded:
        clause += "-(" + "|".join(excluded) + ")"
    if resolution:
        wanted = str(resolution)
        others = [f'"{q}p"' for q in QUALITIES if q != wanted]
        clause += " -(" + "|".join(others) + ")"
    return clause


def format_episode(episode: Optional[Union[int, str]]) -> str:
    if episode is None or episode == "":
        return ""
    return str(episode).strip().rjust(2, "0")


def build_search_text(request: SearchRequest) -> str:
    """Free-text part of the query plus filters, trimmed."""
    parts = [request.first_title.strip(), format_episode(request.episode)]
    text = " ".join(part for part in parts if part).strip()
    text += build_filter_clause(request.resolution, request.exclusions)
    return text.strip()


def feed_base_url(settings: Config = config) -> str:
    """Configured Nyaa host without a trailing slash, https if no scheme is given."""
    url = str(settings.get("NYAA_URL") or "").strip().rstrip("/")
    return url if "://" in url else f"https://{url}"


def build_query_url(request: SearchRequest, settings: Config = config) -> str:
    """Full RSS URL for a search, pinned to the English-translated anime category."""
    base_url = feed_base_url(settings)
    encoded = quote(build_search_text(request), safe=_URI_COMPONENT_SAFE)
    return (
        f"{base_url}/?page=rss"
        f"&f={settings.get('NYAA_FILTER', '0')}"
        f"&c={settings.get('NYAA_CATEGORY', '1_2')}"
        f"&q={encoded}"
    )


def build_probe_url(settings: Config = config) -> str:
    """URL used to check that the feed responds at all."""
    base_url = feed_base_url(settings)
    probe = quote(str(settings.get("NYAA_TEST_QUERY", "test")), safe=_URI_COMPONENT_SAFE)
    return f"{base_url}/?page=rss&q={probe}"
