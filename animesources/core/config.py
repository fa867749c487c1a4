"""Process-wide configuration, fixed once at import time."""

from types import MappingProxyType
from typing import Any, Mapping, Optional

DEFAULTS: Mapping[str, Any] = MappingProxyType({
    # Nyaa
    "NYAA_URL": "https://nyaa.si",
    "NYAA_CATEGORY": "1_2",  # Anime - English-translated
    "NYAA_FILTER": "0",  # No filter
    "NYAA_TEST_QUERY": "test",
    "NYAA_TIMEOUT": 30,
    # HTTP
    "REQUEST_USER_AGENT": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/115.0.0.0 Safari/537.36"
    ),
    # Logging
    "LOG_LEVEL": "INFO",
})


class Config:
    """Read-only key/value settings.

    Values are frozen when the instance is built. Use ``with_overrides`` to
    derive a new instance (e.g. to point a source at a mirror).
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping[str, Any]] = None):
        merged = dict(DEFAULTS)
        if values:
            merged.update(values)
        object.__setattr__(self, "_values", MappingProxyType(merged))

    def __setattr__(self, key: str, value: Any) -> None:
        raise TypeError("Config is immutable; use with_overrides()")

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def with_overrides(self, **values: Any) -> "Config":
        merged = dict(self._values)
        merged.update(values)
        return Config(merged)

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)


config = Config()
