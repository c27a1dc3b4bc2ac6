"""
Header Name Utilities

HTTP header names are case-insensitive, but the mappings we receive keep whatever
spelling the client or framework used. Every lookup and removal in this package goes
through the helpers below so "Host", "host" and "HOST" are always treated as one header.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any, Optional

from header_relay.config import Settings, get_settings

CONTENT_LENGTH = "content-length"

# Routing, CDN and connection-management headers that are never relayed upstream.
DEFAULT_HEADER_BLACKLIST: tuple[str, ...] = (
    "host",
    "x-target-url",
    "x-api-key",
    "cdn-loop",
    "cf-connecting-ip",
    "cf-ipcountry",
    "cf-ray",
    "cf-visitor",
    "render-proxy-ttl",
    "connection",
)


def normalize_header_name(name: str) -> str:
    """Canonical comparison form of a header name"""
    return name.strip().lower()


def matching_keys(headers: Mapping[str, Any], name: str) -> list[str]:
    """
    Find every key in headers that spells the given header name

    Args:
        headers: Header mapping
        name: Header name in any casing

    Returns:
        list[str]: Matching keys in their original spelling, in mapping order
    """
    wanted = normalize_header_name(name)
    return [key for key in headers.keys() if normalize_header_name(key) == wanted]


def get_header(headers: Optional[Mapping[str, Any]], name: str) -> Any:
    """
    Case-insensitive header lookup

    Returns None when headers is None or the header is not present. When several
    spellings are present, the first one in mapping order wins.
    """
    if headers is None:
        return None
    wanted = normalize_header_name(name)
    for key, value in headers.items():
        if normalize_header_name(key) == wanted:
            return value
    return None


def remove_header(headers: MutableMapping[str, Any], name: str) -> list[str]:
    """
    Remove every spelling of a header in place

    Returns:
        list[str]: Removed keys in their original spelling
    """
    removed = matching_keys(headers, name)
    for key in removed:
        del headers[key]
    return removed


@dataclass(frozen=True)
class HeaderBlacklist:
    """
    Header Blacklist

    Immutable, ordered set of lowercase header names that must never appear in
    forwarded headers. Names are normalized on construction and duplicates dropped.
    """

    names: tuple[str, ...] = DEFAULT_HEADER_BLACKLIST

    def __post_init__(self):
        normalized: list[str] = []
        for name in self.names:
            lowered = normalize_header_name(name)
            if lowered and lowered not in normalized:
                normalized.append(lowered)
        object.__setattr__(self, "names", tuple(normalized))

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return normalize_header_name(name) in self.names

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def extended(self, extra: Iterable[str]) -> HeaderBlacklist:
        """Return a new blacklist with extra names appended"""
        return HeaderBlacklist(self.names + tuple(extra))

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> HeaderBlacklist:
        """
        Build the blacklist from application settings

        The default entries are always present; EXTRA_STRIPPED_HEADERS can only add to them.
        """
        settings = settings or get_settings()
        return cls().extended(settings.extra_stripped_headers)
