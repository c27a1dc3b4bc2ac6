"""
Header Name Utilities Unit Tests
"""

import dataclasses

import pytest

from header_relay.common.header_names import (
    DEFAULT_HEADER_BLACKLIST,
    HeaderBlacklist,
    get_header,
    matching_keys,
    normalize_header_name,
    remove_header,
)
from header_relay.config import Settings


class TestNormalizeHeaderName:

    def test_lowercases_and_strips(self):
        assert normalize_header_name("  Content-Length ") == "content-length"


class TestGetHeader:
    """Case-insensitive lookup"""

    def test_any_casing_matches(self):
        headers = {"Authorization": "Bearer t"}
        assert get_header(headers, "authorization") == "Bearer t"
        assert get_header(headers, "AUTHORIZATION") == "Bearer t"

    def test_missing_header(self):
        assert get_header({"a": "1"}, "b") is None

    def test_none_headers(self):
        assert get_header(None, "authorization") is None

    def test_first_spelling_wins(self):
        headers = {"X-Id": "first", "x-id": "second"}
        assert get_header(headers, "x-id") == "first"

    def test_non_mapping_raises(self):
        with pytest.raises(AttributeError):
            get_header(["authorization"], "authorization")


class TestMatchingAndRemove:

    def test_matching_keys_preserves_spelling(self):
        headers = {"Host": "a", "HOST": "b", "other": "c"}
        assert matching_keys(headers, "host") == ["Host", "HOST"]

    def test_remove_header_removes_all_spellings(self):
        headers = {"Content-Length": "1", "content-length": "2", "Accept": "*/*"}
        removed = remove_header(headers, "CONTENT-LENGTH")
        assert removed == ["Content-Length", "content-length"]
        assert headers == {"Accept": "*/*"}

    def test_remove_absent_header(self):
        headers = {"Accept": "*/*"}
        assert remove_header(headers, "host") == []
        assert headers == {"Accept": "*/*"}


class TestHeaderBlacklist:
    """Blacklist configuration"""

    def test_default_entries_and_order(self):
        blacklist = HeaderBlacklist()
        assert blacklist.names == (
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
        assert blacklist.names == DEFAULT_HEADER_BLACKLIST

    def test_contains_is_case_insensitive(self):
        blacklist = HeaderBlacklist()
        assert "Host" in blacklist
        assert "CF-Ray" in blacklist
        assert "authorization" not in blacklist
        assert 42 not in blacklist

    def test_names_normalized_and_deduplicated(self):
        blacklist = HeaderBlacklist(("X-Secret", "x-secret", " Host ", ""))
        assert blacklist.names == ("x-secret", "host")
        assert len(blacklist) == 2

    def test_immutable(self):
        blacklist = HeaderBlacklist()
        with pytest.raises(dataclasses.FrozenInstanceError):
            blacklist.names = ()

    def test_extended_returns_new_instance(self):
        blacklist = HeaderBlacklist()
        extended = blacklist.extended(["X-Forwarded-For"])
        assert "x-forwarded-for" in extended
        assert "x-forwarded-for" not in blacklist
        assert extended.names[: len(blacklist)] == blacklist.names

    def test_from_settings_keeps_defaults(self):
        settings = Settings(EXTRA_STRIPPED_HEADERS="X-Real-IP, x-forwarded-for,,")
        blacklist = HeaderBlacklist.from_settings(settings)
        assert blacklist.names == DEFAULT_HEADER_BLACKLIST + ("x-real-ip", "x-forwarded-for")

    def test_from_settings_without_extras(self):
        blacklist = HeaderBlacklist.from_settings(Settings(EXTRA_STRIPPED_HEADERS=""))
        assert blacklist == HeaderBlacklist()
