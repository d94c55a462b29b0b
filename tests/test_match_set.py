"""Tests for MatchSet and the canned scheme sets."""

from __future__ import annotations

import pytest

from matchpattern import (
    MATCH_SETS,
    MatchSet,
    chrome_extension_match_set,
    default_match_set,
)


class TestDefaultMatchSet:
    def test_all_url_schemes(self) -> None:
        ms = default_match_set()
        assert ms.all_url_schemes == {"http", "https", "ws", "wss", "ftp", "ftps", "data", "file"}

    def test_allowed_schemes(self) -> None:
        assert default_match_set().allowed_schemes == {"http", "https", "ws", "wss"}

    def test_allowed_is_subset(self) -> None:
        ms = default_match_set()
        assert ms.allowed_schemes <= ms.all_url_schemes


class TestChromeExtensionMatchSet:
    def test_all_url_schemes(self) -> None:
        ms = chrome_extension_match_set()
        assert ms.all_url_schemes == {"http", "https", "file", "ftp", "urn"}

    def test_allowed_schemes(self) -> None:
        assert chrome_extension_match_set().allowed_schemes == {"http", "https"}


class TestMatchSet:
    def test_lists_are_frozen(self) -> None:
        ms = MatchSet(["http", "https"], ["http"])  # type: ignore[arg-type]
        assert isinstance(ms.all_url_schemes, frozenset)
        assert isinstance(ms.allowed_schemes, frozenset)

    def test_single_string_is_one_scheme(self) -> None:
        ms = MatchSet("https", "https")  # type: ignore[arg-type]
        assert ms.all_url_schemes == {"https"}

    def test_immutable(self) -> None:
        ms = default_match_set()
        with pytest.raises(AttributeError):
            ms.allowed_schemes = frozenset()  # type: ignore[misc]

    def test_equality(self) -> None:
        assert default_match_set() == default_match_set()
        assert default_match_set() != chrome_extension_match_set()


class TestPresets:
    def test_names(self) -> None:
        assert sorted(MATCH_SETS) == ["chrome_extension", "default"]

    def test_factories(self) -> None:
        assert MATCH_SETS["default"]() == default_match_set()
        assert MATCH_SETS["chrome_extension"]() == chrome_extension_match_set()

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            MATCH_SETS["custom"] = default_match_set  # type: ignore[index]
