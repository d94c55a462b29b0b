"""MatchSet — the scheme whitelists behind the two match-everything forms.

A MatchSet pairs two scheme sets:
- all_url_schemes: accepted by ``<all_urls>``, and the only schemes a full
  pattern may name explicitly
- allowed_schemes: accepted when a pattern's scheme segment is ``*``
  (including the ``*://*/*`` form)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class MatchSet:
    """Immutable pair of scheme whitelists.

    Any iterable of scheme strings is accepted and frozen at construction.
    """

    all_url_schemes: frozenset[str]
    allowed_schemes: frozenset[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "all_url_schemes", _freeze(self.all_url_schemes))
        object.__setattr__(self, "allowed_schemes", _freeze(self.allowed_schemes))


def _freeze(schemes: Iterable[str]) -> frozenset[str]:
    if isinstance(schemes, str):
        # A bare string would otherwise become a set of characters.
        return frozenset((schemes,))
    return frozenset(schemes)


def default_match_set() -> MatchSet:
    """Schemes defined for WebExtension match patterns.

    https://developer.mozilla.org/en-US/docs/Mozilla/Add-ons/WebExtensions/Match_patterns
    """
    return MatchSet(
        all_url_schemes=frozenset({"http", "https", "ws", "wss", "ftp", "ftps", "data", "file"}),
        allowed_schemes=frozenset({"http", "https", "ws", "wss"}),
    )


def chrome_extension_match_set() -> MatchSet:
    """Schemes defined for Chrome extension match patterns.

    https://developer.chrome.com/docs/extensions/mv3/match_patterns/
    """
    return MatchSet(
        all_url_schemes=frozenset({"http", "https", "file", "ftp", "urn"}),
        allowed_schemes=frozenset({"http", "https"}),
    )


# Named presets, addressable from config.
MATCH_SETS: MappingProxyType[str, Callable[[], MatchSet]] = MappingProxyType(
    {
        "default": default_match_set,
        "chrome_extension": chrome_extension_match_set,
    }
)
