"""MatchEngine — ordered compiled matchers with OR semantics.

Evaluation walks the matchers in order and stops at the first one that
accepts the URL. Order affects only speed and which matcher first_match()
reports, never the boolean result.

An engine is immutable once built; concurrent evaluation needs no locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from matchpattern._compiler import compile_matchers
from matchpattern._errors import UrlError
from matchpattern._match_set import default_match_set
from matchpattern._url import parse_url

if TYPE_CHECKING:
    from collections.abc import Iterable

    from matchpattern._match_set import MatchSet
    from matchpattern._matcher import CompiledMatcher
    from matchpattern._url import ParsedUrl

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MatchEngine:
    """A compiled set of match patterns.

    Build with compile_patterns(). An empty engine matches nothing.
    """

    matchers: tuple[CompiledMatcher, ...]

    @property
    def patterns(self) -> tuple[str, ...]:
        """Raw pattern texts, in evaluation order."""
        return tuple(m.raw for m in self.matchers)

    def __len__(self) -> int:
        return len(self.matchers)

    def matches(self, address: str) -> bool:
        """Check whether the address is matched by any pattern.

        Raises:
            UrlError: If the address cannot be parsed. The engine remains
                usable afterwards.
        """
        return self.first_match(address) is not None

    def matches_parsed_url(self, url: ParsedUrl) -> bool:
        """Same as matches() for a URL that is already parsed."""
        return self.first_match_parsed_url(url) is not None

    def first_match(self, address: str) -> CompiledMatcher | None:
        """Return the first matcher accepting the address, or None.

        Raises:
            UrlError: If the address cannot be parsed.
        """
        try:
            url = parse_url(address)
        except UrlError:
            logger.debug("rejecting unparseable address %r", address)
            raise
        return self.first_match_parsed_url(url)

    def first_match_parsed_url(self, url: ParsedUrl) -> CompiledMatcher | None:
        """Return the first matcher accepting the URL, or None."""
        for matcher in self.matchers:
            if matcher.evaluate(url):
                return matcher
        return None


def compile_patterns(
    patterns: Iterable[str], match_set: MatchSet | None = None
) -> MatchEngine:
    """Compile match patterns into a MatchEngine.

    Uses default_match_set() when no MatchSet is given. Compilation is
    all-or-nothing: the first invalid pattern aborts the whole batch.

    Raises:
        PatternError: If any pattern is malformed or uses an unsupported scheme.
    """
    if match_set is None:
        match_set = default_match_set()
    return MatchEngine(matchers=compile_matchers(patterns, match_set))
