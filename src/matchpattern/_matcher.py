"""Compiled matchers — the two shapes a match pattern compiles to.

- SchemeMatcher: ``<all_urls>`` and ``*://*/*``; tests scheme membership only
- FullMatcher: ``scheme://host/path``; tests scheme, then host, then path

CompiledMatcher is a closed union of the two, pattern-matchable via
match/case. Both are frozen after construction and hold everything their
evaluation needs, so a matcher may be shared freely across threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from matchpattern._path import PathPattern

if TYPE_CHECKING:
    from matchpattern._match_set import MatchSet
    from matchpattern._url import ParsedUrl

MATCH_ALL = "*"
MATCH_SUBDOMAINS = "*."
PATH_SEPARATOR = "/"


@dataclass(frozen=True, slots=True)
class SchemeMatcher:
    """Matches any URL whose scheme is in ``schemes``."""

    raw: str
    schemes: frozenset[str]

    def evaluate(self, url: ParsedUrl) -> bool:
        return url.scheme in self.schemes


@dataclass(frozen=True, slots=True)
class HostPattern:
    """Host part of a full pattern: ``*``, ``*.suffix`` or an exact host.

    ``*.suffix`` is a raw suffix test with no dot boundary, so ``*.org``
    also accepts ``notmozilla.org``. Comparison is case-sensitive.
    """

    pattern: str

    def matches(self, host: str) -> bool:
        if self.pattern == MATCH_ALL:
            return True
        if self.pattern.startswith(MATCH_SUBDOMAINS):
            return host.endswith(self.pattern[len(MATCH_SUBDOMAINS) :])
        return host == self.pattern


@dataclass(frozen=True, slots=True)
class FullMatcher:
    """Matches scheme, host and (if present) path of a URL.

    ``path`` is None when the pattern has no ``/`` after the host, in which
    case any path is accepted once the host matches.
    """

    raw: str
    scheme: str
    host: HostPattern
    path: PathPattern | None
    match_set: MatchSet

    def evaluate(self, url: ParsedUrl) -> bool:
        if self.scheme == MATCH_ALL:
            if url.scheme not in self.match_set.allowed_schemes:
                return False
        elif url.scheme != self.scheme:
            return False

        if not self.host.matches(url.host):
            return False
        if self.path is None:
            return True
        return self.path.matches(url.match_path)


# Closed set of compiled matcher shapes.
CompiledMatcher: TypeAlias = SchemeMatcher | FullMatcher


def split_host_path(host_path: str) -> tuple[HostPattern, PathPattern | None]:
    """Split the part after ``://`` at the first ``/``."""
    index = host_path.find(PATH_SEPARATOR)
    if index == -1:
        return HostPattern(host_path), None
    return HostPattern(host_path[:index]), PathPattern(host_path[index:])


def matcher_kind(matcher: CompiledMatcher) -> str:
    """Discriminant of a compiled matcher: ``"scheme"`` or ``"full"``."""
    match matcher:
        case SchemeMatcher():
            return "scheme"
        case FullMatcher():
            return "full"
    msg = f"unknown matcher type: {type(matcher).__name__}"  # pragma: no cover
    raise TypeError(msg)  # pragma: no cover
