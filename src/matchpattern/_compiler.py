"""Pattern compilation: pattern string -> CompiledMatcher.

Grammar accepted:
- ``<all_urls>``: any scheme in the MatchSet's all_url_schemes
- ``*://*/*``: any scheme in the MatchSet's allowed_schemes
- ``scheme://host`` or ``scheme://host/path`` where scheme is ``*`` or a
  member of all_url_schemes, host is ``*``, ``*.suffix`` or a literal host,
  and path may contain ``*`` wildcards

Compilation is all-or-nothing: the first bad pattern raises PatternError.
validate_patterns() collects every error instead, for callers that report
problems per rule.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from matchpattern._errors import PatternError, PatternTooLongError
from matchpattern._match_set import default_match_set
from matchpattern._matcher import (
    MATCH_ALL,
    CompiledMatcher,
    FullMatcher,
    SchemeMatcher,
    split_host_path,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from matchpattern._match_set import MatchSet

logger = logging.getLogger(__name__)

ALL_URLS_PATTERN = "<all_urls>"
ALL_PATTERN = "*://*/*"
SCHEME_SEPARATOR = "://"
MAX_PATTERN_LENGTH = 8192


def compile_matcher(pattern: str, match_set: MatchSet) -> CompiledMatcher:
    """Compile a single match pattern.

    Raises:
        PatternTooLongError: pattern exceeds MAX_PATTERN_LENGTH
        PatternError: pattern is malformed or names an unsupported scheme
    """
    if len(pattern) > MAX_PATTERN_LENGTH:
        raise PatternTooLongError(pattern, MAX_PATTERN_LENGTH)

    if pattern == ALL_URLS_PATTERN:
        return SchemeMatcher(raw=pattern, schemes=match_set.all_url_schemes)
    if pattern == ALL_PATTERN:
        return SchemeMatcher(raw=pattern, schemes=match_set.allowed_schemes)

    segments = pattern.split(SCHEME_SEPARATOR)
    if len(segments) != 2:
        raise PatternError(pattern, "invalid pattern")
    scheme, host_path = segments
    if scheme != MATCH_ALL and scheme not in match_set.all_url_schemes:
        raise PatternError(pattern, "unsupported scheme", scheme)

    host, path = split_host_path(host_path)
    return FullMatcher(
        raw=pattern,
        scheme=scheme,
        host=host,
        path=path,
        match_set=match_set,
    )


def compile_matchers(
    patterns: Iterable[str], match_set: MatchSet
) -> tuple[CompiledMatcher, ...]:
    """Compile patterns in order, failing on the first bad one."""
    _check_not_str(patterns)
    matchers = tuple(compile_matcher(p, match_set) for p in patterns)
    logger.debug("compiled %d match patterns against %r", len(matchers), match_set)
    return matchers


def validate_patterns(
    patterns: Iterable[str], match_set: MatchSet | None = None
) -> list[PatternError]:
    """Compile every pattern and return all errors, in pattern order.

    An empty list means compile_matchers() would succeed. Uses
    default_match_set() when no MatchSet is given.
    """
    _check_not_str(patterns)
    if match_set is None:
        match_set = default_match_set()
    errors: list[PatternError] = []
    for pattern in patterns:
        try:
            compile_matcher(pattern, match_set)
        except PatternError as e:
            errors.append(e)
    return errors


def _check_not_str(patterns: Iterable[str]) -> None:
    # A bare string would otherwise compile one pattern per character.
    if isinstance(patterns, str):
        msg = "patterns must be an iterable of strings, not a single string"
        raise TypeError(msg)
