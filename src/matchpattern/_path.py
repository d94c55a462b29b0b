"""Glob-style matching of a path pattern against path+query.

``*`` is the only wildcard: no character classes, no escaping, and matching
is case-sensitive on the raw string. The pattern is split on ``*`` once at
construction; ``matches`` is the hot path.

Semantics for a pattern with at least one wildcard:
- a non-empty final literal segment is an anchored suffix: the path must
  end with it
- the first literal segment is an anchored prefix of what remains
- the literal segments in between are found leftmost-first, in order and
  without overlapping each other, the prefix or the suffix
- whatever is left over is absorbed by the wildcard preceding the suffix
  (or by the trailing wildcard)

A pattern without a wildcard requires exact equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field

MATCH_ALL_PATH = "/*"
WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled path pattern such as ``/a/*/b/*``."""

    pattern: str
    _segments: tuple[str, ...] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_segments", tuple(self.pattern.split(WILDCARD)))

    @property
    def segments(self) -> tuple[str, ...]:
        """Literal segments between wildcards (may contain empty strings)."""
        return self._segments

    def matches(self, path: str) -> bool:
        if self.pattern == MATCH_ALL_PATH:
            return True

        segments = self._segments
        if len(segments) == 1:
            return path == self.pattern

        rem = path
        suffix = segments[-1]
        if suffix:
            if not path.endswith(suffix):
                return False
            rem = path[: len(path) - len(suffix)]

        prefix = segments[0]
        if not rem.startswith(prefix):
            return False
        rem = rem[len(prefix) :]

        for segment in segments[1:-1]:
            index = rem.find(segment)
            if index == -1:
                return False
            rem = rem[index + len(segment) :]

        # The wildcard before the suffix consumes the rest.
        return True
