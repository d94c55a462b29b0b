"""Error types for matchpattern.

PatternError is a configuration problem raised at compile time; UrlError is
an untrusted-input problem raised per address. A URL that simply does not
satisfy any pattern is not an error and yields False.
"""

from __future__ import annotations


class MatchPatternError(Exception):
    """Base class for all matchpattern errors."""


class PatternError(MatchPatternError):
    """A match pattern could not be compiled."""

    def __init__(self, pattern: str, reason: str, detail: str | None = None) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"{reason} {detail if detail is not None else pattern}")


class PatternTooLongError(PatternError):
    """A match pattern exceeds the length limit."""

    def __init__(self, pattern: str, max_: int) -> None:
        self.length = len(pattern)
        self.max = max_
        super().__init__(
            pattern,
            "pattern too long",
            f"(length {self.length} exceeds maximum {max_})",
        )


class UrlError(MatchPatternError):
    """An address could not be parsed into a URL."""

    def __init__(self, address: str, reason: str) -> None:
        self.address = address
        self.reason = reason
        super().__init__(f"invalid URL {address!r}: {reason}")


class ConfigParseError(MatchPatternError):
    """Error parsing a config dict into config types."""
