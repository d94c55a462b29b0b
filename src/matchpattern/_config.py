"""Config types for building a MatchEngine from JSON/YAML-shaped data.

Config-driven construction path:
  dict → parse_pattern_config() → PatternSetConfig → .compile() → MatchEngine

Accepted shape::

    match_set: default              # or chrome_extension, or a mapping
    # match_set:
    #   all_url_schemes: [http, https, file]
    #   allowed_schemes: [http, https]
    patterns:
      - "<all_urls>"
      - "*://*.example.com/*"

Parsing only checks structure. Pattern validity is checked by compile(),
which raises PatternError.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import re2

from matchpattern._engine import MatchEngine, compile_patterns
from matchpattern._errors import ConfigParseError
from matchpattern._match_set import MATCH_SETS, MatchSet

_SCHEME_NAME = re2.compile(r"[a-z][a-z0-9+.\-]*")
_DEFAULT_MATCH_SET = "default"


@dataclass(frozen=True, slots=True)
class PatternSetConfig:
    """A parsed pattern set: patterns plus the MatchSet to compile them with."""

    patterns: tuple[str, ...]
    match_set: MatchSet

    def compile(self) -> MatchEngine:
        """Compile into a MatchEngine.

        Raises:
            PatternError: If any pattern is invalid.
        """
        return compile_patterns(self.patterns, self.match_set)


def parse_pattern_config(data: dict[str, Any]) -> PatternSetConfig:
    """Parse a dict into a PatternSetConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_patterns = data.get("patterns")
    if raw_patterns is None:
        msg = "missing required field 'patterns'"
        raise ConfigParseError(msg)
    if not isinstance(raw_patterns, list):
        msg = f"'patterns' must be a list, got {type(raw_patterns).__name__}"
        raise ConfigParseError(msg)
    for i, pattern in enumerate(raw_patterns):
        if not isinstance(pattern, str):
            msg = f"patterns[{i}] must be a string, got {type(pattern).__name__}"
            raise ConfigParseError(msg)

    match_set = _parse_match_set(data.get("match_set", _DEFAULT_MATCH_SET))
    return PatternSetConfig(patterns=tuple(raw_patterns), match_set=match_set)


def _parse_match_set(data: Any) -> MatchSet:
    """Parse a match_set entry: a preset name or an explicit mapping."""
    if isinstance(data, str):
        factory = MATCH_SETS.get(data)
        if factory is None:
            msg = f"unknown match_set {data!r} (available: {', '.join(sorted(MATCH_SETS))})"
            raise ConfigParseError(msg)
        return factory()

    if not isinstance(data, dict):
        msg = f"match_set must be a string or a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    unknown = sorted(set(data) - {"all_url_schemes", "allowed_schemes"})
    if unknown:
        msg = f"match_set has unknown fields: {unknown}"
        raise ConfigParseError(msg)

    return MatchSet(
        all_url_schemes=frozenset(_parse_schemes(data, "all_url_schemes")),
        allowed_schemes=frozenset(_parse_schemes(data, "allowed_schemes")),
    )


def _parse_schemes(data: dict[str, Any], key: str) -> list[str]:
    if key not in data:
        msg = f"match_set missing required field {key!r}"
        raise ConfigParseError(msg)

    schemes = data[key]
    if not isinstance(schemes, list):
        msg = f"match_set.{key} must be a list, got {type(schemes).__name__}"
        raise ConfigParseError(msg)

    for scheme in schemes:
        if not isinstance(scheme, str) or not _SCHEME_NAME.fullmatch(scheme):
            msg = f"match_set.{key} contains invalid scheme {scheme!r}"
            raise ConfigParseError(msg)
    return schemes
