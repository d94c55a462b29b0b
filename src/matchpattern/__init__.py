"""matchpattern — WebExtension match patterns for URL allow-lists.

Compile a list of match patterns once, then test URLs against them:

    from matchpattern import compile_patterns, default_match_set

    engine = compile_patterns(["*://*.mozilla.org/*"], default_match_set())
    engine.matches("https://developer.mozilla.org/en-US/")  # True

All public types are exported from this module for flat imports.
"""

__version__ = "0.1.0"

from matchpattern._compiler import (
    ALL_PATTERN,
    ALL_URLS_PATTERN,
    MAX_PATTERN_LENGTH,
    compile_matcher,
    compile_matchers,
    validate_patterns,
)

# Config types — see matchpattern._config for details
from matchpattern._config import PatternSetConfig, parse_pattern_config
from matchpattern._engine import MatchEngine, compile_patterns
from matchpattern._errors import (
    ConfigParseError,
    MatchPatternError,
    PatternError,
    PatternTooLongError,
    UrlError,
)
from matchpattern._match_set import (
    MATCH_SETS,
    MatchSet,
    chrome_extension_match_set,
    default_match_set,
)
from matchpattern._matcher import (
    CompiledMatcher,
    FullMatcher,
    HostPattern,
    SchemeMatcher,
    matcher_kind,
)
from matchpattern._path import PathPattern
from matchpattern._url import ParsedUrl, parse_url

__all__ = [
    # Engine
    "MatchEngine",
    "compile_patterns",
    # Compiler
    "compile_matcher",
    "compile_matchers",
    "validate_patterns",
    "ALL_URLS_PATTERN",
    "ALL_PATTERN",
    "MAX_PATTERN_LENGTH",
    # Match sets
    "MatchSet",
    "default_match_set",
    "chrome_extension_match_set",
    "MATCH_SETS",
    # Compiled matchers
    "CompiledMatcher",
    "SchemeMatcher",
    "FullMatcher",
    "HostPattern",
    "PathPattern",
    "matcher_kind",
    # URLs
    "ParsedUrl",
    "parse_url",
    # Config
    "PatternSetConfig",
    "parse_pattern_config",
    # Errors
    "MatchPatternError",
    "PatternError",
    "PatternTooLongError",
    "UrlError",
    "ConfigParseError",
]
