"""Conformance tests driven by the YAML fixtures in tests/fixtures/.

Parametrization happens in conftest.pytest_generate_tests.
"""

from __future__ import annotations

from typing import Any

import pytest

from matchpattern import (
    ConfigParseError,
    PatternError,
    UrlError,
    parse_pattern_config,
)


def test_fixture_case(fixture_case: Any) -> None:
    """Positive fixture: the config compiles and each URL evaluates as expected."""
    engine = parse_pattern_config(fixture_case.config).compile()

    if fixture_case.expect == "error":
        with pytest.raises(UrlError):
            engine.matches(fixture_case.url)
        return

    actual = engine.matches(fixture_case.url)
    assert actual is fixture_case.expect, (
        f"Fixture '{fixture_case.fixture_name}' case '{fixture_case.case_name}': "
        f"expected {fixture_case.expect!r}, got {actual!r}"
    )


def test_fixture_error(error_doc: dict[str, Any]) -> None:
    """Error fixture: either parse or compile must fail."""
    with pytest.raises((ConfigParseError, PatternError)):
        parse_pattern_config(error_doc["config"]).compile()
