"""Conformance fixture loader for matchpattern.

Loads YAML fixtures from tests/fixtures/ for parametrized testing. Each
document names a pattern set config and a list of URL cases:

    name: subdomain wildcard
    config:
      match_set: default
      patterns: ["*://*.mozilla.org/*"]
    cases:
      - {name: apex, url: "http://mozilla.org/", expect: true}
      - {name: broken, url: "http://[::1/", expect: error}

A document with ``expect_error: true`` must fail to compile.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single URL case from a conformance fixture."""

    fixture_name: str
    case_name: str
    config: dict[str, Any]
    url: str
    expect: bool | str


def load_fixture_docs() -> list[dict[str, Any]]:
    """Load every YAML document under tests/fixtures/."""
    docs: list[dict[str, Any]] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        with yaml_file.open() as f:
            for doc in yaml.safe_load_all(f):
                if doc is None:
                    continue
                doc["_source"] = yaml_file.name
                docs.append(doc)
    return docs


def load_fixture_cases() -> list[FixtureCase]:
    """Flatten the positive fixtures into one case per URL."""
    cases: list[FixtureCase] = []
    for doc in load_fixture_docs():
        if doc.get("expect_error", False):
            continue
        for case in doc.get("cases", []):
            cases.append(
                FixtureCase(
                    fixture_name=f"{doc['_source']}::{doc['name']}",
                    case_name=case["name"],
                    config=doc["config"],
                    url=case["url"],
                    expect=case["expect"],
                )
            )
    return cases


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize conformance tests over the YAML fixtures."""
    if "fixture_case" in metafunc.fixturenames:
        cases = load_fixture_cases()
        metafunc.parametrize(
            "fixture_case",
            cases,
            ids=[f"{c.fixture_name}::{c.case_name}" for c in cases],
        )
    if "error_doc" in metafunc.fixturenames:
        docs = [d for d in load_fixture_docs() if d.get("expect_error", False)]
        metafunc.parametrize(
            "error_doc",
            docs,
            ids=[f"{d['_source']}::{d['name']}" for d in docs],
        )
