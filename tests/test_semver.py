"""Tests for npm-style range matching."""

from __future__ import annotations

import pytest
from packaging.version import InvalidVersion

from engine_validator.parsers.semver import compare, parse_range, parse_version, satisfies


@pytest.mark.parametrize(
    ("version", "expr"),
    [
        ("1.2.3", "1.2.3"),
        ("v1.2.3", "=1.2.3"),
        ("1.2.3+build.5", "1.2.3"),
        ("4.1.2", "^4.1.2"),
        ("4.9.0", "^4.1.2"),
        ("0.2.5", "^0.2.3"),
        ("0.0.3", "^0.0.3"),
        ("1.2.9", "~1.2.3"),
        ("1.9.0", "~1"),
        ("1.2.0", "~>1.2"),
        ("3.3.5", ">=3.3.4"),
        ("3.3.5", ">= 3.3.4"),
        ("1.5.0", ">=1.0.0 <2.0.0"),
        ("2.0.0", "1.2.3 - 2.3.4"),
        ("2.3.9", "1.2 - 2.3"),
        ("1.7.1", "1.x"),
        ("1.2.7", "1.2.*"),
        ("20.11.1", "*"),
        ("20.11.1", ""),
        ("5.0.0", "^4.0.0 || ^5.0.0"),
        ("2.0.0", ">1"),
        ("1.9.9", "<=1"),
        ("1.2.3-beta.2", ">=1.2.3-beta.1"),
        ("1.2.3-beta.2", "~1.2.3-beta"),
    ],
)
def test_satisfies_accepts(version: str, expr: str) -> None:
    assert satisfies(version, expr)


@pytest.mark.parametrize(
    ("version", "expr"),
    [
        ("4.0.0", "^4.1.2"),
        ("5.0.0", "^4.1.2"),
        ("0.3.0", "^0.2.3"),
        ("0.0.4", "^0.0.3"),
        ("1.3.0", "~1.2.3"),
        ("2.0.0", ">=1.0.0 <2.0.0"),
        ("2.3.5", "1.2.3 - 2.3.4"),
        ("2.4.0", "1.2 - 2.3"),
        ("2.0.0", "1.x"),
        ("1.9.9", ">1"),
        ("2.0.0", "<=1"),
        ("0.10.0", ">=4"),
        ("20.11.1", ">=999.0.0"),
        ("6.0.0", "^4.0.0 || ^5.0.0"),
    ],
)
def test_satisfies_rejects(version: str, expr: str) -> None:
    assert not satisfies(version, expr)


def test_prerelease_needs_matching_comparator() -> None:
    assert not satisfies("1.3.0-beta.1", "^1.2.0")
    assert not satisfies("2.0.0-alpha", "^1.2.0")
    assert not satisfies("1.0.0-rc.1", "*")
    assert satisfies("1.3.0-beta.1", ">=1.3.0-alpha <2")


def test_missing_or_invalid_input_never_satisfies() -> None:
    assert not satisfies(None, "*")
    assert not satisfies(None, ">=0.0.0")
    assert not satisfies("not-a-version", ">=1.0.0")
    assert not satisfies("1.2.3", ">=banana")


def test_prerelease_ordering() -> None:
    ordered = [
        "1.0.0-0",
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
    ]
    versions = [parse_version(v) for v in ordered]
    for lower, higher in zip(versions, versions[1:]):
        assert compare(lower, higher) == -1
        assert compare(higher, lower) == 1


def test_parse_version_rejects_partial() -> None:
    with pytest.raises(InvalidVersion):
        parse_version("1.2")


def test_parse_range_splits_unions() -> None:
    sets = parse_range(">=1.0.0 <2.0.0 || 3.x")
    assert len(sets) == 2
    assert [c.operator for c in sets[0]] == [">=", "<"]
