"""Tests for package.json discovery and the engines reader."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from engine_validator.discovery import find_manifest, locate
from engine_validator.parsers.package_json import ManifestError, parse, validate_namespace


def test_find_manifest_walks_upwards(tmp_path: Path, write_manifest) -> None:
    manifest = write_manifest(tmp_path / "project", {"name": "demo"})
    nested = tmp_path / "project" / "src" / "lib"
    nested.mkdir(parents=True)

    assert find_manifest(nested) == manifest.resolve()


def test_find_manifest_prefers_nearest(tmp_path: Path, write_manifest) -> None:
    write_manifest(tmp_path, {"name": "outer"})
    inner = write_manifest(tmp_path / "inner", {"name": "inner"})

    assert find_manifest(tmp_path / "inner") == inner.resolve()


def test_find_manifest_accepts_file_path(tmp_path: Path, write_manifest) -> None:
    manifest = write_manifest(tmp_path, {"name": "demo"})
    source = tmp_path / "index.js"
    source.write_text("", encoding="utf-8")

    assert find_manifest(source) == manifest.resolve()


def test_parse_returns_engines(tmp_path: Path, write_manifest) -> None:
    path = write_manifest(tmp_path, {"engines": {"node": ">=18", "npm": "^10.0.0"}})

    assert parse(path) == {"node": ">=18", "npm": "^10.0.0"}


def test_parse_missing_engines_is_empty(tmp_path: Path, write_manifest) -> None:
    path = write_manifest(tmp_path, {"name": "demo"})

    assert parse(path) == {}


def test_parse_rejects_non_string_ranges(tmp_path: Path, write_manifest) -> None:
    path = write_manifest(tmp_path, {"engines": {"node": 18}})

    with pytest.raises(ManifestError, match="node"):
        parse(path)


def test_parse_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestError, match="Failed to read"):
        parse(path)


def test_parse_rejects_non_object_document(tmp_path: Path) -> None:
    path = tmp_path / "package.json"
    path.write_text(json.dumps(["engines"]), encoding="utf-8")

    with pytest.raises(ManifestError, match="JSON object"):
        parse(path)


def test_validate_namespace_requires_object() -> None:
    with pytest.raises(ManifestError, match="<root>"):
        validate_namespace([">=18"])


def test_locate_reads_nearest_engines(tmp_path: Path, write_manifest) -> None:
    write_manifest(tmp_path, {"engines": {"node": ">=18"}})
    nested = tmp_path / "packages" / "app"
    nested.mkdir(parents=True)

    assert asyncio.run(locate("engines", cwd=nested)) == {"node": ">=18"}


def test_locate_other_namespace(tmp_path: Path, write_manifest) -> None:
    write_manifest(tmp_path, {"scripts": {"test": "ava"}})

    assert asyncio.run(locate("scripts", cwd=tmp_path)) == {"test": "ava"}


def test_locate_without_manifest_is_empty(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    import engine_validator.discovery as discovery

    monkeypatch.setattr(discovery, "find_manifest", lambda cwd, name="package.json": None)

    assert asyncio.run(locate("engines", cwd=tmp_path)) == {}
