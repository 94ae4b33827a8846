"""Shared test fixtures and test-path bootstrap."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def write_manifest():
    """Write a package.json into a directory and return its path."""

    def _write(directory: Path, data: dict) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / "package.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def no_probe(monkeypatch: pytest.MonkeyPatch):
    """Fail the test if any external tool would be run."""
    import engine_validator.bin_version as bin_version

    async def fail(tool, args=("--version",)):
        raise AssertionError(f"unexpected probe of {tool}")

    monkeypatch.setattr(bin_version, "probe", fail)
