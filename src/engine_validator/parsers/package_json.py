"""Parse package.json and extract a top-level namespace such as ``engines``."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from collections.abc import Iterable

from jsonschema import Draft202012Validator

from ..config import ENGINES_NAMESPACE

ENGINES_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "additionalProperties": {"type": "string"},
}
_OBJECT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
}


class ManifestError(ValueError):
    """Raised when a manifest cannot be decoded or a namespace is malformed."""


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_namespace(value: Any, namespace: str = ENGINES_NAMESPACE) -> dict[str, Any]:
    """Check ``value`` against the schema for ``namespace`` and return a copy."""
    schema = ENGINES_SCHEMA if namespace == ENGINES_NAMESPACE else _OBJECT_SCHEMA
    validator = Draft202012Validator(schema)
    errors = sorted(validator.iter_errors(value), key=lambda e: list(e.path))
    if errors:
        raise ManifestError(f"Invalid '{namespace}' field:\n" + _format_errors(errors))
    return dict(value)


def parse(path: Path, namespace: str = ENGINES_NAMESPACE) -> dict[str, Any]:
    """Return the ``namespace`` object from the manifest at ``path``.

    A missing field yields an empty mapping. Unreadable files raise OSError.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Failed to read {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{path} does not contain a JSON object")

    value = data.get(namespace)
    if value is None:
        return {}
    try:
        return validate_namespace(value, namespace)
    except ManifestError as exc:
        raise ManifestError(f"{path}: {exc}") from exc
