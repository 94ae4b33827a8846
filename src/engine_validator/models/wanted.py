"""Tagged forms of the ``wanted`` argument accepted by the public API."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeAlias

from ..config import ENGINES_NAMESPACE


@dataclass(frozen=True)
class DefaultCwd:
    """Look for the manifest starting at the current working directory."""


@dataclass(frozen=True)
class ManifestRoot:
    """Look for the manifest starting at ``path``."""

    path: Path


@dataclass(frozen=True)
class ExplicitExpectation:
    """Use ``engines`` as the expected ranges without touching the disk."""

    engines: dict[str, Any] = field(default_factory=dict)


Wanted: TypeAlias = DefaultCwd | ManifestRoot | ExplicitExpectation


def coerce_wanted(raw: Any) -> Wanted:
    """Normalise the loose shapes callers pass as ``wanted`` into a variant.

    ``None`` searches from the cwd, a string or path names the search root,
    and a mapping is either a whole manifest (its ``engines`` object is used)
    or an engines mapping itself.
    """
    if isinstance(raw, (DefaultCwd, ManifestRoot, ExplicitExpectation)):
        return raw
    if raw is None:
        return DefaultCwd()
    if isinstance(raw, (str, os.PathLike)):
        return ManifestRoot(Path(raw))
    if isinstance(raw, Mapping):
        nested = raw.get(ENGINES_NAMESPACE)
        if isinstance(nested, Mapping):
            return ExplicitExpectation(dict(nested))
        return ExplicitExpectation(dict(raw))
    raise TypeError(f"Unsupported wanted value of type {type(raw).__name__}")
