"""Evaluation context pairing actual and expected engine versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

EngineMap: TypeAlias = dict[str, str | None]


@dataclass(frozen=True)
class Engine:
    """Actual versions and expected ranges for one validation call."""

    actual: EngineMap = field(default_factory=dict)
    expected: EngineMap = field(default_factory=dict)
