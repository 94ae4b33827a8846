"""Data models for engine validation."""

from __future__ import annotations

from .engine import Engine, EngineMap
from .report import Report, SatisfactionEntry
from .wanted import DefaultCwd, ExplicitExpectation, ManifestRoot, Wanted, coerce_wanted

__all__ = [
    "DefaultCwd",
    "Engine",
    "EngineMap",
    "ExplicitExpectation",
    "ManifestRoot",
    "Report",
    "SatisfactionEntry",
    "Wanted",
    "coerce_wanted",
]
