"""Satisfaction report model."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Iterable


@dataclass(frozen=True)
class SatisfactionEntry:
    """Expected range and actual version recorded for one engine."""

    expected: str
    actual: str | None

    def to_dict(self) -> dict[str, str | None]:
        return {
            "expected": self.expected,
            "actual": self.actual,
        }


@dataclass(frozen=True)
class Report:
    """Per-engine breakdown of a validation run."""

    all_satisfied: bool
    satisfied: dict[str, SatisfactionEntry] = field(default_factory=dict)
    not_satisfied: dict[str, SatisfactionEntry] = field(default_factory=dict)

    def __post_init__(self) -> None:
        overlap = set(self.satisfied) & set(self.not_satisfied)
        if overlap:
            raise ValueError(f"Engines cannot be both satisfied and not: {sorted(overlap)}")
        if self.all_satisfied != (not self.not_satisfied):
            raise ValueError("all_satisfied must be true exactly when nothing is unsatisfied")

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"allSatisfied": self.all_satisfied}
        if self.satisfied:
            data["satisfied"] = {name: entry.to_dict() for name, entry in self.satisfied.items()}
        if self.not_satisfied:
            data["notSatisfied"] = {
                name: entry.to_dict() for name, entry in self.not_satisfied.items()
            }
        return data

    @classmethod
    def from_results(
        cls, results: Iterable[tuple[str, bool, SatisfactionEntry]]
    ) -> Report:
        satisfied: dict[str, SatisfactionEntry] = {}
        not_satisfied: dict[str, SatisfactionEntry] = {}
        for name, ok, entry in results:
            (satisfied if ok else not_satisfied)[name] = entry
        return cls(
            all_satisfied=not not_satisfied,
            satisfied=satisfied,
            not_satisfied=not_satisfied,
        )
