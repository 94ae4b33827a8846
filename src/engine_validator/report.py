"""Compare actual engine versions against expected ranges."""

from __future__ import annotations

from collections.abc import Iterator

from .models import Engine, Report, SatisfactionEntry
from .parsers.semver import satisfies


def _evaluate(engine: Engine) -> Iterator[tuple[str, bool, SatisfactionEntry]]:
    for name, expected in engine.expected.items():
        actual = engine.actual.get(name)
        yield name, satisfies(actual, expected), SatisfactionEntry(expected=expected, actual=actual)


def compare(engine: Engine, detail: bool = False) -> bool | Report:
    """Evaluate ``engine`` as a single boolean or, with ``detail``, a Report.

    Engines only present in ``engine.actual`` are ignored. An empty
    expectation is always satisfied.
    """
    if not engine.expected:
        return Report(all_satisfied=True) if detail else True

    if not detail:
        return all(
            satisfies(engine.actual.get(name), expected)
            for name, expected in engine.expected.items()
        )

    return Report.from_results(_evaluate(engine))
