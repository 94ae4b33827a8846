"""Core validation entrypoints.

This module MUST NOT read the environment or print anything so it can be used
both as a library and from the command line wrapper.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, cast

from .actual import resolve_actual
from .expected import resolve_expected
from .models import Engine, Report, coerce_wanted
from .report import compare

logger = logging.getLogger(__name__)

INCOMPATIBLE_HEADER = "Your engines are not compatible:"


class IncompatibleEnginesError(ValueError):
    """Raised by assert_engines when an engine falls outside its range."""

    def __init__(self, report: Report) -> None:
        self.report = report
        super().__init__(format_incompatibility(report))


def format_incompatibility(report: Report) -> str:
    lines = [INCOMPATIBLE_HEADER]
    for name, entry in report.not_satisfied.items():
        actual = entry.actual if entry.actual is not None else "(unknown)"
        lines.append(f"  {name} {actual}, expected {entry.expected}")
    return "\n".join(lines) + "\n"


async def _resolve(wanted: Any, known: Mapping[str, str | None] | None) -> Engine:
    expected = await resolve_expected(coerce_wanted(wanted))

    # Nothing expected means nothing to look up.
    if not expected:
        return Engine(actual=dict(known or {}), expected={})

    actual = await resolve_actual(expected, known)
    return Engine(actual=actual, expected=expected)


async def check(
    wanted: Any = None,
    known: Mapping[str, str | None] | None = None,
    *,
    detail: bool = False,
) -> bool | Report:
    """Return whether the environment satisfies the expected engines.

    Params:
        wanted: None to read ``engines`` from the package.json nearest the
            cwd, a path to start that search from, a package.json-like
            mapping with an ``engines`` object, or an engines mapping.
        known: actual versions already known; these are never looked up.
        detail: return a Report instead of a boolean.

    Failures to read the manifest or probe a tool propagate unchanged.
    """
    engine = await _resolve(wanted, known)
    result = compare(engine, detail=detail)
    logger.debug("Checked %s against %s", engine.expected, engine.actual)
    return result


async def check_detailed(
    wanted: Any = None, known: Mapping[str, str | None] | None = None
) -> Report:
    """Like check, but always return the full Report."""
    return cast(Report, await check(wanted, known, detail=True))


async def assert_engines(
    wanted: Any = None, known: Mapping[str, str | None] | None = None
) -> Report:
    """Return the Report, or raise IncompatibleEnginesError carrying it."""
    report = await check_detailed(wanted, known)
    if report.all_satisfied:
        return report
    raise IncompatibleEnginesError(report)
