"""Human-readable summary rendering for a validation Report."""

from __future__ import annotations

from .models import Report


def render_summary(report: Report) -> str:
    """Return a Markdown string with the outcome and a table of engines."""
    lines = []
    lines.append("# Engine compatibility")
    lines.append("")
    satisfied = len(report.satisfied)
    total = satisfied + len(report.not_satisfied)
    status = "compatible" if report.all_satisfied else "NOT compatible"
    lines.append(f"Status: {status} | Satisfied: {satisfied}/{total}")
    lines.append("")
    lines.append("| Engine | Actual | Expected | Satisfied |")
    lines.append("| --- | --- | --- | --- |")

    rows = [(name, entry, "yes") for name, entry in report.satisfied.items()]
    rows += [(name, entry, "no") for name, entry in report.not_satisfied.items()]
    for name, entry, ok in sorted(rows, key=lambda row: row[0]):
        actual = entry.actual if entry.actual is not None else "(unknown)"
        lines.append(f"| {name} | {actual} | {entry.expected} | {ok} |")

    if not rows:
        lines.append("| (no engines declared) | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
