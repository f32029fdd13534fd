"""Human-readable Markdown summary of an audit report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and one row per declared dependency."""
    totals = report.get("totals", {})
    packages = report.get("packages", [])

    lines = []
    lines.append("# Dependency range summary")
    lines.append("")
    lines.append(
        f"Declared: {totals.get('packages', 0)} | Satisfied: {totals.get('satisfied', 0)}"
        f" | Unsatisfied: {totals.get('unsatisfied', 0)}"
    )
    lines.append("")
    lines.append("| Section | Package | Requirement | Installed | Result |")
    lines.append("| --- | --- | --- | --- | --- |")

    for entry in packages:
        installed = entry.get("installed") or "n/a"
        if entry.get("satisfied"):
            result = "ok"
        else:
            result = entry.get("reason") or "unsatisfied"
        lines.append(
            f"| {entry.get('section', '')} | {entry.get('package', '')} "
            f"| {entry.get('requirement', '')} | {installed} | {result} |"
        )

    if not packages:
        lines.append("| (none) | No declared dependencies | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
