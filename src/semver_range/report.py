"""Report aggregation and schema validation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from jsonschema import Draft202012Validator

REASONS = ("missing", "unsatisfied", "invalid-requirement", "invalid-version")

REPORT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["version", "ok", "packages", "totals"],
    "additionalProperties": False,
    "properties": {
        "version": {"type": "string"},
        "ok": {"type": "boolean"},
        "packages": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["section", "package", "requirement", "installed", "satisfied"],
                "additionalProperties": False,
                "properties": {
                    "section": {"type": "string", "minLength": 1},
                    "package": {"type": "string", "minLength": 1},
                    "requirement": {"type": "string"},
                    "installed": {"type": ["string", "null"]},
                    "satisfied": {"type": "boolean"},
                    "reason": {"enum": list(REASONS)},
                },
            },
        },
        "totals": {
            "type": "object",
            "required": ["packages", "satisfied", "unsatisfied"],
            "additionalProperties": False,
            "properties": {
                "packages": {"type": "integer", "minimum": 0},
                "satisfied": {"type": "integer", "minimum": 0},
                "unsatisfied": {"type": "integer", "minimum": 0},
            },
        },
    },
}


def aggregate(packages: list[dict[str, Any]]) -> dict[str, Any]:
    """Wrap per-package results into a single report with totals.

    Each entry is expected to carry at least a ``satisfied`` flag; entries are
    passed through unchanged.
    """
    satisfied = sum(1 for p in packages if p.get("satisfied"))
    unsatisfied = len(packages) - satisfied

    return {
        "version": "1",
        "ok": unsatisfied == 0,
        "packages": packages,
        "totals": {
            "packages": len(packages),
            "satisfied": satisfied,
            "unsatisfied": unsatisfied,
        },
    }


def _format_errors(errors: Iterable) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"- {pointer or '<root>'}: {error.message}")
    return "\n".join(messages)


def validate_report(report: dict[str, Any]) -> None:
    """Raise ValueError listing every schema violation in ``report``."""
    validator = Draft202012Validator(REPORT_SCHEMA)
    errors = sorted(validator.iter_errors(report), key=lambda e: list(map(str, e.path)))
    if errors:
        raise ValueError("Report failed validation:\n" + _format_errors(errors))
