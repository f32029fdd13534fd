"""Check declared dependency ranges against installed versions.

Inputs are plain mappings: a package.json-shaped manifest and a
``package -> version`` mapping as read from a lockfile. Loading either from
disk is left to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .config import Settings, load_settings
from .errors import InvalidOperatorError, InvalidVersionError
from .evaluator import satisfied_by
from .models.version import Version
from .models.version_range import VersionRange
from .report import aggregate

logger = logging.getLogger(__name__)


def collect_declared(
    manifest: Mapping[str, Any], sections: Iterable[str]
) -> list[tuple[str, str, str]]:
    """Return ``(section, package, requirement)`` from the given manifest sections."""
    declared: list[tuple[str, str, str]] = []
    for section in sections:
        deps = manifest.get(section) or {}
        if not isinstance(deps, Mapping):
            logger.warning("Section %r is not a mapping; skipping", section)
            continue
        for name, requirement in deps.items():
            declared.append((section, str(name), str(requirement)))
    return declared


def _check_one(
    section: str, name: str, requirement: str, installed: str | None
) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "section": section,
        "package": name,
        "requirement": requirement,
        "installed": installed,
        "satisfied": False,
    }

    try:
        version_range = VersionRange.from_requirement_string(requirement)
    except (InvalidOperatorError, InvalidVersionError) as exc:
        logger.info("Skipping %s: invalid requirement %r (%s)", name, requirement, exc)
        entry["reason"] = "invalid-requirement"
        return entry

    if installed is None:
        entry["reason"] = "missing"
        return entry

    try:
        version = Version.from_semver(installed)
    except InvalidVersionError as exc:
        logger.info("Skipping %s: invalid installed version %r (%s)", name, installed, exc)
        entry["reason"] = "invalid-version"
        return entry

    if satisfied_by(version_range, version):
        entry["satisfied"] = True
    else:
        entry["reason"] = "unsatisfied"
    return entry


def check_dependencies(
    manifest: Mapping[str, Any],
    installed: Mapping[str, str],
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Evaluate every declared requirement against the installed version.

    Returns a report as produced by :func:`semver_range.report.aggregate`.
    """
    settings = settings or load_settings()
    results = []
    for section, name, requirement in collect_declared(manifest, settings.sections):
        version = installed.get(name)
        entry = _check_one(section, name, requirement, None if version is None else str(version))
        if not entry["satisfied"]:
            logger.warning(
                "%s %s does not satisfy %r (%s)",
                name,
                entry["installed"] or "(not installed)",
                requirement,
                entry["reason"],
            )
        results.append(entry)

    return aggregate(results)
