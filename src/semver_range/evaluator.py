"""Range satisfaction: caret/tilde expansion and group evaluation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .comparator import compare, constraint_satisfied, relation_holds, tuple_equals
from .models.version import Version
from .models.version_range import Constraint, Group, Operator, VersionRange

logger = logging.getLogger(__name__)


def _release(major: int, minor: int = 0, patch: int = 0) -> Version:
    return Version(major=major, minor=minor, patch=patch)


def _caret_upper(base: Version) -> Version:
    if base.major > 0:
        return _release(base.major + 1)
    if base.minor_explicit and base.minor > 0:
        return _release(0, base.minor + 1)
    if base.patch_explicit:
        return _release(0, base.minor, base.patch + 1)
    # ^0 or ^0.0: bump the most specific component that was given.
    if base.minor_explicit:
        return _release(0, base.minor + 1)
    return _release(base.major + 1)


def expand_caret(base: Version) -> tuple[Constraint, Constraint]:
    """``^base`` → ``>=base <upper`` where upper bumps the first nonzero given component."""
    return Constraint(Operator.GTE, base), Constraint(Operator.LT, _caret_upper(base))


def expand_tilde(base: Version) -> tuple[Constraint, Constraint]:
    """``~base`` → ``>=base <upper``; upper bumps minor when given, else major."""
    if base.minor_explicit:
        upper = _release(base.major, base.minor + 1)
    else:
        upper = _release(base.major + 1)
    return Constraint(Operator.GTE, base), Constraint(Operator.LT, upper)


def expand(group: Group) -> Group:
    """Replace caret and tilde constraints with their boundary pairs."""
    expanded: list[Constraint] = []
    for constraint in group:
        if constraint.operator is Operator.CARET:
            expanded.extend(expand_caret(constraint.version))
        elif constraint.operator is Operator.TILDE:
            expanded.extend(expand_tilde(constraint.version))
        else:
            expanded.append(constraint)
    return tuple(expanded)


def _expanded_satisfied(constraint: Constraint, candidate: Version) -> bool:
    """Evaluate a caret or tilde constraint.

    A prerelease candidate must share the base version's triple; the
    expanded bounds then compare with full precedence.
    """
    if candidate.is_prerelease and not tuple_equals(candidate, constraint.version):
        return False
    if constraint.operator is Operator.CARET:
        bounds = expand_caret(constraint.version)
    else:
        bounds = expand_tilde(constraint.version)
    return all(relation_holds(b.operator, compare(candidate, b.version)) for b in bounds)


def group_satisfied(group: Group, candidate: Version) -> bool:
    """Check every constraint of an AND-group against ``candidate``.

    Prerelease exclusion applies to each constraint on its own.
    """
    for constraint in group:
        if constraint.operator in (Operator.CARET, Operator.TILDE):
            ok = _expanded_satisfied(constraint, candidate)
        else:
            ok = constraint_satisfied(constraint.operator, constraint.version, candidate)
        if not ok:
            return False
    return True


def satisfied_by(version_range: VersionRange, candidate: Version) -> bool:
    """Return True when at least one group of ``version_range`` accepts ``candidate``."""
    return any(group_satisfied(group, candidate) for group in version_range.requirements)


def _coerce_version(value: Version | str) -> Version:
    return value if isinstance(value, Version) else Version.from_semver(value)


def _coerce_range(value: VersionRange | str) -> VersionRange:
    return value if isinstance(value, VersionRange) else VersionRange.from_requirement_string(value)


def satisfies(version: Version | str, requirement: VersionRange | str) -> bool:
    """Parse both sides when given as text and evaluate the range."""
    return satisfied_by(_coerce_range(requirement), _coerce_version(version))


def filter_satisfying(
    versions: Iterable[Version | str], requirement: VersionRange | str
) -> list[Version]:
    """Return the candidates that satisfy ``requirement``, in input order."""
    version_range = _coerce_range(requirement)
    matched = [v for v in map(_coerce_version, versions) if satisfied_by(version_range, v)]
    logger.debug("%d candidate(s) satisfy %r", len(matched), str(version_range))
    return matched


def max_satisfying(
    versions: Iterable[Version | str], requirement: VersionRange | str
) -> Version | None:
    """Return the highest candidate satisfying ``requirement``, or None."""
    best: Version | None = None
    for version in filter_satisfying(versions, requirement):
        if best is None or compare(version, best) > 0:
            best = version
    return best


def min_satisfying(
    versions: Iterable[Version | str], requirement: VersionRange | str
) -> Version | None:
    """Return the lowest candidate satisfying ``requirement``, or None."""
    best: Version | None = None
    for version in filter_satisfying(versions, requirement):
        if best is None or compare(version, best) < 0:
            best = version
    return best
