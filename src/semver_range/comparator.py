"""Semantic version precedence and single-constraint satisfaction."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models.version import Identifier, Version
    from .models.version_range import Operator

LESS = -1
EQUAL = 0
GREATER = 1


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compare_identifiers(a: Identifier, b: Identifier) -> int:
    """Compare two prerelease identifiers.

    Numeric identifiers (ints) compare numerically and always rank below
    alphanumeric ones (strs), which compare in ASCII order.
    """
    a_numeric = isinstance(a, int)
    b_numeric = isinstance(b, int)
    if a_numeric and b_numeric:
        return _sign(a - b)
    if a_numeric:
        return LESS
    if b_numeric:
        return GREATER
    if a == b:
        return EQUAL
    return LESS if a < b else GREATER


def compare_prerelease(a: tuple[Identifier, ...], b: tuple[Identifier, ...]) -> int:
    if a == b:
        return EQUAL
    # A release ranks above any prerelease of the same triple.
    if not a:
        return GREATER
    if not b:
        return LESS
    for left, right in zip(a, b):
        result = compare_identifiers(left, right)
        if result != EQUAL:
            return result
    return _sign(len(a) - len(b))


def compare_tuples(a: Version, b: Version) -> int:
    """Compare only the (major, minor, patch) triples."""
    left, right = a.triple, b.triple
    if left == right:
        return EQUAL
    return LESS if left < right else GREATER


def compare(a: Version, b: Version) -> int:
    """Return LESS, EQUAL or GREATER by semver precedence; build is ignored."""
    result = compare_tuples(a, b)
    if result != EQUAL:
        return result
    return compare_prerelease(a.prerelease, b.prerelease)


def tuple_equals(a: Version, b: Version) -> bool:
    return a.triple == b.triple


def relation_holds(operator: Operator, result: int) -> bool:
    """Check whether a comparison result stands in the relation ``operator`` names."""
    from .models.version_range import Operator

    if operator is Operator.GT:
        return result == GREATER
    if operator is Operator.GTE:
        return result != LESS
    if operator is Operator.LT:
        return result == LESS
    if operator is Operator.LTE:
        return result != GREATER
    raise ValueError(f"Operator {operator.name} has no direct comparison")


def bound_satisfied(operator: Operator, bound: Version, candidate: Version) -> bool:
    """Evaluate an inequality without the prerelease exclusion.

    Matching triples compare with full precedence, anything else compares
    triples only.
    """
    if tuple_equals(candidate, bound):
        return relation_holds(operator, compare(candidate, bound))
    return relation_holds(operator, compare_tuples(candidate, bound))


def constraint_satisfied(operator: Operator, bound: Version, candidate: Version) -> bool:
    """Evaluate one ``(operator, version)`` pair against ``candidate``.

    ``EQ`` matches on the numeric triple alone. Inequalities reject a
    prerelease candidate unless it sits on the bound's triple. Caret and
    tilde must be expanded first, see :func:`semver_range.evaluator.expand`.
    """
    from .models.version_range import Operator

    if operator is Operator.EQ:
        return tuple_equals(candidate, bound)
    if operator in (Operator.CARET, Operator.TILDE):
        raise ValueError(f"Operator {operator.name} must be expanded before comparison")
    if candidate.is_prerelease and not tuple_equals(candidate, bound):
        return False
    return bound_satisfied(operator, bound, candidate)
