"""semver-range: semantic version parsing and requirement range evaluation.

Typical use::

    from semver_range import Version, VersionRange

    VersionRange.from_requirement_string("^1.2 <1.3.2").satisfied_by(
        Version.from_semver("1.2.5")
    )
"""

from __future__ import annotations

from .comparator import compare
from .errors import ConfigError, InvalidOperatorError, InvalidVersionError, ParseError
from .evaluator import filter_satisfying, max_satisfying, min_satisfying, satisfies
from .models import Constraint, Group, Operator, Version, VersionRange

__all__ = [
    "ConfigError",
    "Constraint",
    "Group",
    "InvalidOperatorError",
    "InvalidVersionError",
    "Operator",
    "ParseError",
    "Version",
    "VersionRange",
    "compare",
    "filter_satisfying",
    "max_satisfying",
    "min_satisfying",
    "satisfies",
]
