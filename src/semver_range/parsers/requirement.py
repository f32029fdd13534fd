"""Parse requirement strings into :class:`VersionRange` objects.

Supported expressions:
- bare or ``=`` versions, e.g. ``1.2.3`` or ``=1.2.3``
- comparators ``>``, ``>=``, ``<``, ``<=``
- caret ``^1.2`` and tilde ``~1.2`` ranges
- whitespace separated comparator sets (AND), e.g. ``>=1.0.0 <2.0.0``
- ``||`` separated alternatives (OR); empty alternatives are ignored
"""

from __future__ import annotations

import logging
import re

from ..errors import InvalidOperatorError, InvalidVersionError
from ..models.version_range import Constraint, Group, Operator, VersionRange
from .semver import parse_version

logger = logging.getLogger(__name__)

# Longest first so ">=" wins over ">".
_OPERATORS: tuple[Operator, ...] = (
    Operator.GTE,
    Operator.LTE,
    Operator.CARET,
    Operator.TILDE,
    Operator.GT,
    Operator.LT,
    Operator.EQ,
)
_PREFIX_PATTERN = re.compile(r"[^0-9]*")


def parse_token(token: str) -> Constraint:
    """Parse a single ``OPERATOR? VERSION`` token."""
    prefix = _PREFIX_PATTERN.match(token).group(0)
    if not prefix:
        return Constraint(Operator.EQ, parse_version(token))

    for operator in _OPERATORS:
        if prefix == operator.value:
            remainder = token[len(operator.value):]
            if not remainder:
                raise InvalidVersionError(f"Operator '{operator.value}' is missing a version", token)
            return Constraint(operator, parse_version(remainder))

    raise InvalidOperatorError(f"Unrecognized operator '{prefix}' in '{token}'", token)


def _parse_group(segment: str) -> Group:
    return tuple(parse_token(token) for token in segment.split())


def parse_requirement_string(text: str) -> VersionRange:
    """Parse ``text`` into a :class:`VersionRange`.

    Raises :class:`InvalidOperatorError` or :class:`InvalidVersionError` on the
    first malformed token. A string with no groups yields an empty range.
    """
    if not isinstance(text, str):
        raise InvalidVersionError(
            f"Requirement must be a string, got {type(text).__name__}", repr(text)
        )
    groups: list[Group] = []
    for segment in text.split("||"):
        cleaned = segment.strip()
        if not cleaned:
            continue
        groups.append(_parse_group(cleaned))

    if not groups:
        logger.debug("Requirement %r contains no groups", text)
    else:
        logger.debug("Parsed requirement %r into %d group(s)", text, len(groups))
    return VersionRange(requirements=tuple(groups))
