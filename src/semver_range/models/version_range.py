"""Requirement range model: OR-ed groups of AND-ed constraints."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from .version import Version


class Operator(str, Enum):
    """Requirement operators, valued by their textual prefix."""

    EQ = "="
    GT = ">"
    LT = "<"
    GTE = ">="
    LTE = "<="
    CARET = "^"
    TILDE = "~"

    @property
    def is_inequality(self) -> bool:
        return self in (Operator.GT, Operator.LT, Operator.GTE, Operator.LTE)


@dataclass(frozen=True)
class Constraint:
    """A single ``(operator, version)`` pair."""

    operator: Operator
    version: Version

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"


Group: TypeAlias = tuple[Constraint, ...]


@dataclass(frozen=True)
class VersionRange:
    """Parsed requirement string.

    ``requirements`` holds the groups in source order; a candidate satisfies
    the range when every constraint of at least one group accepts it.
    """

    requirements: tuple[Group, ...] = ()

    def __post_init__(self) -> None:
        if any(not group for group in self.requirements):
            raise ValueError("VersionRange groups must be non-empty")

    @classmethod
    def from_requirement_string(cls, text: str) -> VersionRange:
        from ..parsers.requirement import parse_requirement_string

        return parse_requirement_string(text)

    def satisfied_by(self, version: Version) -> bool:
        from ..evaluator import satisfied_by

        return satisfied_by(self, version)

    def __str__(self) -> str:
        return " || ".join(" ".join(str(c) for c in group) for group in self.requirements)
