"""Semantic version model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias

from ..comparator import GREATER, LESS, compare
from ..errors import InvalidVersionError

# Numeric prerelease identifiers are stored as ints, alphanumeric ones as strs.
Identifier: TypeAlias = int | str


@dataclass(frozen=True)
class Version:
    """Immutable semantic version.

    Equality and hashing cover ``major``, ``minor``, ``patch`` and
    ``prerelease`` only. ``build`` and the presence flags are carried along
    but never take part in ordering or equality.
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)
    minor_explicit: bool = field(default=True, compare=False)
    patch_explicit: bool = field(default=True, compare=False)

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise InvalidVersionError(f"{name} must be a non-negative integer", str(value))
        if self.patch_explicit and not self.minor_explicit:
            raise InvalidVersionError("patch cannot be given without minor")
        if not self.minor_explicit and self.minor != 0:
            raise InvalidVersionError("an omitted minor must default to 0")
        if not self.patch_explicit and self.patch != 0:
            raise InvalidVersionError("an omitted patch must default to 0")
        for ident in self.prerelease:
            if isinstance(ident, bool) or not isinstance(ident, (int, str)):
                raise InvalidVersionError("prerelease identifiers must be int or str", repr(ident))
            if isinstance(ident, int) and ident < 0:
                raise InvalidVersionError("numeric prerelease identifiers must be non-negative")
            if isinstance(ident, str) and (not ident or ident.isdigit()):
                raise InvalidVersionError(
                    "alphanumeric prerelease identifiers must be non-empty and not all digits",
                    ident,
                )
        if any(not ident for ident in self.build):
            raise InvalidVersionError("build identifiers must be non-empty")

    @classmethod
    def from_semver(cls, text: str) -> Version:
        from ..parsers.semver import parse_version

        return parse_version(text)

    @property
    def triple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def __str__(self) -> str:
        text = str(self.major)
        if self.minor_explicit:
            text += f".{self.minor}"
        if self.patch_explicit:
            text += f".{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(str(ident) for ident in self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) != GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) != LESS

