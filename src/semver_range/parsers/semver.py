"""Parse semantic version strings.

Grammar: ``MAJOR ['.' MINOR ['.' PATCH]] ['-' PRERELEASE] ['+' BUILD]``

- MINOR and PATCH may be omitted; they default to 0 and the omission is
  recorded on the resulting :class:`Version`
- PRERELEASE starts at the first ``-`` and BUILD at the first ``+``; both are
  dot-separated lists of non-empty printable ASCII identifiers
- all-digit prerelease identifiers are numeric, everything else alphanumeric
"""

from __future__ import annotations

import re

from ..errors import InvalidVersionError
from ..models.version import Identifier, Version

_CORE_PATTERN = re.compile(r"(?P<major>[0-9]+)(?:\.(?P<minor>[0-9]+)(?:\.(?P<patch>[0-9]+))?)?")
_IDENTIFIER_PATTERN = re.compile(r"[!-~]+")


def _split_identifiers(raw: str, label: str, text: str) -> list[str]:
    parts = raw.split(".")
    for part in parts:
        if not part:
            raise InvalidVersionError(f"Empty {label} identifier in version '{text}'", text)
        if not _IDENTIFIER_PATTERN.fullmatch(part):
            raise InvalidVersionError(f"Invalid {label} identifier '{part}' in version '{text}'", text)
    return parts


def _to_identifier(part: str) -> Identifier:
    return int(part) if part.isdigit() else part


def parse_version(text: str) -> Version:
    """Parse ``text`` into a :class:`Version` or raise :class:`InvalidVersionError`."""
    if not isinstance(text, str):
        raise InvalidVersionError(f"Version must be a string, got {type(text).__name__}", repr(text))
    raw = text.strip()
    if not raw:
        raise InvalidVersionError("Empty version string", text)

    core_pre, plus, build_raw = raw.partition("+")
    build: tuple[str, ...] = ()
    if plus:
        build = tuple(_split_identifiers(build_raw, "build", text))

    core, dash, pre_raw = core_pre.partition("-")
    prerelease: tuple[Identifier, ...] = ()
    if dash:
        prerelease = tuple(_to_identifier(p) for p in _split_identifiers(pre_raw, "prerelease", text))

    match = _CORE_PATTERN.fullmatch(core)
    if match is None:
        raise InvalidVersionError(f"Invalid version '{text}': expected MAJOR[.MINOR[.PATCH]]", text)

    minor = match.group("minor")
    patch = match.group("patch")
    return Version(
        major=int(match.group("major")),
        minor=int(minor) if minor is not None else 0,
        patch=int(patch) if patch is not None else 0,
        prerelease=prerelease,
        build=build,
        minor_explicit=minor is not None,
        patch_explicit=patch is not None,
    )
