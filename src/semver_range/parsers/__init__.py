"""Text parsers for versions and requirement strings."""

from __future__ import annotations

from .requirement import parse_requirement_string, parse_token
from .semver import parse_version

__all__ = [
    "parse_requirement_string",
    "parse_token",
    "parse_version",
]
