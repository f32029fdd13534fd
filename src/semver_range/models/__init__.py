"""Data models for versions and requirement ranges."""

from __future__ import annotations

from .version import Identifier, Version
from .version_range import Constraint, Group, Operator, VersionRange

__all__ = [
    "Constraint",
    "Group",
    "Identifier",
    "Operator",
    "Version",
    "VersionRange",
]
