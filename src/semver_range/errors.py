"""Exceptions raised while interpreting versions, ranges and settings."""

from __future__ import annotations


class ParseError(ValueError):
    """Base error for text that cannot be parsed into a version or range."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text


class InvalidVersionError(ParseError):
    """Raised when a version string is malformed."""


class InvalidOperatorError(ParseError):
    """Raised when a requirement token starts with an unknown operator."""


class ConfigError(RuntimeError):
    """Raised when settings cannot be resolved or contain invalid values."""
