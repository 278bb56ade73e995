# SPDX-License-Identifier: MIT
"""Exceptions raised by semverkit.

Grammar violations derive from :class:`InvalidVersionError` and always carry
the complete text that was being scanned. Problems that are not about the
grammar (negative numbers, missing arguments) raise
:class:`InvalidArgumentError`.
"""

from __future__ import annotations

from typing import Optional


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class UnexpectedCharacterError(InvalidVersionError):
    """Raised when a character is not allowed at its position."""

    def __init__(self, version: str, char: str):
        self.char = char
        super().__init__(version, f"Unexpected char in {version}: {char}")


class IncompleteVersionPartError(InvalidVersionError):
    """Raised when the input ends early or an identifier is empty."""

    def __init__(self, version: str):
        super().__init__(version, f"Incomplete version part in {version}")


class IllegalLeadingZeroError(InvalidVersionError):
    """Raised when a numeric part has a leading zero where none is allowed."""

    def __init__(self, version: str, component: str):
        self.component = component
        super().__init__(
            version, f"Illegal leading char '0' in {component} part of {version}"
        )


class InvalidArgumentError(ValueError):
    """Raised for arguments that are missing or out of range."""

    pass


def unexpected(version: str, char: Optional[str]) -> InvalidVersionError:
    """Build the error for an unexpected character, or end of input if ``char`` is None."""
    if char is None:
        return IncompleteVersionPartError(version)
    return UnexpectedCharacterError(version, char)


def require(condition: bool, message: str) -> None:
    """Raise InvalidArgumentError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise InvalidArgumentError(message)
