# SPDX-License-Identifier: MIT
"""Grammar for dot-separated pre-release and build metadata identifiers.

An identifier consists of ASCII letters, ASCII digits and hyphens and may not
be empty. Pre-release identifiers that consist only of digits must not have a
leading zero (``"0"`` itself is fine); build metadata identifiers may.

The scanner works one character at a time and treats the end of the input as
a sentinel character, so running out of input and hitting an illegal
character are reported through the same branches.
"""

from __future__ import annotations

import string
from typing import Iterable, Optional

from .errors import (
    IllegalLeadingZeroError,
    InvalidVersionError,
    UnexpectedCharacterError,
    unexpected,
)

# Sentinel for the end of the input
EOS = None

DIGITS = frozenset(string.digits)
IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")

PRERELEASE = "pre-release"
BUILD_METADATA = "build-meta-data"


def is_numeric_identifier(token: str) -> bool:
    """Return True if ``token`` consists of ASCII digits only."""
    return bool(token) and all(c in DIGITS for c in token)


def _has_leading_zero(token: str) -> bool:
    return len(token) > 1 and token[0] == "0" and is_numeric_identifier(token)


def scan_identifiers(
    text: str,
    start: int = 0,
    *,
    allow_leading_zero: bool,
    allow_plus_transition: bool,
    component: str,
) -> tuple[list[str], int]:
    """Consume a dot-separated identifier list starting at ``start``.

    Args:
        text: The complete text being scanned; embedded into errors
        start: Offset of the first identifier character
        allow_leading_zero: Accept numeric identifiers like ``"007"``
        allow_plus_transition: Stop at ``+`` instead of rejecting it
        component: Name reported in leading zero errors

    Returns:
        The identifiers and the offset where scanning stopped. The offset is
        either ``len(text)`` or the position of the ``+`` that ended the list.

    Raises:
        IncompleteVersionPartError: If an identifier is empty
        UnexpectedCharacterError: If a character outside the alphabet is found
        IllegalLeadingZeroError: If a numeric identifier has a leading zero
            and ``allow_leading_zero`` is False
    """
    parts: list[str] = []
    length = len(text)
    token_start = start
    i = start

    while True:
        c: Optional[str] = text[i] if i < length else EOS

        if c in IDENTIFIER_CHARS:
            i += 1
            continue

        if c == "+" and not allow_plus_transition:
            raise UnexpectedCharacterError(text, c)
        if c is not EOS and c != "." and c != "+":
            raise UnexpectedCharacterError(text, c)

        # c ends the current identifier
        token = text[token_start:i]
        if not token:
            raise unexpected(text, c if c == "+" else EOS)
        if not allow_leading_zero and _has_leading_zero(token):
            raise IllegalLeadingZeroError(text, component)
        parts.append(token)

        if c != ".":
            return parts, i
        i += 1
        token_start = i


def validate_identifiers(
    text: str, *, allow_leading_zero: bool, component: str
) -> tuple[str, ...]:
    """Validate a complete identifier literal and split it into parts.

    The empty string is the literal for "no identifiers".

    Examples:
        >>> validate_identifiers("alpha.1", allow_leading_zero=False, component=PRERELEASE)
        ('alpha', '1')
        >>> validate_identifiers("", allow_leading_zero=True, component=BUILD_METADATA)
        ()
    """
    if not text:
        return ()
    parts, _ = scan_identifiers(
        text,
        allow_leading_zero=allow_leading_zero,
        allow_plus_transition=False,
        component=component,
    )
    return tuple(parts)


def check_identifiers(text: str, *, allow_leading_zero: bool) -> bool:
    """Return True if ``text`` is a valid identifier literal. Never raises."""
    if not isinstance(text, str):
        return False
    try:
        validate_identifiers(text, allow_leading_zero=allow_leading_zero, component="")
    except InvalidVersionError:
        return False
    return True


def join_identifiers(parts: Iterable[str]) -> str:
    """Join identifiers back into their dot-separated literal."""
    return ".".join(parts)


def increment_identifiers(parts: tuple[str, ...]) -> tuple[str, ...]:
    """Return the identifiers that follow ``parts``.

    An empty list becomes ``("1",)``. A numeric last identifier is incremented,
    otherwise ``"1"`` is appended.

    Examples:
        >>> increment_identifiers(())
        ('1',)
        >>> increment_identifiers(("rc", "9"))
        ('rc', '10')
        >>> increment_identifiers(("SNAPSHOT",))
        ('SNAPSHOT', '1')
    """
    if not parts:
        return ("1",)
    last = parts[-1]
    if is_numeric_identifier(last):
        return parts[:-1] + (str(int(last) + 1),)
    return parts + ("1",)
