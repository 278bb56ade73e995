# SPDX-License-Identifier: MIT
"""State machine parser for semantic version strings.

The parser walks the input exactly once from left to right. The end of the
input is fed through the same dispatch as a regular character, so "the string
ended here" and "this character is not allowed here" share one code path.

States progress strictly forward::

    MAJOR_INIT -> MAJOR_LEADING_ZERO | MAJOR_DEFAULT
    -> MINOR_INIT -> MINOR_LEADING_ZERO | MINOR_DEFAULT
    -> PATCH_INIT -> PATCH_LEADING_ZERO | PATCH_DEFAULT
    -> [PRERELEASE_INIT on '-'] -> [BUILDMD_INIT on '+'] -> END
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import IllegalLeadingZeroError, InvalidVersionError, unexpected
from .identifiers import BUILD_METADATA, DIGITS, EOS, PRERELEASE, scan_identifiers

# Numeric states are encoded as field * 3 + phase
MAJOR_INIT = 0
MAJOR_LEADING_ZERO = 1
MAJOR_DEFAULT = 2
MINOR_INIT = 3
MINOR_LEADING_ZERO = 4
MINOR_DEFAULT = 5
PATCH_INIT = 6
PATCH_LEADING_ZERO = 7
PATCH_DEFAULT = 8
PRERELEASE_INIT = 9
BUILDMD_INIT = 10
END = 11

_INIT = 0
_LEADING_ZERO = 1
_DEFAULT = 2

FIELD_NAMES = ("major", "minor", "patch")


@dataclass(frozen=True, slots=True)
class VersionFields:
    """Raw components produced by :func:`scan_version`."""

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()


def _leave_number(text: str, field: int, c: Optional[str]) -> int:
    """Return the state entered when numeric ``field`` is terminated by ``c``."""
    if field < 2:
        if c == ".":
            return (field + 1) * 3
        raise unexpected(text, c)

    if c == "-":
        return PRERELEASE_INIT
    if c == "+":
        return BUILDMD_INIT
    if c is EOS:
        return END
    raise unexpected(text, c)


def scan_version(text: str) -> VersionFields:
    """Parse ``text`` and return its components.

    Args:
        text: The complete version string

    Returns:
        The parsed fields

    Raises:
        UnexpectedCharacterError: On the first character not allowed at its position
        IncompleteVersionPartError: If the input ends inside a part or a part is empty
        IllegalLeadingZeroError: If a numeric part starts with a superfluous zero
    """
    numbers = [0, 0, 0]
    prerelease: list[str] = []
    build: list[str] = []

    length = len(text)
    state = MAJOR_INIT
    i = 0

    while state != END:
        c = text[i] if i < length else EOS

        if state < PRERELEASE_INIT:
            field, phase = divmod(state, 3)

            if phase == _INIT:
                if c == "0":
                    state += _LEADING_ZERO
                elif c in DIGITS:
                    numbers[field] = int(c)
                    state += _DEFAULT
                else:
                    raise unexpected(text, c)
            elif c in DIGITS:
                if phase == _LEADING_ZERO:
                    raise IllegalLeadingZeroError(text, FIELD_NAMES[field])
                numbers[field] = numbers[field] * 10 + int(c)
            else:
                state = _leave_number(text, field, c)

        elif state == PRERELEASE_INIT:
            prerelease, i = scan_identifiers(
                text,
                i,
                allow_leading_zero=False,
                allow_plus_transition=True,
                component=PRERELEASE,
            )
            # i points at the '+' or at the end of the input
            state = BUILDMD_INIT if i < length else END

        elif state == BUILDMD_INIT:
            build, i = scan_identifiers(
                text,
                i,
                allow_leading_zero=True,
                allow_plus_transition=False,
                component=BUILD_METADATA,
            )
            state = END

        i += 1

    return VersionFields(
        major=numbers[0],
        minor=numbers[1],
        patch=numbers[2],
        prerelease=tuple(prerelease),
        build=tuple(build),
    )


def check_version(text: str) -> bool:
    """Return True if ``text`` is a valid semantic version. Never raises."""
    if not isinstance(text, str):
        return False
    try:
        scan_version(text)
    except InvalidVersionError:
        return False
    return True
