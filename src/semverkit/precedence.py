# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0 section 11.

Natural order compares MAJOR, MINOR and PATCH numerically, then ranks a
version without pre-release above one with a pre-release, then compares the
pre-release identifiers one by one. Build metadata is ignored.

The build metadata aware order breaks ties of the natural order by applying
the same identifier comparison to the build metadata. It is inconsistent with
equality: two versions may be equal and still differ in that order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .errors import InvalidArgumentError, require
from .identifiers import is_numeric_identifier

if TYPE_CHECKING:
    from .semver import Version


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _compare_parts(p1: str, p2: str) -> int:
    num1 = is_numeric_identifier(p1)
    num2 = is_numeric_identifier(p2)

    if num1 and num2:
        return _sign(int(p1) - int(p2))
    if num1:
        # Numeric identifiers have lower precedence than alphanumeric ones
        return -1
    if num2:
        return 1
    if p1 == p2:
        return 0
    return -1 if p1 < p2 else 1


def compare_identifiers(parts1: Sequence[str], parts2: Sequence[str]) -> int:
    """Compare two identifier lists.

    An empty list ranks above any non-empty one (a release is greater than
    its pre-releases). Otherwise identifiers are compared position by position
    and, if all shared positions are equal, the longer list is greater.

    Returns:
        -1, 0 or 1
    """
    if not parts1 and not parts2:
        return 0
    if not parts1:
        return 1
    if not parts2:
        return -1

    for p1, p2 in zip(parts1, parts2):
        result = _compare_parts(p1, p2)
        if result != 0:
            return result

    return _sign(len(parts1) - len(parts2))


def _check_operands(v1: Version, v2: Version) -> None:
    # Imported here, semver imports this module
    from .semver import Version

    for name, value in (("v1", v1), ("v2", v2)):
        require(value is not None, f"{name} is None")
        if not isinstance(value, Version):
            raise InvalidArgumentError(
                f"{name} must be a Version, got {type(value).__name__}"
            )


def _compare(v1: Version, v2: Version, with_build_metadata: bool) -> int:
    if v1 is v2:
        return 0

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    result = compare_identifiers(v1.prerelease_parts, v2.prerelease_parts)
    if result == 0 and with_build_metadata:
        result = compare_identifiers(v1.build_parts, v2.build_parts)
    return result


def compare(v1: Version, v2: Version) -> int:
    """Compare two versions by natural order, ignoring build metadata.

    Returns:
        -1 if v1 < v2, 0 if they have the same precedence, 1 if v1 > v2

    Raises:
        InvalidArgumentError: If either version is None or not a Version
    """
    _check_operands(v1, v2)
    return _compare(v1, v2, False)


def compare_with_build_metadata(v1: Version, v2: Version) -> int:
    """Compare two versions by natural order, breaking ties on build metadata.

    Raises:
        InvalidArgumentError: If either version is None or not a Version
    """
    _check_operands(v1, v2)
    return _compare(v1, v2, True)
