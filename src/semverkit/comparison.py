# SPDX-License-Identifier: MIT
"""Convenience helpers for comparing and sorting versions.

Strings are parsed on the fly, so these helpers accept both ``"1.2.3"`` and
``Version`` objects. Build metadata is ignored unless stated otherwise.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Union

from .errors import require
from .identifiers import is_numeric_identifier
from .precedence import compare, compare_with_build_metadata
from .semver import Version, parse_version

VersionLike = Union[str, Version]

# Sort keys for sorted(), min() and max()
natural_order_key = cmp_to_key(compare)
build_metadata_order_key = cmp_to_key(compare_with_build_metadata)


def _coerce(version: VersionLike) -> Version:
    require(version is not None, "version is None")
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions by natural order.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.beta", "1.0.0-alpha.1")
        1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    return compare(_coerce(version1), _coerce(version2))


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    The key orders exactly like :func:`~semverkit.precedence.compare`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Releases sort after all of their pre-releases
    if not v.prerelease_parts:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease_parts:
            if is_numeric_identifier(part):
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def max_version(version1: VersionLike, version2: VersionLike) -> Version:
    """Return the greater version; the first one if both are equal."""
    return _coerce(version1).max(_coerce(version2))


def min_version(version1: VersionLike, version2: VersionLike) -> Version:
    """Return the lower version; the first one if both are equal."""
    return _coerce(version1).min(_coerce(version2))


def sort_versions(
    versions: Iterable[VersionLike],
    *,
    with_build_metadata: bool = False,
    reverse: bool = False,
) -> list[Version]:
    """Parse and sort versions.

    Args:
        versions: Version strings or Version objects
        with_build_metadata: Break ties on build metadata
        reverse: Sort descending

    Returns:
        The sorted versions. The sort is stable, so versions of equal
        precedence keep their input order.
    """
    key = build_metadata_order_key if with_build_metadata else natural_order_key
    return sorted((_coerce(v) for v in versions), key=key, reverse=reverse)
