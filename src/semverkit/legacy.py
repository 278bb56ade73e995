# SPDX-License-Identifier: MIT
"""Import of versions stored by earlier format revisions.

Older releases persisted a version as a record with the keys ``major``,
``minor``, ``patch``, ``preRelease`` and ``buildMetaData``, where the two
identifier fields were dot-joined literals and could be missing or null.
Those records are converted through :func:`~semverkit.create`, so they get the
same validation as any other version. Current data should be stored as
``str(version)`` and read back with :func:`~semverkit.parse_version`.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from .errors import InvalidArgumentError
from .semver import Version, create

logger = logging.getLogger(__name__)

LEGACY_NUMERIC_KEYS = ("major", "minor", "patch")
LEGACY_PRERELEASE_KEY = "preRelease"
LEGACY_BUILD_KEY = "buildMetaData"


def from_legacy(record: Mapping[str, Any]) -> Version:
    """Convert a legacy version record into a Version.

    Args:
        record: Mapping in the legacy layout

    Returns:
        The equivalent Version

    Raises:
        InvalidArgumentError: If the record is not a mapping or lacks a number
        InvalidVersionError: If an identifier field violates the grammar

    Examples:
        >>> str(from_legacy({"major": 1, "minor": 0, "patch": 0, "preRelease": "rc.1"}))
        '1.0.0-rc.1'
    """
    if not isinstance(record, Mapping):
        raise InvalidArgumentError(
            f"Legacy version record must be a mapping, got {type(record).__name__}"
        )

    missing = [key for key in LEGACY_NUMERIC_KEYS if key not in record]
    if missing:
        raise InvalidArgumentError(
            f"Legacy version record is missing: {', '.join(missing)}"
        )

    version = create(
        record["major"],
        record["minor"],
        record["patch"],
        record.get(LEGACY_PRERELEASE_KEY) or "",
        record.get(LEGACY_BUILD_KEY) or "",
    )
    logger.debug("Converted legacy version record to %s", version)
    return version


def to_legacy(version: Version) -> dict[str, Any]:
    """Write a Version in the legacy record layout."""
    return {
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        LEGACY_PRERELEASE_KEY: version.prerelease,
        LEGACY_BUILD_KEY: version.build,
    }
