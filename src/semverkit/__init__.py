# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and derivation.

This package implements the SemVer 2.0.0 grammar with a hand-written state
machine parser that reports the exact reason a string was rejected, the
SemVer precedence rules, and operations to derive new versions.

Example:
    >>> from semverkit import parse_version, compare_versions, is_valid_version
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> str(version.next_prerelease())
    '1.2.3-alpha.2+build.456'
    >>>
    >>> is_valid_version("1.0.0")
    True
    >>>
    >>> compare_versions("1.0.0", "2.0.0")
    -1
"""

import logging

__version__ = "0.1.0"

from .errors import (
    InvalidVersionError,
    UnexpectedCharacterError,
    IncompleteVersionPartError,
    IllegalLeadingZeroError,
    InvalidArgumentError,
)
from .config import VersionPolicy, DEFAULT_POLICY
from .semver import (
    Version,
    create,
    parse_version,
    is_valid_version,
    is_valid_prerelease,
    is_valid_build_metadata,
    COMPLIANCE,
    ZERO,
)
from .precedence import (
    compare,
    compare_with_build_metadata,
)
from .comparison import (
    compare_versions,
    version_key,
    natural_order_key,
    build_metadata_order_key,
    max_version,
    min_version,
    sort_versions,
)
from .legacy import from_legacy, to_legacy

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "InvalidVersionError",
    "UnexpectedCharacterError",
    "IncompleteVersionPartError",
    "IllegalLeadingZeroError",
    "InvalidArgumentError",
    # Configuration
    "VersionPolicy",
    "DEFAULT_POLICY",
    # Version parsing and construction
    "Version",
    "create",
    "parse_version",
    "is_valid_version",
    "is_valid_prerelease",
    "is_valid_build_metadata",
    "COMPLIANCE",
    "ZERO",
    # Version comparison
    "compare",
    "compare_with_build_metadata",
    "compare_versions",
    "version_key",
    "natural_order_key",
    "build_metadata_order_key",
    "max_version",
    "min_version",
    "sort_versions",
    # Legacy records
    "from_legacy",
    "to_legacy",
]
