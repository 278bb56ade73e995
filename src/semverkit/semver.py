# SPDX-License-Identifier: MIT
"""Semantic version values.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Every way of obtaining a :class:`Version` runs the identifier grammar from
:mod:`semverkit.identifiers`; derived versions are never produced by
formatting a string and parsing it again.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Union

from .config import DEFAULT_POLICY, VersionPolicy
from .errors import (
    IncompleteVersionPartError,
    InvalidArgumentError,
    InvalidVersionError,
    require,
)
from .identifiers import (
    BUILD_METADATA,
    PRERELEASE,
    check_identifiers,
    increment_identifiers,
    join_identifiers,
    validate_identifiers,
)
from .parser import check_version, scan_version
from .precedence import compare, compare_with_build_metadata

# A dot-separated literal such as "alpha.1" or an iterable of identifiers
Identifiers = Union[str, Iterable[str]]


def _check_number(value: int, name: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an int, got {type(value).__name__}")
    require(value >= 0, f"{name} < 0")


def _to_parts(value: Identifiers, allow_leading_zero: bool, component: str) -> tuple[str, ...]:
    """Validate ``value`` and return it as a tuple of identifiers.

    Iterables are copied and dot-joined before validation, so an element
    containing dots is the same as passing its pieces separately. An empty
    element is rejected; an empty iterable clears the field.
    """
    require(value is not None, f"{component} is None")
    if isinstance(value, str):
        literal = value
    else:
        parts = tuple(value)
        for part in parts:
            if not isinstance(part, str):
                raise InvalidArgumentError(
                    f"{component} identifiers must be strings, got {type(part).__name__}"
                )
        literal = join_identifiers(parts)
        # [""] would join to the literal for "no identifiers"
        if "" in parts:
            raise IncompleteVersionPartError(literal)
    return validate_identifiers(
        literal, allow_leading_zero=allow_leading_zero, component=component
    )


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Equality, hashing and the ``<``/``>`` operators follow natural order and
    ignore build metadata. Use :meth:`equals_with_build_metadata` or
    :func:`~semverkit.precedence.compare_with_build_metadata` to take it
    into account.

    ``prerelease_parts`` and ``build_parts`` also accept a dot-separated
    string or any iterable of strings; they are validated and stored as
    tuples.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease_parts: Pre-release identifiers (e.g., ``("alpha", "1")``)
        build_parts: Build metadata identifiers (e.g., ``("build", "123")``)
    """

    major: int
    minor: int
    patch: int
    prerelease_parts: tuple[str, ...] = ()
    build_parts: tuple[str, ...] = ()
    _hash: Optional[int] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        _check_number(self.major, "major")
        _check_number(self.minor, "minor")
        _check_number(self.patch, "patch")
        object.__setattr__(
            self, "prerelease_parts", _to_parts(self.prerelease_parts, False, PRERELEASE)
        )
        object.__setattr__(
            self, "build_parts", _to_parts(self.build_parts, True, BUILD_METADATA)
        )

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease_parts:
            version += f"-{self.prerelease}"
        if self.build_parts:
            version += f"+{self.build}"
        return version

    def __hash__(self) -> int:
        h = self._hash
        if h is None:
            h = hash((self.major, self.minor, self.patch, self.prerelease_parts))
            object.__setattr__(self, "_hash", h)
        return h

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0

    @property
    def prerelease(self) -> str:
        """Return the pre-release literal, or an empty string."""
        return join_identifiers(self.prerelease_parts)

    @property
    def build(self) -> str:
        """Return the build metadata literal, or an empty string."""
        return join_identifiers(self.build_parts)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease_parts)

    @property
    def is_stable(self) -> bool:
        return not self.prerelease_parts

    @property
    def has_build_metadata(self) -> bool:
        return bool(self.build_parts)

    @property
    def is_initial_development(self) -> bool:
        """Return True for 0.y.z versions, whose public API is not yet stable."""
        return self.major == 0

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare_to(self, other: Version) -> int:
        return compare(self, other)

    def compare_to_with_build_metadata(self, other: Version) -> int:
        return compare_with_build_metadata(self, other)

    def equals_with_build_metadata(self, other: object) -> bool:
        """Return True if ``other`` is equal including its build metadata."""
        return isinstance(other, Version) and compare_with_build_metadata(self, other) == 0

    def is_greater_than(self, other: Version) -> bool:
        require(other is not None, "other is None")
        return compare(self, other) > 0

    def is_lower_than(self, other: Version) -> bool:
        require(other is not None, "other is None")
        return compare(self, other) < 0

    def max(self, other: Version) -> Version:
        """Return the greater of both versions; ``self`` if they are equal."""
        require(other is not None, "other is None")
        return other if compare(self, other) < 0 else self

    def min(self, other: Version) -> Version:
        """Return the lower of both versions; ``self`` if they are equal."""
        require(other is not None, "other is None")
        return self if compare(self, other) <= 0 else other

    # -------------------------------------------------------------------------
    # Derivation
    # -------------------------------------------------------------------------

    def with_major(self, major: int) -> Version:
        return replace(self, major=major)

    def with_minor(self, minor: int) -> Version:
        return replace(self, minor=minor)

    def with_patch(self, patch: int) -> Version:
        return replace(self, patch=patch)

    def with_prerelease(self, prerelease: Identifiers) -> Version:
        """Return a copy with the given pre-release; ``""`` or ``[]`` removes it.

        Raises:
            InvalidVersionError: If the identifiers violate the grammar
            InvalidArgumentError: If ``prerelease`` is None
        """
        return replace(self, prerelease_parts=prerelease)

    def with_build_metadata(self, build: Identifiers) -> Version:
        """Return a copy with the given build metadata; ``""`` or ``[]`` removes it.

        Raises:
            InvalidVersionError: If the identifiers violate the grammar
            InvalidArgumentError: If ``build`` is None
        """
        return replace(self, build_parts=build)

    def next_major(self, prerelease: Identifiers = "") -> Version:
        """Return the next major version, e.g. 1.2.3-rc+b -> 2.0.0.

        Args:
            prerelease: Optional pre-release for the new version. Build
                metadata is always dropped.
        """
        return Version(self.major + 1, 0, 0, prerelease)

    def next_minor(self, prerelease: Identifiers = "") -> Version:
        """Return the next minor version, e.g. 1.2.3-rc+b -> 1.3.0."""
        return Version(self.major, self.minor + 1, 0, prerelease)

    def next_patch(self, prerelease: Identifiers = "") -> Version:
        """Return the next patch version, e.g. 1.2.3-rc+b -> 1.2.4."""
        return Version(self.major, self.minor, self.patch + 1, prerelease)

    def next_prerelease(self) -> Version:
        """Increment the pre-release, keeping build metadata.

        Examples:
            >>> str(create(1, 2, 3).next_prerelease())
            '1.2.3-1'
            >>> str(create(1, 2, 3, "rc.1").next_prerelease())
            '1.2.3-rc.2'
        """
        return replace(self, prerelease_parts=increment_identifiers(self.prerelease_parts))

    def next_build_metadata(self) -> Version:
        """Increment the build metadata the same way as :meth:`next_prerelease`."""
        return replace(self, build_parts=increment_identifiers(self.build_parts))

    def to_stable(self) -> Version:
        """Drop pre-release and build metadata."""
        return Version(self.major, self.minor, self.patch)

    def to_upper(self) -> Version:
        return replace(
            self,
            prerelease_parts=tuple(p.upper() for p in self.prerelease_parts),
            build_parts=tuple(p.upper() for p in self.build_parts),
        )

    def to_lower(self) -> Version:
        return replace(
            self,
            prerelease_parts=tuple(p.lower() for p in self.prerelease_parts),
            build_parts=tuple(p.lower() for p in self.build_parts),
        )


def _check_policy(version: Version, policy: Optional[VersionPolicy]) -> Version:
    policy = policy or DEFAULT_POLICY
    if not policy.allow_zero_version:
        require(
            version.major != 0 or version.minor != 0 or version.patch != 0,
            "all parts are 0",
        )
    return version


def create(
    major: int,
    minor: int,
    patch: int,
    prerelease: Identifiers = "",
    build: Identifiers = "",
    *,
    policy: Optional[VersionPolicy] = None,
) -> Version:
    """Create a version from its components.

    Args:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release literal or identifiers
        build: Build metadata literal or identifiers
        policy: Validation policy, defaults to :data:`~semverkit.config.DEFAULT_POLICY`

    Raises:
        InvalidArgumentError: If a number is negative or an argument is None
        InvalidVersionError: If an identifier violates the grammar

    Examples:
        >>> str(create(1, 0, 0, "beta.2", ["exp", "sha", "5114f85"]))
        '1.0.0-beta.2+exp.sha.5114f85'
    """
    return _check_policy(Version(major, minor, patch, prerelease, build), policy)


def parse_version(
    version_string: str,
    allow_prerelease: bool = True,
    *,
    policy: Optional[VersionPolicy] = None,
) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])
        allow_prerelease: If False, reject versions with pre-release or build
            metadata
        policy: Validation policy, defaults to :data:`~semverkit.config.DEFAULT_POLICY`

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning
        InvalidArgumentError: If ``version_string`` is None or not a string

    Examples:
        >>> parse_version("1.0.0-alpha.1").prerelease_parts
        ('alpha', '1')

        >>> str(parse_version("2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'
    """
    require(version_string is not None, "version_string is None")
    if not isinstance(version_string, str):
        raise InvalidArgumentError(
            f"Version must be a string, got {type(version_string).__name__}"
        )

    fields = scan_version(version_string)
    if not allow_prerelease and (fields.prerelease or fields.build):
        raise InvalidVersionError(
            version_string,
            f"Version string '{version_string}' is expected to have no "
            "pre-release or build meta data part",
        )

    version = Version(
        major=fields.major,
        minor=fields.minor,
        patch=fields.patch,
        prerelease_parts=fields.prerelease,
        build_parts=fields.build,
    )
    return _check_policy(version, policy)


def is_valid_version(version_string: str, *, policy: Optional[VersionPolicy] = None) -> bool:
    """Check if a string is a valid semantic version.

    Returns False instead of raising, also for None and non-string input.

    Examples:
        >>> is_valid_version("1.0.0-alpha")
        True
        >>> is_valid_version("1.0")
        False
    """
    if (policy or DEFAULT_POLICY).allow_zero_version:
        return check_version(version_string)
    try:
        parse_version(version_string, policy=policy)
    except (InvalidVersionError, InvalidArgumentError):
        return False
    return True


def is_valid_prerelease(prerelease: str) -> bool:
    """Check if a string is a valid pre-release literal (``""`` is valid)."""
    return check_identifiers(prerelease, allow_leading_zero=False)


def is_valid_build_metadata(build: str) -> bool:
    """Check if a string is a valid build metadata literal (``""`` is valid)."""
    return check_identifiers(build, allow_leading_zero=True)


# SemVer revision implemented by this package
COMPLIANCE = create(2, 0, 0)

ZERO = Version(0, 0, 0)
