# SPDX-License-Identifier: MIT
"""Validation policy for version construction."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class VersionPolicy:
    """Rules applied by :func:`~semverkit.parse_version` and :func:`~semverkit.create`.

    Attributes:
        allow_zero_version: Accept ``0.0.0``. SemVer 2.0.0 permits it; older
            releases of this library rejected it.
    """

    allow_zero_version: bool = True

    @classmethod
    def from_env(cls) -> "VersionPolicy":
        """Create a policy from environment variables."""
        return cls(
            allow_zero_version=os.getenv("SEMVERKIT_ALLOW_ZERO_VERSION", "true").lower()
            != "false",
        )


DEFAULT_POLICY = VersionPolicy()
