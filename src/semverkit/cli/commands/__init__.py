# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import parse, validate, compare, bump, sort

__all__ = ["parse", "validate", "compare", "bump", "sort"]
