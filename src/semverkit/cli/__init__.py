# SPDX-License-Identifier: MIT
"""Command line interface for semverkit."""

from .main import cli, main

__all__ = ["cli", "main"]
