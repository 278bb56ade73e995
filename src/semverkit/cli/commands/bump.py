# SPDX-License-Identifier: MIT
"""Derive the next version."""

from __future__ import annotations

from typing import Optional

import click

from ...errors import InvalidArgumentError, InvalidVersionError
from ...semver import parse_version
from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("version")
@click.argument(
    "part",
    type=click.Choice(["major", "minor", "patch", "prerelease", "build"]),
)
@click.option(
    "--pre",
    "prerelease",
    default=None,
    help="Pre-release for the new version (major, minor and patch only).",
)
@pass_context
def bump(ctx: Context, version: str, part: str, prerelease: Optional[str]) -> None:
    """Print the version that follows VERSION when PART is incremented.

    \b
    Examples:
        semverkit bump 1.2.3 minor              # 1.3.0
        semverkit bump 1.2.3 major --pre rc.1   # 2.0.0-rc.1
        semverkit bump 1.2.3-rc.1 prerelease    # 1.2.3-rc.2
    """
    if prerelease is not None and part in ("prerelease", "build"):
        echo_error(f"--pre cannot be combined with {part}")
        raise SystemExit(1)

    try:
        current = parse_version(version, policy=ctx.load_policy())
        if part == "major":
            result = current.next_major(prerelease or "")
        elif part == "minor":
            result = current.next_minor(prerelease or "")
        elif part == "patch":
            result = current.next_patch(prerelease or "")
        elif part == "prerelease":
            result = current.next_prerelease()
        else:
            result = current.next_build_metadata()
    except (InvalidVersionError, InvalidArgumentError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(result))
