# SPDX-License-Identifier: MIT
"""Validate versions, pre-release or build metadata literals."""

from __future__ import annotations

import click

from ...semver import is_valid_build_metadata, is_valid_prerelease, is_valid_version
from ..main import Context, echo_error, echo_success, pass_context


@click.command()
@click.argument("values", nargs=-1, required=True)
@click.option(
    "--kind",
    type=click.Choice(["version", "prerelease", "build"]),
    default="version",
    show_default=True,
    help="What the values are expected to be.",
)
@pass_context
def validate(ctx: Context, values: tuple[str, ...], kind: str) -> None:
    """Check that every value is valid.

    Exits with status 1 and lists the offending values if any is invalid.

    \b
    Examples:
        semverkit validate 1.0.0 2.0.0-rc.1
        semverkit validate --kind prerelease alpha.1
    """
    if kind == "prerelease":
        check = is_valid_prerelease
    elif kind == "build":
        check = is_valid_build_metadata
    else:
        policy = ctx.load_policy()

        def check(value: str) -> bool:
            return is_valid_version(value, policy=policy)

    invalid = [value for value in values if not check(value)]

    if invalid:
        for value in invalid:
            echo_error(f"'{value}' is not a valid {kind}")
        raise SystemExit(1)

    echo_success(f"Validation passed ({len(values)} checked)")
