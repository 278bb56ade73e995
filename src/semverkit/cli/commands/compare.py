# SPDX-License-Identifier: MIT
"""Compare two versions."""

from __future__ import annotations

import click

from ...errors import InvalidArgumentError, InvalidVersionError
from ...precedence import compare as compare_natural
from ...precedence import compare_with_build_metadata
from ...semver import parse_version
from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("first")
@click.argument("second")
@click.option(
    "--with-build-metadata",
    is_flag=True,
    help="Break ties on build metadata.",
)
@pass_context
def compare(ctx: Context, first: str, second: str, with_build_metadata: bool) -> None:
    """Print -1, 0 or 1 depending on whether FIRST is lower, equal or greater than SECOND.

    \b
    Examples:
        semverkit compare 1.0.0-alpha 1.0.0
        semverkit compare --with-build-metadata 1.0.0+1 1.0.0+2
    """
    try:
        policy = ctx.load_policy()
        v1 = parse_version(first, policy=policy)
        v2 = parse_version(second, policy=policy)
    except (InvalidVersionError, InvalidArgumentError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if with_build_metadata:
        result = compare_with_build_metadata(v1, v2)
    else:
        result = compare_natural(v1, v2)
    echo_info(str(result))
