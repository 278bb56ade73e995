# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import click

from ...comparison import sort_versions
from ...errors import InvalidArgumentError, InvalidVersionError
from ...semver import parse_version
from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Sort from highest to lowest.")
@click.option(
    "--with-build-metadata",
    is_flag=True,
    help="Break ties on build metadata.",
)
@pass_context
def sort(
    ctx: Context, versions: tuple[str, ...], reverse: bool, with_build_metadata: bool
) -> None:
    """Print VERSIONS sorted by precedence, one per line.

    \b
    Examples:
        semverkit sort 2.0.0 1.0.0-rc.1 1.0.0
        semverkit sort -r 1.0.0+b 1.0.0+a --with-build-metadata
    """
    policy = ctx.load_policy()
    try:
        parsed = [parse_version(v, policy=policy) for v in versions]
        result = sort_versions(
            parsed, with_build_metadata=with_build_metadata, reverse=reverse
        )
    except (InvalidVersionError, InvalidArgumentError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in result:
        echo_info(str(version))
