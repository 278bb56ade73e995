# SPDX-License-Identifier: MIT
"""Show the components of a version."""

from __future__ import annotations

import json

import click

from ...errors import InvalidArgumentError, InvalidVersionError
from ...semver import parse_version
from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Print the components as JSON.")
@pass_context
def parse(ctx: Context, version: str, as_json: bool) -> None:
    """Parse VERSION and print its components.

    \b
    Examples:
        semverkit parse 1.2.3-rc.1+build.5
        semverkit parse --json 2.0.0
    """
    try:
        parsed = parse_version(version, policy=ctx.load_policy())
    except (InvalidVersionError, InvalidArgumentError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    data = {
        "major": parsed.major,
        "minor": parsed.minor,
        "patch": parsed.patch,
        "prerelease": list(parsed.prerelease_parts),
        "build": list(parsed.build_parts),
    }

    if as_json:
        echo_info(json.dumps(data, indent=2))
        return

    for key, value in data.items():
        if isinstance(value, list):
            value = ".".join(value) or "-"
        echo_info(f"{key}: {value}")
