# SPDX-License-Identifier: MIT
"""CLI entry point for the semverkit command."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from ..config import VersionPolicy
from ..errors import InvalidArgumentError, InvalidVersionError


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.policy: Optional[VersionPolicy] = None
        self.verbose: bool = False

    def load_policy(self) -> VersionPolicy:
        """Load the validation policy, caching the result."""
        if self.policy is None:
            self.policy = VersionPolicy.from_env()
        return self.policy


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="semverkit")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """Semantic version toolkit.

    Parse, validate, compare, sort and bump SemVer 2.0.0 versions.

    \b
    Examples:
        semverkit parse 1.2.3-rc.1+build.5
        semverkit validate 1.0.0 1.01.0
        semverkit compare 1.0.0-alpha 1.0.0
        semverkit bump 1.2.3 minor
        semverkit sort 2.0.0 1.0.0-rc.1 1.0.0
    """
    ctx.verbose = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


# Import and register commands
from .commands import parse, validate, compare, bump, sort

cli.add_command(parse.parse)
cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(bump.bump)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (InvalidVersionError, InvalidArgumentError) as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
