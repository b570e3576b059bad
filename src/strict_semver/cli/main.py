# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click

from ..errors import SemanticVersionError
from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.json_output: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    @property
    def output(self) -> str:
        """Effective output format; --json overrides the config file."""
        if self.json_output:
            return "json"
        return self.load_config().output


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


def echo_json(data: Any) -> None:
    """Print data as indented JSON."""
    click.echo(json.dumps(data, indent=2))


@click.group()
@click.version_option(package_name="strict-semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read pyproject.toml from this directory instead of the current one.",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Print results as JSON.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path], json_output: bool) -> None:
    """Parse, compare and sort Semantic Versioning 2.0.0 versions.

    \b
    Examples:
        semver parse 1.2.3-alpha.1+build.5
        semver compare 1.0.0-rc.1 1.0.0
        semver sort 1.0.0 1.0.0-beta 0.9.0
        semver check
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.verbose = verbose
    ctx.project_dir = directory
    ctx.json_output = json_output


# Import and register commands
from .commands import check, compare, parse, sort

cli.add_command(parse.parse)
cli.add_command(compare.compare)
cli.add_command(sort.sort)
cli.add_command(check.check)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, SemanticVersionError) as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
