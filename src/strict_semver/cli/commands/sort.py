# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

import sys
from typing import Optional

import click

from ...compare import version_key
from ...errors import SemanticVersionError
from ...semver import parse_version
from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_json, pass_context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse/--no-reverse",
    default=None,
    help="Sort from highest to lowest precedence.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: Optional[bool]) -> None:
    """Print VERSIONS in precedence order, lowest first.

    Versions of equal precedence (e.g. differing only in build metadata)
    keep their input order.

    \b
    Examples:
        semver sort 1.0.0 1.0.0-rc.1 1.0.0-beta.11 1.0.0-beta.2
        semver sort --reverse 2.0.0 10.0.0 1.0.0
    """
    try:
        config = ctx.load_config()
        output = ctx.output
        parsed = [parse_version(text) for text in versions]
    except (ConfigError, SemanticVersionError) as e:
        echo_error(str(e))
        sys.exit(1)

    if reverse is None:
        reverse = config.reverse

    ordered = [str(version) for version in sorted(parsed, key=version_key, reverse=reverse)]

    if output == "json":
        echo_json(ordered)
    else:
        for version in ordered:
            echo_info(version)
