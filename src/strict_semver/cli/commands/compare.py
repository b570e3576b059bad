# SPDX-License-Identifier: MIT
"""Compare two versions by precedence."""

from __future__ import annotations

import sys

import click

from ...compare import compare_versions
from ...errors import SemanticVersionError
from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_json, pass_context

_SYMBOLS = {-1: "<", 0: "=", 1: ">"}


@click.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Compare VERSION1 with VERSION2.

    Prints "<", "=" or ">". Build metadata does not affect the result.

    \b
    Examples:
        semver compare 1.0.0-alpha 1.0.0-alpha.1
        semver compare 1.0.0+build.1 1.0.0+build.2
    """
    try:
        output = ctx.output
        result = compare_versions(version1, version2)
    except (ConfigError, SemanticVersionError) as e:
        echo_error(str(e))
        sys.exit(1)

    if output == "json":
        echo_json({"version1": version1, "version2": version2, "result": result})
    else:
        echo_info(f"{version1} {_SYMBOLS[result]} {version2}")
