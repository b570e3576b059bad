# SPDX-License-Identifier: MIT
"""Parse versions and print their components."""

from __future__ import annotations

import sys

import click

from ...errors import SemanticVersionError
from ...semver import Version, parse_version
from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_json, pass_context


def version_to_dict(version: Version) -> dict[str, object]:
    """Return the components of a version as a JSON-ready dict."""
    return {
        "version": str(version),
        "major": version.major,
        "minor": version.minor,
        "patch": version.patch,
        "prerelease": version.prerelease,
        "build": version.build,
    }


@click.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def parse(ctx: Context, versions: tuple[str, ...]) -> None:
    """Parse one or more versions and show their components.

    \b
    Examples:
        semver parse 1.2.3
        semver --json parse 1.0.0-alpha.1+build.5 2.0.0
    """
    try:
        output = ctx.output
        parsed = [parse_version(text) for text in versions]
    except (ConfigError, SemanticVersionError) as e:
        echo_error(str(e))
        sys.exit(1)

    if output == "json":
        echo_json([version_to_dict(version) for version in parsed])
        return

    for version in parsed:
        echo_info(str(version))
        echo_info(f"  major:      {version.major}")
        echo_info(f"  minor:      {version.minor}")
        echo_info(f"  patch:      {version.patch}")
        echo_info(f"  prerelease: {version.prerelease or '-'}")
        echo_info(f"  build:      {version.build or '-'}")
