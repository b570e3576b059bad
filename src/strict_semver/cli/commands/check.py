# SPDX-License-Identifier: MIT
"""Check that versions follow Semantic Versioning 2.0.0."""

from __future__ import annotations

import logging
import sys

import click

from ...errors import SemanticVersionError
from ...semver import parse_version
from ..config import ConfigError
from ..main import Context, echo_error, echo_json, echo_success, pass_context

logger = logging.getLogger(__name__)


def _check_version(version: str) -> str:
    """Return the reason ``version`` is invalid, or "" if it is valid."""
    try:
        parse_version(version)
    except SemanticVersionError as e:
        return str(e)
    return ""


@click.command()
@click.argument("versions", nargs=-1)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that VERSIONS are valid semantic versions.

    With no arguments, checks [project].version in pyproject.toml.
    Exits with status 1 if any version is invalid.

    \b
    Examples:
        semver check 1.0.0 1.0.0-01
        semver -C path/to/project check
    """
    try:
        config = ctx.load_config()
        output = ctx.output
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)

    if not versions:
        if not config.version:
            echo_error(f"No versions given and no [project].version in {config.project_dir}")
            sys.exit(1)
        logger.debug("Checking [project].version from %s", config.project_dir)
        versions = (config.version,)

    results = [(version, _check_version(version)) for version in versions]
    failed = any(reason for _, reason in results)

    if output == "json":
        echo_json(
            [
                {"version": version, "valid": not reason, "error": reason or None}
                for version, reason in results
            ]
        )
    else:
        for version, reason in results:
            if reason:
                echo_error(f"{version}: {reason}")
            else:
                echo_success(f"{version}: valid")

    if failed:
        sys.exit(1)
