# SPDX-License-Identifier: MIT
"""Command-line interface for strict_semver."""

from .main import cli, main

__all__ = ["cli", "main"]
