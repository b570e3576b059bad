# SPDX-License-Identifier: MIT
"""Subcommands of the semver CLI."""
