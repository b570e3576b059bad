# SPDX-License-Identifier: MIT
"""Exceptions raised by semantic version construction and parsing."""

from __future__ import annotations

from typing import Any


class SemanticVersionError(Exception):
    """Base class for all errors raised by strict_semver."""

    pass


class VersionArgumentError(SemanticVersionError, ValueError):
    """Raised when a caller passes an invalid argument to a Version.

    This covers structural preconditions (negative or non-integer
    major/minor/patch, non-string pre-release or build) rather than
    malformed version text.
    """

    def __init__(self, argument: str, value: Any, message: str = ""):
        self.argument = argument
        self.value = value
        self.message = message or f"Invalid value for {argument}: {value!r}"
        super().__init__(self.message)


class VersionFormatError(SemanticVersionError, ValueError):
    """Raised when text does not follow the SemVer 2.0.0 grammar."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class VersionOverflowError(VersionFormatError, OverflowError):
    """Raised when a major, minor or patch number is too large."""

    pass
