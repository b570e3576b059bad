# SPDX-License-Identifier: MIT
"""Semantic version value and parser.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

Parsing is strict SemVer 2.0.0: no surrounding whitespace, no ``v`` prefix,
no leading zeros in numeric fields.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .compare import compare
from .errors import (
    SemanticVersionError,
    VersionArgumentError,
    VersionFormatError,
    VersionOverflowError,
)
from .validation import MAX_COMPONENT, check_component, validate_build, validate_prerelease

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Instances are validated on construction and immutable afterwards.
    Equality, hashing and ordering ignore build metadata.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., "alpha.1", "rc.2"), "" for none
        build: Build metadata (e.g., "build.123", "20240101"), "" for none
    """

    major: int
    minor: int
    patch: int
    prerelease: str = ""
    build: str = ""

    def __post_init__(self) -> None:
        check_component("major", self.major)
        check_component("minor", self.minor)
        check_component("patch", self.patch)

        if not isinstance(self.prerelease, str):
            raise VersionArgumentError(
                "prerelease",
                self.prerelease,
                f"prerelease must be a str, got {type(self.prerelease).__name__}",
            )
        if not isinstance(self.build, str):
            raise VersionArgumentError(
                "build", self.build, f"build must be a str, got {type(self.build).__name__}"
            )

        if self.prerelease:
            validate_prerelease(self.prerelease)
        if self.build:
            validate_build(self.build)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_fields() == other._precedence_fields()

    def __hash__(self) -> int:
        return hash(self._precedence_fields())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0

    def _precedence_fields(self) -> tuple[int, int, int, str]:
        return (self.major, self.minor, self.patch, self.prerelease)

    def compare_to(self, other: Any) -> int:
        """Compare with another Version.

        Returns:
            -1, 0 or 1 as this version precedes, equals or follows ``other``

        Raises:
            VersionArgumentError: If ``other`` is not a Version
        """
        if not isinstance(other, Version):
            raise VersionArgumentError(
                "other", other, f"Cannot compare Version with {type(other).__name__}"
            )
        return compare(self, other)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated pre-release identifiers."""
        return tuple(self.prerelease.split(".")) if self.prerelease else ()

    @property
    def build_identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated build metadata identifiers."""
        return tuple(self.build.split(".")) if self.build else ()

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    @classmethod
    def try_parse(cls, version_string: Any) -> tuple[bool, "Version"]:
        """Parse without raising. See :func:`try_parse_version`."""
        return try_parse_version(version_string)


def _parse_component(name: str, text: str, version_string: str) -> int:
    """Parse a major, minor or patch field."""
    if not text or not (text.isascii() and text.isdigit()):
        raise VersionFormatError(
            version_string, f"{name} '{text}' is not a valid non-negative integer"
        )
    if len(text) > 1 and text.startswith("0"):
        raise VersionFormatError(version_string, f"{name} '{text}' must not have a leading zero")

    if len(text) > len(str(MAX_COMPONENT)):
        raise VersionOverflowError(
            version_string,
            f"{name} has {len(text)} digits and exceeds the maximum of {MAX_COMPONENT}",
        )

    value = int(text)
    if value > MAX_COMPONENT:
        raise VersionOverflowError(
            version_string, f"{name} {text} exceeds the maximum of {MAX_COMPONENT}"
        )
    return value


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    The string is scanned once, recording the first and second periods,
    the first hyphen seen before any plus sign, and the first plus sign.
    A hyphen after the plus belongs to the build metadata.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        VersionFormatError: If the string does not follow semantic versioning
        VersionOverflowError: If a numeric field is too large

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease='', build='')

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease='rc.1', build='build.456')
    """
    if not isinstance(version_string, str):
        raise VersionFormatError(
            f"<{type(version_string).__name__}>",
            f"Version must be a string, got {type(version_string).__name__}",
        )

    first_period = second_period = hyphen = plus = -1
    for index, char in enumerate(version_string):
        if char == ".":
            if first_period == -1:
                first_period = index
            elif second_period == -1:
                second_period = index
        elif char == "-":
            if hyphen == -1 and plus == -1:
                hyphen = index
        elif char == "+":
            if plus == -1:
                plus = index

    if first_period == -1 or second_period == -1:
        raise VersionFormatError(
            version_string,
            "Version must consist of major, minor and patch numbers separated by periods",
        )

    # a hyphen or plus ahead of the second period leaves no room for patch
    end_of_patch = hyphen if hyphen != -1 else plus
    if end_of_patch != -1 and end_of_patch < second_period:
        raise VersionFormatError(
            version_string, "Pre-release or build metadata must follow the patch number"
        )

    major = _parse_component("major", version_string[:first_period], version_string)
    minor = _parse_component(
        "minor", version_string[first_period + 1 : second_period], version_string
    )

    if hyphen == -1 and plus == -1:
        patch_text, prerelease, build = version_string[second_period + 1 :], "", ""
    elif plus == -1:
        patch_text = version_string[second_period + 1 : hyphen]
        prerelease, build = version_string[hyphen + 1 :], ""
    elif hyphen == -1:
        patch_text = version_string[second_period + 1 : plus]
        prerelease, build = "", version_string[plus + 1 :]
    else:
        patch_text = version_string[second_period + 1 : hyphen]
        prerelease, build = version_string[hyphen + 1 : plus], version_string[plus + 1 :]

    patch = _parse_component("patch", patch_text, version_string)

    # "1.0.0-" and "1.0.0+" open a field and leave it empty; rejected rather
    # than read as "no pre-release" or "no build"
    if hyphen != -1 and not prerelease:
        raise VersionFormatError(version_string, "Pre-release must not be empty")
    if plus != -1 and not build:
        raise VersionFormatError(version_string, "Build metadata must not be empty")

    try:
        return Version(major, minor, patch, prerelease, build)
    except VersionFormatError as e:
        raise VersionFormatError(version_string, e.message) from e


def try_parse_version(version_string: Any) -> tuple[bool, Version]:
    """Parse a version string without raising.

    Returns:
        ``(True, version)`` on success, ``(False, Version(0, 0, 0))`` otherwise

    Examples:
        >>> try_parse_version("1.0.0-beta")
        (True, Version(major=1, minor=0, patch=0, prerelease='beta', build=''))
        >>> try_parse_version("1.0")[0]
        False
    """
    try:
        return True, parse_version(version_string)
    except SemanticVersionError as e:
        logger.debug("Rejected version %r: %s", version_string, e)
        return False, Version(0, 0, 0)


def is_valid_semver(version_string: Any) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    return try_parse_version(version_string)[0]
