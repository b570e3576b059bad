# SPDX-License-Identifier: MIT
"""Grammar checks for version components.

Pre-release and build metadata are dot-separated identifiers made of
``[0-9A-Za-z-]``. Pre-release numeric identifiers additionally must not
carry a leading zero, so ``0`` is valid but ``01`` is not.
"""

from __future__ import annotations

import enum
import string

from .errors import VersionArgumentError, VersionFormatError, VersionOverflowError

# Largest value accepted for major, minor and patch (signed 32-bit).
MAX_COMPONENT = 2**31 - 1

IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")


class IdentifierKind(enum.Enum):
    """Which dot-separated field an identifier string belongs to."""

    PRERELEASE = "pre-release"
    BUILD = "build metadata"


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the identifier consists only of ASCII digits."""
    return bool(identifier) and identifier.isascii() and identifier.isdigit()


def validate_identifiers(text: str, kind: IdentifierKind) -> None:
    """Check every dot-separated identifier of ``text``.

    Args:
        text: A non-empty pre-release or build metadata string
        kind: Which grammar to apply

    Raises:
        VersionFormatError: If an identifier is empty, contains a character
            outside ``[0-9A-Za-z-]``, or (pre-release only) is a numeric
            identifier with a leading zero
    """
    for identifier in text.split("."):
        if not identifier:
            raise VersionFormatError(
                text, f"Empty identifier in {kind.value} '{text}' (consecutive periods?)"
            )

        for char in identifier:
            if char not in IDENTIFIER_CHARS:
                raise VersionFormatError(
                    text, f"Invalid character {char!r} in {kind.value} '{text}'"
                )

        if (
            kind is IdentifierKind.PRERELEASE
            and len(identifier) > 1
            and identifier.startswith("0")
            and is_numeric_identifier(identifier)
        ):
            raise VersionFormatError(
                text,
                f"Numeric identifier '{identifier}' in {kind.value} must not have a leading zero",
            )


def validate_prerelease(prerelease: str) -> None:
    """Validate a pre-release string such as ``alpha.1``."""
    validate_identifiers(prerelease, IdentifierKind.PRERELEASE)


def validate_build(build: str) -> None:
    """Validate build metadata such as ``build.0123``."""
    validate_identifiers(build, IdentifierKind.BUILD)


def _describe(value: int) -> str:
    # str() of an int longer than 4300 digits raises ValueError
    if value.bit_length() > 64:
        return f"<{value.bit_length()}-bit integer>"
    return str(value)


def check_component(name: str, value: object) -> None:
    """Check a major, minor or patch argument.

    Raises:
        VersionArgumentError: If the value is not an int or is negative
        VersionOverflowError: If the value exceeds MAX_COMPONENT
    """
    # bool is an int subclass but never a meaningful version number
    if isinstance(value, bool) or not isinstance(value, int):
        raise VersionArgumentError(
            name, value, f"{name} must be an int, got {type(value).__name__}"
        )
    if value < 0:
        raise VersionArgumentError(
            name, value, f"{name} must not be negative, got {_describe(value)}"
        )
    if value > MAX_COMPONENT:
        raise VersionOverflowError(
            _describe(value), f"{name} {_describe(value)} exceeds the maximum of {MAX_COMPONENT}"
        )
