# SPDX-License-Identifier: MIT
"""Strict Semantic Versioning 2.0.0 version values.

This package provides an immutable Version type with a single-pass parser,
canonical formatting and SemVer precedence ordering.

Example:
    >>> from strict_semver import Version, parse_version, try_parse_version
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease
    'alpha.1'
    >>> str(version)
    '1.2.3-alpha.1+build.456'
    >>>
    >>> Version(1, 0, 0, "alpha") < Version(1, 0, 0)
    True
    >>> try_parse_version("1.2")[0]
    False
"""

__version__ = "0.1.0"

from .errors import (
    SemanticVersionError,
    VersionArgumentError,
    VersionFormatError,
    VersionOverflowError,
)
from .validation import (
    MAX_COMPONENT,
    IdentifierKind,
    is_numeric_identifier,
    validate_build,
    validate_identifiers,
    validate_prerelease,
)
from .semver import (
    Version,
    parse_version,
    try_parse_version,
    is_valid_semver,
)
from .compare import (
    compare,
    compare_prerelease,
    compare_versions,
    version_key,
)

__all__ = [
    # Errors
    "SemanticVersionError",
    "VersionArgumentError",
    "VersionFormatError",
    "VersionOverflowError",
    # Identifier validation
    "MAX_COMPONENT",
    "IdentifierKind",
    "is_numeric_identifier",
    "validate_build",
    "validate_identifiers",
    "validate_prerelease",
    # Version parsing
    "Version",
    "parse_version",
    "try_parse_version",
    "is_valid_semver",
    # Version comparison
    "compare",
    "compare_prerelease",
    "compare_versions",
    "version_key",
]
