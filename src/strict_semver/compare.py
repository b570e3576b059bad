# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0.

Major, minor and patch compare numerically. A version without pre-release
has higher precedence than one with pre-release. Pre-release identifiers
compare left to right: numeric identifiers by value, alphanumeric ones in
ASCII order, and numeric identifiers always lower than alphanumeric ones.
Build metadata is ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from .validation import is_numeric_identifier

if TYPE_CHECKING:
    from .semver import Version


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _numeric_key(identifier: str) -> tuple[int, str]:
    # length, then digits: int() refuses strings longer than 4300 digits
    digits = identifier.lstrip("0") or "0"
    return (len(digits), digits)


def _compare_identifier(left: str, right: str) -> int:
    """Compare two differing pre-release identifiers."""
    left_numeric = is_numeric_identifier(left)
    right_numeric = is_numeric_identifier(right)

    if left_numeric and right_numeric:
        left_key, right_key = _numeric_key(left), _numeric_key(right)
        if left_key != right_key:
            return -1 if left_key < right_key else 1
    elif left_numeric:
        return -1
    elif right_numeric:
        return 1

    return -1 if left < right else (1 if left > right else 0)


def compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    An empty string means "no pre-release" and outranks any pre-release
    (1.0.0 > 1.0.0-alpha).
    """
    if pre1 == pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        if p1 == p2:
            continue
        result = _compare_identifier(p1, p2)
        if result:
            return result

    # All compared parts equal - the longer set of identifiers wins
    return _sign(len(parts1) - len(parts2))


def compare(version1: "Version", version2: "Version") -> int:
    """Compare two Version objects by precedence.

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2
    """
    for attr in ("major", "minor", "patch"):
        val1 = getattr(version1, attr)
        val2 = getattr(version2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return compare_prerelease(version1.prerelease, version2.prerelease)


def _coerce(version: Union[str, "Version"]) -> "Version":
    from .semver import parse_version

    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, "Version"], version2: Union[str, "Version"]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionFormatError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-alpha.beta", "1.0.0-beta")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    return compare(_coerce(version1), _coerce(version2))


def _identifier_key(identifier: str) -> tuple[int, int, str]:
    if is_numeric_identifier(identifier):
        return (0, *_numeric_key(identifier))
    return (1, 0, identifier)


def version_key(version: Union[str, "Version"]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order the same way :func:`compare` does.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # No pre-release becomes (1,) to sort after every (0, ...) pre-release
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(_identifier_key(part) for part in v.prerelease.split(".")))

    return (v.major, v.minor, v.patch, prerelease_key)
