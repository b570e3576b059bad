# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from strict_semver import (
    Version,
    VersionArgumentError,
    VersionFormatError,
    compare,
    compare_prerelease,
    compare_versions,
    parse_version,
    version_key,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_numeric_not_textual(self):
        """Test that 10 > 9 for version numbers."""
        assert compare_versions("1.10.0", "1.9.0") == 1

    def test_major_outranks_prerelease(self):
        """Test that a pre-release of a higher version is still higher."""
        assert compare_versions("2.0.0-alpha", "1.9.9") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0
        assert compare_versions("1.0.0-rc.1+a", "1.0.0-rc.1+b") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(Version(1, 0, 0), Version(2, 0, 0)) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        """Test that invalid strings raise VersionFormatError."""
        with pytest.raises(VersionFormatError):
            compare_versions("1.0", "1.0.0")


class TestPrereleaseOrdering:
    """Tests for pre-release ordering edge cases."""

    def test_precedence_chain(self, precedence_chain):
        """Test the ordering example from semver.org."""
        for lower, higher in zip(precedence_chain, precedence_chain[1:]):
            assert compare_versions(lower, higher) == -1, f"{lower} should be < {higher}"
            assert compare_versions(higher, lower) == 1, f"{higher} should be > {lower}"

    def test_numeric_lower_than_alphanumeric(self):
        """Test that numeric identifiers sort below alphanumeric ones."""
        assert compare_versions("1.0.0-1", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-alpha", "1.0.0-1") == 1
        assert compare_versions("1.0.0-alpha.99", "1.0.0-alpha.beta") == -1

    def test_numeric_prerelease_parts(self):
        """Test numeric pre-release parts compare by value."""
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1

    def test_arbitrary_precision(self):
        """Test numbers beyond 64 bits compare by value."""
        assert compare_versions("1.0.0-18446744073709551616", "1.0.0-18446744073709551615") == 1
        assert compare_versions("1.0.0-9", "1.0.0-100000000000000000000000000000") == -1

    def test_identifiers_beyond_int_conversion_limit(self):
        """Test numeric identifiers longer than 4300 digits."""
        ones = Version(1, 0, 0, "1" * 5000)
        twos = Version(1, 0, 0, "2" * 5000)
        longer = Version(1, 0, 0, "1" * 5001)

        assert ones < twos < longer
        assert compare(twos, ones) == 1
        assert compare(ones, Version(1, 0, 0, "1" * 5000, "build")) == 0
        assert compare_versions("1.0.0-" + "9" * 5000, "1.0.0-alpha") == -1

    def test_ordinal_comparison(self):
        """Test that alphanumeric identifiers compare in ASCII order."""
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-alpha.beta", "1.0.0-alpha.gamma") == -1
        assert compare_versions("1.0.0-rc-1", "1.0.0-rc1") == -1

    def test_mixed_digits_are_alphanumeric(self):
        """Test that identifiers like '1a' are compared as text."""
        assert compare_versions("1.0.0-1a", "1.0.0-a") == -1
        assert compare_versions("1.0.0-2", "1.0.0-1a") == -1

    def test_longer_prerelease_wins(self):
        """Test that a strict prefix sorts lower."""
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.0") == -1
        assert compare_versions("1.0.0-a.b.c", "1.0.0-a.b") == 1


class TestComparePrerelease:
    """Tests for compare_prerelease."""

    def test_both_empty(self):
        assert compare_prerelease("", "") == 0

    def test_release_outranks(self):
        assert compare_prerelease("", "alpha") == 1
        assert compare_prerelease("alpha", "") == -1

    def test_identical(self):
        assert compare_prerelease("rc.1", "rc.1") == 0


class TestCompare:
    """Tests for compare and the Version operators."""

    def test_compare(self):
        """Test compare over Version objects."""
        assert compare(Version(1, 0, 0, "alpha"), Version(1, 0, 0)) == -1
        assert compare(Version(1, 0, 0, "", "b1"), Version(1, 0, 0, "", "b2")) == 0

    def test_operators(self):
        """Test rich comparison operators."""
        alpha = Version(1, 0, 0, "alpha")
        release = Version(1, 0, 0)
        assert alpha < release
        assert alpha <= release
        assert release > alpha
        assert release >= alpha
        assert release <= Version(1, 0, 0, "", "build")
        assert release >= Version(1, 0, 0, "", "build")
        assert not release < Version(1, 0, 0, "", "build")

    def test_compare_to(self):
        """Test compare_to."""
        assert Version(2, 0, 0).compare_to(Version(1, 0, 0)) == 1
        assert Version(1, 0, 0).compare_to(Version(1, 0, 0, "", "x")) == 0

    def test_compare_to_wrong_type(self):
        """Test that compare_to rejects other types."""
        with pytest.raises(VersionArgumentError):
            Version(1, 0, 0).compare_to("1.0.0")

    def test_ordering_wrong_type(self):
        """Test that ordering against other types raises TypeError."""
        with pytest.raises(TypeError):
            Version(1, 0, 0) < "1.0.0"  # type: ignore


class TestVersionKey:
    """Tests for version_key and sorting."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_prereleases(self):
        """Test that pre-releases precede the release."""
        versions = [
            "1.2.3",
            "0.1.2",
            "1.2.3-alpha.1",
            "1.2.3-beta",
            "1.2.3-alpha.beta",
            "1.2.3-alpha.gamma",
        ]
        assert sorted(versions, key=version_key) == [
            "0.1.2",
            "1.2.3-alpha.1",
            "1.2.3-alpha.beta",
            "1.2.3-alpha.gamma",
            "1.2.3-beta",
            "1.2.3",
        ]

    def test_sorting_version_objects(self, precedence_chain):
        """Test that Version objects sort by precedence on their own."""
        versions = [parse_version(text) for text in reversed(precedence_chain)]
        assert [str(v) for v in sorted(versions)] == precedence_chain

    def test_key_matches_chain(self, precedence_chain):
        """Test that keys increase along the precedence chain."""
        keys = [version_key(text) for text in precedence_chain]
        assert keys == sorted(keys)
        assert len(set(keys)) == len(keys)

    def test_key_ignores_build(self):
        """Test that build metadata does not change the key."""
        assert version_key("1.0.0+a") == version_key("1.0.0+b")

    def test_key_for_long_numeric_identifiers(self):
        """Test keys for identifiers longer than 4300 digits."""
        versions = [
            Version(1, 0, 0, "9" * 5001),
            Version(1, 0, 0, "9" * 5000),
            Version(1, 0, 0, "1" * 5000),
        ]

        assert sorted(versions, key=version_key) == list(reversed(versions))
        assert version_key(versions[1]) < version_key(versions[0])
