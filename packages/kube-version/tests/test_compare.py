# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from kube_version import (
    parse_version,
    compare_versions,
    version_key,
    priority_key,
    sort_versions,
    latest_version,
    KubeVersionError,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("v1", "v1") == 0
        assert compare_versions("v1beta2", "v1beta2") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("v1", "v2") == -1
        assert compare_versions("v2", "v1") == 1

    def test_alpha_vs_beta(self):
        """Test that alpha < beta regardless of numbers."""
        assert compare_versions("v1alpha9", "v1beta1") == -1
        assert compare_versions("v1beta1", "v1alpha9") == 1

    def test_prerelease_vs_stable(self):
        """Test that a pre-release is older than the stable version."""
        assert compare_versions("v1beta1", "v1") == -1
        assert compare_versions("v1", "v1alpha1") == 1

    def test_major_before_level(self):
        """Test that the major version dominates the level."""
        assert compare_versions("v1", "v2alpha1") == -1

    def test_numbered_levels(self):
        """Test comparison of numbered levels."""
        assert compare_versions("v1alpha1", "v1alpha2") == -1
        assert compare_versions("v1beta3", "v1beta2") == 1

    def test_version_objects(self):
        """Test comparison with Version objects."""
        v1 = parse_version("v1")
        assert compare_versions(v1, "v2") == -1
        assert compare_versions("v1", v1) == 0

    def test_invalid_version(self):
        """Test that invalid strings raise."""
        with pytest.raises(KubeVersionError):
            compare_versions("v1", "1.0.0")


class TestVersionKey:
    """Tests for version_key function."""

    def test_sort_strings(self):
        """Test sorting strings oldest to newest."""
        versions = ["v2", "v1", "v1beta1", "v1alpha1", "v2beta1"]
        assert sorted(versions, key=version_key) == [
            "v1alpha1",
            "v1beta1",
            "v1",
            "v2beta1",
            "v2",
        ]


class TestPriorityKey:
    """Tests for Kubernetes version priority."""

    def test_kubernetes_documented_order(self):
        """Test the ordering from the Kubernetes CRD versioning docs."""
        versions = [
            "v11alpha2",
            "v1",
            "v3beta1",
            "v12alpha1",
            "v10beta3",
            "v2",
            "v11beta2",
            "v10",
        ]
        assert sorted(versions, key=priority_key) == [
            "v10",
            "v2",
            "v1",
            "v11beta2",
            "v10beta3",
            "v3beta1",
            "v12alpha1",
            "v11alpha2",
        ]

    def test_same_major_level_number(self):
        """Test that higher level numbers have priority."""
        assert sorted(["v1beta1", "v1beta2"], key=priority_key) == ["v1beta2", "v1beta1"]


class TestSortVersions:
    """Tests for sort_versions function."""

    def test_natural_order(self):
        """Test the default natural order."""
        result = sort_versions(["v2", "v1beta1", "v1"])
        assert [str(v) for v in result] == ["v1beta1", "v1", "v2"]

    def test_reverse(self):
        """Test reversing the natural order."""
        result = sort_versions(["v2", "v1beta1", "v1"], reverse=True)
        assert [str(v) for v in result] == ["v2", "v1", "v1beta1"]

    def test_priority(self):
        """Test sorting by priority."""
        result = sort_versions(["v1alpha1", "v1", "v2beta1"], priority=True)
        assert [str(v) for v in result] == ["v1", "v2beta1", "v1alpha1"]

    def test_empty(self):
        assert sort_versions([]) == []


class TestLatestVersion:
    """Tests for latest_version function."""

    def test_prefers_stable(self):
        """Test that a stable version beats a newer major beta."""
        assert latest_version(["v1", "v2beta1"]) == parse_version("v1")

    def test_prerelease_only(self):
        """Test picking among pre-releases."""
        assert latest_version(["v1alpha1", "v1beta1"]) == parse_version("v1beta1")

    def test_exclude_prereleases(self):
        """Test that pre-releases can be excluded."""
        assert latest_version(["v1beta1", "v1alpha1"], include_prereleases=False) is None

    def test_empty(self):
        assert latest_version([]) is None
