# SPDX-License-Identifier: MIT
"""Version comparison and Kubernetes version priority.

Natural ordering: alpha < beta < stable within a major version, then by major.
Priority ordering follows the rules the API server uses to pick the preferred
version of a custom resource: stable versions first, then betas, then alphas,
each sorted by major version and then level number, highest first.
"""

from __future__ import annotations

from typing import Iterable, Optional, Union

from .version import Version, parse_version

VersionLike = Union[str, Version]

# Stability rank used by priority ordering (higher = preferred)
_STABLE_RANK = 2


def _as_version(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two Kubernetes resource versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        KubeVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("v1", "v2")
        -1
        >>> compare_versions("v1beta1", "v1alpha3")
        1
        >>> compare_versions("v1beta1", "v1")
        -1
    """
    key1 = version_key(version1)
    key2 = version_key(version2)
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for natural (oldest to newest) ordering.

    Examples:
        >>> sorted(["v2", "v1", "v1beta1"], key=version_key)
        ['v1beta1', 'v1', 'v2']
    """
    return _as_version(version).sort_key()


def priority_key(version: VersionLike) -> tuple:
    """Return a sort key for Kubernetes version priority (preferred first).

    Examples:
        >>> sorted(["v1beta1", "v1", "v2", "v2alpha1"], key=priority_key)
        ['v2', 'v1', 'v1beta1', 'v2alpha1']
    """
    v = _as_version(version)
    if v.level is None:
        return (-_STABLE_RANK, -v.major, 0)
    return (-int(v.level.stability), -v.major, -v.level.number)


def sort_versions(
    versions: Iterable[VersionLike],
    *,
    priority: bool = False,
    reverse: bool = False,
) -> list[Version]:
    """Parse and sort versions.

    Args:
        versions: Version strings or Version objects
        priority: Sort by Kubernetes version priority instead of natural order
        reverse: Reverse the resulting order

    Returns:
        A new list of Version objects

    Raises:
        KubeVersionError: If any version string is invalid
    """
    parsed = [_as_version(v) for v in versions]
    key = priority_key if priority else version_key
    return sorted(parsed, key=key, reverse=reverse)


def latest_version(
    versions: Iterable[VersionLike],
    *,
    include_prereleases: bool = True,
) -> Optional[Version]:
    """Return the preferred version by Kubernetes priority.

    Args:
        versions: Version strings or Version objects
        include_prereleases: Consider alpha and beta versions

    Returns:
        The highest priority version, or None if nothing qualifies
    """
    candidates = [_as_version(v) for v in versions]
    if not include_prereleases:
        candidates = [v for v in candidates if v.is_stable]
    if not candidates:
        return None
    return min(candidates, key=priority_key)
