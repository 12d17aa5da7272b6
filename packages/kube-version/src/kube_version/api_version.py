# SPDX-License-Identifier: MIT
"""Kubernetes API version parsing.

An API version is a resource version with an optional group prefix,
``(<GROUP>/)<VERSION>``, for example ``certificates.k8s.io/v1beta1``,
``extensions/v1beta1`` or ``v1``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import KubeVersionError, ParseVersionError
from .group import validate_group as _validate_group
from .version import Version, parse_version


@dataclass(frozen=True, slots=True)
class ApiVersion:
    """Represents a parsed Kubernetes API version.

    Attributes:
        group: API group, stored verbatim, or None for the core group
        version: The parsed resource version
    """

    group: Optional[str]
    version: Version

    def __str__(self) -> str:
        """Return the canonical string representation of the API version."""
        if self.group is None:
            return str(self.version)
        return f"{self.group}/{self.version}"

    @property
    def is_core(self) -> bool:
        """Return True if the API version has no group (e.g. ``v1``)."""
        return self.group is None


def parse_api_version(api_version_string: str, *, validate_group: bool = False) -> ApiVersion:
    """Parse an API version string into an ApiVersion object.

    The string is split at the first '/'. Everything before it is the group,
    which is kept as-is unless ``validate_group`` is set.

    Args:
        api_version_string: A string in ``(<GROUP>/)<VERSION>`` format
        validate_group: Also check that the group is a DNS subdomain

    Returns:
        An ApiVersion object with parsed components

    Raises:
        ParseVersionError: If the version part is invalid
        InvalidGroupError: If ``validate_group`` is set and the group is invalid

    Examples:
        >>> parse_api_version("certificates.k8s.io/v1beta1").group
        'certificates.k8s.io'
        >>> parse_api_version("v1").group is None
        True
    """
    if not isinstance(api_version_string, str):
        raise TypeError(f"API version must be a string, got {type(api_version_string).__name__}")

    group: Optional[str]
    group, separator, version_string = api_version_string.partition("/")
    if not separator:
        group, version_string = None, api_version_string

    try:
        version = parse_version(version_string)
    except KubeVersionError as e:
        raise ParseVersionError(e) from e

    if validate_group and group is not None:
        _validate_group(group)

    return ApiVersion(group=group, version=version)
