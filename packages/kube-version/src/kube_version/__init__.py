# SPDX-License-Identifier: MIT
"""Kubernetes API version parsing and comparison.

This package parses, validates, formats and orders Kubernetes-style API
version identifiers of the form ``v<MAJOR>[(beta|alpha)<NUM>]``, optionally
prefixed with a group as ``<GROUP>/<VERSION>``.

Example:
    >>> from kube_version import parse_version, parse_api_version, compare_versions
    >>>
    >>> version = parse_version("v2beta1")
    >>> version.major
    2
    >>> str(version.level)
    'beta1'
    >>>
    >>> parse_api_version("apps/v1").group
    'apps'
    >>>
    >>> compare_versions("v1alpha1", "v1beta1")
    -1
"""

__version__ = "0.1.0"

from .errors import (
    KubeVersionError,
    EmptyError,
    IllegalLengthError,
    NonAsciiError,
    IllegalFormatError,
    IllegalPrefixError,
    LeadingZeroError,
    IntegerOverflowError,
    UnknownIdentifierError,
    InvalidLevelFormatError,
    ParseLevelError,
    ParseVersionError,
    InvalidGroupError,
    MAX_VERSION_LENGTH,
)
from .scanner import (
    Scanner,
    consume_digits,
    consume_identifier,
    U64_MAX,
)
from .level import (
    Level,
    Stability,
    parse_level,
)
from .version import (
    Version,
    parse_version,
    is_valid_version,
    DNS_LABEL_PATTERN,
)
from .api_version import (
    ApiVersion,
    parse_api_version,
)
from .group import (
    validate_group,
    is_valid_group,
)
from .compare import (
    compare_versions,
    version_key,
    priority_key,
    sort_versions,
    latest_version,
)

__all__ = [
    # Errors
    "KubeVersionError",
    "EmptyError",
    "IllegalLengthError",
    "NonAsciiError",
    "IllegalFormatError",
    "IllegalPrefixError",
    "LeadingZeroError",
    "IntegerOverflowError",
    "UnknownIdentifierError",
    "InvalidLevelFormatError",
    "ParseLevelError",
    "ParseVersionError",
    "InvalidGroupError",
    "MAX_VERSION_LENGTH",
    # Scanning
    "Scanner",
    "consume_digits",
    "consume_identifier",
    "U64_MAX",
    # Levels
    "Level",
    "Stability",
    "parse_level",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "DNS_LABEL_PATTERN",
    # API versions
    "ApiVersion",
    "parse_api_version",
    "validate_group",
    "is_valid_group",
    # Version comparison
    "compare_versions",
    "version_key",
    "priority_key",
    "sort_versions",
    "latest_version",
]
