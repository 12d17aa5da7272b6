# SPDX-License-Identifier: MIT
"""Kubernetes resource version parsing.

Supports the ``v<MAJOR>[(beta|alpha)<NUM>]`` format, for example ``v1``,
``v2beta1`` or ``v1alpha12``. Versions must also have the shape of a DNS
label (lowercase alphanumerics and hyphens, at most 63 characters).
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import Optional

from .errors import (
    MAX_VERSION_LENGTH,
    EmptyError,
    IllegalFormatError,
    IllegalLengthError,
    IllegalPrefixError,
    KubeVersionError,
    NonAsciiError,
    ParseLevelError,
)
from .level import Level, parse_level
from .scanner import U64_MAX, Scanner

# RFC 1123 DNS label; the length limit is checked separately
DNS_LABEL_PATTERN = re.compile(r"[a-z0-9](?:[-a-z0-9]*[a-z0-9])?")

_LABEL_CHAR_PATTERN = re.compile(r"[^-a-z0-9]")


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed Kubernetes resource version.

    Versions order by major version first. Within the same major version a
    stable version (no level) is newer than any beta, and any beta is newer
    than any alpha: ``v1alpha1 < v1beta1 < v1 < v2alpha1``.

    Attributes:
        major: Major version number, between 1 and 2**64 - 1
        level: Optional stability level (e.g., beta1, alpha2)
    """

    major: int
    level: Optional[Level] = None

    def __post_init__(self) -> None:
        if isinstance(self.major, bool) or not isinstance(self.major, int):
            raise ValueError(f"Major version must be an integer, got {type(self.major).__name__}")
        if not 1 <= self.major <= U64_MAX:
            raise ValueError(f"Major version must be between 1 and {U64_MAX}, got {self.major}")
        if self.level is not None and not isinstance(self.level, Level):
            raise ValueError(f"Version level must be a Level, got {self.level!r}")

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        if self.level is None:
            return f"v{self.major}"
        return f"v{self.major}{self.level}"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def sort_key(self) -> tuple:
        """Return a tuple ordering versions from oldest to newest."""
        if self.level is None:
            return (self.major, 1, 0, 0)
        return (self.major, 0, int(self.level.stability), self.level.number)

    @property
    def is_stable(self) -> bool:
        """Return True if this is a GA version without a level."""
        return self.level is None

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is an alpha or beta version."""
        return self.level is not None


def _check_shape(version_string: str) -> None:
    if DNS_LABEL_PATTERN.fullmatch(version_string):
        return

    bad = _LABEL_CHAR_PATTERN.search(version_string)
    if bad is not None:
        raise IllegalFormatError(
            "version must consist of lowercase alphanumerics and hyphens",
            character=bad.group(),
            index=bad.start(),
        )
    raise IllegalFormatError("version must not start or end with a hyphen")


def parse_version(version_string: str) -> Version:
    """Parse a Kubernetes resource version string into a Version object.

    Args:
        version_string: A string in ``v<MAJOR>[(beta|alpha)<NUM>]`` format

    Returns:
        A Version object with parsed components

    Raises:
        EmptyError: If the string is empty
        IllegalLengthError: If the string is longer than 63 bytes
        NonAsciiError: If the string contains non-ASCII characters
        IllegalFormatError: If the string is not a DNS label or has no major version
        IllegalPrefixError: If the string does not start with 'v'
        LeadingZeroError: If the major version starts with a zero
        IntegerOverflowError: If the major version exceeds 2**64 - 1
        ParseLevelError: If the level suffix is invalid

    Examples:
        >>> parse_version("v1")
        Version(major=1, level=None)

        >>> parse_version("v2alpha12")
        Version(major=2, level=Level(stability=<Stability.ALPHA: 0>, number=12))
    """
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")

    if not version_string:
        raise EmptyError()

    length = len(version_string.encode("utf-8"))
    if length > MAX_VERSION_LENGTH:
        raise IllegalLengthError(length)

    if not version_string.isascii():
        raise NonAsciiError()

    _check_shape(version_string)

    if version_string[0] != "v":
        raise IllegalPrefixError(version_string[0])

    scanner = Scanner(version_string, position=1)
    major, consumed = scanner.consume_digits()
    if consumed == 0:
        raise IllegalFormatError("missing major version number")

    if scanner.at_end:
        return Version(major=major)

    try:
        level = parse_level(scanner.remaining)
    except KubeVersionError as e:
        raise ParseLevelError(e) from e

    return Version(major=major, level=level)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid Kubernetes resource version.

    Examples:
        >>> is_valid_version("v1beta1")
        True
        >>> is_valid_version("v1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except KubeVersionError:
        return False
    return True
