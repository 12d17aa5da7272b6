# SPDX-License-Identifier: MIT
"""Error types raised while parsing Kubernetes API versions.

Every error derives from KubeVersionError, which is itself a ValueError, so
callers can either catch the whole family or match on a specific kind:

    >>> try:
    ...     parse_version("v1beta0")
    ... except ParseLevelError as e:
    ...     isinstance(e.root_cause, LeadingZeroError)
    True

Wrapping errors (ParseLevelError, ParseVersionError) keep the inner failure
in ``source`` and are raised ``from`` it.
"""

from __future__ import annotations

from typing import Optional

MAX_VERSION_LENGTH = 63


class KubeVersionError(ValueError):
    """Base class for all version parsing errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    @property
    def root_cause(self) -> KubeVersionError:
        """Return the innermost error of a chain of wrapped errors."""
        error = self
        while isinstance(getattr(error, "source", None), KubeVersionError):
            error = error.source  # type: ignore[attr-defined]
        return error


class EmptyError(KubeVersionError):
    """Raised when the input string is empty."""

    def __init__(self) -> None:
        super().__init__("empty string, expected a Kubernetes resource version")


class IllegalLengthError(KubeVersionError):
    """Raised when the input is longer than a DNS label allows."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"expected a string with {MAX_VERSION_LENGTH} characters or less, got {length}"
        )


class NonAsciiError(KubeVersionError):
    """Raised when the input contains non-ASCII characters."""

    def __init__(self) -> None:
        super().__init__("unexpected non-ascii character")


class IllegalFormatError(KubeVersionError):
    """Raised when the input does not have the shape of a version."""

    def __init__(
        self,
        reason: str,
        character: Optional[str] = None,
        index: Optional[int] = None,
    ):
        self.reason = reason
        self.character = character
        self.index = index
        if character is not None and index is not None:
            message = f"{reason}: unexpected character {character!r} at index {index}"
        else:
            message = reason
        super().__init__(message)


class IllegalPrefixError(KubeVersionError):
    """Raised when the version does not start with 'v'."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"unexpected prefix character {character!r}, expected 'v'")


class LeadingZeroError(KubeVersionError):
    """Raised when a version number starts with a zero."""

    def __init__(self) -> None:
        super().__init__("unexpected leading zero in version number")


class IntegerOverflowError(KubeVersionError):
    """Raised when a version number does not fit in an unsigned 64-bit integer."""

    def __init__(self) -> None:
        super().__init__("version number overflows a u64 integer")


class UnknownIdentifierError(KubeVersionError):
    """Raised when the level identifier is neither 'beta' nor 'alpha'."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(
            f"unexpected level identifier {identifier!r}, expected 'beta' or 'alpha'"
        )


class InvalidLevelFormatError(KubeVersionError):
    """Raised when a level is not of the form beta<N> or alpha<N>."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"invalid level format, expected beta<VERSION>/alpha<VERSION>: {reason}")


class ParseLevelError(KubeVersionError):
    """Raised by version parsing when the level suffix is invalid."""

    def __init__(self, source: KubeVersionError):
        self.source = source
        super().__init__(f"failed to parse level: {source}")


class ParseVersionError(KubeVersionError):
    """Raised by api version parsing when the version part is invalid."""

    def __init__(self, source: KubeVersionError):
        self.source = source
        super().__init__(f"failed to parse version: {source}")


class InvalidGroupError(KubeVersionError):
    """Raised when an API group is not a valid DNS subdomain."""

    def __init__(self, group: str, reason: str):
        self.group = group
        self.reason = reason
        super().__init__(f"invalid API group {group!r}: {reason}")
