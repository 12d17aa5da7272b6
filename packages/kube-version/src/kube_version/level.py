# SPDX-License-Identifier: MIT
"""Stability levels of Kubernetes API versions.

A level is the optional ``beta<N>`` / ``alpha<N>`` suffix of a version such
as ``v1beta2``. Any beta level is more stable, and orders greater, than any
alpha level; levels of the same stability order by their number.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .errors import (
    IntegerOverflowError,
    InvalidLevelFormatError,
    UnknownIdentifierError,
)
from .scanner import U64_MAX, Scanner


class Stability(IntEnum):
    """Pre-release tier of a level. Higher values are more stable."""

    ALPHA = 0
    BETA = 1

    @property
    def identifier(self) -> str:
        """Return the identifier used in version strings ("alpha" or "beta")."""
        return self.name.lower()


_IDENTIFIERS = {stability.identifier: stability for stability in Stability}


@dataclass(frozen=True, slots=True, order=True)
class Level:
    """A parsed ``beta<N>`` or ``alpha<N>`` suffix.

    Ordering compares stability first and number second, which gives the
    total order ``alpha1 < alpha2 < beta1 < beta2``.

    Attributes:
        stability: Stability.ALPHA or Stability.BETA
        number: Iteration number, between 1 and 2**64 - 1
    """

    stability: Stability
    number: int

    def __post_init__(self) -> None:
        if not isinstance(self.stability, Stability):
            raise ValueError(f"Level stability must be a Stability, got {self.stability!r}")
        _check_level_number(self.number)

    def __str__(self) -> str:
        return f"{self.stability.identifier}{self.number}"

    @classmethod
    def beta(cls, number: int) -> Level:
        """Create a ``beta<number>`` level."""
        return cls(Stability.BETA, number)

    @classmethod
    def alpha(cls, number: int) -> Level:
        """Create an ``alpha<number>`` level."""
        return cls(Stability.ALPHA, number)

    @property
    def is_beta(self) -> bool:
        return self.stability is Stability.BETA

    @property
    def is_alpha(self) -> bool:
        return self.stability is Stability.ALPHA

    def __add__(self, other: int) -> Level:
        if not isinstance(other, int):
            return NotImplemented
        number = self.number + other
        if number > U64_MAX:
            raise IntegerOverflowError()
        return Level(self.stability, number)

    def __sub__(self, other: int) -> Level:
        if not isinstance(other, int):
            return NotImplemented
        return self + (-other)


def _check_level_number(number: int) -> None:
    if isinstance(number, bool) or not isinstance(number, int):
        raise ValueError(f"Level number must be an integer, got {type(number).__name__}")
    if not 1 <= number <= U64_MAX:
        raise ValueError(f"Level number must be between 1 and {U64_MAX}, got {number}")


def parse_level(level_string: str) -> Level:
    """Parse a ``beta<N>`` or ``alpha<N>`` string into a Level.

    The whole string has to match; trailing characters are an error.

    Args:
        level_string: The level to parse, for example "beta1"

    Returns:
        The parsed Level

    Raises:
        UnknownIdentifierError: If the identifier is neither "beta" nor "alpha"
        InvalidLevelFormatError: If the number is missing or followed by more text
        LeadingZeroError: If the number starts with a zero
        IntegerOverflowError: If the number exceeds 2**64 - 1

    Examples:
        >>> parse_level("beta1")
        Level(stability=<Stability.BETA: 1>, number=1)
        >>> str(parse_level("alpha12"))
        'alpha12'
    """
    scanner = Scanner(level_string)

    identifier = scanner.consume_identifier()
    stability = _IDENTIFIERS.get(identifier)
    if stability is None:
        raise UnknownIdentifierError(identifier)

    number, consumed = scanner.consume_digits()
    if consumed == 0:
        raise InvalidLevelFormatError(f"missing {identifier} version number")

    if not scanner.at_end:
        raise InvalidLevelFormatError(
            f"unexpected trailing characters {scanner.remaining!r}"
        )

    return Level(stability, number)
