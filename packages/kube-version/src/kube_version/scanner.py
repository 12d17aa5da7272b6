# SPDX-License-Identifier: MIT
"""Character-class scanning primitives used by the version grammar.

The scanner only understands two character classes: ASCII digits and ASCII
lowercase letters. Anything else stops a run without being consumed.
"""

from __future__ import annotations

from .errors import IntegerOverflowError, LeadingZeroError

U64_MAX = 2**64 - 1


def _is_digit(char: str) -> bool:
    # str.isdigit() also accepts non-ASCII digits
    return "0" <= char <= "9"


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


class Scanner:
    """A forward-only cursor over a string.

    Examples:
        >>> scanner = Scanner("12beta3")
        >>> scanner.consume_digits()
        (12, 2)
        >>> scanner.consume_identifier()
        'beta'
        >>> scanner.remaining
        '3'
    """

    __slots__ = ("text", "position")

    def __init__(self, text: str, position: int = 0):
        self.text = text
        self.position = position

    def __repr__(self) -> str:
        return f"Scanner(text={self.text!r}, position={self.position})"

    @property
    def remaining(self) -> str:
        """Return the unconsumed part of the text."""
        return self.text[self.position :]

    @property
    def at_end(self) -> bool:
        """Return True if the whole text has been consumed."""
        return self.position >= len(self.text)

    def peek(self) -> str:
        """Return the next character without consuming it, or '' at the end."""
        return self.text[self.position : self.position + 1]

    def consume_digits(self) -> tuple[int, int]:
        """Consume the longest run of ASCII digits.

        Returns:
            A tuple of (value, consumed). ``consumed`` is 0 when the next
            character is not a digit, in which case ``value`` is 0 as well.

        Raises:
            LeadingZeroError: If the run starts with '0'
            IntegerOverflowError: If the value exceeds 2**64 - 1
        """
        start = self.position
        number = 0

        while not self.at_end and _is_digit(self.text[self.position]):
            digit = self.text[self.position]
            if self.position == start and digit == "0":
                raise LeadingZeroError()

            number = number * 10 + (ord(digit) - ord("0"))
            if number > U64_MAX:
                raise IntegerOverflowError()

            self.position += 1

        return number, self.position - start

    def consume_identifier(self) -> str:
        """Consume the longest run of ASCII lowercase letters (possibly empty)."""
        start = self.position
        while not self.at_end and _is_lower(self.text[self.position]):
            self.position += 1
        return self.text[start : self.position]


def consume_digits(text: str) -> tuple[int, int]:
    """Consume leading digits of ``text``, returning (value, consumed)."""
    return Scanner(text).consume_digits()


def consume_identifier(text: str) -> tuple[str, int]:
    """Consume leading lowercase letters of ``text``, returning (identifier, consumed)."""
    identifier = Scanner(text).consume_identifier()
    return identifier, len(identifier)
