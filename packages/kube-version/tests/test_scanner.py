# SPDX-License-Identifier: MIT
"""Unit tests for the character-class scanner."""

import pytest

from kube_version import (
    Scanner,
    consume_digits,
    consume_identifier,
    IntegerOverflowError,
    LeadingZeroError,
    U64_MAX,
)


class TestConsumeDigits:
    """Tests for digit scanning."""

    def test_single_digit(self):
        """Test consuming a single digit."""
        assert consume_digits("1") == (1, 1)

    def test_stops_at_letter(self):
        """Test that scanning stops at the first non-digit."""
        assert consume_digits("12beta3") == (12, 2)

    def test_no_digits(self):
        """Test that nothing is consumed when the input starts with a letter."""
        assert consume_digits("beta1") == (0, 0)

    def test_empty_input(self):
        """Test that empty input consumes nothing and does not raise."""
        assert consume_digits("") == (0, 0)

    def test_leading_zero(self):
        """Test that a run starting with zero is rejected."""
        with pytest.raises(LeadingZeroError):
            consume_digits("01")

    def test_lone_zero(self):
        """Test that a lone zero is rejected."""
        with pytest.raises(LeadingZeroError):
            consume_digits("0")

    def test_inner_zero_allowed(self):
        """Test that zeros after the first digit are fine."""
        assert consume_digits("100") == (100, 3)

    def test_u64_max(self):
        """Test that the largest u64 value is accepted."""
        assert consume_digits(str(U64_MAX)) == (U64_MAX, 20)

    def test_overflow(self):
        """Test that values beyond u64 are rejected."""
        with pytest.raises(IntegerOverflowError):
            consume_digits(str(U64_MAX + 1))

    def test_non_ascii_digits_not_consumed(self):
        """Test that non-ASCII digits are not treated as digits."""
        assert consume_digits("٣") == (0, 0)


class TestConsumeIdentifier:
    """Tests for identifier scanning."""

    def test_identifier(self):
        """Test consuming lowercase letters."""
        assert consume_identifier("beta1") == ("beta", 4)

    def test_stops_at_uppercase(self):
        """Test that uppercase letters stop the run."""
        assert consume_identifier("betaX") == ("beta", 4)

    def test_empty_identifier(self):
        """Test that a leading digit yields an empty identifier."""
        assert consume_identifier("1beta") == ("", 0)

    def test_empty_input(self):
        """Test that empty input yields an empty identifier."""
        assert consume_identifier("") == ("", 0)


class TestScanner:
    """Tests for the Scanner cursor."""

    def test_sequential_consumption(self):
        """Test that operations advance the cursor."""
        scanner = Scanner("12alpha3")
        assert scanner.consume_digits() == (12, 2)
        assert scanner.consume_identifier() == "alpha"
        assert scanner.consume_digits() == (3, 1)
        assert scanner.at_end

    def test_remaining_and_peek(self):
        """Test inspecting the unconsumed text."""
        scanner = Scanner("v1beta1", position=1)
        assert scanner.peek() == "1"
        scanner.consume_digits()
        assert scanner.remaining == "beta1"
        assert scanner.position == 2

    def test_peek_at_end(self):
        """Test that peek returns an empty string at the end."""
        scanner = Scanner("")
        assert scanner.peek() == ""
        assert scanner.at_end

    def test_failed_scan_does_not_consume_non_digits(self):
        """Test that a non-matching character is left in place."""
        scanner = Scanner("-1")
        assert scanner.consume_digits() == (0, 0)
        assert scanner.consume_identifier() == ""
        assert scanner.remaining == "-1"
