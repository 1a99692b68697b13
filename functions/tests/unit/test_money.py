"""Unit tests for monetary string parsing."""

import math
from decimal import Decimal

import pytest

from services.money import parse_money


class TestParseMoney:
    """Tests for parse_money."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("$1,234.50", 1234.5),
            ("(500)", -500.0),
            ("", 0.0),
            (None, 0.0),
            ("abc", 0.0),
            ("-$12", -12.0),
            ("1,000,000", 1000000.0),
        ],
    )
    def test_sanitizer_table(self, value, expected):
        """Test the documented sanitizer cases."""
        assert parse_money(value) == expected

    def test_surrounding_whitespace(self):
        """Test that padding around the amount is ignored."""
        assert parse_money("  $ 2,533,115  ") == 2533115.0

    def test_accounting_negative_with_currency(self):
        """Test parenthesised amounts with a currency symbol and separators."""
        assert parse_money("($1,250.75)") == -1250.75

    def test_parentheses_with_literal_minus_stay_negative(self):
        """Test that a minus inside parentheses is not negated twice."""
        assert parse_money("(-500)") == -500.0

    def test_partial_parentheses_are_not_negative(self):
        """Test that only a fully wrapped value counts as accounting negative."""
        assert parse_money("500 (est.)") == 500.0

    def test_whitespace_only(self):
        """Test that blank strings parse to zero."""
        assert parse_money("   ") == 0.0

    def test_lone_minus_sign(self):
        """Test that a sign without digits parses to zero."""
        assert parse_money("-") == 0.0
        assert parse_money("$-") == 0.0

    def test_trailing_garbage_keeps_leading_number(self):
        """Test that the leading numeric portion is used."""
        assert parse_money("12.5.3") == 12.5
        assert parse_money("1,200 USD") == 1200.0

    def test_numbers_pass_through(self):
        """Test that numeric values are returned as floats."""
        assert parse_money(1500) == 1500.0
        assert parse_money(-12.25) == -12.25
        assert parse_money(Decimal("1998927.00")) == 1998927.0

    def test_non_finite_numbers_become_zero(self):
        """Test that NaN and infinity never leak out."""
        assert parse_money(float("nan")) == 0.0
        assert parse_money(float("inf")) == 0.0
        assert parse_money("nan") == 0.0

    def test_booleans_are_not_amounts(self):
        """Test that booleans are treated as missing."""
        assert parse_money(True) == 0.0

    def test_result_is_always_finite(self):
        """Test that every result is a finite float."""
        for value in ["$", "()", "(", ")", "..", "-.", "1e5", "  (  ) "]:
            result = parse_money(value)
            assert isinstance(result, float)
            assert math.isfinite(result)
