"""
Tests: money coercion and rounding helpers.

Run with:
    pytest quote_pricing/tests/test_money.py -v
"""

from decimal import Decimal

import pytest

from quote_pricing.utils.money import format_money, format_percent, round2, to_money


class TestToMoney:
    @pytest.mark.parametrize(
        "value", [None, "", "abc", float("nan"), float("inf"), -5, "-0.01", True]
    )
    def test_invalid_becomes_zero(self, value):
        assert to_money(value) == Decimal("0")

    def test_float_goes_through_str(self):
        assert to_money(0.1) == Decimal("0.1")

    def test_numeric_string(self):
        assert to_money(" 19.99 ") == Decimal("19.99")


class TestRounding:
    def test_half_up(self):
        assert round2(Decimal("238.335")) == Decimal("238.34")
        assert round2(Decimal("0.005")) == Decimal("0.01")
        assert round2(Decimal("238.3349")) == Decimal("238.33")

    def test_formatting(self):
        assert format_money(Decimal("1234.5")) == "$1,234.50"
        assert format_percent(Decimal("20")) == "20"
        assert format_percent(Decimal("12.50")) == "12.5"
        assert format_percent(Decimal("0")) == "0"
