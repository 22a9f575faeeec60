"""
Tests: contract-term parsing.

Run with:
    pytest quote_pricing/tests/test_term_parser.py -v
"""

import pytest

from quote_pricing.pricing.term_parser import parse_term_months


class TestStandardLabels:
    @pytest.mark.parametrize(
        "label, months",
        [
            ("36 Months", 36),
            ("12 Months", 12),
            ("2 Years", 24),
            ("1 Year", 12),
            ("24months", 24),
            ("60 MONTH term", 60),
        ],
    )
    def test_parses_label(self, label, months):
        assert parse_term_months(label) == months

    def test_months_win_over_years(self):
        assert parse_term_months("3 year / 36 month agreement") == 36


class TestFallback:
    @pytest.mark.parametrize("label", ["", "   ", None, "garbage", "Month-to-month"])
    def test_unparseable_is_default(self, label):
        assert parse_term_months(label) == 36

    def test_zero_is_never_returned(self):
        assert parse_term_months("0 Months") == 36
        assert parse_term_months("0 years") == 36

    def test_explicit_default(self):
        assert parse_term_months("garbage", default=12) == 12
        assert parse_term_months("24 Months", default=12) == 24
