"""
Tests: category resolution and minimum-markup floor.

Run with:
    pytest quote_pricing/tests/test_markup_engine.py -v
"""

from decimal import Decimal

import pytest

from quote_pricing.models.schemas import Category
from quote_pricing.pricing.markup_engine import (
    check_sell_price,
    markup_percent,
    minimum_markup_percent,
    minimum_sell_price,
    resolve_category,
)

CATEGORIES = [
    Category(id="1", name="Fiber Internet", type="fiber", minimum_markup_percent=20),
    Category(id="2", name="Broadband", type="coax", minimum_markup_percent=10),
    Category(id="3", name="Hosted Voice", type="voip"),
]


class TestResolveCategory:
    def test_matches_type_case_insensitive(self):
        assert resolve_category("FIBER", CATEGORIES).id == "1"

    def test_matches_name_substring(self):
        assert resolve_category("internet", CATEGORIES).id == "1"
        assert resolve_category("voice", CATEGORIES).id == "3"

    def test_first_match_wins(self):
        categories = [
            Category(id="a", name="Business Fiber", type="dia"),
            Category(id="b", name="Fiber", type="fiber"),
        ]
        assert resolve_category("fiber", categories).id == "a"

    def test_no_match_is_none(self):
        assert resolve_category("satellite", CATEGORIES) is None
        assert resolve_category("", CATEGORIES) is None
        assert resolve_category("fiber", []) is None

    def test_explicit_id_takes_precedence(self):
        assert resolve_category("fiber", CATEGORIES, category_id="2").id == "2"
        assert resolve_category("fiber", [Category(id=7, name="x")], category_id=7).name == "x"

    def test_unknown_id_falls_back_to_service_type(self):
        assert resolve_category("coax", CATEGORIES, category_id="99").id == "2"


class TestMinimumSellPrice:
    def test_twenty_percent_on_hundred(self):
        category = Category(name="Fiber", type="fiber", minimum_markup_percent=20)
        assert minimum_sell_price(Decimal("100"), category) == Decimal("120.00")

    def test_rounds_half_up_to_cents(self):
        category = Category(minimum_markup_percent=10)
        # 216.67 * 1.10 = 238.337
        assert minimum_sell_price(Decimal("216.67"), category) == Decimal("238.34")

    @pytest.mark.parametrize(
        "category",
        [
            None,
            Category(name="Voice"),
            Category(minimum_markup_percent=0),
            Category(minimum_markup_percent=-5),
            Category(minimum_markup_percent="not a number"),
        ],
    )
    def test_no_floor_sells_at_cost(self, category):
        assert minimum_markup_percent(category) == 0
        assert minimum_sell_price(Decimal("87.5"), category) == Decimal("87.50")


class TestMarkupPercent:
    def test_markup(self):
        assert markup_percent(Decimal("100"), Decimal("115")) == Decimal("15")

    def test_zero_cost_guard(self):
        assert markup_percent(Decimal("0"), Decimal("50")) == 0


class TestCheckSellPrice:
    def test_below_floor_reports_message(self):
        message = check_sell_price(Decimal("100"), Decimal("110"), Decimal("20"))
        assert message == "Unit price $110.00 is below the minimum of $120.00 (20% markup)"

    def test_at_or_above_floor_is_fine(self):
        assert check_sell_price(Decimal("100"), Decimal("120"), Decimal("20")) is None
        assert check_sell_price(Decimal("100"), Decimal("150"), Decimal("20")) is None

    def test_no_floor_never_reports(self):
        assert check_sell_price(Decimal("100"), Decimal("1"), Decimal("0")) is None
