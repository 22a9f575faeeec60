"""
Markup Engine — category resolution and the minimum-markup price floor.
Absence of a governing category is a normal outcome, not an error.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from quote_pricing.models.schemas import Category
from quote_pricing.utils.money import HUNDRED, ZERO, format_money, format_percent, round2

logger = logging.getLogger(__name__)


def resolve_category(
    service_type: str,
    categories: Iterable[Category],
    category_id: str | None = None,
) -> Category | None:
    """
    Find the category governing ``service_type``.

    An explicit ``category_id`` is matched exactly and takes precedence.
    Otherwise the first category whose type equals the service type, or whose
    name contains it, wins (both case-insensitive).
    """
    categories = list(categories)

    if category_id is not None:
        for category in categories:
            if category.id is not None and category.id == str(category_id):
                return category
        logger.debug(f"No category with id {category_id!r}, falling back to service type")

    needle = (service_type or "").strip().lower()
    if not needle:
        return None

    for category in categories:
        if category.type.lower() == needle or needle in category.name.lower():
            return category

    logger.debug(f"No category matches service type {service_type!r}")
    return None


def minimum_markup_percent(category: Category | None) -> Decimal:
    """The governed floor in percent; 0 when there is none."""
    if category is None or category.minimum_markup_percent is None:
        return ZERO
    if category.minimum_markup_percent <= 0:
        return ZERO
    return category.minimum_markup_percent


def apply_markup(cost_basis: Decimal, markup_percent: Decimal) -> Decimal:
    return round2(cost_basis * (1 + markup_percent / HUNDRED))


def minimum_sell_price(cost_basis: Decimal, category: Category | None) -> Decimal:
    floor = minimum_markup_percent(category)
    if floor == 0:
        return round2(cost_basis)
    return apply_markup(cost_basis, floor)


def markup_percent(cost_basis: Decimal, sell_price: Decimal) -> Decimal:
    """Markup of ``sell_price`` over cost, unrounded; 0 for a zero cost."""
    if cost_basis == 0:
        return ZERO
    return (sell_price - cost_basis) / cost_basis * HUNDRED


def check_sell_price(
    cost_basis: Decimal,
    sell_price: Decimal,
    floor_percent: Decimal,
) -> str | None:
    """Return a user-facing message when ``sell_price`` is under the floor."""
    if floor_percent <= 0:
        return None
    floor_price = apply_markup(cost_basis, floor_percent)
    if round2(sell_price) >= floor_price:
        return None
    return (
        f"Unit price {format_money(sell_price)} is below the minimum of "
        f"{format_money(floor_price)} ({format_percent(floor_percent)}% markup)"
    )
