"""
Commission Adjuster — couples the agent's chosen commission to the markup floor.

The margin protected by a category floor is shared between house and agent.
An agent who selects less than their maximum commission gives that headroom
back, which lowers the enforced floor point for point:

    effective floor = max(0, category floor - (agent max - chosen rate))

The inverse direction (``reconcile_commission``) starts from a price the user
typed in and reports how much commission remains once a shortfall against the
floor is charged to the agent.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal

from quote_pricing.config import get_settings
from quote_pricing.models.enums import PricingMode
from quote_pricing.models.schemas import Category, CommissionCheck, PricingResult
from quote_pricing.utils.money import ZERO, format_percent, round2

from .markup_engine import apply_markup, check_sell_price, markup_percent, minimum_markup_percent
from .totals_aggregator import margin_band

logger = logging.getLogger(__name__)


def clamp_commission_rate(commission_rate: Decimal, agent_max_rate: Decimal) -> Decimal:
    """Clamp into ``[0, agent_max_rate]``."""
    ceiling = max(ZERO, agent_max_rate)
    clamped = min(max(ZERO, commission_rate), ceiling)
    if clamped != commission_rate:
        logger.debug(f"Commission rate {commission_rate} clamped to {clamped}")
    return clamped


def effective_minimum_markup(
    category: Category | None,
    commission_rate: Decimal,
    agent_max_rate: Decimal,
) -> Decimal:
    rate = clamp_commission_rate(commission_rate, agent_max_rate)
    reduction = max(ZERO, agent_max_rate) - rate
    return max(ZERO, minimum_markup_percent(category) - reduction)


def adjust_for_commission(
    cost_basis: Decimal,
    category: Category | None,
    commission_rate: Decimal,
    agent_max_rate: Decimal,
    *,
    actual_sell_price: Decimal | None = None,
    mode: PricingMode = PricingMode.GOVERNED,
    term_months: int | None = None,
    favorable_above: Decimal | None = None,
) -> PricingResult:
    """
    Price a line item from its cost basis.

    ``sell_price`` is the recommended minimum. Markup, margin and the floor
    check are measured against ``actual_sell_price`` when the user has set one.
    """
    if term_months is None or term_months < 1:
        term_months = get_settings().default_term_months

    rate = clamp_commission_rate(commission_rate, agent_max_rate)
    if mode is PricingMode.UNCONSTRAINED:
        floor = ZERO
        reduction = ZERO
        sell_price = round2(cost_basis)
    else:
        reduction = max(ZERO, agent_max_rate) - rate
        floor = effective_minimum_markup(category, rate, agent_max_rate)
        sell_price = apply_markup(cost_basis, floor)

    actual = sell_price if actual_sell_price is None else actual_sell_price
    current = markup_percent(cost_basis, actual)

    message = None
    if mode is PricingMode.GOVERNED:
        message = check_sell_price(cost_basis, actual, floor)

    return PricingResult(
        term_months=term_months,
        cost_basis=round2(cost_basis),
        sell_price=sell_price,
        effective_minimum_markup_percent=round2(floor),
        current_markup_percent=round2(current),
        profit_margin_percent=round2(current),
        margin_band=margin_band(current, favorable_above),
        commission_rate=rate,
        commission_reduction=reduction,
        validation_message=message,
    )


def reconcile_commission(
    cost_basis: Decimal,
    sell_price: Decimal,
    category: Category | None,
    agent_max_rate: Decimal,
) -> CommissionCheck:
    """Charge a markup shortfall against the agent's commission."""
    floor = minimum_markup_percent(category)
    ceiling = max(ZERO, agent_max_rate)
    current = markup_percent(cost_basis, sell_price)

    shortfall = max(ZERO, floor - current)
    reduction = min(shortfall, ceiling)
    final_rate = max(ZERO, ceiling - reduction)

    if current < 0:
        return CommissionCheck(
            minimum_markup_percent=floor,
            current_markup_percent=round2(current),
            commission_reduction=round2(reduction),
            final_commission_rate=round2(final_rate),
            is_valid=False,
            message="Sell price cannot be below cost",
        )

    message = None
    if reduction > 0:
        shown = reduction.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
        message = (
            f"Commission reduced by {shown}% due to markup "
            f"below minimum ({format_percent(floor)}%)"
        )
    return CommissionCheck(
        minimum_markup_percent=floor,
        current_markup_percent=round2(current),
        commission_reduction=round2(reduction),
        final_commission_rate=round2(final_rate),
        is_valid=True,
        message=message,
    )
