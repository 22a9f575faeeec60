"""
Quote-level MRC / NRC totals and per-line margin display.
Order of the line items never affects the result.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from quote_pricing.config import get_settings
from quote_pricing.models.enums import ChargeType, MarginBand
from quote_pricing.models.schemas import QuoteLineItem, QuoteTotals
from quote_pricing.utils.money import HUNDRED, ZERO, round2

logger = logging.getLogger(__name__)


def profit_margin_percent(cost: Decimal, sell_price: Decimal) -> Decimal:
    """``(sell - cost) / cost`` in percent, unrounded; 0 when cost is 0."""
    if cost == 0:
        return ZERO
    return (sell_price - cost) / cost * HUNDRED


def margin_band(percent: Decimal, favorable_above: Decimal | None = None) -> MarginBand:
    if favorable_above is None:
        favorable_above = get_settings().favorable_margin_percent
    if percent > favorable_above:
        return MarginBand.FAVORABLE
    if percent > 0:
        return MarginBand.ACCEPTABLE
    if percent == 0:
        return MarginBand.BREAKEVEN
    return MarginBand.LOSS


def line_margin(
    item: QuoteLineItem,
    favorable_above: Decimal | None = None,
) -> tuple[Decimal, MarginBand]:
    """Display margin for one quote line: (rounded percent, band)."""
    percent = profit_margin_percent(item.cost, item.unit_sell_price)
    return round2(percent), margin_band(percent, favorable_above)


def aggregate(items: Iterable[QuoteLineItem]) -> QuoteTotals:
    mrc_total = ZERO
    nrc_total = ZERO
    mrc_count = 0
    nrc_count = 0
    commission_total = ZERO

    for item in items:
        if item.charge_type is ChargeType.NRC:
            nrc_total += item.total_price
            nrc_count += 1
        else:
            mrc_total += item.total_price
            mrc_count += 1
        commission_total += item.commission_amount

    totals = QuoteTotals(
        mrc_total=round2(mrc_total),
        nrc_total=round2(nrc_total),
        mrc_count=mrc_count,
        nrc_count=nrc_count,
        commission_total=round2(commission_total),
    )
    logger.debug(
        f"Aggregated {mrc_count} MRC / {nrc_count} NRC lines: "
        f"MRC {totals.mrc_total}, NRC {totals.nrc_total}"
    )
    return totals
