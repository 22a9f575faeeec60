"""
Folds the optional add-on fees of a line item into one monthly cost basis.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from quote_pricing.models.schemas import LineItemSource
from quote_pricing.utils.money import round2

from .term_parser import parse_term_months

logger = logging.getLogger(__name__)


def amortize(amount: Decimal, term_months: int) -> Decimal:
    """Spread a one-time amount evenly over the contract term."""
    return amount / max(1, term_months)


def rollup_cost(source: LineItemSource, term_months: int | None = None) -> Decimal:
    """
    Return the cent-rounded monthly cost basis for ``source``.

    base price
      + static IP fee        (if enabled)
      + static IP /29 fee    (if enabled)
      + install fee / term   (if enabled)
      + other costs
    """
    if term_months is None:
        term_months = parse_term_months(source.term_label)

    total = source.base_price
    if source.static_ip_fee_enabled:
        total += source.static_ip_fee
    if source.static_ip5_fee_enabled:
        total += source.static_ip5_fee
    if source.install_fee_enabled:
        total += amortize(source.install_fee, term_months)
    total += source.other_costs

    cost_basis = round2(total)
    logger.debug(f"Cost basis {cost_basis} ({term_months} month term)")
    return cost_basis
