"""
PricingService — the ONLY class callers should import.

This is the facade over the pricing stages:
  • Term Parser          (free-text term → months)
  • Cost Rollup          (base price + enabled fees → monthly cost basis)
  • Markup Engine        (category resolution, minimum-markup floor)
  • Commission Adjuster  (commission-driven floor, privileged bypass)
  • Totals Aggregator    (MRC / NRC quote totals, margin bands)

Every call is a pure function of its arguments; the service keeps nothing
between calls, so a stale result can simply be discarded and recomputed.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from quote_pricing.config import Settings, get_settings
from quote_pricing.models.enums import MarginBand
from quote_pricing.models.schemas import (
    Category,
    CommissionCheck,
    LineItemSource,
    PricingRequest,
    PricingResult,
    QuoteLineItem,
    QuoteTotals,
)
from quote_pricing.utils.money import ZERO

from . import commission_adjuster, cost_rollup, markup_engine, term_parser, totals_aggregator

logger = logging.getLogger(__name__)


class PricingService:
    """
    Facade over all pricing stages.

    Usage:
        from quote_pricing.pricing import PricingService
        service = PricingService()
        result = service.price_line_item(request)
        totals = service.aggregate(items)
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

    # ── Individual stages ────────────────────────────────

    def parse_term(self, term: str | None) -> int:
        return term_parser.parse_term_months(term, default=self.settings.default_term_months)

    def rollup(self, source: LineItemSource) -> Decimal:
        return cost_rollup.rollup_cost(source, self.parse_term(source.term_label))

    def resolve_category(
        self,
        service_type: str,
        categories: Iterable[Category],
        category_id: str | None = None,
    ) -> Category | None:
        return markup_engine.resolve_category(service_type, categories, category_id)

    # ── Line pricing ─────────────────────────────────────

    def price_line_item(self, request: PricingRequest) -> PricingResult:
        """Run term → rollup → markup/commission for one line item."""
        term_months = self.parse_term(request.source.term_label)
        cost_basis = cost_rollup.rollup_cost(request.source, term_months)

        agent_max, rate = self._commission_bounds(request)
        result = commission_adjuster.adjust_for_commission(
            cost_basis,
            request.category,
            rate,
            agent_max,
            actual_sell_price=request.unit_sell_price,
            mode=request.mode,
            term_months=term_months,
            favorable_above=self.settings.favorable_margin_percent,
        )
        logger.debug(
            f"Priced {request.source.service_type or 'line'}: cost {result.cost_basis} "
            f"→ {result.sell_price} (floor {result.effective_minimum_markup_percent}%)"
        )
        return result

    def check_commission(
        self,
        cost_basis: Decimal,
        sell_price: Decimal,
        category: Category | None,
        agent_max_rate: Decimal,
    ) -> CommissionCheck:
        return commission_adjuster.reconcile_commission(
            cost_basis, sell_price, category, agent_max_rate
        )

    # ── Quote totals ─────────────────────────────────────

    def aggregate(self, items: Iterable[QuoteLineItem]) -> QuoteTotals:
        return totals_aggregator.aggregate(items)

    def line_margin(self, item: QuoteLineItem) -> tuple[Decimal, MarginBand]:
        return totals_aggregator.line_margin(item, self.settings.favorable_margin_percent)

    # ── Helpers ──────────────────────────────────────────

    @staticmethod
    def _commission_bounds(request: PricingRequest) -> tuple[Decimal, Decimal]:
        """Agents who opted out of commission price with a zero ceiling."""
        if request.agent.opted_out:
            return ZERO, ZERO
        return request.agent.max_commission_rate, request.commission_rate
