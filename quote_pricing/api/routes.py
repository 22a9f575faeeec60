"""
API routes — thin HTTP layer that delegates to the PricingService.

Routes:
  GET  /health                   → API health check
  POST /api/pricing/term         → Parse a contract-term label into months
  POST /api/pricing/line-item    → Price one line item (cost basis, floor, markup)
  POST /api/pricing/quote        → Quote totals (MRC / NRC) with per-line margins
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from quote_pricing.config import get_settings
from quote_pricing.models.schemas import (
    Category,
    PricingRequest,
    PricingResult,
    QuoteLineItem,
    QuoteTotals,
)
from quote_pricing.pricing import PricingService

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
pricing_router = APIRouter()


# ── Request / response schemas ───────────────────────────
class TermRequest(BaseModel):
    term: Optional[str] = None


class TermResponse(BaseModel):
    term: Optional[str] = None
    term_months: int


class LineItemRequest(PricingRequest):
    """A pricing request that may leave category resolution to the server."""
    categories: list[Category] = []
    category_id: Optional[str] = None


class QuoteRequest(BaseModel):
    items: list[QuoteLineItem] = []


class QuoteResponse(BaseModel):
    items: list[QuoteLineItem]
    totals: QuoteTotals


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check():
    settings = get_settings()
    return {
        "status": "ok",
        "app": settings.app_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Pricing ──────────────────────────────────────────────

@pricing_router.post("/term", response_model=TermResponse)
async def parse_term(body: TermRequest):
    months = PricingService().parse_term(body.term)
    return TermResponse(term=body.term, term_months=months)


@pricing_router.post("/line-item", response_model=PricingResult)
async def price_line_item(body: LineItemRequest):
    service = PricingService()
    category = body.category
    if category is None and (body.categories or body.category_id):
        category = service.resolve_category(
            body.source.service_type, body.categories, body.category_id
        )

    request = PricingRequest(
        source=body.source,
        category=category,
        agent=body.agent,
        commission_rate=body.commission_rate,
        mode=body.mode,
        unit_sell_price=body.unit_sell_price,
    )
    result = service.price_line_item(request)
    logger.info(
        f"Line item priced: cost {result.cost_basis} → {result.sell_price} "
        f"({category.name if category else 'no category'})"
    )
    return result


@pricing_router.post("/quote", response_model=QuoteResponse)
async def price_quote(body: QuoteRequest):
    totals = PricingService().aggregate(body.items)
    logger.info(f"Quote totals: MRC {totals.mrc_total}, NRC {totals.nrc_total}")
    return QuoteResponse(items=body.items, totals=totals)
