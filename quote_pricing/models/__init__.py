from .enums import ChargeType, MarginBand, PricingMode
from .schemas import (
    Agent,
    Category,
    CommissionCheck,
    LineItemSource,
    PricingRequest,
    PricingResult,
    QuoteLineItem,
    QuoteTotals,
)

__all__ = [
    "ChargeType",
    "MarginBand",
    "PricingMode",
    "Agent",
    "Category",
    "CommissionCheck",
    "LineItemSource",
    "PricingRequest",
    "PricingResult",
    "QuoteLineItem",
    "QuoteTotals",
]
