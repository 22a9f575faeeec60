"""
Pricing — the single boundary callers interact with.

    from quote_pricing.pricing import PricingService
"""

from .pricing_service import PricingService

__all__ = ["PricingService"]
