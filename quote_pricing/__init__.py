"""Quote line-item pricing engine."""

__version__ = "0.1.0"

from quote_pricing.pricing import PricingService  # noqa: E402

__all__ = ["PricingService", "__version__"]
