"""
Decimal coercion and cent rounding shared by every pricing stage.

All amounts are ``Decimal``; binary floats are converted through ``str`` so
that ``0.1`` becomes ``Decimal("0.1")`` rather than its float expansion.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal | None:
    """Return ``value`` as a finite Decimal, or None when it is not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            result = Decimal(text)
        except InvalidOperation:
            return None
    if not result.is_finite():
        return None
    return result


def to_money(value: Any) -> Decimal:
    """Coerce a monetary input; absent, NaN and negative values become 0."""
    amount = to_decimal(value)
    if amount is None:
        if value not in (None, ""):
            logger.debug(f"Non-numeric amount {value!r} treated as 0")
        return ZERO
    if amount < 0:
        logger.debug(f"Negative amount {amount} treated as 0")
        return ZERO
    return amount


def to_percent(value: Any) -> Decimal | None:
    """Coerce a percentage; None stays None so 'no floor' survives."""
    return to_decimal(value)


def round2(value: Decimal) -> Decimal:
    """Round half-up to two decimal places (cents, or hundredths of a percent)."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    return f"${round2(value):,.2f}"


def format_percent(value: Decimal) -> str:
    """Render a percent without trailing zeros: 20 → '20', 12.5 → '12.5'."""
    text = f"{round2(value):f}".rstrip("0").rstrip(".")
    return text or "0"
