"""
Term Parser — contract-term labels ("36 Months", "2 Year") to months.
Free text never fails to parse: anything unrecognised is the default term.
"""

from __future__ import annotations

import logging
import re

from quote_pricing.config import get_settings

logger = logging.getLogger(__name__)

_MONTHS_RE = re.compile(r"(\d+)\s*month", re.IGNORECASE)
_YEARS_RE = re.compile(r"(\d+)\s*year", re.IGNORECASE)


def parse_term_months(term: str | None, default: int | None = None) -> int:
    """Return the contract length in months, always >= 1."""
    fallback = default if default is not None and default >= 1 else get_settings().default_term_months

    if not term or not term.strip():
        return fallback

    match = _MONTHS_RE.search(term)
    if match:
        months = int(match.group(1))
    else:
        match = _YEARS_RE.search(term)
        months = int(match.group(1)) * 12 if match else 0

    if months < 1:
        logger.debug(f"Unparseable term {term!r}, using {fallback} months")
        return fallback
    return months
