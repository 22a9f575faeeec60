"""
Quote Pricing Engine — Main Entry Point

Price a quote document from the command line:
    python -m quote_pricing path/to/quote.json

Run as an API server (for the quoting UI):
    python -m quote_pricing --serve
    # or: uvicorn quote_pricing.api:app --reload --port 8000

Or import and run programmatically:
    from quote_pricing.main import run
    result = run("path/to/quote.json")

A quote document looks like:
    {
      "categories": [{"id": "c1", "name": "Fiber", "type": "fiber", "minimum_markup_percent": 10}],
      "agent": {"name": "Pat", "max_commission_rate": 15},
      "lines": [
        {"name": "DIA 100M", "charge_type": "MRC", "quantity": 1, "commission_rate": 15,
         "source": {"base_price": 200, "term_label": "36 Months", "service_type": "fiber",
                    "install_fee": 600, "install_fee_enabled": true}}
      ]
    }
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any

from quote_pricing.config import get_settings
from quote_pricing.models.enums import ChargeType
from quote_pricing.models.schemas import Agent, Category, PricingRequest, QuoteLineItem
from quote_pricing.pricing import PricingService
from quote_pricing.utils.logger import setup_logging


def run(file_path: str) -> dict[str, Any]:
    """Price every line of a quote document and return lines plus totals."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Quote file not found: {file_path}")

    document = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(document, dict) or not isinstance(document.get("lines"), list):
        raise ValueError(f"{file_path} is not a quote document (expected a 'lines' list)")

    logger.info("=" * 60)
    logger.info(f"  {settings.app_name.upper()}")
    logger.info(f"  Quote file: {path.name}")
    logger.info("=" * 60)

    service = PricingService(settings)
    categories = [Category(**c) for c in document.get("categories", [])]
    agent = Agent(**document.get("agent", {}))

    priced: list[dict[str, Any]] = []
    items: list[QuoteLineItem] = []
    for raw in document["lines"]:
        line = dict(raw)
        charge_type = ChargeType(str(line.pop("charge_type", ChargeType.MRC.value)).upper())
        quantity = line.pop("quantity", 1)
        name = line.pop("name", "")
        category_id = line.pop("category_id", None)
        line.setdefault("agent", agent)

        request = PricingRequest(**line)
        if request.category is None:
            category = service.resolve_category(
                request.source.service_type, categories, category_id
            )
            request = request.model_copy(update={"category": category})

        result = service.price_line_item(request)
        item = QuoteLineItem(
            name=name,
            quantity=quantity,
            unit_sell_price=request.unit_sell_price if request.unit_sell_price is not None else result.sell_price,
            charge_type=charge_type,
            cost=result.cost_basis,
            commission_rate=result.commission_rate,
        )
        items.append(item)
        priced.append({
            "name": name,
            "result": result.model_dump(mode="json"),
            "item": item.model_dump(mode="json"),
        })

    totals = service.aggregate(items)
    summary = {"lines": priced, "totals": totals.model_dump(mode="json")}
    _print_summary(summary)
    return summary


def _print_summary(summary: dict[str, Any]) -> None:
    """Print a human-readable summary of the priced quote."""
    logger = logging.getLogger(__name__)

    logger.info("-" * 60)
    for line in summary["lines"]:
        result = line["result"]
        item = line["item"]
        logger.info(
            f"  {line['name'] or 'line':<24} {item['charge_type']} "
            f"x{item['quantity']:<3} cost ${result['cost_basis']:>10} "
            f"sell ${item['unit_sell_price']:>10} total ${item['total_price']:>10}"
        )
        if result.get("validation_message"):
            logger.info(f"    ! {result['validation_message']}")

    totals = summary["totals"]
    logger.info("-" * 60)
    logger.info(f"  MRC Total:      ${totals['mrc_total']}")
    logger.info(f"  NRC Total:      ${totals['nrc_total']}")
    logger.info(f"  Grand Total:    ${totals['grand_total']}")
    logger.info(f"  Commission:     ${totals['commission_total']}")
    logger.info("-" * 60)


def serve(host: str | None = None, port: int | None = None) -> None:
    """Start the FastAPI server."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    host = host or settings.api_host
    port = port or settings.api_port
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("quote_pricing.api:app", host=host, port=port, reload=settings.debug)


if __name__ == "__main__":
    if "--serve" in sys.argv:
        serve()
    elif len(sys.argv) > 1:
        run(sys.argv[1])
    else:
        print(__doc__)
