"""
Tests: pricing a quote document from the command-line entry point.

Run with:
    pytest quote_pricing/tests/test_main.py -v
"""

import json

import pytest

from quote_pricing.main import run

QUOTE = {
    "categories": [
        {"id": "c1", "name": "Fiber", "type": "fiber", "minimum_markup_percent": 10},
    ],
    "agent": {"name": "Pat", "max_commission_rate": 15},
    "lines": [
        {
            "name": "DIA 100M",
            "charge_type": "MRC",
            "quantity": 2,
            "commission_rate": 15,
            "source": {
                "base_price": 200,
                "install_fee": 600,
                "install_fee_enabled": True,
                "term_label": "36 Months",
                "service_type": "fiber",
            },
        },
        {
            "name": "Install",
            "charge_type": "nrc",
            "source": {"base_price": 500, "service_type": "labor"},
        },
    ],
}


class TestRun:
    def test_prices_document(self, tmp_path):
        path = tmp_path / "quote.json"
        path.write_text(json.dumps(QUOTE), encoding="utf-8")

        summary = run(str(path))

        first = summary["lines"][0]
        assert first["result"]["sell_price"] == "238.34"
        assert first["item"]["total_price"] == "476.68"
        assert summary["totals"]["mrc_total"] == "476.68"
        assert summary["totals"]["nrc_total"] == "500.00"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            run(str(tmp_path / "nope.json"))

    def test_not_a_quote_document(self, tmp_path):
        path = tmp_path / "quote.json"
        path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
        with pytest.raises(ValueError):
            run(str(path))
