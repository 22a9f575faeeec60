"""
Tests: settings loading.

Run with:
    pytest quote_pricing/tests/test_config.py -v
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from quote_pricing.config import Settings


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.default_term_months == 36
        assert settings.favorable_margin_percent == Decimal("20")

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("DEFAULT_TERM_MONTHS", "24")
        monkeypatch.setenv("FAVORABLE_MARGIN_PERCENT", "25")
        settings = Settings()
        assert settings.default_term_months == 24
        assert settings.favorable_margin_percent == Decimal("25")

    def test_default_term_must_be_positive(self):
        with pytest.raises(ValidationError):
            Settings(default_term_months=0)
