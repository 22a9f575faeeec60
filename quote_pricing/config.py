"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Quote Pricing Engine"
    debug: bool = False

    # ── Pricing ──────────────────────────────────────────
    default_term_months: int = Field(default=36, ge=1)
    favorable_margin_percent: Decimal = Decimal("20")

    # ── API server ───────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
