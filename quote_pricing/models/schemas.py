"""
Data schemas for the pricing engine.
Inputs are transient, built per evaluation and discarded after pricing;
nothing here is persisted.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, computed_field, field_validator

from quote_pricing.utils.money import ZERO, round2, to_money, to_percent

from .enums import ChargeType, MarginBand, PricingMode


# ── Pricing inputs ───────────────────────────────────────


class LineItemSource(BaseModel):
    """Cost facts for one priced thing, from a catalog item or a carrier quote."""
    model_config = ConfigDict(frozen=True)

    base_price: Decimal = ZERO  # per month
    term_label: Optional[str] = None
    install_fee: Decimal = ZERO
    install_fee_enabled: bool = False
    static_ip_fee: Decimal = ZERO
    static_ip_fee_enabled: bool = False
    static_ip5_fee: Decimal = ZERO
    static_ip5_fee_enabled: bool = False
    other_costs: Decimal = ZERO
    service_type: str = ""

    @field_validator(
        "base_price", "install_fee", "static_ip_fee", "static_ip5_fee", "other_costs",
        mode="before",
    )
    @classmethod
    def _coerce_money(cls, value: Any) -> Decimal:
        return to_money(value)

    @field_validator("term_label", mode="before")
    @classmethod
    def _coerce_term_label(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    @field_validator("service_type", mode="before")
    @classmethod
    def _coerce_service_type(cls, value: Any) -> str:
        return "" if value is None else str(value)


class Category(BaseModel):
    """A product category; ``minimum_markup_percent`` of None means no floor."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    name: str = ""
    type: str = ""
    minimum_markup_percent: Optional[Decimal] = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str | None:
        return None if value is None else str(value)

    @field_validator("minimum_markup_percent", mode="before")
    @classmethod
    def _coerce_markup(cls, value: Any) -> Decimal | None:
        return to_percent(value)


class Agent(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    max_commission_rate: Decimal = ZERO  # percent
    opted_out: bool = False

    @field_validator("max_commission_rate", mode="before")
    @classmethod
    def _coerce_rate(cls, value: Any) -> Decimal:
        return to_money(value)


class PricingRequest(BaseModel):
    """One line item to price, with its resolved category and chosen commission."""
    source: LineItemSource = LineItemSource()
    category: Optional[Category] = None
    agent: Agent = Agent()
    commission_rate: Decimal = ZERO
    mode: PricingMode = PricingMode.GOVERNED
    unit_sell_price: Optional[Decimal] = None  # user override of the recommendation

    @field_validator("commission_rate", mode="before")
    @classmethod
    def _coerce_commission(cls, value: Any) -> Decimal:
        return to_money(value)

    @field_validator("unit_sell_price", mode="before")
    @classmethod
    def _coerce_unit_price(cls, value: Any) -> Decimal | None:
        if value is None:
            return None
        return to_money(value)


# ── Pricing outputs ──────────────────────────────────────


class PricingResult(BaseModel):
    term_months: int
    cost_basis: Decimal
    sell_price: Decimal  # recommended minimum
    effective_minimum_markup_percent: Decimal = ZERO
    current_markup_percent: Decimal = ZERO
    profit_margin_percent: Decimal = ZERO
    margin_band: MarginBand = MarginBand.BREAKEVEN
    commission_rate: Decimal = ZERO  # after clamping
    commission_reduction: Decimal = ZERO
    validation_message: Optional[str] = None


class CommissionCheck(BaseModel):
    """Commission left to the agent once a manually set price is taken into account."""
    minimum_markup_percent: Decimal = ZERO
    current_markup_percent: Decimal = ZERO
    commission_reduction: Decimal = ZERO
    final_commission_rate: Decimal = ZERO
    is_valid: bool = True
    message: Optional[str] = None


# ── Quote lines & totals ─────────────────────────────────


class QuoteLineItem(BaseModel):
    name: str = ""
    quantity: int = 1
    unit_sell_price: Decimal = ZERO
    charge_type: ChargeType = ChargeType.MRC
    cost: Decimal = ZERO
    commission_rate: Decimal = ZERO

    @field_validator("quantity", mode="before")
    @classmethod
    def _coerce_quantity(cls, value: Any) -> int:
        try:
            quantity = int(value)
        except (TypeError, ValueError):
            return 1
        return quantity if quantity >= 1 else 1

    @field_validator("unit_sell_price", "cost", "commission_rate", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Decimal:
        return to_money(value)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_price(self) -> Decimal:
        return round2(self.unit_sell_price * self.quantity)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def commission_amount(self) -> Decimal:
        return round2(self.total_price * self.commission_rate / 100)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def profit_margin_percent(self) -> Decimal:
        from quote_pricing.pricing.totals_aggregator import profit_margin_percent

        return round2(profit_margin_percent(self.cost, self.unit_sell_price))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def margin_band(self) -> MarginBand:
        from quote_pricing.pricing.totals_aggregator import margin_band, profit_margin_percent

        return margin_band(profit_margin_percent(self.cost, self.unit_sell_price))


class QuoteTotals(BaseModel):
    mrc_total: Decimal = ZERO
    nrc_total: Decimal = ZERO
    mrc_count: int = 0
    nrc_count: int = 0
    commission_total: Decimal = ZERO

    @computed_field  # type: ignore[prop-decorator]
    @property
    def grand_total(self) -> Decimal:
        return self.mrc_total + self.nrc_total
