"""
Data schemas for the price book, proposal selections and pricing results.
Configuration records are read by the pricing engine, never mutated by it.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field

from .enums import (
    MarginType,
    SystemTier,
    MaintenanceTier,
    FinancingType,
    PaymentMethod,
    IncentiveType,
)


# ── Priced items ─────────────────────────────────────────


class PricedItem(BaseModel):
    """Anything sold at base cost plus a margin rule."""
    id: str = ""
    name: str = ""
    base_cost: float = Field(default=0.0, ge=0)
    margin_type: MarginType = MarginType.FIXED
    margin_amount: float = 0.0  # dollars when fixed, percent of base_cost otherwise


class HVACSystem(PricedItem):
    """Customer-facing equipment tier."""
    tier: SystemTier = SystemTier.GOOD
    description: str = ""
    features: list[str] = []
    enabled: bool = True


class AddOn(PricedItem):
    description: str = ""
    enabled: bool = True
    selected: bool = False  # proposal-time flag, ignored by the price book


class MaintenancePlan(PricedItem):
    tier: MaintenanceTier = MaintenanceTier.BASIC
    description: str = ""
    visits_per_year: int = 1
    features: list[str] = []
    enabled: bool = True


# ── Maintenance bundles ──────────────────────────────────


class BundleDiscount(BaseModel):
    """Discount applied to a multi-year prepaid maintenance total."""
    id: str = ""
    years: int
    discount_percent: float = 0.0
    label: str = ""
    badge: Optional[str] = None


class BundleTotal(BaseModel):
    total: float
    discount: float
    final_price: float


# ── Incentives ───────────────────────────────────────────


class Incentive(BaseModel):
    id: str = ""
    name: str = ""
    amount: float = 0.0  # flat dollars
    type: IncentiveType = IncentiveType.REBATE
    description: str = ""
    requirements: list[str] = []
    available: bool = True
    selected: bool = False


# ── Financing ────────────────────────────────────────────


class FinancingOption(BaseModel):
    id: str = ""
    name: str = ""
    type: FinancingType = FinancingType.CASH
    term_months: int = Field(default=0, ge=0)  # 0 for cash
    apr: float = Field(default=0.0, ge=0)
    dealer_fee: float = 0.0
    description: str = ""
    available: bool = True
    provider: Optional[str] = None
    escalator_percent: float = 0.0  # lease products only: 0, 0.99 or 1.99


class LeasePayment(BaseModel):
    monthly_payment: float
    total_cost: float
    escalator_note: str


class LeaseYear(BaseModel):
    year: int  # 1-based contract year
    monthly_payment: float
    yearly_cost: float


class LeaseQuote(BaseModel):
    """Year-by-year projection of one payment-factor lease product."""
    name: str
    term_years: int
    escalator_percent: float
    payment_factor: float
    monthly_payments: list[LeaseYear] = []
    total_amount_paid: float = 0.0


# ── Job costing ──────────────────────────────────────────


class PriceBookUnit(BaseModel):
    """Specific condenser model used for detailed job costing."""
    id: str = ""
    name: str = ""
    tier: SystemTier = SystemTier.GOOD
    tonnage: float = 0.0
    equipment_cost: float = Field(default=0.0, ge=0)
    install_labor_hours: float = Field(default=0.0, ge=0)
    seer_rating: float = 0.0
    brand: str = ""
    model_number: str = ""
    lead_time_days: int = 0
    system_type: str = ""


class LaborRate(BaseModel):
    id: str = ""
    name: str = ""
    description: str = ""
    rate: float = 0.0  # dollars per hour
    is_default: bool = False


class PermitFee(BaseModel):
    id: str = ""
    name: str = ""
    tonnage_range: str = ""
    max_tonnage: float = 0.0  # largest system tonnage this fee covers
    fee: float = 0.0


class UnitCostBreakdown(BaseModel):
    equipment: float
    labor: float
    permit: float
    total: float


# ── Price book ───────────────────────────────────────────


class PricingSettings(BaseModel):
    overhead_multiplier: float = 1.15
    profit_margin: float = 20.0  # percent
    tax_rate: float = 0.0
    margin_visible: bool = True
    cash_markup: float = 20.0  # percent added on the pay-in-full path


class PriceBook(BaseModel):
    """Admin-configured pricing inputs, passed explicitly into the engine."""
    hvac_systems: list[HVACSystem] = []
    add_ons: list[AddOn] = []
    maintenance_plans: list[MaintenancePlan] = []
    bundle_discounts: list[BundleDiscount] = []
    incentives: list[Incentive] = []
    financing_options: list[FinancingOption] = []
    units: list[PriceBookUnit] = []
    labor_rates: list[LaborRate] = []
    permit_fees: list[PermitFee] = []
    settings: PricingSettings = Field(default_factory=PricingSettings)


# ── Proposal ─────────────────────────────────────────────


class ProposalSelection(BaseModel):
    """Builder state the totals are computed from."""
    tier: Optional[SystemTier] = None
    add_on_ids: list[str] = []
    maintenance_plan_id: Optional[str] = None
    years: int = Field(default=1, ge=1)
    incentive_ids: list[str] = []
    payment_method: PaymentMethod = PaymentMethod.CASH
    financing_option_id: Optional[str] = None


class ProposalTotals(BaseModel):
    payment_method: PaymentMethod = PaymentMethod.CASH
    equipment_price: float = 0.0
    add_ons_total: float = 0.0
    maintenance_total: float = 0.0
    incentives_total: float = 0.0
    subtotal: float = 0.0
    grand_total: float = 0.0
    monthly_payment: Optional[float] = None
    lease: Optional[LeasePayment] = None
