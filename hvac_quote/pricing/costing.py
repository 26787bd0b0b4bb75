"""
Job costing for price book units and tier price lookup.
"""

from __future__ import annotations

from typing import Sequence

from hvac_quote.models.enums import SystemTier
from hvac_quote.models.schemas import (
    HVACSystem,
    LaborRate,
    PermitFee,
    PriceBookUnit,
    PricingSettings,
    UnitCostBreakdown,
)
from hvac_quote.pricing.margin import sales_price
from hvac_quote.pricing.rounding import WHOLE_DOLLARS, round_money

# Used when no system is configured for a tier
DEFAULT_TIER_PRICES: dict[SystemTier, float] = {
    SystemTier.GOOD: 12499,
    SystemTier.BETTER: 14499,
    SystemTier.BEST: 18499,
}

FALLBACK_LABOR_RATE = 150.0
FALLBACK_PERMIT_FEE = 200.0


def default_labor_rate(labor_rates: Sequence[LaborRate]) -> float:
    for rate in labor_rates:
        if rate.is_default:
            return rate.rate
    return FALLBACK_LABOR_RATE


def permit_fee_for(tonnage: float, permit_fees: Sequence[PermitFee]) -> float:
    """
    Fee of the smallest bracket that covers ``tonnage``. Units larger than
    every bracket pay the largest bracket's fee.
    """
    brackets = sorted(permit_fees, key=lambda p: p.max_tonnage)
    if not brackets:
        return FALLBACK_PERMIT_FEE
    for permit in brackets:
        if tonnage <= permit.max_tonnage:
            return permit.fee
    return brackets[-1].fee


def unit_total_cost(
    unit: PriceBookUnit,
    labor_rates: Sequence[LaborRate],
    permit_fees: Sequence[PermitFee],
    settings: PricingSettings,
) -> UnitCostBreakdown:
    labor = unit.install_labor_hours * default_labor_rate(labor_rates)
    permit = permit_fee_for(unit.tonnage, permit_fees)

    subtotal = unit.equipment_cost + labor + permit
    with_overhead = subtotal * settings.overhead_multiplier
    total = round_money(with_overhead * (1 + settings.profit_margin / 100), WHOLE_DOLLARS)

    return UnitCostBreakdown(equipment=unit.equipment_cost, labor=labor, permit=permit, total=total)


def tier_price(systems: Sequence[HVACSystem], tier: SystemTier) -> float:
    for system in systems:
        if system.tier == tier and system.enabled:
            return sales_price(system)
    return DEFAULT_TIER_PRICES[tier]
