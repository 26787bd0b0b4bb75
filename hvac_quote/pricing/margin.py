"""
Margin calculator — base cost plus a margin rule → sales price.

Written once against PricedItem, so equipment tiers, add-ons and
maintenance plans all price the same way.
"""

from __future__ import annotations

from hvac_quote.models.enums import MarginType
from hvac_quote.models.schemas import MaintenancePlan, PricedItem
from hvac_quote.pricing.errors import InvalidConfigurationError
from hvac_quote.pricing.rounding import WHOLE_DOLLARS, round_money


def sales_price(item: PricedItem, digits: int = WHOLE_DOLLARS) -> float:
    """Base cost plus margin, in whole dollars for percentage margins."""
    if item.margin_type == MarginType.FIXED:
        return item.base_cost + item.margin_amount
    return round_money(item.base_cost * (1 + item.margin_amount / 100), digits)


def gross_profit(item: PricedItem, digits: int = WHOLE_DOLLARS) -> float:
    if item.margin_type == MarginType.FIXED:
        return item.margin_amount
    return round_money(item.base_cost * (item.margin_amount / 100), digits)


def markup_percent(item: PricedItem) -> float:
    """Gross profit as a percent of base cost, to one decimal place."""
    if item.base_cost <= 0:
        raise InvalidConfigurationError(
            f"Markup is undefined for '{item.name or item.id}' with base cost {item.base_cost}",
            field="base_cost",
        )
    return round_money(gross_profit(item) / item.base_cost * 1000, WHOLE_DOLLARS) / 10


def plan_monthly_price(plan: MaintenancePlan) -> float:
    return round_money(sales_price(plan) / 12, WHOLE_DOLLARS)


def cost_per_visit(plan: MaintenancePlan) -> float:
    if plan.visits_per_year <= 0:
        raise InvalidConfigurationError(
            f"Plan '{plan.name or plan.id}' has no visits per year",
            field="visits_per_year",
        )
    return round_money(sales_price(plan) / plan.visits_per_year, WHOLE_DOLLARS)
