"""
Pricing engine — pure functions over explicit configuration.

Callers import from this package:
    from hvac_quote.pricing import compute_totals, lease_payment
"""

from .errors import PricingError, InvalidConfigurationError, UnsupportedFinancingTermError
from .rounding import WHOLE_DOLLARS, CENTS, round_money
from .margin import sales_price, gross_profit, markup_percent, plan_monthly_price, cost_per_visit
from .cash_markup import customer_price
from .bundles import bundle_total, find_bundle_discount
from .loans import monthly_payment
from .lease import PAYMENT_FACTORS, payment_factor, lease_payment, lease_schedule, lease_options
from .financing import financing_by_type, monthly_payment_for_option
from .costing import DEFAULT_TIER_PRICES, unit_total_cost, tier_price
from .totals import compute_totals

__all__ = [
    "PricingError",
    "InvalidConfigurationError",
    "UnsupportedFinancingTermError",
    "WHOLE_DOLLARS",
    "CENTS",
    "round_money",
    "sales_price",
    "gross_profit",
    "markup_percent",
    "plan_monthly_price",
    "cost_per_visit",
    "customer_price",
    "bundle_total",
    "find_bundle_discount",
    "monthly_payment",
    "PAYMENT_FACTORS",
    "payment_factor",
    "lease_payment",
    "lease_schedule",
    "lease_options",
    "financing_by_type",
    "monthly_payment_for_option",
    "DEFAULT_TIER_PRICES",
    "unit_total_cost",
    "tier_price",
    "compute_totals",
]
