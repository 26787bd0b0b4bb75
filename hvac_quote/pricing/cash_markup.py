"""Cash markup — the extra percentage a pay-in-full customer sees."""

from __future__ import annotations

from hvac_quote.pricing.rounding import CENTS, round_money


def customer_price(sales_price: float, cash_markup_percent: float, digits: int = CENTS) -> float:
    """Apply the cash markup to a sales price, rounded to cents."""
    return round_money(sales_price * (1 + cash_markup_percent / 100), digits)
