"""
Bundle discount calculator for multi-year prepaid maintenance.
A term with no configured discount is priced at the full N-year total.
"""

from __future__ import annotations

from typing import Optional, Sequence

from hvac_quote.models.schemas import BundleDiscount, BundleTotal
from hvac_quote.pricing.rounding import WHOLE_DOLLARS, round_money


def find_bundle_discount(
    years: int, discounts: Sequence[BundleDiscount]
) -> Optional[BundleDiscount]:
    for discount in discounts:
        if discount.years == years:
            return discount
    return None


def bundle_total(
    annual_price: float, years: int, discounts: Sequence[BundleDiscount] = ()
) -> BundleTotal:
    """Multi-year total, the bundle discount for that term, and what's left."""
    total = annual_price * years
    match = find_bundle_discount(years, discounts)
    discount_percent = match.discount_percent if match else 0.0
    discount = round_money(total * (discount_percent / 100), WHOLE_DOLLARS)
    return BundleTotal(total=total, discount=discount, final_price=total - discount)
