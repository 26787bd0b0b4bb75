"""
Currency rounding rules.

Sales prices, gross profit and bundle discounts are whole dollars; customer
prices, payments and totals are cents. Ties round half up (toward +inf).
"""

from __future__ import annotations

import math

WHOLE_DOLLARS = 0
CENTS = 2


def round_money(value: float, digits: int = CENTS) -> float:
    """Round ``value`` half up to ``digits`` decimal places."""
    scale = 10 ** digits
    rounded = math.floor(value * scale + 0.5) / scale
    if digits == WHOLE_DOLLARS:
        return float(int(rounded))
    return rounded
