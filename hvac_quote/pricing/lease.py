"""
Lease payment-factor engine for the Comfort Plan lease product.

The month-1 payment is a fixed fraction of the system price, taken from the
financing provider's published calculator. The factors are given constants
and are not derived from an APR. Each contract anniversary raises the
monthly payment by the escalator rate.
"""

from __future__ import annotations

import logging

from hvac_quote.models.schemas import LeasePayment, LeaseQuote, LeaseYear
from hvac_quote.pricing.errors import UnsupportedFinancingTermError
from hvac_quote.pricing.rounding import CENTS, round_money

logger = logging.getLogger(__name__)

# (term years, annual escalator %) → month-1 payment per dollar financed.
# Checked against the provider calculator at a $14,998 system price.
PAYMENT_FACTORS: dict[tuple[int, float], float] = {
    (10, 0.0): 0.01546,   # $231.92/mo
    (10, 0.99): 0.01487,  # $222.99/mo
    (10, 1.99): 0.01416,  # $212.33/mo
    (12, 0.0): 0.01397,   # $209.57/mo
    (12, 0.99): 0.01321,  # $198.08/mo
    (12, 1.99): 0.01247,  # $187.04/mo
}

LEASE_TERMS_YEARS = (10, 12)

_ESCALATOR_TOLERANCE = 1e-6


def payment_factor(term_years: int, escalator_percent: float) -> float:
    """Look up the payment factor, or raise for a term the product doesn't offer."""
    for (term, escalator), factor in PAYMENT_FACTORS.items():
        if term == term_years and abs(escalator - escalator_percent) < _ESCALATOR_TOLERANCE:
            return factor
    raise UnsupportedFinancingTermError(
        f"No lease payment factor for {term_years} years at {escalator_percent}% escalator "
        f"(supported terms: {', '.join(str(t) for t in LEASE_TERMS_YEARS)} years; "
        f"escalators: 0, 0.99, 1.99%)",
        field="term_years" if term_years not in LEASE_TERMS_YEARS else "escalator_percent",
    )


def escalator_note(escalator_percent: float) -> str:
    if escalator_percent > 0:
        return f"Year 1, increases {_format_percent(escalator_percent)}% annually"
    return "Fixed monthly payment"


def lease_payment(system_price: float, term_years: int, escalator_percent: float) -> LeasePayment:
    """Month-1 payment and projected total cost over the full lease term."""
    factor = payment_factor(term_years, escalator_percent)
    monthly = round_money(system_price * factor, CENTS)

    total_cost = 0.0
    current_monthly = monthly
    for year in range(term_years):
        if year > 0 and escalator_percent > 0:
            current_monthly = current_monthly * (1 + escalator_percent / 100)
        total_cost += current_monthly * 12

    logger.debug(
        f"Lease {term_years}yr @ {escalator_percent}%: factor={factor} "
        f"price={system_price} monthly={monthly}"
    )

    return LeasePayment(
        monthly_payment=monthly,
        total_cost=round_money(total_cost, CENTS),
        escalator_note=escalator_note(escalator_percent),
    )


def lease_schedule(system_price: float, term_years: int, escalator_percent: float) -> LeaseQuote:
    """Year-by-year monthly payment and yearly cost for one lease product."""
    factor = payment_factor(term_years, escalator_percent)
    current_monthly = round_money(system_price * factor, CENTS)

    years: list[LeaseYear] = []
    total_paid = 0.0
    for year in range(1, term_years + 1):
        yearly = current_monthly * 12
        years.append(LeaseYear(
            year=year,
            monthly_payment=round_money(current_monthly, CENTS),
            yearly_cost=round_money(yearly, CENTS),
        ))
        total_paid += yearly
        if escalator_percent > 0:
            current_monthly = current_monthly * (1 + escalator_percent / 100)

    return LeaseQuote(
        name=f"{term_years} Year Comfort Plan ({_format_percent(escalator_percent)}% escalator)",
        term_years=term_years,
        escalator_percent=escalator_percent,
        payment_factor=factor,
        monthly_payments=years,
        total_amount_paid=round_money(total_paid, CENTS),
    )


def lease_options(system_price: float) -> list[LeaseQuote]:
    """Schedules for every product in the factor table, 10-year terms first."""
    return [
        lease_schedule(system_price, term, escalator)
        for term, escalator in PAYMENT_FACTORS
    ]


def _format_percent(value: float) -> str:
    return f"{value:g}"
