"""Standard loan amortizer."""

from __future__ import annotations

from hvac_quote.pricing.errors import InvalidConfigurationError, UnsupportedFinancingTermError
from hvac_quote.pricing.rounding import CENTS, round_money


def monthly_payment(principal: float, apr: float, term_months: int) -> float:
    """
    Fixed monthly payment for a fully amortizing loan.

    A zero APR is plain division and is left unrounded; otherwise the
    standard amortization formula is rounded to cents.
    """
    if term_months <= 0:
        raise UnsupportedFinancingTermError(
            f"Loan term must be positive, got {term_months} months", field="term_months"
        )
    if principal < 0:
        raise InvalidConfigurationError(f"Principal cannot be negative: {principal}", field="principal")
    if apr < 0:
        raise InvalidConfigurationError(f"APR cannot be negative: {apr}", field="apr")

    if apr == 0:
        return principal / term_months

    monthly_rate = apr / 100 / 12
    try:
        growth = (1 + monthly_rate) ** term_months
    except OverflowError:
        raise UnsupportedFinancingTermError(
            f"Loan term of {term_months} months at {apr}% APR is out of range", field="term_months"
        )

    # Rate too small to register in floating point
    if growth == 1:
        return principal / term_months

    payment = principal * monthly_rate / (1 - 1 / growth)
    return round_money(payment, CENTS)
