"""
Financing dispatch — pick the loan amortizer or the lease factor engine for
a configured financing option.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from hvac_quote.models.enums import FinancingType
from hvac_quote.models.schemas import FinancingOption, LeasePayment
from hvac_quote.pricing import lease, loans

logger = logging.getLogger(__name__)

DEFAULT_LEASE_PROVIDER = "Lightreach"

# Lease products are only sold on these terms
LEASE_TERM_MONTHS = (120, 144)


def financing_by_type(
    options: Sequence[FinancingOption], financing_type: FinancingType
) -> list[FinancingOption]:
    """Available options of one type; leases restricted to supported terms."""
    matches = [o for o in options if o.type == financing_type and o.available]
    if financing_type == FinancingType.LEASE:
        return [o for o in matches if o.term_months in LEASE_TERM_MONTHS]
    return matches


def uses_payment_factors(option: FinancingOption, lease_provider: str = DEFAULT_LEASE_PROVIDER) -> bool:
    return option.type == FinancingType.LEASE and option.provider == lease_provider


def lease_payment_for_option(principal: float, option: FinancingOption) -> LeasePayment:
    return lease.lease_payment(principal, option.term_months // 12, option.escalator_percent)


def monthly_payment_for_option(
    principal: float,
    option: FinancingOption,
    lease_provider: str = DEFAULT_LEASE_PROVIDER,
) -> Optional[float]:
    """
    Monthly payment for ``principal`` under ``option``.
    Returns None for cash; raises PricingError for unsupported terms.
    """
    if option.type == FinancingType.CASH:
        return None

    if uses_payment_factors(option, lease_provider):
        return lease_payment_for_option(principal, option).monthly_payment

    logger.debug(
        f"Amortizing {principal} over {option.term_months} months at {option.apr}% "
        f"({option.name or option.id})"
    )
    return loans.monthly_payment(principal, option.apr, option.term_months)
