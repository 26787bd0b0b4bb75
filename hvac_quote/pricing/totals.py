"""
Proposal total aggregator.

Line items are always aggregated at sales price. On the pay-in-full path the
cash markup is applied once to the equipment and to each selected add-on.
Maintenance is priced through the bundle discount only. Financed and leased
totals carry no cash markup and feed the monthly payment directly.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from hvac_quote.models.enums import PaymentMethod
from hvac_quote.models.schemas import (
    AddOn,
    BundleDiscount,
    FinancingOption,
    HVACSystem,
    Incentive,
    MaintenancePlan,
    ProposalTotals,
)
from hvac_quote.pricing.bundles import bundle_total
from hvac_quote.pricing.cash_markup import customer_price
from hvac_quote.pricing.errors import InvalidConfigurationError
from hvac_quote.pricing.financing import (
    DEFAULT_LEASE_PROVIDER,
    lease_payment_for_option,
    monthly_payment_for_option,
    uses_payment_factors,
)
from hvac_quote.pricing.margin import sales_price
from hvac_quote.pricing.rounding import CENTS, round_money

logger = logging.getLogger(__name__)


def compute_totals(
    equipment: Optional[HVACSystem] = None,
    add_ons: Sequence[AddOn] = (),
    maintenance_plan: Optional[MaintenancePlan] = None,
    years: int = 1,
    bundle_discounts: Sequence[BundleDiscount] = (),
    incentives: Sequence[Incentive] = (),
    cash_markup_percent: float = 0.0,
    payment_method: PaymentMethod = PaymentMethod.CASH,
    financing_option: Optional[FinancingOption] = None,
    lease_provider: str = DEFAULT_LEASE_PROVIDER,
) -> ProposalTotals:
    """Recompute every proposal total from the current selections."""
    if (
        payment_method != PaymentMethod.CASH
        and financing_option is not None
        and financing_option.type.value != payment_method.value
    ):
        raise InvalidConfigurationError(
            f"Financing option '{financing_option.name or financing_option.id}' is a "
            f"{financing_option.type.value} option and cannot be used to {payment_method.value}",
            field="financing_option",
        )

    markup = cash_markup_percent if payment_method == PaymentMethod.CASH else 0.0

    equipment_price = 0.0
    if equipment is not None:
        equipment_price = _line_price(sales_price(equipment), markup)

    add_ons_total = sum(
        _line_price(sales_price(addon), markup) for addon in add_ons if addon.selected
    )

    maintenance_total = 0.0
    if maintenance_plan is not None:
        maintenance_total = bundle_total(
            sales_price(maintenance_plan), years, bundle_discounts
        ).final_price

    incentives_total = sum(i.amount for i in incentives if i.selected)

    subtotal = round_money(equipment_price + add_ons_total + maintenance_total, CENTS)
    grand_total = max(0.0, round_money(subtotal - incentives_total, CENTS))

    totals = ProposalTotals(
        payment_method=payment_method,
        equipment_price=equipment_price,
        add_ons_total=round_money(add_ons_total, CENTS),
        maintenance_total=maintenance_total,
        incentives_total=round_money(incentives_total, CENTS),
        subtotal=subtotal,
        grand_total=grand_total,
    )

    if payment_method != PaymentMethod.CASH and financing_option is not None:
        if uses_payment_factors(financing_option, lease_provider):
            totals.lease = lease_payment_for_option(grand_total, financing_option)
            totals.monthly_payment = totals.lease.monthly_payment
        else:
            payment = monthly_payment_for_option(grand_total, financing_option, lease_provider)
            totals.monthly_payment = round_money(payment, CENTS)

    logger.debug(
        f"Totals [{payment_method.value}]: subtotal={totals.subtotal} "
        f"incentives={totals.incentives_total} grand={totals.grand_total} "
        f"monthly={totals.monthly_payment}"
    )
    return totals


def _line_price(price: float, markup_percent: float) -> float:
    if markup_percent:
        return customer_price(price, markup_percent)
    return price
