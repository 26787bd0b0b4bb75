"""
Quote Service — turns builder selections into proposal totals.

Resolves the ids in a ProposalSelection against an explicit PriceBook and
hands the resolved configuration to the pricing engine.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar

from hvac_quote.config import get_settings
from hvac_quote.models.enums import PaymentMethod, SystemTier
from hvac_quote.models.schemas import (
    FinancingOption,
    HVACSystem,
    MaintenancePlan,
    PriceBook,
    ProposalSelection,
    ProposalTotals,
)
from hvac_quote.pricing import InvalidConfigurationError, compute_totals

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QuoteService:
    """Builds quotes from a price book snapshot."""

    def __init__(self, price_book: PriceBook, lease_provider: str | None = None):
        self.price_book = price_book
        self.lease_provider = lease_provider or get_settings().lease_provider

    def build_quote(self, selection: ProposalSelection) -> ProposalTotals:
        book = self.price_book

        equipment = self._system_for_tier(selection.tier) if selection.tier else None
        plan: Optional[MaintenancePlan] = None
        if selection.maintenance_plan_id:
            plan = _by_id(
                book.maintenance_plans, selection.maintenance_plan_id, "maintenance plan", "enabled"
            )

        add_ons = [
            _by_id(book.add_ons, addon_id, "add-on", "enabled").model_copy(update={"selected": True})
            for addon_id in selection.add_on_ids
        ]
        incentives = [
            _by_id(book.incentives, incentive_id, "incentive", "available").model_copy(update={"selected": True})
            for incentive_id in selection.incentive_ids
        ]

        option: Optional[FinancingOption] = None
        if selection.payment_method != PaymentMethod.CASH and selection.financing_option_id:
            option = _by_id(
                book.financing_options, selection.financing_option_id, "financing option", "available"
            )

        return compute_totals(
            equipment=equipment,
            add_ons=add_ons,
            maintenance_plan=plan,
            years=selection.years,
            bundle_discounts=book.bundle_discounts,
            incentives=incentives,
            cash_markup_percent=book.settings.cash_markup,
            payment_method=selection.payment_method,
            financing_option=option,
            lease_provider=self.lease_provider,
        )

    def _system_for_tier(self, tier: SystemTier) -> HVACSystem:
        for system in self.price_book.hvac_systems:
            if system.tier == tier and system.enabled:
                return system
        raise InvalidConfigurationError(f"No enabled system for tier '{tier.value}'", field="tier")


def _by_id(items: Sequence[T], item_id: str, kind: str, active_flag: str) -> T:
    """Find a price book item by id; switched-off items cannot be quoted."""
    field = kind.replace(" ", "_")
    for item in items:
        if getattr(item, "id", None) == item_id:
            if not getattr(item, active_flag):
                raise InvalidConfigurationError(f"The {kind} '{item_id}' is not {active_flag}", field=field)
            return item
    raise InvalidConfigurationError(f"Unknown {kind} '{item_id}'", field=field)
