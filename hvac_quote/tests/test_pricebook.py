"""
Tests: price book store, job costing and proposal drafts.

Run with:
    pytest hvac_quote/tests/test_pricebook.py -v
"""

import pytest
from pydantic import ValidationError

from hvac_quote.models.enums import MarginType, PriceBookSection, SystemTier
from hvac_quote.models.schemas import (
    HVACSystem,
    LaborRate,
    PermitFee,
    PriceBookUnit,
    PricingSettings,
    ProposalSelection,
)
from hvac_quote.persistence.proposal_repository import ProposalRepository
from hvac_quote.pricebook import PriceBookStore, default_price_book
from hvac_quote.pricing import DEFAULT_TIER_PRICES, sales_price, tier_price, unit_total_cost


class TestPriceBookStore:
    def test_defaults_on_first_run(self):
        book = PriceBookStore().get_price_book()
        assert [s.tier for s in book.hvac_systems] == [
            SystemTier.GOOD, SystemTier.BETTER, SystemTier.BEST,
        ]
        assert len(book.add_ons) == 6
        assert len(book.financing_options) == 11
        assert book.settings.cash_markup == 20

    def test_defaults_are_independent_copies(self):
        first = default_price_book()
        first.add_ons[0].base_cost = 1
        assert default_price_book().add_ons[0].base_cost == 500

    def test_update_item_margin(self):
        store = PriceBookStore()
        item = store.update_item_margin(
            PriceBookSection.ADD_ONS, "1", MarginType.PERCENTAGE, 50
        )
        assert sales_price(item) == 750

        reloaded = store.get_price_book().add_ons[0]
        assert reloaded.margin_type == MarginType.PERCENTAGE
        assert sales_price(reloaded) == 750

    def test_update_margin_unknown_item(self):
        with pytest.raises(KeyError):
            PriceBookStore().update_item_margin(
                PriceBookSection.HVAC_SYSTEMS, "missing", MarginType.FIXED, 100
            )

    def test_update_margin_on_unpriced_section(self):
        with pytest.raises(ValueError):
            PriceBookStore().update_item_margin(
                PriceBookSection.INCENTIVES, "1", MarginType.FIXED, 100
            )

    def test_update_section(self):
        store = PriceBookStore()
        store.update_section(
            PriceBookSection.BUNDLE_DISCOUNTS,
            [{"id": "1", "years": 2, "discount_percent": 3, "label": "2-Year Bundle"}],
        )
        discounts = store.get_price_book().bundle_discounts
        assert [(d.years, d.discount_percent) for d in discounts] == [(2, 3)]

    def test_update_section_validates_items(self):
        with pytest.raises(ValidationError):
            PriceBookStore().update_section(
                PriceBookSection.ADD_ONS, [{"id": "x", "base_cost": -5}]
            )

    def test_update_settings(self):
        store = PriceBookStore()
        settings = store.update_settings(cash_markup=10)
        assert settings.cash_markup == 10
        assert store.get_price_book().settings.cash_markup == 10
        assert store.get_price_book().settings.overhead_multiplier == 1.15

    def test_update_settings_rejects_unknown_fields(self):
        store = PriceBookStore()
        with pytest.raises(ValueError, match="cash_markup_percent"):
            store.update_settings(cash_markup_percent=5)
        assert store.get_price_book().settings.cash_markup == 20

    def test_reset(self):
        store = PriceBookStore()
        store.update_settings(cash_markup=0)
        store.reset()
        assert store.get_price_book().settings.cash_markup == 20


class TestJobCosting:
    def _unit(self, tonnage=2, equipment_cost=2400, hours=8):
        return PriceBookUnit(
            name="Goodman GSX160241",
            tonnage=tonnage,
            equipment_cost=equipment_cost,
            install_labor_hours=hours,
        )

    def test_default_unit_cost(self):
        book = default_price_book()
        cost = unit_total_cost(book.units[0], book.labor_rates, book.permit_fees, book.settings)
        assert cost.equipment == 2400
        assert cost.labor == 1200
        assert cost.permit == 200
        # 3,800 × 1.15 × 1.20
        assert cost.total == 5244

    def test_permit_bracket_by_tonnage(self):
        book = default_price_book()
        flat = PricingSettings(overhead_multiplier=1, profit_margin=0)
        for tonnage, permit in [(2, 200), (2.5, 200), (3, 225), (3.5, 225), (4, 275), (5, 275)]:
            cost = unit_total_cost(self._unit(tonnage=tonnage), book.labor_rates, book.permit_fees, flat)
            assert cost.permit == permit
            assert cost.total == 2400 + 1200 + permit

    def test_fallbacks(self):
        flat = PricingSettings(overhead_multiplier=1, profit_margin=0)
        rates = [LaborRate(name="Apprentice", rate=75, is_default=False)]
        cost = unit_total_cost(self._unit(tonnage=3), rates, [], flat)
        assert cost.labor == 8 * 150
        assert cost.permit == 200

    def test_oversized_unit_pays_largest_bracket(self):
        book = default_price_book()
        flat = PricingSettings(overhead_multiplier=1, profit_margin=0)
        cost = unit_total_cost(self._unit(tonnage=5.5), book.labor_rates, book.permit_fees, flat)
        assert cost.permit == 275

        permits = [PermitFee(name="Small", max_tonnage=2.5, fee=180)]
        cost = unit_total_cost(self._unit(tonnage=6), book.labor_rates, permits, flat)
        assert cost.permit == 180

    def test_tier_price(self):
        systems = [
            HVACSystem(tier=SystemTier.BEST, base_cost=15000, margin_amount=4000),
            HVACSystem(tier=SystemTier.GOOD, base_cost=9000, margin_amount=1000, enabled=False),
        ]
        assert tier_price(systems, SystemTier.BEST) == 19000
        assert tier_price(systems, SystemTier.GOOD) == DEFAULT_TIER_PRICES[SystemTier.GOOD]
        assert tier_price([], SystemTier.BETTER) == 14499


class TestProposalRepository:
    def test_versions_append(self):
        repo = ProposalRepository()
        assert repo.save("P-1", ProposalSelection(tier=SystemTier.GOOD)) == 1
        assert repo.save("P-1", ProposalSelection(tier=SystemTier.BEST)) == 2
        assert repo.get_version_count("P-1") == 2
        assert repo.load("P-1").tier == SystemTier.BEST
        assert repo.load("P-1", version=1).tier == SystemTier.GOOD

    def test_missing(self):
        repo = ProposalRepository()
        assert repo.load("nope") is None
        repo.save("P-2", ProposalSelection())
        assert repo.load("P-2", version=5) is None
        assert repo.list_proposals() == ["P-2"]

    def test_loaded_copy_is_detached(self):
        repo = ProposalRepository()
        selection = ProposalSelection(add_on_ids=["1"])
        repo.save("P-3", selection)
        selection.add_on_ids.append("2")
        assert repo.load("P-3").add_on_ids == ["1"]
