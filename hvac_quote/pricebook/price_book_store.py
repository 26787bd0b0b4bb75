"""
Price Book Store — loads/saves the admin price book from MongoDB.

Company-level setting: the price book is configured by an admin and cached.
Falls back to the shipped defaults if MongoDB is empty (first run) or
unreachable. The pricing engine never reads this store directly; callers
pass the loaded PriceBook into it.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel
from pymongo.errors import PyMongoError

from hvac_quote.config import get_settings
from hvac_quote.models.enums import MarginType, PriceBookSection
from hvac_quote.models.schemas import (
    AddOn,
    BundleDiscount,
    FinancingOption,
    HVACSystem,
    Incentive,
    LaborRate,
    MaintenancePlan,
    PermitFee,
    PriceBook,
    PriceBookUnit,
    PricedItem,
    PricingSettings,
)
from hvac_quote.persistence.mongo_client import MongoClient
from hvac_quote.pricebook.defaults import default_price_book

logger = logging.getLogger(__name__)

SECTION_MODELS: dict[PriceBookSection, type[BaseModel]] = {
    PriceBookSection.HVAC_SYSTEMS: HVACSystem,
    PriceBookSection.ADD_ONS: AddOn,
    PriceBookSection.MAINTENANCE_PLANS: MaintenancePlan,
    PriceBookSection.BUNDLE_DISCOUNTS: BundleDiscount,
    PriceBookSection.INCENTIVES: Incentive,
    PriceBookSection.FINANCING_OPTIONS: FinancingOption,
    PriceBookSection.UNITS: PriceBookUnit,
    PriceBookSection.LABOR_RATES: LaborRate,
    PriceBookSection.PERMIT_FEES: PermitFee,
}

# Sections whose items carry a margin rule
PRICED_SECTIONS = (
    PriceBookSection.HVAC_SYSTEMS,
    PriceBookSection.ADD_ONS,
    PriceBookSection.MAINTENANCE_PLANS,
)

_DOC_KEY = {"doc": "price_book"}


class PriceBookStore:
    """
    Loads the price book from MongoDB. Falls back to defaults on first run.
    Cached after first load until an admin update invalidates it.
    """

    def __init__(self, mongo: MongoClient | None = None):
        self._mongo = mongo or MongoClient()
        self._cache: PriceBook | None = None
        self._memory: PriceBook | None = None  # mock-mode source of truth

    def _get_db(self):
        return self._mongo.get_database()

    @staticmethod
    def _defaults() -> PriceBook:
        price_book = default_price_book()
        price_book.settings.cash_markup = get_settings().default_cash_markup_percent
        return price_book

    def get_price_book(self) -> PriceBook:
        """Return the current price book (cached)."""
        if self._cache is not None:
            return self._cache

        db = self._get_db()
        if db is not None:
            try:
                doc = db.price_book.find_one(_DOC_KEY)
                if doc and "config" in doc:
                    self._cache = PriceBook(**doc["config"])
                    return self._cache
            except PyMongoError as e:
                logger.warning(f"Failed loading price book from MongoDB: {e}")

        if self._memory is None:
            self._memory = self._defaults()
        self._cache = self._memory
        return self._cache

    # ── Admin updates ────────────────────────────────────

    def update_section(self, section: PriceBookSection, items: list[dict[str, Any]]) -> PriceBook:
        """Admin: replace every item in one section of the price book."""
        model_cls = SECTION_MODELS[section]
        validated = [model_cls(**item) for item in items]
        updated = self.get_price_book().model_copy(update={section.value: validated}, deep=True)
        self._save(updated)
        logger.info(f"Updated price book section '{section.value}' ({len(validated)} items)")
        return updated

    def update_item_margin(
        self,
        section: PriceBookSection,
        item_id: str,
        margin_type: MarginType,
        margin_amount: float,
    ) -> PricedItem:
        """Admin: change the margin rule of one equipment tier, add-on or plan."""
        if section not in PRICED_SECTIONS:
            raise ValueError(f"Section '{section.value}' has no margin rules")

        price_book = self.get_price_book().model_copy(deep=True)
        items: list[PricedItem] = getattr(price_book, section.value)
        for index, item in enumerate(items):
            if item.id == item_id:
                items[index] = item.model_copy(
                    update={"margin_type": margin_type, "margin_amount": margin_amount}
                )
                self._save(price_book)
                logger.info(
                    f"Margin for {section.value}/{item_id} set to "
                    f"{margin_type.value} {margin_amount}"
                )
                return items[index]

        raise KeyError(f"No item '{item_id}' in section '{section.value}'")

    def update_settings(self, **fields: Any) -> PricingSettings:
        """Admin: update pricing settings such as the cash markup."""
        unknown = sorted(set(fields) - set(PricingSettings.model_fields))
        if unknown:
            raise ValueError(f"Unknown pricing settings: {', '.join(unknown)}")
        price_book = self.get_price_book()
        settings = PricingSettings(**{**price_book.settings.model_dump(), **fields})
        self._save(price_book.model_copy(update={"settings": settings}, deep=True))
        logger.info(f"Updated pricing settings: {sorted(fields)}")
        return settings

    def reset(self) -> PriceBook:
        """Admin: restore the shipped defaults."""
        price_book = self._defaults()
        self._save(price_book)
        return price_book

    def _save(self, price_book: PriceBook) -> None:
        db = self._get_db()
        if db is not None:
            db.price_book.update_one(
                _DOC_KEY,
                {"$set": {**_DOC_KEY, "config": price_book.model_dump(mode="json")}},
                upsert=True,
            )
        else:
            self._memory = price_book
        # Invalidate cache
        self._cache = None
