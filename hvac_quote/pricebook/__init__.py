"""Price book — shipped defaults and the admin-configured store."""

from hvac_quote.pricebook.defaults import default_price_book
from hvac_quote.pricebook.price_book_store import PriceBookStore

__all__ = ["default_price_book", "PriceBookStore"]
