"""Services — QuoteService."""

from hvac_quote.services.quote_service import QuoteService

__all__ = ["QuoteService"]
