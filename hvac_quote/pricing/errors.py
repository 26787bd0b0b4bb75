"""
Pricing errors. Every failure the engine can raise is a PricingError with a
stable ``code`` so callers can render a fallback instead of crashing.
"""

from __future__ import annotations


class PricingError(Exception):
    """Base class for recoverable pricing failures."""

    code = "PRICING_ERROR"

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.message = message
        self.field = field


class InvalidConfigurationError(PricingError):
    """A priced item or financing input cannot be priced as configured."""

    code = "INVALID_CONFIGURATION"


class UnsupportedFinancingTermError(PricingError):
    """A loan or lease term outside what the financing products support."""

    code = "UNSUPPORTED_FINANCING_TERM"
