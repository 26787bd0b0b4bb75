"""
HVAC Proposal Pricing — Main Entry Point

Print a sample quote for the default price book (CLI):
    python -m hvac_quote.main

Run as an API server (for the proposal builder):
    python -m hvac_quote.main --serve
    # or: uvicorn hvac_quote.api:app --reload --port 8000

Or import and quote programmatically:
    from hvac_quote.main import run
    totals = run(ProposalSelection(tier="better", add_on_ids=["1"]))
"""

from __future__ import annotations

import logging
import sys

from hvac_quote.config import get_settings
from hvac_quote.models.enums import FinancingType, PaymentMethod, SystemTier
from hvac_quote.models.schemas import ProposalSelection, ProposalTotals
from hvac_quote.pricebook import PriceBookStore
from hvac_quote.pricing import PricingError, financing_by_type
from hvac_quote.services.quote_service import QuoteService
from hvac_quote.utils.logger import setup_logging

SAMPLE_SELECTION = ProposalSelection(
    tier=SystemTier.BETTER,
    add_on_ids=["1", "4"],
    maintenance_plan_id="2",
    years=5,
    incentive_ids=["2"],
)


def run(selection: ProposalSelection | None = None) -> ProposalTotals:
    """Quote a selection against the current price book and log a summary."""
    settings = get_settings()
    setup_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    selection = selection or SAMPLE_SELECTION
    price_book = PriceBookStore().get_price_book()
    service = QuoteService(price_book, settings.lease_provider)

    totals = service.build_quote(selection)
    _print_summary(totals)

    # Show the "or $X/mo" alternatives the presentation offers
    for financing_type in (FinancingType.FINANCE, FinancingType.LEASE):
        for option in financing_by_type(price_book.financing_options, financing_type):
            financed = selection.model_copy(update={
                "payment_method": PaymentMethod(financing_type.value),
                "financing_option_id": option.id,
            })
            try:
                alt = service.build_quote(financed)
            except PricingError as e:
                logger.warning(f"  {option.name}: price unavailable ({e.code})")
                continue
            logger.info(f"  {option.name:<55} ${alt.monthly_payment:>9,.2f}/mo")

    return totals


def _print_summary(totals: ProposalTotals) -> None:
    """Print a human-readable summary of the quote."""
    logger = logging.getLogger(__name__)

    logger.info("-" * 60)
    logger.info(f"  QUOTE SUMMARY ({totals.payment_method.value})")
    logger.info("-" * 60)
    logger.info(f"  Equipment:      ${totals.equipment_price:,.2f}")
    logger.info(f"  Add-ons:        ${totals.add_ons_total:,.2f}")
    logger.info(f"  Maintenance:    ${totals.maintenance_total:,.2f}")
    logger.info(f"  Subtotal:       ${totals.subtotal:,.2f}")
    logger.info(f"  Incentives:    -${totals.incentives_total:,.2f}")
    logger.info(f"  Grand Total:    ${totals.grand_total:,.2f}")
    if totals.monthly_payment is not None:
        logger.info(f"  Monthly:        ${totals.monthly_payment:,.2f}/mo")
    if totals.lease is not None:
        logger.info(f"  Lease:          {totals.lease.escalator_note}, "
                    f"${totals.lease.total_cost:,.2f} over the term")
    logger.info("-" * 60)


def serve(host: str = "0.0.0.0", port: int = 8000) -> None:
    """Start the FastAPI server (for frontend communication)."""
    import uvicorn

    setup_logging(get_settings().log_level)
    logger = logging.getLogger(__name__)
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run("hvac_quote.api:app", host=host, port=port, reload=get_settings().debug)


if __name__ == "__main__":
    if "--serve" in sys.argv:
        serve()
    else:
        run()
