"""
API routes — thin HTTP layer that delegates to the pricing engine.

Routes:
  GET   /health                                  → API health check
  GET   /api/pricebook                           → Current price book
  PUT   /api/pricebook/{section}                 → Admin: replace one section
  PATCH /api/pricebook/settings                  → Admin: update pricing settings
  PATCH /api/pricebook/{section}/{item_id}/margin → Admin: change one margin rule
  POST  /api/quote                               → Selection → proposal totals
  GET   /api/quote/lease-options                 → All lease schedules for a price
  PUT   /api/proposals/{proposal_id}             → Autosave a builder draft
  GET   /api/proposals/{proposal_id}             → Draft + freshly computed totals
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from hvac_quote.models.enums import MarginType, PriceBookSection
from hvac_quote.models.schemas import (
    LeaseQuote,
    PriceBook,
    ProposalSelection,
    ProposalTotals,
)
from hvac_quote.persistence.proposal_repository import ProposalRepository
from hvac_quote.pricebook.price_book_store import PriceBookStore
from hvac_quote.pricing import PricingError, lease_options
from hvac_quote.services.quote_service import QuoteService

logger = logging.getLogger(__name__)

# ── Routers ──────────────────────────────────────────────
health_router = APIRouter()
pricebook_router = APIRouter()
quote_router = APIRouter()
proposal_router = APIRouter()

# ── Process-wide stores ──────────────────────────────────
_store = PriceBookStore()
_proposals = ProposalRepository()


def get_store() -> PriceBookStore:
    return _store


def get_proposals() -> ProposalRepository:
    return _proposals


def pricing_error_response(error: PricingError) -> JSONResponse:
    """Render a pricing failure as a recoverable 422 the builder can display."""
    logger.warning(f"Pricing failed [{error.code}]: {error.message}")
    return JSONResponse(
        status_code=422,
        content={
            "error": error.message,
            "code": error.code,
            "field": error.field,
            "display": "Price unavailable",
        },
    )


# ── Request / response schemas ───────────────────────────
class MarginUpdate(BaseModel):
    margin_type: MarginType
    margin_amount: float


class ProposalSaveResponse(BaseModel):
    proposal_id: str
    version: int
    saved_at: str


class ProposalResponse(BaseModel):
    proposal_id: str
    version: int
    selection: ProposalSelection
    totals: Optional[ProposalTotals] = None
    error: Optional[dict[str, str]] = None


# ── Health ───────────────────────────────────────────────

@health_router.get("/health")
async def health_check():
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


# ── Price book (admin) ───────────────────────────────────

@pricebook_router.get("", response_model=PriceBook)
async def get_price_book():
    return get_store().get_price_book()


@pricebook_router.patch("/settings")
async def update_settings(fields: dict[str, Any]):
    try:
        return get_store().update_settings(**fields)
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e))


@pricebook_router.put("/{section}", response_model=PriceBook)
async def replace_section(section: str, items: list[dict[str, Any]]):
    try:
        book_section = PriceBookSection(section)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown price book section '{section}'")

    try:
        return get_store().update_section(book_section, items)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@pricebook_router.patch("/{section}/{item_id}/margin")
async def update_margin(section: str, item_id: str, body: MarginUpdate):
    try:
        book_section = PriceBookSection(section)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown price book section '{section}'")

    try:
        item = get_store().update_item_margin(
            book_section, item_id, body.margin_type, body.margin_amount
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Item {item_id} not found in {section}")
    return item.model_dump(mode="json")


# ── Quotes ───────────────────────────────────────────────

@quote_router.post("", response_model=ProposalTotals)
async def quote(selection: ProposalSelection):
    service = QuoteService(get_store().get_price_book())
    try:
        return service.build_quote(selection)
    except PricingError as e:
        return pricing_error_response(e)


@quote_router.get("/lease-options", response_model=list[LeaseQuote])
async def get_lease_options(system_price: float = Query(..., ge=0)):
    return lease_options(system_price)


# ── Proposal drafts ──────────────────────────────────────

@proposal_router.put("/{proposal_id}", response_model=ProposalSaveResponse)
async def save_proposal(proposal_id: str, selection: ProposalSelection):
    version = get_proposals().save(proposal_id, selection)
    return ProposalSaveResponse(
        proposal_id=proposal_id,
        version=version,
        saved_at=datetime.now(timezone.utc).isoformat(),
    )


@proposal_router.get("/{proposal_id}", response_model=ProposalResponse)
async def get_proposal(proposal_id: str, version: int | None = Query(default=None, ge=1)):
    repo = get_proposals()
    selection = repo.load(proposal_id, version)
    if selection is None:
        raise HTTPException(status_code=404, detail=f"Proposal {proposal_id} not found")

    response = ProposalResponse(
        proposal_id=proposal_id,
        version=version or repo.get_version_count(proposal_id),
        selection=selection,
    )
    try:
        response.totals = QuoteService(get_store().get_price_book()).build_quote(selection)
    except PricingError as e:
        logger.warning(f"Proposal {proposal_id} cannot be priced [{e.code}]: {e.message}")
        response.error = {"code": e.code, "error": e.message, "display": "Price unavailable"}
    return response
