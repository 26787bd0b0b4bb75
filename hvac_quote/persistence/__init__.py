"""Persistence — MongoClient, ProposalRepository."""

from hvac_quote.persistence.mongo_client import MongoClient
from hvac_quote.persistence.proposal_repository import ProposalRepository

__all__ = ["MongoClient", "ProposalRepository"]
