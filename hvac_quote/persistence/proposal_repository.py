"""
Proposal Repository — draft storage for the proposal builder.
The builder autosaves its selections here; last write wins.
Totals are never stored, they are recomputed from the selection on read.
"""

from __future__ import annotations

import logging

from hvac_quote.models.schemas import ProposalSelection

logger = logging.getLogger(__name__)


class ProposalRepository:
    """
    Save/load ProposalSelection snapshots.
    Uses an in-memory dict; every save appends a new version.
    """

    def __init__(self):
        self._memory_store: dict[str, list[ProposalSelection]] = {}

    def save(self, proposal_id: str, selection: ProposalSelection) -> int:
        """Save a selection snapshot and return its version number."""
        versions = self._memory_store.setdefault(proposal_id, [])
        versions.append(selection.model_copy(deep=True))
        logger.info(f"Saved proposal {proposal_id} v{len(versions)}")
        return len(versions)

    def load(self, proposal_id: str, version: int | None = None) -> ProposalSelection | None:
        """
        Load the latest (or a specific 1-based version of) a proposal's selection.
        Returns None if not found.
        """
        versions = self._memory_store.get(proposal_id, [])
        if not versions:
            return None
        if version is not None:
            if not 1 <= version <= len(versions):
                return None
            return versions[version - 1].model_copy(deep=True)
        return versions[-1].model_copy(deep=True)

    def list_proposals(self) -> list[str]:
        return list(self._memory_store.keys())

    def get_version_count(self, proposal_id: str) -> int:
        return len(self._memory_store.get(proposal_id, []))
