"""
Mongo Client — raw database connection management.
In mock mode, no actual connection is created.
"""

from __future__ import annotations

import logging
from typing import Any

from pymongo import MongoClient as PyMongoClient
from pymongo.errors import PyMongoError

from hvac_quote.config import get_settings

logger = logging.getLogger(__name__)


class MongoClient:
    """
    Thin wrapper around pymongo.
    In mock mode this is a no-op placeholder and get_database() returns None.
    """

    def __init__(self):
        self.settings = get_settings()
        self._client: Any = None
        self._db: Any = None

    def connect(self) -> None:
        """Establish the MongoDB connection (no-op in mock mode)."""
        if self.settings.mock_mode:
            logger.info("[MOCK] MongoDB connection simulated")
            return

        try:
            self._client = PyMongoClient(self.settings.mongodb_uri, serverSelectionTimeoutMS=2000)
            self._db = self._client[self.settings.mongodb_database]
            logger.info(f"Connected to MongoDB: {self.settings.mongodb_database}")
        except PyMongoError as e:
            logger.warning(f"MongoDB not available, using defaults: {e}")
            self._client = None
            self._db = None

    def get_database(self) -> Any:
        """Return the database handle, or None when running without MongoDB."""
        if self._db is None and not self.settings.mock_mode:
            self.connect()
        return self._db

    def close(self) -> None:
        """Close the connection."""
        if self._client:
            self._client.close()
            logger.info("MongoDB connection closed")
