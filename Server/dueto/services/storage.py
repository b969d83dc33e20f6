"""
State Storage

Durable store for the current round and the leaderboard. Each value lives
under a fixed logical key and is plain JSON-compatible data; callers own the
shape of what they store.
"""

import copy
from typing import Any, Dict, Optional
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi
from ..utils.game_logger import game_logger


class StateStore:
    """Interface for a key/value store of plain data."""

    def load(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def save(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError


class MemoryStateStore(StateStore):
    """Process-local store; values are copied in and out."""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def load(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def save(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class MongoStateStore(StateStore):
    """
    MongoDB-backed store. One document per logical key in the `state`
    collection: {"_id": key, "value": <data>}.
    """

    def __init__(self, mongo_uri: Optional[str] = None, db_name: str = 'dueto', client=None):
        """
        Args:
            mongo_uri: MongoDB connection string (ignored when client is given)
            db_name: Database holding the state collection
            client: Pre-built MongoClient
        """
        self.client = client if client is not None else MongoClient(mongo_uri, server_api=ServerApi('1'))
        self.db = self.client[db_name]
        self.collection = self.db.state

        # Test connection
        try:
            self.client.admin.command('ping')
            game_logger.logger.info(f"Connected to MongoDB database '{db_name}'")
        except Exception as e:
            game_logger.logger.error(f"MongoDB connection error: {e}")
            raise

    def load(self, key: str) -> Optional[Any]:
        document = self.collection.find_one({"_id": key})
        if document is None:
            return None
        return document.get("value")

    def save(self, key: str, value: Any) -> None:
        self.collection.replace_one(
            {"_id": key},
            {"_id": key, "value": value},
            upsert=True
        )

    def delete(self, key: str) -> None:
        self.collection.delete_one({"_id": key})


def build_state_store(config_class) -> StateStore:
    """MongoDB when MONGO_URI is configured, in-memory otherwise."""
    if getattr(config_class, 'MONGO_URI', None):
        return MongoStateStore(config_class.MONGO_URI, getattr(config_class, 'MONGO_DB_NAME', 'dueto'))
    game_logger.logger.warning("MONGO_URI not configured, state is kept in memory only")
    return MemoryStateStore()
