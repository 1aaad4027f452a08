# storage_mongo.py
import logging
from typing import Any, Dict, Optional

from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# The election is a singleton, so its snapshot is one document with a fixed _id
SNAPSHOT_ID = "election"


class MongoStorage:
    """Keeps the ledger snapshot as a single MongoDB document."""

    backend = "mongo"

    def __init__(self, collection=None):
        """
        Args:
            collection: A pymongo collection; when omitted one is opened from config
        """
        if collection is None:
            from ballot_ledger.database.connection import get_ledger_collection
            try:
                collection = get_ledger_collection()
            except Exception as e:
                logger.error(f"Failed to connect to MongoDB: {e}")
                raise
        self.collection = collection

    def load(self) -> Optional[Dict[str, Any]]:
        """
        Retrieve the ledger snapshot

        Returns:
            Snapshot dictionary if one was saved, None otherwise
        """
        doc = self.collection.find_one({"_id": SNAPSHOT_ID})
        if doc is None:
            return None
        doc.pop("_id", None)
        logger.info("Ledger snapshot retrieved from MongoDB")
        return doc

    def save(self, snapshot: Dict[str, Any]) -> None:
        """
        Replace the stored snapshot, creating it on first write

        Raises:
            PyMongoError: the write failed; the ledger rolls back its mutation
        """
        try:
            self.collection.replace_one({"_id": SNAPSHOT_ID}, {"_id": SNAPSHOT_ID, **snapshot}, upsert=True)
        except PyMongoError as e:
            logger.error(f"Error saving ledger snapshot: {e}")
            raise

    def close(self):
        """Close MongoDB connection"""
        self.collection.database.client.close()
        logger.info("MongoDB connection closed")
