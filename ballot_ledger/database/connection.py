import logging

from pymongo import MongoClient

from ballot_ledger.config import LEDGER_COLLECTION, MONGO_DB, MONGO_URI

logger = logging.getLogger(__name__)


def get_ledger_collection(uri: str = MONGO_URI, db_name: str = MONGO_DB, collection_name: str = LEDGER_COLLECTION):
    if not uri:
        raise ValueError("MONGO_URI not set. Check your .env file.")
    if not db_name:
        raise ValueError("MONGO_DB not set. Check your .env file.")

    client = MongoClient(uri)
    # Test connection
    client.server_info()
    logger.info(f"Connected to MongoDB at {uri}, database: {db_name}")
    return client[db_name][collection_name]
