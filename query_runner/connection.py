"""
Connection handling: one client per run, always closed on the way out.
"""

from contextlib import contextmanager
from typing import Iterator

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import (
    ConfigurationError,
    ConnectionFailure,
    OperationFailure,
    PyMongoError,
    ServerSelectionTimeoutError,
)

from query_runner.config import SERVER_SELECTION_TIMEOUT_MS
from query_runner.errors import CleanupError, StoreConnectionError
from query_runner.logger import logger
from query_runner.models import ConnectionConfig


def connect_to_cluster(mongo_uri: str) -> MongoClient:
    """Create and test a MongoClient connection."""
    client = None
    try:
        client = MongoClient(mongo_uri, serverSelectionTimeoutMS=SERVER_SELECTION_TIMEOUT_MS)
        client.server_info()  # force connection test
        return client
    except ServerSelectionTimeoutError as e:
        _discard(client)
        raise StoreConnectionError(
            "Connection timed out. Check your MongoDB URI and network."
        ) from e
    except OperationFailure as e:
        # server reachable but refused us (auth code 18, unauthorized 13)
        _discard(client)
        raise StoreConnectionError(f"Authentication failed: {e}") from e
    except ConnectionFailure as e:
        _discard(client)
        raise StoreConnectionError("Failed to connect to MongoDB cluster") from e
    except (ConfigurationError, ValueError) as e:
        # the URI parser raises ValueError for e.g. an out-of-range port
        _discard(client)
        raise StoreConnectionError(f"Invalid MongoDB URI: {e}") from e


def _discard(client) -> None:
    if client is None:
        return
    try:
        client.close()
    except PyMongoError as e:
        logger.warning("Ignoring close failure after failed connect: %s", e)


def close_client(client: MongoClient) -> None:
    """Close *client*, raising ``CleanupError`` if the driver fails."""
    try:
        client.close()
    except PyMongoError as e:
        raise CleanupError(f"Failed to close MongoDB client: {e}") from e


@contextmanager
def open_collection(config: ConnectionConfig) -> Iterator[Collection]:
    """Yield the configured collection and release the client on every exit path.

    Connection failures surface as ``StoreConnectionError`` before anything
    is yielded. A failure while closing is logged and swallowed so it never
    replaces the outcome of the block.
    """
    client = connect_to_cluster(config.mongo_uri)
    logger.info(
        "Connected to MongoDB (database=%s, collection=%s)",
        config.database_name, config.collection_name,
    )
    try:
        yield client[config.database_name][config.collection_name]
    finally:
        try:
            close_client(client)
            logger.info("Connection closed")
        except CleanupError as e:
            logger.warning("%s", e)
