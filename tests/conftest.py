"""
Pytest configuration and shared fixtures

``mongomock`` stands in for a live MongoDB wherever the test cares about
query results; ``MagicMock`` clients are used to inject driver failures.
"""
import copy
from unittest.mock import MagicMock, patch

import mongomock
import pytest

from query_runner.models import ConnectionConfig
from query_runner.seed import SAMPLE_BOOKS


TEST_CONFIG = ConnectionConfig(
    mongo_uri="mongodb://test-host:27017",
    database_name="plp_bookstore_test",
    collection_name="books",
)


@pytest.fixture
def config():
    return TEST_CONFIG


@pytest.fixture
def mongo_client():
    """In-memory client with an empty test database."""
    return mongomock.MongoClient()


@pytest.fixture
def books(mongo_client):
    """The test collection seeded with the sample books."""
    collection = mongo_client[TEST_CONFIG.database_name][TEST_CONFIG.collection_name]
    collection.insert_many(copy.deepcopy(SAMPLE_BOOKS))
    return collection


@pytest.fixture
def patched_mongo(mongo_client):
    """Route ``connect_to_cluster`` to the in-memory client."""
    with patch("query_runner.connection.MongoClient", return_value=mongo_client) as factory:
        yield factory


@pytest.fixture
def mock_client():
    """A MagicMock client whose collection answers every catalog call."""
    client = MagicMock(name="MongoClient")
    collection = client.__getitem__.return_value.__getitem__.return_value
    collection.name = "books"
    collection.find.return_value.sort.return_value = collection.find.return_value
    collection.find.return_value.skip.return_value = collection.find.return_value
    collection.find.return_value.limit.return_value = collection.find.return_value
    collection.find.return_value.__iter__.return_value = []
    collection.aggregate.side_effect = lambda pipeline: iter([])
    collection.update_one.return_value = MagicMock(matched_count=1, modified_count=1)
    collection.delete_one.return_value = MagicMock(deleted_count=1)
    collection.create_index.return_value = "title_1"
    collection.database.command.return_value = {
        "queryPlanner": {"winningPlan": {"stage": "FETCH"}}
    }
    return client


@pytest.fixture
def patched_mock_client(mock_client):
    with patch("query_runner.connection.MongoClient", return_value=mock_client) as factory:
        yield factory
