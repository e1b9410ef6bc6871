"""
Tests for seeding the bookstore collection
"""
from unittest.mock import MagicMock, patch

import pytest
from pymongo.errors import BulkWriteError, ServerSelectionTimeoutError

from query_runner.errors import OperationError, StoreConnectionError
from query_runner.seed import SAMPLE_BOOKS, seed_collection


def test_seed_inserts_sample_books(config, mongo_client, patched_mongo):
    """Test seeding inserts every sample book"""
    inserted = seed_collection(config)

    collection = mongo_client[config.database_name][config.collection_name]
    assert inserted == len(SAMPLE_BOOKS)
    assert collection.count_documents({}) == len(SAMPLE_BOOKS)


def test_seed_does_not_mutate_sample_books(config, patched_mongo):
    """Test the module-level sample data never gains an _id"""
    seed_collection(config)

    assert all("_id" not in book for book in SAMPLE_BOOKS)


def test_seed_drop_replaces_existing(config, books, patched_mongo):
    """Test reseeding with drop does not duplicate documents"""
    seed_collection(config)

    assert books.count_documents({}) == len(SAMPLE_BOOKS)


def test_seed_without_drop_appends(config, books, patched_mongo):
    """Test drop=False keeps existing documents"""
    seed_collection(config, books=SAMPLE_BOOKS[:2], drop=False)

    assert books.count_documents({}) == len(SAMPLE_BOOKS) + 2


def test_seed_empty_list(config, books, patched_mongo):
    """Test seeding nothing just clears the collection"""
    assert seed_collection(config, books=[]) == 0
    assert books.count_documents({}) == 0


def test_seed_insert_failure_raises_operation_error(config, mock_client, patched_mock_client):
    """Test a failed insert is reported as OperationError"""
    collection = mock_client[config.database_name][config.collection_name]
    collection.insert_many.side_effect = BulkWriteError({"writeErrors": []})

    with pytest.raises(OperationError, match="seed"):
        seed_collection(config)
    mock_client.close.assert_called_once()


def test_seed_unreachable_store(config):
    """Test seeding an unreachable store raises StoreConnectionError"""
    client = MagicMock()
    client.server_info.side_effect = ServerSelectionTimeoutError("timeout")

    with patch("query_runner.connection.MongoClient", return_value=client):
        with pytest.raises(StoreConnectionError):
            seed_collection(config)
