"""
Sample data for the bookstore collection.

``seed_collection`` drops the collection (optionally) and inserts
``SAMPLE_BOOKS`` so the catalog has something to query.
"""

import copy
from typing import Any, Callable, Dict, List, Optional, Sequence

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from query_runner.connection import open_collection
from query_runner.errors import OperationError
from query_runner.logger import logger
from query_runner.models import ConnectionConfig

SAMPLE_BOOKS: List[Dict[str, Any]] = [
    {
        "title": "To Kill a Mockingbird",
        "author": "Harper Lee",
        "genre": "Fiction",
        "published_year": 1960,
        "price": 12.99,
        "in_stock": True,
        "pages": 336,
        "publisher": "J. B. Lippincott & Co.",
    },
    {
        "title": "1984",
        "author": "George Orwell",
        "genre": "Dystopian",
        "published_year": 1949,
        "price": 10.99,
        "in_stock": True,
        "pages": 328,
        "publisher": "Secker & Warburg",
    },
    {
        "title": "The Great Gatsby",
        "author": "F. Scott Fitzgerald",
        "genre": "Fiction",
        "published_year": 1925,
        "price": 9.99,
        "in_stock": True,
        "pages": 180,
        "publisher": "Charles Scribner's Sons",
    },
    {
        "title": "Brave New World",
        "author": "Aldous Huxley",
        "genre": "Dystopian",
        "published_year": 1932,
        "price": 11.50,
        "in_stock": False,
        "pages": 311,
        "publisher": "Chatto & Windus",
    },
    {
        "title": "The Hobbit",
        "author": "J.R.R. Tolkien",
        "genre": "Fantasy",
        "published_year": 1937,
        "price": 14.99,
        "in_stock": True,
        "pages": 310,
        "publisher": "George Allen & Unwin",
    },
    {
        "title": "The Catcher in the Rye",
        "author": "J.D. Salinger",
        "genre": "Fiction",
        "published_year": 1951,
        "price": 8.99,
        "in_stock": True,
        "pages": 224,
        "publisher": "Little, Brown and Company",
    },
    {
        "title": "Pride and Prejudice",
        "author": "Jane Austen",
        "genre": "Romance",
        "published_year": 1813,
        "price": 7.99,
        "in_stock": True,
        "pages": 432,
        "publisher": "T. Egerton",
    },
    {
        "title": "The Lord of the Rings",
        "author": "J.R.R. Tolkien",
        "genre": "Fantasy",
        "published_year": 1954,
        "price": 19.99,
        "in_stock": True,
        "pages": 1178,
        "publisher": "Allen & Unwin",
    },
    {
        "title": "Animal Farm",
        "author": "George Orwell",
        "genre": "Political Satire",
        "published_year": 1945,
        "price": 8.50,
        "in_stock": False,
        "pages": 112,
        "publisher": "Secker & Warburg",
    },
    {
        "title": "The Alchemist",
        "author": "Paulo Coelho",
        "genre": "Fiction",
        "published_year": 1988,
        "price": 10.99,
        "in_stock": True,
        "pages": 197,
        "publisher": "HarperOne",
    },
    {
        "title": "Moby Dick",
        "author": "Herman Melville",
        "genre": "Adventure",
        "published_year": 1851,
        "price": 12.50,
        "in_stock": False,
        "pages": 635,
        "publisher": "Harper & Brothers",
    },
    {
        "title": "The Road",
        "author": "Cormac McCarthy",
        "genre": "Post-apocalyptic",
        "published_year": 2006,
        "price": 13.99,
        "in_stock": True,
        "pages": 287,
        "publisher": "Alfred A. Knopf",
    },
]


def seed_collection(
    config: Optional[ConnectionConfig] = None,
    books: Sequence[Dict[str, Any]] = SAMPLE_BOOKS,
    drop: bool = True,
    on_connect: Optional[Callable[[], None]] = None,
) -> int:
    """Insert *books* into the configured collection and return how many
    documents were inserted. *on_connect* is called once the connection
    is open."""
    config = config or ConnectionConfig()
    # insert_many adds _id to the dicts it is given
    docs = copy.deepcopy(list(books))

    with open_collection(config) as collection:
        if on_connect is not None:
            on_connect()
        try:
            if drop:
                collection.drop()
                logger.info("Dropped existing '%s' collection", config.collection_name)
            if not docs:
                return 0
            result = collection.insert_many(docs)
        except (PyMongoError, BSONError, TypeError) as e:
            raise OperationError("seed", str(e)) from e

    inserted = len(result.inserted_ids)
    logger.info("Inserted %d documents into %s.%s",
                inserted, config.database_name, config.collection_name)
    return inserted
