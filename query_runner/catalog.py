"""
The fixed catalog of bookstore queries, in the order they run.

Sections follow the exercise: basic CRUD, advanced reads, aggregation
pipelines, then indexing and plan inspection.
"""

from typing import Tuple

from pymongo import ASCENDING, DESCENDING

from query_runner.models import KeySpec, Operation

DEFAULT_PAGE_SIZE = 5


def paginate(name: str, page: int, page_size: int = DEFAULT_PAGE_SIZE,
             sort: KeySpec = (("title", ASCENDING),)) -> Operation:
    """Build a find descriptor for 1-based *page* of *page_size* documents."""
    page = max(1, page)
    return Operation(
        name=name,
        kind="find",
        sort=sort,
        skip=(page - 1) * page_size,
        limit=page_size,
    )


# ---------------------- CRUD ----------------------

CRUD: Tuple[Operation, ...] = (
    Operation(
        name="Find all books in Fiction genre",
        kind="find",
        filter={"genre": "Fiction"},
    ),
    Operation(
        name="Find books published after 1950",
        kind="find",
        filter={"published_year": {"$gt": 1950}},
    ),
    Operation(
        name="Find books by George Orwell",
        kind="find",
        filter={"author": "George Orwell"},
    ),
    Operation(
        name="Update price of '1984'",
        kind="update_one",
        filter={"title": "1984"},
        update={"$set": {"price": 12.5}},
    ),
    Operation(
        name="Delete 'Moby Dick'",
        kind="delete_one",
        filter={"title": "Moby Dick"},
    ),
)

# ---------------------- ADVANCED READS ----------------------

ADVANCED: Tuple[Operation, ...] = (
    Operation(
        name="In-stock books published after 2000",
        kind="find",
        filter={"in_stock": True, "published_year": {"$gt": 2000}},
    ),
    Operation(
        name="Projection (title, author, price only)",
        kind="find",
        projection={"title": 1, "author": 1, "price": 1, "_id": 0},
    ),
    Operation(
        name="Books sorted by price (ascending)",
        kind="find",
        sort=(("price", ASCENDING),),
    ),
    Operation(
        name="Books sorted by price (descending)",
        kind="find",
        sort=(("price", DESCENDING),),
    ),
    paginate("Pagination: Page 1 (5 books)", page=1),
    paginate("Pagination: Page 2 (next 5 books)", page=2),
)

# ---------------------- AGGREGATION ----------------------

DECADE_PIPELINE = (
    {
        "$addFields": {
            "decade": {
                "$multiply": [{"$floor": {"$divide": ["$published_year", 10]}}, 10]
            }
        }
    },
    {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
    {"$sort": {"_id": 1}},
)

AGGREGATIONS: Tuple[Operation, ...] = (
    Operation(
        name="Average price of books by genre",
        kind="aggregate",
        pipeline=({"$group": {"_id": "$genre", "avgPrice": {"$avg": "$price"}}},),
    ),
    Operation(
        name="Author with the most books",
        kind="aggregate",
        pipeline=(
            {"$group": {"_id": "$author", "bookCount": {"$sum": 1}}},
            {"$sort": {"bookCount": -1}},
            {"$limit": 1},
        ),
    ),
    Operation(
        name="Books grouped by decade",
        kind="aggregate",
        pipeline=DECADE_PIPELINE,
    ),
)

# ---------------------- INDEXING ----------------------

INDEXING: Tuple[Operation, ...] = (
    Operation(
        name="Create index on title",
        kind="create_index",
        keys=(("title", ASCENDING),),
    ),
    Operation(
        name="Create compound index on author and published_year",
        kind="create_index",
        keys=(("author", ASCENDING), ("published_year", DESCENDING)),
    ),
    Operation(
        name="Performance Analysis with explain()",
        kind="explain",
        filter={"title": "1984"},
        verbosity="executionStats",
    ),
)


CATALOG: Tuple[Operation, ...] = CRUD + ADVANCED + AGGREGATIONS + INDEXING
