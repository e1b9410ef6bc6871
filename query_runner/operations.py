"""
Operation executor: hands one catalog entry to the driver and returns the
raw result. No local interpretation of filters, pipelines or plans.
"""

import copy
from typing import Any, Callable, Dict, List

from bson.errors import BSONError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from query_runner.errors import OperationError
from query_runner.models import Operation


# The driver receives deep copies so a catalog entry is never mutated by a call.

# ---------------------- READS ----------------------

def _find(collection: Collection, op: Operation) -> List[Dict[str, Any]]:
    cursor = collection.find(copy.deepcopy(op.filter), copy.deepcopy(op.projection))

    if op.sort:
        cursor = cursor.sort(list(op.sort))
    if op.skip:
        cursor = cursor.skip(op.skip)
    if op.limit:
        cursor = cursor.limit(op.limit)

    return list(cursor)


def _aggregate(collection: Collection, op: Operation) -> List[Dict[str, Any]]:
    return list(collection.aggregate(copy.deepcopy(list(op.pipeline))))


def _explain(collection: Collection, op: Operation) -> Dict[str, Any]:
    """Return the winning plan the server picked for ``find(filter)``."""
    command = {
        "explain": {"find": collection.name, "filter": copy.deepcopy(op.filter)},
        "verbosity": op.verbosity,
    }
    result = collection.database.command(command)
    return result.get("queryPlanner", {}).get("winningPlan", {})


# ---------------------- WRITES ----------------------

def _update_one(collection: Collection, op: Operation) -> Dict[str, int]:
    result = collection.update_one(copy.deepcopy(op.filter), copy.deepcopy(op.update))
    return {
        "matched_count": result.matched_count,
        "modified_count": result.modified_count,
    }


def _delete_one(collection: Collection, op: Operation) -> Dict[str, int]:
    result = collection.delete_one(copy.deepcopy(op.filter))
    return {"deleted_count": result.deleted_count}


def _create_index(collection: Collection, op: Operation) -> Dict[str, str]:
    # existing index with the same keys → server returns its name, no duplicate
    name = collection.create_index(list(op.keys))
    return {"index_name": name}


EXECUTORS: Dict[str, Callable[[Collection, Operation], Any]] = {
    "find": _find,
    "update_one": _update_one,
    "delete_one": _delete_one,
    "aggregate": _aggregate,
    "create_index": _create_index,
    "explain": _explain,
}


# ---------------------- DISPATCH ----------------------

def execute_operation(collection: Collection, op: Operation) -> Any:
    """Run *op* against *collection* and return the driver's result.

    Driver and server failures, plus documents the driver rejects before
    sending (``ValueError``, ``TypeError``, ``BSONError``), are re-raised as
    ``OperationError`` so the runner can contain them per entry.
    """
    executor = EXECUTORS[op.kind]
    try:
        return executor(collection, op)
    except (PyMongoError, BSONError, ValueError, TypeError) as e:
        raise OperationError(op.name, str(e)) from e
