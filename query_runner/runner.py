"""
Query runner: executes the catalog in order against one collection.

Each entry runs only after the previous one has returned. A failing entry is
logged and recorded; the run carries on with the next one. Only a failure to
connect ends the run, in which case nothing is executed.
"""

import time
from typing import Callable, Iterable, Optional

from pymongo.collection import Collection

from query_runner.catalog import CATALOG
from query_runner.connection import open_collection
from query_runner.errors import OperationError, StoreConnectionError
from query_runner.formatter import clean_documents, to_json_safe
from query_runner.logger import logger
from query_runner.models import ConnectionConfig, Operation, OperationOutcome, RunReport
from query_runner.operations import execute_operation

Reporter = Callable[[OperationOutcome], None]


def run_operation(collection: Collection, op: Operation) -> OperationOutcome:
    """Execute one entry and turn its result or failure into an outcome."""
    start = time.perf_counter()
    try:
        result = execute_operation(collection, op)
    except OperationError as e:
        elapsed = (time.perf_counter() - start) * 1000
        logger.error("[RUN] %s (%s) failed: %s", op.name, op.kind, e)
        return OperationOutcome(
            name=op.name, kind=op.kind, ok=False, error=str(e), duration_ms=elapsed,
        )

    elapsed = (time.perf_counter() - start) * 1000
    logger.info("[RUN] %s (%s) ok in %.1f ms", op.name, op.kind, elapsed)
    return OperationOutcome(
        name=op.name,
        kind=op.kind,
        ok=True,
        result=clean_documents(result) if isinstance(result, list) else to_json_safe(result),
        duration_ms=elapsed,
    )


def run(
    config: Optional[ConnectionConfig] = None,
    catalog: Iterable[Operation] = CATALOG,
    reporter: Optional[Reporter] = None,
    on_connect: Optional[Callable[[], None]] = None,
) -> RunReport:
    """Run *catalog* against the collection named by *config*.

    Returns a ``RunReport`` with one outcome per entry, in catalog order.
    Raises ``StoreConnectionError`` (with an empty report attached) when
    the store cannot be reached or rejects the credentials. *on_connect*
    is called once the connection is open, before the first entry runs.
    """
    config = config or ConnectionConfig()
    report = RunReport(
        database_name=config.database_name,
        collection_name=config.collection_name,
    )

    try:
        with open_collection(config) as collection:
            if on_connect is not None:
                on_connect()
            for op in catalog:
                outcome = run_operation(collection, op)
                report.outcomes.append(outcome)
                if reporter is not None:
                    reporter(outcome)
    except StoreConnectionError as e:
        # raised before the first entry runs, so the report is still empty
        logger.error("[RUN] Cannot connect to MongoDB: %s", e)
        e.report = report
        raise

    logger.info(
        "[RUN] Finished %d operations (%d failed)", len(report), report.failed,
    )
    return report
