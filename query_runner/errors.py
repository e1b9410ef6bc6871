"""
Error taxonomy for a run.

Only ``StoreConnectionError`` ends a run early. ``OperationError`` is
contained per catalog entry and ``CleanupError`` is logged when the client
fails to close.
"""

from typing import Any, Optional


class QueryRunnerError(Exception):
    """Base class for every error raised by the query runner."""


class StoreConnectionError(QueryRunnerError, ConnectionError):
    """The store is unreachable or rejected the credentials."""

    def __init__(self, message: str, report: Optional[Any] = None):
        super().__init__(message)
        # empty RunReport when raised from runner.run
        self.report = report


class OperationError(QueryRunnerError):
    """A single catalog entry failed inside the driver or the store."""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class CleanupError(QueryRunnerError):
    """Closing the client failed after the run finished."""
