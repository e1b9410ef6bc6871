"""
Output formatter: turns driver results into JSON-safe payloads and renders
outcomes for the console.
"""

import base64
import json
from typing import Any, Dict, List

from query_runner.models import OperationOutcome, RunReport


def clean_documents(results: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Sanitise non-JSON-serialisable values (ObjectId, datetime, bytes, ...)
    in every document. ``_id`` is kept, as a string."""
    return [to_json_safe(doc) for doc in results]


def to_json_safe(obj: Any) -> Any:
    """Recursively convert non-JSON-safe types to safe representations."""
    if isinstance(obj, dict):
        return {k: to_json_safe(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_json_safe(item) for item in obj]
    if isinstance(obj, bytes):
        try:
            return obj.decode("utf-8")
        except (UnicodeDecodeError, ValueError):
            return base64.b64encode(obj).decode("ascii")
    if isinstance(obj, (int, float, str, bool, type(None))):
        return obj
    # datetime, ObjectId, Decimal128, etc.
    return str(obj)


def format_outcome(outcome: OperationOutcome) -> str:
    header = f"\n--- {outcome.name} ---"
    if not outcome.ok:
        return f"{header}\nERROR: {outcome.error}"
    return f"{header}\n{json.dumps(outcome.result, indent=2, default=str)}"


def format_summary(report: RunReport) -> str:
    return (
        f"\n{len(report)} operations on {report.database_name}.{report.collection_name}: "
        f"{report.succeeded} succeeded, {report.failed} failed"
    )
