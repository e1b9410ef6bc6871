"""
Pydantic models shared by the runner, the CLI and the HTTP app.

- ``ConnectionConfig``  : where to run (URI, database, collection)
- ``Operation``         : one catalog entry (immutable descriptor)
- ``OperationOutcome``  : what happened when it ran
- ``RunReport``         : ordered outcomes of a whole run
"""

from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from query_runner.config import COLLECTION_NAME, DATABASE_NAME, MONGO_URI

OperationKind = Literal[
    "find",
    "update_one",
    "delete_one",
    "aggregate",
    "create_index",
    "explain",
]

READ_ONLY_KINDS = frozenset({"find", "aggregate", "explain"})

# (field, direction) with direction 1 / -1
KeySpec = Tuple[Tuple[str, int], ...]


# ---------------------- CONNECTION ----------------------


class ConnectionConfig(BaseModel):
    mongo_uri: str = MONGO_URI
    database_name: str = DATABASE_NAME
    collection_name: str = COLLECTION_NAME


# ---------------------- OPERATION DESCRIPTOR ----------------------


class Operation(BaseModel):
    """A named unit of work, fixed when the catalog is authored."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: OperationKind
    filter: Dict[str, Any] = Field(default_factory=dict)
    update: Optional[Dict[str, Any]] = None
    pipeline: Tuple[Dict[str, Any], ...] = ()
    projection: Optional[Dict[str, Any]] = None
    sort: KeySpec = ()
    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0, description="0 means no limit")
    keys: KeySpec = ()
    verbosity: str = "executionStats"

    @model_validator(mode="after")
    def _check_kind_arguments(self) -> "Operation":
        if self.kind == "update_one" and not self.update:
            raise ValueError(f"{self.name}: update_one needs an update document")
        if self.kind == "aggregate" and not self.pipeline:
            raise ValueError(f"{self.name}: aggregate needs at least one stage")
        if self.kind == "create_index" and not self.keys:
            raise ValueError(f"{self.name}: create_index needs index keys")
        for _, direction in self.sort + self.keys:
            if direction not in (1, -1):
                raise ValueError(f"{self.name}: direction must be 1 or -1, got {direction}")
        return self

    @property
    def read_only(self) -> bool:
        return self.kind in READ_ONLY_KINDS


# ---------------------- RESULTS ----------------------


class OperationOutcome(BaseModel):
    name: str
    kind: OperationKind
    ok: bool
    result: Any = None
    error: Optional[str] = None
    duration_ms: float = 0.0


class RunReport(BaseModel):
    database_name: str
    collection_name: str
    outcomes: List[OperationOutcome] = Field(default_factory=list)

    @computed_field
    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.ok)

    @computed_field
    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.ok)

    def __len__(self) -> int:
        return len(self.outcomes)
