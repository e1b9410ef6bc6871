"""
FastAPI service exposing the bookstore query runner over HTTP.

Endpoints:
- ``GET  /health``  : liveness + version
- ``GET  /catalog`` : the ordered list of operations a run executes
- ``POST /run``     : execute the catalog and return the run report
- ``POST /seed``    : reset the collection to the sample books
"""

from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from query_runner import __version__
from query_runner.catalog import CATALOG
from query_runner.errors import OperationError, StoreConnectionError
from query_runner.logger import logger
from query_runner.models import ConnectionConfig, RunReport
from query_runner.runner import run
from query_runner.seed import seed_collection


app = FastAPI(title="Bookstore Query Runner", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------- REQUEST MODELS ----------------------


class SeedRequest(ConnectionConfig):
    drop: bool = True


class SeedResponse(BaseModel):
    inserted: int


# ---------------------- ENDPOINTS ----------------------


@app.get("/health")
def health_check():
    return {"status": "ok", "version": __version__}


@app.get("/catalog")
def list_catalog() -> List[Dict[str, Any]]:
    return [
        {"name": op.name, "kind": op.kind, "read_only": op.read_only}
        for op in CATALOG
    ]


@app.post("/run", response_model=RunReport)
def run_catalog(request: ConnectionConfig):
    """Run the whole catalog; per-operation failures are in the report."""
    try:
        return run(request)
    except StoreConnectionError as e:
        logger.error("run error: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/seed", response_model=SeedResponse)
def seed(request: SeedRequest):
    config = ConnectionConfig(
        mongo_uri=request.mongo_uri,
        database_name=request.database_name,
        collection_name=request.collection_name,
    )
    try:
        inserted = seed_collection(config, drop=request.drop)
    except StoreConnectionError as e:
        logger.error("seed error: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    except OperationError as e:
        logger.error("seed error: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    return {"inserted": inserted}
