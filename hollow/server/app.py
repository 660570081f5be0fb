#!/usr/bin/env python3
"""
Hollow FastAPI Server
Inspect stub types synthesized for contracts importable by the server process
"""
import os
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from hollow import __version__
from hollow.cache import TypeCache, default_cache
from hollow.core.config import DEFAULT_HOST, DEFAULT_PORT
from hollow.core.errors import ConstructionError, ContractError, ContractResolutionError
from hollow.introspection import resolve_contract
from hollow.output.json_formatter import format_stub


# ============================================================================
# Request/Response Models
# ============================================================================

class DescribeRequest(BaseModel):
    contract: str


class PropertyModel(BaseModel):
    name: str
    type: str
    default: str
    backing_field: str


class MethodModel(BaseModel):
    name: str
    returns: str
    default: str
    binding: str
    is_async: bool


class StubReport(BaseModel):
    name: str
    qualified_name: str
    contract: str
    properties: List[PropertyModel] = []
    methods: List[MethodModel] = []
    interfaces: List[str] = []
    skipped: List[str] = []


class StubListResponse(BaseModel):
    total: int
    stubs: List[StubReport]


class StatsResponse(BaseModel):
    hits: int
    misses: int
    syntheses: int
    failures: int
    total_entries: int


class HealthResponse(BaseModel):
    status: str
    version: str


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="Hollow API",
    description="Run-time stub types for abstract classes and protocols",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_cache() -> TypeCache:
    """Registry backing the API (the process-wide one unless overridden)"""
    return default_cache


# ============================================================================
# Endpoints
# ============================================================================

@app.get("/", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    return {
        "status": "ok",
        "version": __version__
    }


@app.post("/api/describe", response_model=StubReport)
def describe(request: DescribeRequest, cache: TypeCache = Depends(get_cache)):
    """
    Synthesize (or fetch) the stub type for a contract and describe it.

    The contract's module is imported on request, so a client can make the
    server import any module on its path, and CORS admits every origin.
    Bind to a trusted interface only. Synthesis holds the registry lock,
    so this is a plain function and runs in the threadpool.

    Example:
        POST /api/describe
        {
            "contract": "shapes.contracts:Point"
        }
    """
    try:
        contract = resolve_contract(request.contract)
    except ContractResolutionError as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        synthesized = cache.get_or_create(contract)
    except ContractError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ConstructionError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return format_stub(synthesized)


@app.get("/api/stubs", response_model=StubListResponse)
def list_stubs(cache: TypeCache = Depends(get_cache)):
    """List every stub type synthesized so far."""
    stubs = [format_stub(s) for s in cache.list_types()]
    return {
        "total": len(stubs),
        "stubs": stubs
    }


@app.get("/api/stats", response_model=StatsResponse)
def stats(cache: TypeCache = Depends(get_cache)):
    """Registry hit/miss and synthesis counters."""
    return cache.get_stats()


def run(host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Serve the API with uvicorn; host and port fall back to HOLLOW_HOST / HOLLOW_PORT"""
    import uvicorn

    host = host or os.getenv("HOLLOW_HOST", DEFAULT_HOST)
    port = port or int(os.getenv("HOLLOW_PORT", DEFAULT_PORT))

    print("=" * 60)
    print("Hollow API Server")
    print("=" * 60)
    print(f"Starting server on http://{host}:{port}")
    print("=" * 60)

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    load_dotenv()
    run()
