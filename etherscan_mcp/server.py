"""FastAPI application exposing the Etherscan MCP tools as plain HTTP routes."""

from __future__ import annotations

import time
import uuid
from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from etherscan_mcp import dispatcher
from etherscan_mcp.api import default_chainlist_client, default_etherscan_client
from etherscan_mcp.config import default_config
from etherscan_mcp.logging_config import configure_logging, log_tool_result
from etherscan_mcp.metrics import default_metrics
from etherscan_mcp.tools import ToolResult

configure_logging(default_config)

HEALTH_STATUS = {"status": "ok"}
APP_VERSION = default_config.server_version


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    await default_etherscan_client.aclose()
    await default_chainlist_client.aclose()


app = FastAPI(
    title="Etherscan MCP Server",
    description="Chain id, token supply and RPC discovery tools for LLM agents.",
    version=APP_VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.time()
    default_metrics.incr_request()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    default_metrics.record_duration(request_id, duration_ms)
    response.headers["X-Request-ID"] = request_id
    return response


async def _run_tool(request: Request, tool_name: str, arguments: Dict[str, Any]) -> ToolResult:
    result = await dispatcher.call_tool(tool_name, arguments)
    log_tool_result(tool_name, result, getattr(request.state, "request_id", None))
    return result


@app.get("/health")
async def health() -> JSONResponse:
    """Lightweight health endpoint for monitoring."""
    return JSONResponse(content=HEALTH_STATUS)


@app.get("/metrics")
async def metrics() -> JSONResponse:
    """Return in-process metrics snapshot."""
    return JSONResponse(content=default_metrics.snapshot())


@app.get("/tools/chain_id/{chain_name}")
async def chain_id_route(chain_name: str, request: Request) -> JSONResponse:
    """Proxy for get_chain_id tool."""
    result = await _run_tool(request, "get_chain_id", {"chain_name": chain_name})
    return JSONResponse(content=result.to_envelope())


@app.get("/tools/total_supply")
async def total_supply_route(
    request: Request,
    chain_id: int = Query(...),
    token_address: str = Query(...),
) -> JSONResponse:
    """Proxy for get_total_supply tool."""
    result = await _run_tool(
        request, "get_total_supply", {"chain_id": chain_id, "token_address": token_address}
    )
    return JSONResponse(content=result.to_envelope())


@app.get("/tools/rpc_list/{chain_id}")
async def rpc_list_route(
    chain_id: str,
    request: Request,
    isOpenSource: bool | None = Query(None),  # noqa: N803
    tracking: str | None = Query(None),
) -> JSONResponse:
    """Proxy for get_filtered_rpc_list tool."""
    arguments: Dict[str, Any] = {"chain_id": chain_id}
    if isOpenSource is not None:
        arguments["isOpenSource"] = isOpenSource
    if tracking is not None:
        arguments["tracking"] = tracking
    result = await _run_tool(request, "get_filtered_rpc_list", arguments)
    return JSONResponse(content=result.to_envelope())

