"""
Tool registry and dispatch shared by the stdio and HTTP surfaces.

Maps tool names to their handlers and input schemas. Stateless: every call is
independent. Schema enforcement is left to the hosting protocol layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional

from etherscan_mcp.tools import get_chain_id, get_filtered_rpc_list, get_total_supply
from etherscan_mcp.tools.result import ResultKind, ToolResult
from etherscan_mcp.tools.rpc_list import TRACKING_VALUES

logger = logging.getLogger(__name__)

ToolCallable = Callable[..., Awaitable[ToolResult]]


@dataclass(slots=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Dict[str, Any]
    callable: ToolCallable


TOOL_REGISTRY: Dict[str, ToolDefinition] = {
    "get_filtered_rpc_list": ToolDefinition(
        name="get_filtered_rpc_list",
        description="Get a filtered list of RPC endpoints for a given chain ID",
        input_schema={
            "type": "object",
            "properties": {
                "chain_id": {
                    "type": "string",
                    "description": "The chain ID to get the RPC endpoints for",
                },
                "isOpenSource": {
                    "type": "boolean",
                    "description": "Filter by isOpenSource",
                },
                "tracking": {
                    "type": "string",
                    "description": f"Filter by tracking ({', '.join(TRACKING_VALUES)})",
                },
            },
            "required": ["chain_id"],
        },
        callable=get_filtered_rpc_list,
    ),
    "get_chain_id": ToolDefinition(
        name="get_chain_id",
        description="Get the chain ID for a given chain name",
        input_schema={
            "type": "object",
            "properties": {
                "chain_name": {
                    "type": "string",
                    "description": "The name of the chain to get the chain ID for",
                },
            },
            "required": ["chain_name"],
        },
        callable=get_chain_id,
    ),
    "get_total_supply": ToolDefinition(
        name="get_total_supply",
        description="Get the total supply of a token given its address",
        input_schema={
            "type": "object",
            "properties": {
                "chain_id": {
                    "type": "integer",
                    "description": "The chain ID",
                },
                "token_address": {
                    "type": "string",
                    "description": "The address of the token",
                },
            },
            "required": ["chain_id", "token_address"],
        },
        callable=get_total_supply,
    ),
}


def list_tools() -> List[Dict[str, Any]]:
    """Return the static tool descriptors."""
    return [
        {
            "name": tool.name,
            "description": tool.description,
            "inputSchema": tool.input_schema,
        }
        for tool in TOOL_REGISTRY.values()
    ]


async def call_tool(tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
    """Dispatch to a tool by name and return its tagged result."""
    arguments = arguments or {}
    tool = TOOL_REGISTRY.get(tool_name)
    if tool is None:
        return ToolResult(ResultKind.UNKNOWN_TOOL, f"Tool {tool_name} not found.")

    # Undeclared keys are ignored; the handlers' keyword-only collaborators
    # (client, registry) are not part of the tool surface.
    declared = tool.input_schema.get("properties", {})
    kwargs = {name: value for name, value in arguments.items() if name in declared}

    # Handlers already shape their own failures.
    try:
        return await tool.callable(**kwargs)
    except Exception as exc:
        logger.exception("Unexpected error while calling tool %s", tool_name)
        return ToolResult.transport_failure(f"Unexpected error while calling tool {tool_name}: {exc}")
