"""MCP server over stdin/stdout, backed by the shared tool dispatcher."""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any, Dict, List

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from etherscan_mcp import dispatcher
from etherscan_mcp.api import default_chainlist_client, default_etherscan_client
from etherscan_mcp.config import default_config
from etherscan_mcp.logging_config import configure_logging, log_tool_result

logger = logging.getLogger(__name__)


class ToolCallError(Exception):
    """Raised so the SDK wraps the message in an ``isError`` tool result."""


server = Server(default_config.server_name, version=default_config.server_version)


@server.list_tools()
async def handle_list_tools() -> List[types.Tool]:
    return [
        types.Tool(name=tool["name"], description=tool["description"], inputSchema=tool["inputSchema"])
        for tool in dispatcher.list_tools()
    ]


@server.call_tool()
async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
    result = await dispatcher.call_tool(name, arguments)
    log_tool_result(name, result)
    if result.is_error:
        raise ToolCallError(result.text)
    return [types.TextContent(type="text", text=result.text)]


async def serve() -> None:
    """Run until the host closes stdin."""
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Etherscan MCP server running on stdio")
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await default_etherscan_client.aclose()
        await default_chainlist_client.aclose()


def main() -> None:
    configure_logging(default_config)
    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


if __name__ == "__main__":
    main()
