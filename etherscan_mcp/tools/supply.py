"""Token total-supply tool backed by the Etherscan v2 API."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from etherscan_mcp.api import ExplorerApiError, default_etherscan_client
from etherscan_mcp.config import load_api_key
from etherscan_mcp.tools.result import ToolResult

logger = logging.getLogger(__name__)

SUCCESS_STATUS = "1"


async def get_total_supply(
    chain_id: Any = None,
    token_address: Optional[str] = None,
    *,
    client=default_etherscan_client,
    api_key_loader: Callable[[], Optional[str]] = load_api_key,
) -> ToolResult:
    """
    Fetch a token's total supply.

    The upstream ``result`` is returned verbatim so large integers keep every
    digit. The API key is read on each call and is not checked up front.

    Args:
        chain_id: Chain id passed through as the ``chainid`` query parameter.
        token_address: Token contract address.
        client: Etherscan client (override for testing).
        api_key_loader: Source of the API key (override for testing).
    """
    try:
        payload = await client.fetch_token_supply(chain_id, token_address, api_key_loader())
    except ExplorerApiError as exc:
        return ToolResult.transport_failure(f"Failed to get total supply: {exc}")
    except Exception as exc:
        logger.exception("Unexpected error fetching total supply")
        return ToolResult.transport_failure(f"Failed to get total supply: {exc}")

    if payload.get("status") == SUCCESS_STATUS:
        total_supply = payload.get("result")
        return ToolResult.success(
            f"Total supply of token {token_address} on chain {chain_id}: {total_supply}"
        )
    return ToolResult.upstream_failure(f"Failed to get total supply: {payload.get('message')}")
