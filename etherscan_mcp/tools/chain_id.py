"""Chain-name lookup tool."""

from __future__ import annotations

from typing import Optional

from etherscan_mcp.chains import ChainRegistry, default_registry
from etherscan_mcp.tools.result import ToolResult


async def get_chain_id(
    chain_name: Optional[str] = None,
    *,
    registry: ChainRegistry = default_registry,
) -> ToolResult:
    """
    Resolve a chain display name (exact, case-sensitive) to its chain id.

    Args:
        chain_name: Display name such as "Ethereum Mainnet".
        registry: Chain registry (override for testing).
    """
    chain_id = registry.lookup(chain_name)
    if chain_id is None:
        return ToolResult.not_found(f"Chain {chain_name} not found")
    return ToolResult.success(f"Chain ID for {chain_name}: {chain_id}")
