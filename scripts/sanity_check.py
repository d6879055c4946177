"""Minimal live sanity checks for the Etherscan MCP tools."""

from __future__ import annotations

import asyncio
import os
import sys

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from etherscan_mcp.api import default_chainlist_client, default_etherscan_client  # noqa: E402
from etherscan_mcp.tools import get_chain_id, get_filtered_rpc_list, get_total_supply  # noqa: E402

# USDT on Ethereum mainnet by default; override via env.
SAMPLE_CHAIN_ID = int(os.getenv("ETHERSCAN_SAMPLE_CHAIN_ID", "1"))
SAMPLE_TOKEN = os.getenv("ETHERSCAN_SAMPLE_TOKEN", "0xdAC17F958D2ee523a2206206994597C13D831ec7")
# Total supply needs ETHERSCAN_API_KEY; skip unless it is set.
RUN_SUPPLY = bool(os.getenv("ETHERSCAN_API_KEY"))


async def main() -> None:
    print("Chain id:", (await get_chain_id("Ethereum Mainnet")).text)
    print("Unknown chain:", (await get_chain_id("ethereum mainnet")).text)

    rpcs = await get_filtered_rpc_list(str(SAMPLE_CHAIN_ID), isOpenSource=True, tracking="none")
    print(f"RPC list ({rpcs.kind.value}):", rpcs.text)

    if RUN_SUPPLY:
        supply = await get_total_supply(SAMPLE_CHAIN_ID, SAMPLE_TOKEN)
        print(f"Total supply ({supply.kind.value}):", supply.text)

    await default_etherscan_client.aclose()
    await default_chainlist_client.aclose()


if __name__ == "__main__":
    asyncio.run(main())
