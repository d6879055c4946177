"""
Etherscan MCP server package.

This package exposes LLM-friendly tools for chain-id lookup, token total supply
(via the Etherscan v2 API) and public RPC discovery (via chainlist.org). See
DESIGN.md for full details.
"""

__version__ = "1.0.0"

__all__ = ["config", "__version__"]
