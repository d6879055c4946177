"""LLM-facing tool implementations."""

from .chain_id import get_chain_id
from .supply import get_total_supply
from .rpc_list import filter_rpc_endpoints, find_chain_record, get_filtered_rpc_list, parse_chain_id
from .result import ResultKind, ToolResult

__all__ = [
    "get_chain_id",
    "get_total_supply",
    "get_filtered_rpc_list",
    "filter_rpc_endpoints",
    "find_chain_record",
    "parse_chain_id",
    "ResultKind",
    "ToolResult",
]
