"""Public RPC endpoint discovery backed by the chainlist.org directory."""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from etherscan_mcp.api import ExplorerApiError, default_chainlist_client
from etherscan_mcp.tools.result import ToolResult

logger = logging.getLogger(__name__)

TRACKING_VALUES = ("none", "yes", "limited", "unspecified")

# Leading-integer parse in the manner of JavaScript's parseInt: "137", " 56",
# "10abc" and "0x38" all parse; "abc", "0x" and non-ASCII digits do not.
_LEADING_INT_REGEX = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(?!0[xX])([0-9]+))")


def parse_chain_id(value: Any) -> Optional[int]:
    """Parse a chain id from an int or the leading ASCII digits of a string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if not isinstance(value, str):
        return None
    match = _LEADING_INT_REGEX.match(value)
    if not match:
        return None
    sign, hex_digits, dec_digits = match.groups()
    parsed = int(hex_digits, 16) if hex_digits is not None else int(dec_digits)
    return -parsed if sign == "-" else parsed


def find_chain_record(directory: Iterable[Any], chain_id: Optional[int]) -> Optional[Dict[str, Any]]:
    """Return the first directory record whose ``chainId`` equals ``chain_id``."""
    if chain_id is None:
        return None
    for record in directory:
        if not isinstance(record, dict):
            continue
        record_id = record.get("chainId")
        if isinstance(record_id, int) and not isinstance(record_id, bool) and record_id == chain_id:
            return record
    return None


def filter_rpc_endpoints(
    entries: Iterable[Any],
    *,
    is_open_source: Optional[bool] = None,
    tracking: Optional[str] = None,
) -> List[str]:
    """
    Keep endpoints matching every supplied filter and return their URLs.

    Each filter is skipped when None. Matching is strict: an entry without an
    ``isOpenSource`` field never matches ``is_open_source=False``. Bare string
    entries are URLs with no attributes, so they only survive when unfiltered.
    """
    urls: List[str] = []
    for entry in entries:
        if isinstance(entry, str):
            entry = {"url": entry}
        if not isinstance(entry, dict):
            continue
        if is_open_source is not None and entry.get("isOpenSource") is not is_open_source:
            continue
        if tracking is not None and entry.get("tracking") != tracking:
            continue
        urls.append(f"{entry.get('url')}")
    return urls


async def get_filtered_rpc_list(
    chain_id: Any = None,
    isOpenSource: Optional[bool] = None,  # noqa: N803 - matches the tool schema
    tracking: Optional[str] = None,
    *,
    client=default_chainlist_client,
) -> ToolResult:
    """
    List RPC URLs for a chain, optionally filtered by openness and tracking.

    Args:
        chain_id: Chain id as a string or integer.
        isOpenSource: Keep only endpoints whose isOpenSource flag equals this.
        tracking: Keep only endpoints with this tracking class.
        client: Chainlist client (override for testing).
    """
    try:
        directory = await client.fetch_rpc_directory()
    except ExplorerApiError as exc:
        return ToolResult.transport_failure(f"Failed to fetch RPC list: {exc}")
    except Exception as exc:
        logger.exception("Unexpected error fetching RPC directory")
        return ToolResult.transport_failure(f"Failed to fetch RPC list: {exc}")

    record = find_chain_record(directory, parse_chain_id(chain_id))
    if record is None:
        return ToolResult.not_found(f"Chain ID {chain_id} not found")

    rpc_entries = record.get("rpc")
    if not isinstance(rpc_entries, list):
        rpc_entries = []
    urls = filter_rpc_endpoints(rpc_entries, is_open_source=isOpenSource, tracking=tracking)
    rpc_list = "\n".join(urls)
    return ToolResult.success(f"RPC List for Chain ID {chain_id}:\n{rpc_list}")
