"""HTTP client wrappers for Etherscan and chainlist.org."""

from .client import (
    ChainlistClient,
    EtherscanClient,
    ExplorerApiError,
    UnexpectedResponseError,
    UpstreamUnreachableError,
    default_chainlist_client,
    default_etherscan_client,
)

__all__ = [
    "EtherscanClient",
    "ChainlistClient",
    "ExplorerApiError",
    "UpstreamUnreachableError",
    "UnexpectedResponseError",
    "default_etherscan_client",
    "default_chainlist_client",
]
