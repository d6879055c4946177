"""Static chain-name to chain-id registry."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional

# Display names as listed by Etherscan's v2 multichain API.
DEFAULT_CHAIN_IDS: Mapping[str, int] = MappingProxyType(
    {
        "Ethereum Mainnet": 1,
        "Sepolia Testnet": 11155111,
        "Holesky Testnet": 17000,
        "Abstract Mainnet": 2741,
        "Abstract Sepolia Testnet": 11124,
        "ApeChain Curtis Testnet": 33111,
        "ApeChain Mainnet": 33139,
        "Arbitrum Nova Mainnet": 42170,
        "Arbitrum One Mainnet": 42161,
        "Arbitrum Sepolia Testnet": 421614,
        "Avalanche C-Chain": 43114,
        "Avalanche Fuji Testnet": 43113,
        "Base Mainnet": 8453,
        "Base Sepolia Testnet": 84532,
        "Berachain Mainnet": 80094,
        "BitTorrent Chain Mainnet": 199,
        "BitTorrent Chain Testnet": 1028,
        "Blast Mainnet": 81457,
        "Blast Sepolia Testnet": 168587773,
        "BNB Smart Chain Mainnet": 56,
        "BNB Smart Chain Testnet": 97,
        "Celo Alfajores Testnet": 44787,
        "Celo Mainnet": 42220,
        "Cronos Mainnet": 25,
        "Fraxtal Mainnet": 252,
        "Fraxtal Testnet": 2522,
        "Gnosis": 100,
        "Linea Mainnet": 59144,
        "Linea Sepolia Testnet": 59141,
        "Mantle Mainnet": 5000,
        "Mantle Sepolia Testnet": 5003,
        "Moonbase Alpha Testnet": 1287,
        "Moonbeam Mainnet": 1284,
        "Moonriver Mainnet": 1285,
        "OP Mainnet": 10,
        "OP Sepolia Testnet": 11155420,
        "Polygon Amoy Testnet": 80002,
        "Polygon Mainnet": 137,
        "Polygon zkEVM Cardona Testnet": 2442,
        "Polygon zkEVM Mainnet": 1101,
        "Scroll Mainnet": 534352,
        "Scroll Sepolia Testnet": 534351,
        "Sonic Blaze Testnet": 57054,
        "Sonic Mainnet": 146,
        "Sophon Mainnet": 50104,
        "Sophon Sepolia Testnet": 531050104,
        "Taiko Hekla L2 Testnet": 167009,
        "Taiko Mainnet": 167000,
        "Unichain Mainnet": 130,
        "Unichain Sepolia Testnet": 1301,
        "WEMIX3.0 Mainnet": 1111,
        "WEMIX3.0 Testnet": 1112,
        "World Mainnet": 480,
        "World Sepolia Testnet": 4801,
        "Xai Mainnet": 660279,
        "Xai Sepolia Testnet": 37714555429,
        "XDC Apothem Testnet": 51,
        "XDC Mainnet": 50,
        "zkSync Mainnet": 324,
        "zkSync Sepolia Testnet": 300,
    }
)


class ChainRegistry:
    """Read-only lookup of chain ids by exact (case-sensitive) display name."""

    def __init__(self, chain_ids: Mapping[str, int]) -> None:
        self._chain_ids: Mapping[str, int] = MappingProxyType(dict(chain_ids))

    def lookup(self, chain_name: str) -> Optional[int]:
        if not isinstance(chain_name, str):
            return None
        return self._chain_ids.get(chain_name)

    def names(self) -> List[str]:
        return list(self._chain_ids)

    def __contains__(self, chain_name: object) -> bool:
        return chain_name in self._chain_ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._chain_ids)

    def __len__(self) -> int:
        return len(self._chain_ids)


default_registry = ChainRegistry(DEFAULT_CHAIN_IDS)
