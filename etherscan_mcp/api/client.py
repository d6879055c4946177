"""
Thin HTTP clients for the two upstream services.

Both clients issue a single GET per call and map transport problems to
internal exceptions that the tool layer turns into user-facing text.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from etherscan_mcp.config import EtherscanMcpConfig, default_config

logger = logging.getLogger(__name__)


class ExplorerApiError(Exception):
    """Base exception for upstream API errors."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamUnreachableError(ExplorerApiError):
    """Raised when the upstream host cannot be reached."""


class UnexpectedResponseError(ExplorerApiError):
    """Raised when the upstream body is not the JSON shape we expect."""


class _BaseApiClient:
    """Owns a lazily created ``httpx.AsyncClient`` shared by all calls."""

    def __init__(
        self,
        config: EtherscanMcpConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or default_config
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            if self.config.timeout is None:
                self._client = httpx.AsyncClient()
            else:
                self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    def _process_response(self, response: httpx.Response, *, expect: type) -> Any:
        if response.status_code >= 400:
            raise ExplorerApiError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise UnexpectedResponseError(
                "Unexpected response: body is not valid JSON", status_code=response.status_code
            ) from exc
        if not isinstance(data, expect):
            raise UnexpectedResponseError(
                f"Unexpected response: expected a JSON {'array' if expect is list else 'object'}",
                status_code=response.status_code,
            )
        return data

    async def _get(self, url: str, *, params: Optional[Dict[str, Any]] = None, expect: type = dict) -> Any:
        client = await self._get_client()
        try:
            response = await client.get(url, params=params)
        except httpx.RequestError as exc:
            logger.warning("Upstream unreachable for %s", url)
            raise UpstreamUnreachableError(str(exc) or exc.__class__.__name__) from exc
        return self._process_response(response, expect=expect)


class EtherscanClient(_BaseApiClient):
    """Async client for the Etherscan v2 multichain API."""

    async def fetch_token_supply(
        self, chain_id: Any, contract_address: Any, api_key: Optional[str]
    ) -> Dict[str, Any]:
        """Return the raw ``{status, message, result}`` body for a tokensupply query."""
        params = {
            "chainid": chain_id,
            "module": "stats",
            "action": "tokensupply",
            "contractaddress": contract_address,
            "apikey": api_key,
        }
        return await self._get(self.config.etherscan_api_url, params=params)


class ChainlistClient(_BaseApiClient):
    """Async client for the chainlist.org RPC directory."""

    async def fetch_rpc_directory(self) -> List[Dict[str, Any]]:
        """Return every chain record with its ``rpc`` endpoint list."""
        return await self._get(self.config.chainlist_url, expect=list)


default_etherscan_client = EtherscanClient()
default_chainlist_client = ChainlistClient()
