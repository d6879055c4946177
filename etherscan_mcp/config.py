"""
Configuration helpers for the Etherscan MCP server.

This module centralizes upstream URLs, API key loading, the optional HTTP
timeout, and logging settings. No secrets are stored in the repository; the
API key is read from the environment (or a local file) each time it is needed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Upstream endpoints
DEFAULT_ETHERSCAN_API_URL = os.getenv("ETHERSCAN_API_URL", "https://api.etherscan.io/v2/api")
DEFAULT_CHAINLIST_URL = os.getenv("CHAINLIST_RPCS_URL", "https://chainlist.org/rpcs.json")


def _load_timeout() -> Optional[float]:
    """Return the configured timeout, or None to keep httpx's own default."""
    raw_timeout = os.getenv("ETHERSCAN_MCP_HTTP_TIMEOUT")
    if raw_timeout:
        try:
            return float(raw_timeout)
        except ValueError:
            return None
    return None


DEFAULT_TIMEOUT = _load_timeout()

# API key handling
API_KEY_ENV_VAR = "ETHERSCAN_API_KEY"
API_KEY_FILE_ENV_VAR = "ETHERSCAN_API_KEY_FILE"

SERVER_NAME = "etherscan-mcp"
SERVER_VERSION = "1.0.0"
LOG_LEVEL = os.getenv("ETHERSCAN_MCP_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("ETHERSCAN_MCP_LOG_FORMAT", "json")  # json or plain


def load_api_key() -> Optional[str]:
    """
    Load the Etherscan API key from environment or a local file.

    Called once per total-supply request. A missing key is not an error here:
    the request is still issued and Etherscan reports the problem.

    Returns:
        The API key string if available, otherwise None. The key is never logged
        or returned to callers.
    """
    env_key = os.getenv(API_KEY_ENV_VAR)
    if env_key:
        return env_key.strip()

    key_path = os.getenv(API_KEY_FILE_ENV_VAR)
    if key_path:
        path = Path(key_path)
        if path.is_file():
            return path.read_text(encoding="utf-8").strip() or None

    return None


@dataclass(slots=True)
class EtherscanMcpConfig:
    """Runtime configuration for upstream access and logging."""

    etherscan_api_url: str = DEFAULT_ETHERSCAN_API_URL
    chainlist_url: str = DEFAULT_CHAINLIST_URL
    timeout: Optional[float] = DEFAULT_TIMEOUT
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT
    server_name: str = SERVER_NAME
    server_version: str = SERVER_VERSION


default_config = EtherscanMcpConfig()
