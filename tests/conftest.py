import os
import sys

import pytest

# Ensure repository root is on sys.path before importing project modules.
repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if repo_root not in sys.path:
    sys.path.insert(0, repo_root)

from etherscan_mcp.metrics import default_metrics  # noqa: E402


@pytest.fixture(autouse=True)
def reset_metrics():
    default_metrics.reset()
    yield
    default_metrics.reset()


@pytest.fixture
def sample_directory():
    return [
        {
            "chainId": 1,
            "name": "Ethereum Mainnet",
            "rpc": [
                {"url": "https://a", "isOpenSource": True, "tracking": "none"},
                {"url": "https://b", "isOpenSource": False, "tracking": "none"},
                {"url": "https://c", "isOpenSource": True, "tracking": "yes"},
                {"url": "https://d", "tracking": "limited"},
            ],
        },
        {
            "chainId": 56,
            "name": "BNB Smart Chain Mainnet",
            "rpc": [{"url": "https://bsc", "isOpenSource": False, "tracking": "unspecified"}],
        },
    ]
