import pytest

from etherscan_mcp.chains import DEFAULT_CHAIN_IDS, ChainRegistry, default_registry
from etherscan_mcp.tools import ResultKind, get_chain_id


def test_default_registry_known_ids():
    assert default_registry.lookup("Ethereum Mainnet") == 1
    assert default_registry.lookup("BNB Smart Chain Mainnet") == 56
    assert default_registry.lookup("Xai Sepolia Testnet") == 37714555429
    assert len(default_registry) == 60


def test_lookup_is_exact_and_case_sensitive():
    assert default_registry.lookup("ethereum mainnet") is None
    assert default_registry.lookup(" Ethereum Mainnet") is None
    assert default_registry.lookup("Ethereum") is None


def test_lookup_non_string_returns_none():
    assert default_registry.lookup(None) is None  # type: ignore[arg-type]
    assert default_registry.lookup(1) is None  # type: ignore[arg-type]


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_CHAIN_IDS["New Chain"] = 9999  # type: ignore[index]


def test_registry_copies_source_mapping():
    source = {"Local Devnet": 31337}
    registry = ChainRegistry(source)
    source["Local Devnet"] = 1
    assert registry.lookup("Local Devnet") == 31337
    assert "Local Devnet" in registry
    assert registry.names() == ["Local Devnet"]


@pytest.mark.asyncio
async def test_get_chain_id_found():
    result = await get_chain_id("BNB Smart Chain Mainnet")
    assert result.kind is ResultKind.SUCCESS
    assert result.text == "Chain ID for BNB Smart Chain Mainnet: 56"


@pytest.mark.asyncio
async def test_get_chain_id_not_found():
    result = await get_chain_id("Nope Chain")
    assert result.kind is ResultKind.NOT_FOUND
    assert result.text == "Chain Nope Chain not found"
    assert result.to_envelope() == {"content": [{"type": "text", "text": "Chain Nope Chain not found"}]}


@pytest.mark.asyncio
async def test_get_chain_id_with_substitute_registry():
    registry = ChainRegistry({"Local Devnet": 31337})
    found = await get_chain_id("Local Devnet", registry=registry)
    missing = await get_chain_id("Ethereum Mainnet", registry=registry)
    assert found.text == "Chain ID for Local Devnet: 31337"
    assert missing.kind is ResultKind.NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("name, chain_id", sorted(DEFAULT_CHAIN_IDS.items()))
async def test_every_registry_entry_resolves(name, chain_id):
    result = await get_chain_id(name)
    assert result.kind is ResultKind.SUCCESS
    assert result.text.endswith(f": {chain_id}")
