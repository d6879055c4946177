import pytest
from fastapi.testclient import TestClient

from etherscan_mcp.api import UpstreamUnreachableError, default_chainlist_client, default_etherscan_client
from etherscan_mcp.server import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_chain_id_route(client):
    resp = client.get("/tools/chain_id/BNB Smart Chain Mainnet")
    assert resp.status_code == 200
    assert resp.json() == {"content": [{"type": "text", "text": "Chain ID for BNB Smart Chain Mainnet: 56"}]}
    assert "X-Request-ID" in resp.headers


def test_total_supply_route(client, monkeypatch):
    calls = []

    async def fake_fetch(chain_id, contract_address, api_key):
        calls.append((chain_id, contract_address))
        return {"status": "1", "message": "OK", "result": "46141292590"}

    monkeypatch.setattr(default_etherscan_client, "fetch_token_supply", fake_fetch)
    resp = client.get("/tools/total_supply", params={"chain_id": 137, "token_address": "0xabc"})
    assert resp.status_code == 200
    assert calls == [(137, "0xabc")]
    assert "46141292590" in resp.json()["content"][0]["text"]


def test_rpc_list_route_filters(client, monkeypatch, sample_directory):
    async def fake_fetch():
        return sample_directory

    monkeypatch.setattr(default_chainlist_client, "fetch_rpc_directory", fake_fetch)
    resp = client.get("/tools/rpc_list/1", params={"isOpenSource": "false"})
    assert resp.status_code == 200
    assert resp.json()["content"][0]["text"] == "RPC List for Chain ID 1:\nhttps://b"


def test_rpc_list_route_transport_failure(client, monkeypatch):
    async def failing_fetch():
        raise UpstreamUnreachableError("connection reset")

    monkeypatch.setattr(default_chainlist_client, "fetch_rpc_directory", failing_fetch)
    resp = client.get("/tools/rpc_list/1")
    body = resp.json()
    assert body["content"][0]["text"] == "Failed to fetch RPC list: connection reset"
    assert "isError" not in body


def test_metrics_count_requests_and_outcomes(client):
    client.get("/tools/chain_id/Gnosis")
    client.get("/tools/chain_id/Atlantis")
    data = client.get("/metrics").json()
    assert data["requests"] >= 3
    assert data["tool_outcomes"]["get_chain_id"] == {"success": 1, "not_found": 1}
    assert data["tool_error"] == {}


def test_no_json_rpc_route_over_http(client):
    # MCP itself is served over stdio only.
    resp = client.post("/mcp", json={"jsonrpc": "2.0", "id": 1, "method": "tools/list"})
    assert resp.status_code in (404, 405)
