from etherscan_mcp.config import (
    EtherscanMcpConfig,
    _load_timeout,
    load_api_key,
)


def test_load_timeout_unset_keeps_library_default(monkeypatch):
    monkeypatch.delenv("ETHERSCAN_MCP_HTTP_TIMEOUT", raising=False)
    assert _load_timeout() is None


def test_load_timeout_invalid_env(monkeypatch):
    monkeypatch.setenv("ETHERSCAN_MCP_HTTP_TIMEOUT", "not-a-number")
    assert _load_timeout() is None


def test_load_timeout_valid_env(monkeypatch):
    monkeypatch.setenv("ETHERSCAN_MCP_HTTP_TIMEOUT", "5.5")
    assert _load_timeout() == 5.5


def test_load_api_key_env_over_file(monkeypatch, tmp_path):
    key_file = tmp_path / "apikey.txt"
    key_file.write_text("file-key", encoding="utf-8")
    monkeypatch.setenv("ETHERSCAN_API_KEY", " env-key ")
    monkeypatch.setenv("ETHERSCAN_API_KEY_FILE", str(key_file))
    assert load_api_key() == "env-key"


def test_load_api_key_from_file(monkeypatch, tmp_path):
    key_file = tmp_path / "apikey.txt"
    key_file.write_text("file-key\n", encoding="utf-8")
    monkeypatch.delenv("ETHERSCAN_API_KEY", raising=False)
    monkeypatch.setenv("ETHERSCAN_API_KEY_FILE", str(key_file))
    assert load_api_key() == "file-key"


def test_load_api_key_missing(monkeypatch, tmp_path):
    monkeypatch.delenv("ETHERSCAN_API_KEY", raising=False)
    monkeypatch.setenv("ETHERSCAN_API_KEY_FILE", str(tmp_path / "absent.txt"))
    assert load_api_key() is None


def test_config_server_identity():
    cfg = EtherscanMcpConfig()
    assert cfg.server_name == "etherscan-mcp"
    assert cfg.server_version == "1.0.0"


def test_config_overrides_upstream_urls():
    cfg = EtherscanMcpConfig(etherscan_api_url="http://localhost:8080/api", timeout=3.0)
    assert cfg.etherscan_api_url == "http://localhost:8080/api"
    assert cfg.timeout == 3.0
