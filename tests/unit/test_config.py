"""Unit tests for environment-driven configuration."""

import pytest

from solana_token_info.config import (
    SolanaConfig, get_app_config, get_solana_config, infer_network_label
)
from solana_token_info.constants import DEFAULT_RPC_URL, DEFAULT_TOKEN_ADDRESS

CONFIG_VARS = (
    "RPC_URL", "SOLANA_RPC_URL", "TOKEN_ADDRESS", "SOLANA_COMMITMENT",
    "SOLANA_TIMEOUT", "SOLANA_NETWORK", "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an empty environment and fresh caches."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    get_solana_config.cache_clear()
    get_app_config.cache_clear()
    yield
    get_solana_config.cache_clear()
    get_app_config.cache_clear()


def test_defaults():
    config = get_app_config()

    assert config.solana.rpc_url == DEFAULT_RPC_URL
    assert config.solana.commitment == "confirmed"
    assert config.solana.timeout == 30
    assert config.solana.network_label == "Devnet"
    assert config.token_address == DEFAULT_TOKEN_ADDRESS
    assert config.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("RPC_URL", "http://localhost:8899")
    monkeypatch.setenv("TOKEN_ADDRESS", "So11111111111111111111111111111111111111112")
    monkeypatch.setenv("SOLANA_COMMITMENT", "Finalized")
    monkeypatch.setenv("SOLANA_TIMEOUT", "5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = get_app_config()

    assert config.solana.rpc_url == "http://localhost:8899"
    assert config.solana.network_label == "Localnet"
    assert config.solana.commitment == "finalized"
    assert config.solana.timeout == 5
    assert config.token_address == "So11111111111111111111111111111111111111112"
    assert config.log_level == "DEBUG"


def test_solana_rpc_url_alias(monkeypatch):
    monkeypatch.setenv("SOLANA_RPC_URL", "https://api.mainnet-beta.solana.com")
    assert get_solana_config().rpc_url == "https://api.mainnet-beta.solana.com"


def test_rpc_url_takes_precedence(monkeypatch):
    monkeypatch.setenv("RPC_URL", "https://api.testnet.solana.com")
    monkeypatch.setenv("SOLANA_RPC_URL", "https://api.mainnet-beta.solana.com")
    assert get_solana_config().rpc_url == "https://api.testnet.solana.com"


@pytest.mark.parametrize("name,value", [
    ("RPC_URL", "not a url"),
    ("SOLANA_COMMITMENT", "eventually"),
    ("SOLANA_TIMEOUT", "soon"),
    ("LOG_LEVEL", "LOUD"),
])
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match=name):
        get_app_config()


@pytest.mark.parametrize("url,label", [
    ("https://api.devnet.solana.com", "Devnet"),
    ("https://api.testnet.solana.com", "Testnet"),
    ("https://api.mainnet-beta.solana.com", "Mainnet"),
    ("http://127.0.0.1:8899", "Localnet"),
    ("https://rpc.example.com", "Custom"),
])
def test_infer_network_label(url, label):
    assert infer_network_label(url) == label


def test_explicit_network_label():
    config = SolanaConfig(rpc_url="https://rpc.example.com", network="Staging")
    assert config.network_label == "Staging"
