from config import Settings, setup_logging
from services.endpoint import resolve


def test_settings_defaults(monkeypatch):
    for name in ("ARBITRUM_NETWORK", "ARBITRUM_RPC_PROVIDER", "ARBITRUM_ENABLE_WEBSOCKET", "RPC_PROBE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.ARBITRUM_NETWORK == "arbitrumOne"
    assert settings.ARBITRUM_RPC_PROVIDER == "public"
    assert settings.ARBITRUM_ENABLE_WEBSOCKET is False
    assert settings.RPC_PROBE_TIMEOUT == 10.0


def test_connection_config_from_env(monkeypatch):
    monkeypatch.setenv("ARBITRUM_NETWORK", "custom")
    monkeypatch.setenv("ARBITRUM_RPC_URL", "https://my-node:8545")
    monkeypatch.setenv("ARBITRUM_CHAIN_ID", "99999")
    monkeypatch.setenv("ARBITRUM_ENABLE_WEBSOCKET", "true")
    monkeypatch.setenv("RPC_PROBE_TIMEOUT", "2.5")

    settings = Settings()
    config = settings.connection_config()

    assert settings.RPC_PROBE_TIMEOUT == 2.5
    assert config.enable_websocket is True
    assert resolve(config).chain_id == 99999


def test_setup_logging_accepts_lowercase_level():
    setup_logging("debug")
