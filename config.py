import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from models.dtos import ConnectionConfig
from utils.utils import parse_bool

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _env_bool(name: str, default: bool = False) -> bool:
    return parse_bool(os.getenv(name), default)


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name, "").strip()
    return float(value) if value else default


@dataclass
class Settings:
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    RPC_PROBE_TIMEOUT: float = field(default_factory=lambda: _env_float("RPC_PROBE_TIMEOUT", 10.0))

    ARBITRUM_NETWORK: str = field(default_factory=lambda: os.getenv("ARBITRUM_NETWORK", "arbitrumOne"))
    ARBITRUM_RPC_PROVIDER: str = field(default_factory=lambda: os.getenv("ARBITRUM_RPC_PROVIDER", "public"))
    ARBITRUM_RPC_URL: str = field(default_factory=lambda: os.getenv("ARBITRUM_RPC_URL", ""))
    ARBITRUM_CUSTOM_RPC_URL: str = field(default_factory=lambda: os.getenv("ARBITRUM_CUSTOM_RPC_URL", ""))
    ARBITRUM_API_KEY: str = field(default_factory=lambda: os.getenv("ARBITRUM_API_KEY", ""))
    ARBITRUM_QUICKNODE_ENDPOINT: str = field(default_factory=lambda: os.getenv("ARBITRUM_QUICKNODE_ENDPOINT", ""))
    ARBITRUM_CHAIN_ID: str = field(default_factory=lambda: os.getenv("ARBITRUM_CHAIN_ID", ""))
    ARBITRUM_WS_URL: str = field(default_factory=lambda: os.getenv("ARBITRUM_WS_URL", ""))
    ARBITRUM_ENABLE_WEBSOCKET: bool = field(default_factory=lambda: _env_bool("ARBITRUM_ENABLE_WEBSOCKET"))
    ARBITRUM_L1_RPC_URL: str = field(default_factory=lambda: os.getenv("ARBITRUM_L1_RPC_URL", ""))
    ARBITRUM_PRIVATE_KEY: str = field(default_factory=lambda: os.getenv("ARBITRUM_PRIVATE_KEY", ""))
    ARBITRUM_L1_PRIVATE_KEY: str = field(default_factory=lambda: os.getenv("ARBITRUM_L1_PRIVATE_KEY", ""))

    def connection_config(self) -> ConnectionConfig:
        # chain id stays a string here, the resolver validates it
        return ConnectionConfig(
            network=self.ARBITRUM_NETWORK,
            rpc_provider=self.ARBITRUM_RPC_PROVIDER,
            rpc_url=self.ARBITRUM_RPC_URL or None,
            custom_rpc_url=self.ARBITRUM_CUSTOM_RPC_URL or None,
            api_key=self.ARBITRUM_API_KEY or None,
            quicknode_endpoint=self.ARBITRUM_QUICKNODE_ENDPOINT or None,
            chain_id=self.ARBITRUM_CHAIN_ID or None,
            ws_url=self.ARBITRUM_WS_URL or None,
            enable_websocket=self.ARBITRUM_ENABLE_WEBSOCKET,
            l1_rpc_url=self.ARBITRUM_L1_RPC_URL or None,
            private_key=self.ARBITRUM_PRIVATE_KEY or None,
            l1_private_key=self.ARBITRUM_L1_PRIVATE_KEY or None,
        )


def setup_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )


settings = Settings()
