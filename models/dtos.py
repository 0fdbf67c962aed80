from dataclasses import dataclass
from typing import Any

from enums.network import NetworkStatus
from utils.utils import parse_bool


@dataclass(frozen=True)
class NetworkConfig:
    network_id: str
    chain_id: int
    name: str
    short_name: str
    symbol: str
    rpc_url: str
    ws_url: str
    explorer_url: str
    explorer_api_url: str
    l1_chain_id: int
    l1_name: str
    l1_rpc_url: str
    is_testnet: bool
    is_nova: bool
    block_time: float
    confirmations: int
    status: NetworkStatus = NetworkStatus.ACTIVE


@dataclass(frozen=True)
class L1NetworkConfig:
    chain_id: int
    name: str
    symbol: str
    explorer_url: str
    rpc_url: str


@dataclass
class ConnectionConfig:
    network: str = "arbitrumOne"
    rpc_provider: str = "public"
    rpc_url: str | None = None
    custom_rpc_url: str | None = None
    api_key: str | None = None
    quicknode_endpoint: str | None = None
    chain_id: Any = None
    ws_url: str | None = None
    enable_websocket: bool = False
    l1_rpc_url: str | None = None
    private_key: str | None = None
    l1_private_key: str | None = None

    FIELD_NAMES = {
        "network": "network",
        "rpcProvider": "rpc_provider",
        "rpcUrl": "rpc_url",
        "customRpcUrl": "custom_rpc_url",
        "apiKey": "api_key",
        "quicknodeEndpoint": "quicknode_endpoint",
        "chainId": "chain_id",
        "wsUrl": "ws_url",
        "enableWebSocket": "enable_websocket",
        "l1RpcUrl": "l1_rpc_url",
        "privateKey": "private_key",
        "l1PrivateKey": "l1_private_key",
    }

    @classmethod
    def from_credentials(cls, credentials: dict[str, Any]) -> "ConnectionConfig":
        """Build a config from a camelCase credential record.

        Unknown keys are ignored, missing keys keep their defaults.
        """
        values = {}
        for key, attr in cls.FIELD_NAMES.items():
            if key in credentials and credentials[key] is not None:
                values[attr] = credentials[key]

        if "enable_websocket" in values:
            values["enable_websocket"] = parse_bool(values["enable_websocket"])

        return cls(**values)


@dataclass(frozen=True)
class ResolvedConnection:
    rpc_url: str
    chain_id: int
    ws_url: str | None = None
    l1_chain_id: int | None = None
    explorer_url: str | None = None

    def to_dict(self) -> dict:
        return {
            "rpcUrl": self.rpc_url,
            "wsUrl": self.ws_url,
            "chainId": self.chain_id,
            "l1ChainId": self.l1_chain_id,
            "explorerUrl": self.explorer_url,
        }


@dataclass(frozen=True)
class L1Connection:
    rpc_url: str
    chain_id: int
    name: str

    def to_dict(self) -> dict:
        return {
            "rpcUrl": self.rpc_url,
            "chainId": self.chain_id,
            "name": self.name,
        }
