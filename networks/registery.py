from types import MappingProxyType

from enums.network import NetworkId
from models.dtos import L1NetworkConfig, NetworkConfig


class NetworkRegistry:
    def __init__(self, networks: list[NetworkConfig]):
        networks_by_id: dict[NetworkId, NetworkConfig] = {}
        for cfg in networks:
            networks_by_id[NetworkId(cfg.network_id)] = cfg

        self._networks = MappingProxyType(networks_by_id)
        self._by_chain_id = MappingProxyType(
            {cfg.chain_id: cfg for cfg in networks}
        )

    def get(self, network_id: NetworkId) -> NetworkConfig | None:
        return self._networks.get(network_id)

    def get_by_chain_id(self, chain_id: int) -> NetworkConfig | None:
        return self._by_chain_id.get(chain_id)

    def list(self) -> list[NetworkConfig]:
        return list(self._networks.values())

    def chain_ids(self) -> dict[str, int]:
        return {
            network_id.value: cfg.chain_id
            for network_id, cfg in self._networks.items()
        }


class L1NetworkRegistry:
    def __init__(self, networks: list[L1NetworkConfig]):
        self._networks = MappingProxyType({cfg.chain_id: cfg for cfg in networks})

    def get(self, chain_id: int) -> L1NetworkConfig | None:
        return self._networks.get(chain_id)

    def list(self) -> list[L1NetworkConfig]:
        return list(self._networks.values())
