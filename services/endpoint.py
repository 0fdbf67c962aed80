import logging
from enum import Enum
from typing import Any
from urllib.parse import urlsplit

from enums.network import NetworkId, NetworkStatus, ProviderId
from models.dtos import ConnectionConfig, L1Connection, NetworkConfig, ResolvedConnection
from networks import l1_registery, registery
from networks.providers import build_quicknode_url, get_template
from networks.registery import L1NetworkRegistry, NetworkRegistry
from services.errors import (
    InvalidChainId,
    InvalidUrl,
    MissingField,
    UnknownNetwork,
    UnknownProvider,
    UnsupportedProviderForNetwork,
)

module_logger = logging.getLogger(__name__)

# Chain used for bridge pairing when the L2 is a custom network.
DEFAULT_L1_CHAIN_ID = 1


def clean_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip()


def validate_url(value: str, field: str | None = None) -> str:
    try:
        parts = urlsplit(value)
        hostname = parts.hostname
        # raises on a malformed port
        parts.port
    except ValueError:
        raise InvalidUrl(value, field)

    if not parts.scheme or not hostname:
        raise InvalidUrl(value, field)

    return value


def parse_chain_id(value: Any) -> int:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise MissingField("chainId")

    if isinstance(value, bool):
        raise InvalidChainId(value)

    if isinstance(value, int):
        chain_id = value
    elif isinstance(value, float):
        if not value.is_integer():
            raise InvalidChainId(value)
        chain_id = int(value)
    elif isinstance(value, str):
        try:
            chain_id = int(value.strip(), 10)
        except ValueError:
            raise InvalidChainId(value)
    else:
        raise InvalidChainId(value)

    if chain_id <= 0:
        raise InvalidChainId(value)

    return chain_id


def mask_secret(url: str, secret: str) -> str:
    if not secret:
        return url
    return url.replace(secret, "***")


class EndpointResolver:
    """Maps a credential record to the endpoint and chain parameters used downstream.

    Resolution is pure: it reads only its input and the static network and
    provider tables, and either returns a complete ResolvedConnection or
    raises a ResolutionError.
    """

    def __init__(
        self,
        networks: NetworkRegistry = registery,
        l1_networks: L1NetworkRegistry = l1_registery,
    ):
        self.networks = networks
        self.l1_networks = l1_networks

    def resolve(self, config: ConnectionConfig) -> ResolvedConnection:
        network = self._parse_network(config.network)

        if network is NetworkId.CUSTOM:
            return self._resolve_custom(config)

        network_config = self._get_network_config(network)

        if network_config.status is NetworkStatus.DEPRECATED:
            module_logger.warning(f"Network {network.value} is deprecated")

        provider = self._parse_provider(config.rpc_provider)
        rpc_url = self._resolve_rpc_url(config, network, provider, network_config)

        resolved = ResolvedConnection(
            rpc_url=rpc_url,
            ws_url=network_config.ws_url if config.enable_websocket else None,
            chain_id=network_config.chain_id,
            l1_chain_id=network_config.l1_chain_id,
            explorer_url=network_config.explorer_url,
        )

        module_logger.debug(
            f"Resolved {network.value} via {provider.value} -> "
            f"{mask_secret(rpc_url, clean_value(config.api_key))}"
        )
        return resolved

    def resolve_l1(
        self,
        config: ConnectionConfig,
        resolved: ResolvedConnection | None = None,
    ) -> L1Connection | None:
        """Resolve the Ethereum side used by bridge operations.

        Returns None when no L1 RPC URL is configured.
        """
        l1_rpc_url = clean_value(config.l1_rpc_url)
        if not l1_rpc_url:
            return None

        validate_url(l1_rpc_url, "l1RpcUrl")

        if resolved is None:
            resolved = self.resolve(config)

        l1_chain_id = resolved.l1_chain_id or DEFAULT_L1_CHAIN_ID
        l1_network = self.l1_networks.get(l1_chain_id)

        return L1Connection(
            rpc_url=l1_rpc_url,
            chain_id=l1_chain_id,
            name=l1_network.name if l1_network else "ethereum",
        )

    def _resolve_custom(self, config: ConnectionConfig) -> ResolvedConnection:
        rpc_url = clean_value(config.rpc_url)
        if not rpc_url:
            raise MissingField("rpcUrl")
        validate_url(rpc_url, "rpcUrl")

        chain_id = parse_chain_id(config.chain_id)

        ws_url = clean_value(config.ws_url) or None
        if ws_url:
            validate_url(ws_url, "wsUrl")

        module_logger.debug(f"Resolved custom network {chain_id} -> {rpc_url}")

        return ResolvedConnection(
            rpc_url=rpc_url,
            ws_url=ws_url,
            chain_id=chain_id,
            l1_chain_id=None,
            explorer_url=None,
        )

    def _resolve_rpc_url(
        self,
        config: ConnectionConfig,
        network: NetworkId,
        provider: ProviderId,
        network_config: NetworkConfig,
    ) -> str:
        if provider is ProviderId.PUBLIC:
            return network_config.rpc_url

        if provider is ProviderId.CUSTOM_URL:
            custom_rpc_url = clean_value(config.custom_rpc_url)
            if not custom_rpc_url:
                raise MissingField("customRpcUrl")
            return validate_url(custom_rpc_url, "customRpcUrl")

        if provider is ProviderId.QUICKNODE:
            endpoint = clean_value(config.quicknode_endpoint)
            if not endpoint:
                raise MissingField("quicknodeEndpoint")
            # subdomain only, not a URL or host:port
            if "/" in endpoint or ":" in endpoint:
                raise InvalidUrl(endpoint, "quicknodeEndpoint")

            api_key = self._require_api_key(config, provider)

            return validate_url(
                build_quicknode_url(network, endpoint, api_key),
                "quicknodeEndpoint",
            )

        template = get_template(provider, network)
        if not template:
            raise UnsupportedProviderForNetwork(provider.value, network.value)

        return template + self._require_api_key(config, provider)

    @staticmethod
    def _require_api_key(config: ConnectionConfig, provider: ProviderId) -> str:
        api_key = clean_value(config.api_key)
        if provider.needs_api_key and not api_key:
            raise MissingField("apiKey")
        return api_key

    def _get_network_config(self, network: NetworkId) -> NetworkConfig:
        network_config = self.networks.get(network)
        if network_config is None:
            raise LookupError(f"Network table has no entry for {network.value}")
        return network_config

    @staticmethod
    def _parse_network(value: Any) -> NetworkId:
        try:
            return NetworkId(clean_value(value))
        except ValueError:
            raise UnknownNetwork(value)

    @staticmethod
    def _parse_provider(value: Any) -> ProviderId:
        cleaned = clean_value(value)
        if not cleaned:
            return ProviderId.PUBLIC
        try:
            return ProviderId(cleaned)
        except ValueError:
            raise UnknownProvider(value)


_resolver = EndpointResolver()


def resolve(config: ConnectionConfig) -> ResolvedConnection:
    return _resolver.resolve(config)


def resolve_l1(
    config: ConnectionConfig,
    resolved: ResolvedConnection | None = None,
) -> L1Connection | None:
    return _resolver.resolve_l1(config, resolved)


def resolve_credentials(credentials: dict[str, Any]) -> ResolvedConnection:
    return resolve(ConnectionConfig.from_credentials(credentials))
