from clients.evm.arbitrum import ArbitrumClient, L1Client
from models.dtos import ConnectionConfig, ResolvedConnection
from services.endpoint import EndpointResolver


class Web3ClientFactory:
    def __init__(self, config: ConnectionConfig, resolver: EndpointResolver | None = None):
        self.config = config
        self.resolver = resolver or EndpointResolver()
        self.connection: ResolvedConnection = self.resolver.resolve(config)

    def create_arbitrum_client(self) -> ArbitrumClient:
        return ArbitrumClient(self.connection, self.config.private_key)

    def create_l1_client(self) -> L1Client | None:
        l1_connection = self.resolver.resolve_l1(self.config, self.connection)
        if l1_connection is None:
            return None
        return L1Client(l1_connection, self.config.l1_private_key)
