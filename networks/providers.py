from types import MappingProxyType

from enums.network import NetworkId, ProviderId


# Empty string means the provider does not serve that network.
PROVIDER_TEMPLATES = MappingProxyType({
    ProviderId.ALCHEMY: MappingProxyType({
        NetworkId.ARBITRUM_ONE: "https://arb-mainnet.g.alchemy.com/v2/",
        NetworkId.ARBITRUM_NOVA: "https://arb-nova.g.alchemy.com/v2/",
        NetworkId.ARBITRUM_SEPOLIA: "https://arb-sepolia.g.alchemy.com/v2/",
        NetworkId.ARBITRUM_GOERLI: "https://arb-goerli.g.alchemy.com/v2/",
    }),
    ProviderId.INFURA: MappingProxyType({
        NetworkId.ARBITRUM_ONE: "https://arbitrum-mainnet.infura.io/v3/",
        NetworkId.ARBITRUM_NOVA: "",
        NetworkId.ARBITRUM_SEPOLIA: "https://arbitrum-sepolia.infura.io/v3/",
        NetworkId.ARBITRUM_GOERLI: "https://arbitrum-goerli.infura.io/v3/",
    }),
    ProviderId.ANKR: MappingProxyType({
        NetworkId.ARBITRUM_ONE: "https://rpc.ankr.com/arbitrum/",
        NetworkId.ARBITRUM_NOVA: "https://rpc.ankr.com/arbitrumnova/",
        NetworkId.ARBITRUM_SEPOLIA: "https://rpc.ankr.com/arbitrum_sepolia/",
        NetworkId.ARBITRUM_GOERLI: "",
    }),
})

# https://{endpoint}.arbitrum-mainnet.quiknode.pro/{token}
QUICKNODE_DOMAINS = MappingProxyType({
    NetworkId.ARBITRUM_ONE: ".arbitrum-mainnet.quiknode.pro",
    NetworkId.ARBITRUM_NOVA: ".arbitrum-nova.quiknode.pro",
    NetworkId.ARBITRUM_SEPOLIA: ".arbitrum-sepolia.quiknode.pro",
    NetworkId.ARBITRUM_GOERLI: ".arbitrum-goerli.quiknode.pro",
})

QUICKNODE_SCHEME = "https://"


def get_template(provider: ProviderId, network: NetworkId) -> str:
    return PROVIDER_TEMPLATES[provider].get(network, "")


def build_quicknode_url(network: NetworkId, endpoint: str, api_key: str) -> str:
    return f"{QUICKNODE_SCHEME}{endpoint}{QUICKNODE_DOMAINS[network]}/{api_key}"
