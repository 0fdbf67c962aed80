from enum import Enum

class NetworkStatus(str, Enum):
    ACTIVE = "active"
    DEPRECATED = "deprecated"


class NetworkId(str, Enum):
    ARBITRUM_ONE = "arbitrumOne"
    ARBITRUM_NOVA = "arbitrumNova"
    ARBITRUM_SEPOLIA = "arbitrumSepolia"
    ARBITRUM_GOERLI = "arbitrumGoerli"
    CUSTOM = "custom"


class ProviderId(str, Enum):
    PUBLIC = "public"
    ALCHEMY = "alchemy"
    INFURA = "infura"
    QUICKNODE = "quicknode"
    ANKR = "ankr"
    CUSTOM_URL = "customUrl"

    @property
    def needs_api_key(self) -> bool:
        return self in (
            ProviderId.ALCHEMY,
            ProviderId.INFURA,
            ProviderId.QUICKNODE,
            ProviderId.ANKR,
        )
