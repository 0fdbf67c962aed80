from networks.registery import L1NetworkRegistry, NetworkRegistry
from networks.arbitrum import arbitrum_one, arbitrum_nova, arbitrum_sepolia, arbitrum_goerli
from networks.ethereum import ethereum, sepolia, goerli


registery = NetworkRegistry([arbitrum_one, arbitrum_nova, arbitrum_sepolia, arbitrum_goerli])
l1_registery = L1NetworkRegistry([ethereum, sepolia, goerli])
