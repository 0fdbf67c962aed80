from enums.network import NetworkId, NetworkStatus
from models.dtos import NetworkConfig


arbitrum_one = NetworkConfig(
    network_id=NetworkId.ARBITRUM_ONE.value,
    chain_id=42161,
    name="Arbitrum One",
    short_name="arb1",
    symbol="ETH",
    rpc_url="https://arb1.arbitrum.io/rpc",
    ws_url="wss://arb1.arbitrum.io/ws",
    explorer_url="https://arbiscan.io",
    explorer_api_url="https://api.arbiscan.io/api",
    l1_chain_id=1,
    l1_name="Ethereum Mainnet",
    l1_rpc_url="https://eth.llamarpc.com",
    is_testnet=False,
    is_nova=False,
    block_time=0.25,
    confirmations=1,
)

arbitrum_nova = NetworkConfig(
    network_id=NetworkId.ARBITRUM_NOVA.value,
    chain_id=42170,
    name="Arbitrum Nova",
    short_name="arb-nova",
    symbol="ETH",
    rpc_url="https://nova.arbitrum.io/rpc",
    ws_url="wss://nova.arbitrum.io/ws",
    explorer_url="https://nova.arbiscan.io",
    explorer_api_url="https://api-nova.arbiscan.io/api",
    l1_chain_id=1,
    l1_name="Ethereum Mainnet",
    l1_rpc_url="https://eth.llamarpc.com",
    is_testnet=False,
    # AnyTrust chain
    is_nova=True,
    block_time=0.25,
    confirmations=1,
)

arbitrum_sepolia = NetworkConfig(
    network_id=NetworkId.ARBITRUM_SEPOLIA.value,
    chain_id=421614,
    name="Arbitrum Sepolia",
    short_name="arb-sepolia",
    symbol="ETH",
    rpc_url="https://sepolia-rollup.arbitrum.io/rpc",
    ws_url="wss://sepolia-rollup.arbitrum.io/ws",
    explorer_url="https://sepolia.arbiscan.io",
    explorer_api_url="https://api-sepolia.arbiscan.io/api",
    l1_chain_id=11155111,
    l1_name="Sepolia",
    l1_rpc_url="https://rpc.sepolia.org",
    is_testnet=True,
    is_nova=False,
    block_time=0.25,
    confirmations=1,
)

arbitrum_goerli = NetworkConfig(
    network_id=NetworkId.ARBITRUM_GOERLI.value,
    chain_id=421613,
    name="Arbitrum Goerli",
    short_name="arb-goerli",
    symbol="ETH",
    rpc_url="https://goerli-rollup.arbitrum.io/rpc",
    ws_url="wss://goerli-rollup.arbitrum.io/ws",
    explorer_url="https://goerli.arbiscan.io",
    explorer_api_url="https://api-goerli.arbiscan.io/api",
    l1_chain_id=5,
    l1_name="Goerli",
    l1_rpc_url="https://rpc.ankr.com/eth_goerli",
    is_testnet=True,
    is_nova=False,
    block_time=0.25,
    confirmations=1,
    status=NetworkStatus.DEPRECATED,
)
