from models.dtos import L1NetworkConfig


ethereum = L1NetworkConfig(
    chain_id=1,
    name="Ethereum Mainnet",
    symbol="ETH",
    explorer_url="https://etherscan.io",
    rpc_url="https://eth.llamarpc.com",
)

sepolia = L1NetworkConfig(
    chain_id=11155111,
    name="Sepolia",
    symbol="ETH",
    explorer_url="https://sepolia.etherscan.io",
    rpc_url="https://rpc.sepolia.org",
)

goerli = L1NetworkConfig(
    chain_id=5,
    name="Goerli",
    symbol="ETH",
    explorer_url="https://goerli.etherscan.io",
    rpc_url="https://rpc.ankr.com/eth_goerli",
)
