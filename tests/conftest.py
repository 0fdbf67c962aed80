import pytest

from models.dtos import ConnectionConfig

# Well-known development key (hardhat account #0), never funded on mainnet.
DEV_PRIVATE_KEY = "0xac0974bec39a17e36ba4a6b4d238ff944bacb478cbed5efcae784d7bf4f2ff80"
DEV_ADDRESS = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


@pytest.fixture
def dev_private_key():
    return DEV_PRIVATE_KEY


@pytest.fixture
def dev_address():
    return DEV_ADDRESS


@pytest.fixture
def custom_config():
    return ConnectionConfig(
        network="custom",
        rpc_url="https://my-node:8545",
        chain_id=99999,
    )
