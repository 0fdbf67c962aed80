import logging

from web3 import AsyncWeb3

from clients.evm.base import BaseWeb3Client
from models.dtos import L1Connection, ResolvedConnection

module_logger = logging.getLogger(__name__)

ARB_SYS_ADDRESS = "0x0000000000000000000000000000000000000064"


class ArbitrumClient(BaseWeb3Client):
    ARB_SYS_ABI = [
        {
            "inputs": [],
            "name": "arbBlockNumber",
            "outputs": [{"name": "", "type": "uint256"}],
            "stateMutability": "view",
            "type": "function",
        },
    ]

    def __init__(self, connection: ResolvedConnection, private_key: str | None = None):
        super().__init__(connection.rpc_url, connection.chain_id, private_key)
        self.connection = connection

    def _get_arb_sys_contract(self):
        return self.w3.eth.contract(
            AsyncWeb3.to_checksum_address(ARB_SYS_ADDRESS), abi=self.ARB_SYS_ABI
        )

    async def get_l2_block_number(self) -> int:
        return await self._get_arb_sys_contract().functions.arbBlockNumber().call()

    def explorer_tx_url(self, tx_hash: str) -> str | None:
        if not self.connection.explorer_url:
            return None
        return f"{self.connection.explorer_url}/tx/{tx_hash}"


class L1Client(BaseWeb3Client):
    def __init__(self, connection: L1Connection, private_key: str | None = None):
        super().__init__(
            connection.rpc_url,
            connection.chain_id,
            private_key,
            private_key_field="l1PrivateKey",
        )
        self.connection = connection
