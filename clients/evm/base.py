import logging
from abc import ABC

from eth_account.signers.local import LocalAccount
from web3 import AsyncWeb3
from web3.providers import AsyncHTTPProvider

from clients.evm.dto import GasFees
from clients.evm.errors import ChainIdMismatch
from services.wallet import WalletService

module_logger = logging.getLogger(__name__)


class BaseWeb3Client(ABC):
    """Async web3 connection bound to one RPC URL and expected chain id."""

    def __init__(
        self,
        rpc_url: str,
        chain_id: int,
        private_key: str | None = None,
        private_key_field: str = "privateKey",
    ):
        self.rpc_url = rpc_url
        self.chain_id = chain_id
        self._account: LocalAccount | None = WalletService.load_account(
            private_key, private_key_field
        )
        self._w3: AsyncWeb3 | None = None

    async def __aenter__(self):
        if self._w3 is None:
            self._w3 = AsyncWeb3(AsyncHTTPProvider(self.rpc_url))
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._w3 is not None:
            await self._w3.provider.disconnect()

            self._w3 = None

    @property
    def w3(self) -> AsyncWeb3:
        return self._w3

    @property
    def account(self) -> LocalAccount | None:
        return self._account

    @property
    def address(self) -> str | None:
        return self._account.address if self._account else None

    async def verify_chain_id(self) -> int:
        actual = await self.w3.eth.chain_id
        if actual != self.chain_id:
            module_logger.error(
                f"Node at {self.rpc_url} reports chain {actual}, expected {self.chain_id}"
            )
            raise ChainIdMismatch(self.chain_id, actual)
        return actual

    async def get_balance(self, address: str | None = None) -> int:
        addr = address or self.address
        if not addr:
            raise ValueError("Address not provided and no account set")

        return await self.w3.eth.get_balance(AsyncWeb3.to_checksum_address(addr))

    async def get_gas_fees(self) -> GasFees:
        latest_block = await self.w3.eth.get_block("latest")
        base_fee = latest_block.get("baseFeePerGas", 0)

        max_priority_fee = await self.w3.eth.max_priority_fee

        max_fee = base_fee + max_priority_fee

        return GasFees(max_priority_fee=max_priority_fee, max_fee=max_fee)
