import logging

from eth_account import Account
from eth_account.signers.local import LocalAccount

from models.dtos import ConnectionConfig
from services.dto import SignerData
from services.errors import InvalidPrivateKey

module_logger = logging.getLogger(__name__)


class WalletService:
    @staticmethod
    def normalize_private_key(private_key: str) -> str:
        private_key = private_key.strip()
        if not private_key.startswith("0x"):
            private_key = f"0x{private_key}"
        return private_key

    @staticmethod
    def get_address(private_key: str) -> str:
        account = Account.from_key(WalletService.normalize_private_key(private_key))
        return account.address

    @staticmethod
    def validate_private_key(private_key: str) -> bool:
        try:
            Account.from_key(WalletService.normalize_private_key(private_key))
            return True
        except Exception:
            return False

    @staticmethod
    def load_account(private_key: str | None, field: str = "privateKey") -> LocalAccount | None:
        """Signer for write operations, or None when no key is configured."""
        if not private_key or not private_key.strip():
            return None

        try:
            return Account.from_key(WalletService.normalize_private_key(private_key))
        except Exception:
            module_logger.error(f"Could not load signer from {field}")
            raise InvalidPrivateKey(field)

    @staticmethod
    def describe_signers(config: ConnectionConfig) -> list[SignerData]:
        signers = []

        for field, private_key in (
            ("privateKey", config.private_key),
            ("l1PrivateKey", config.l1_private_key),
        ):
            account = WalletService.load_account(private_key, field)
            if account is not None:
                signers.append(SignerData(field=field, address=account.address))

        return signers
