import pytest

from models.dtos import ConnectionConfig
from services.errors import InvalidPrivateKey
from services.wallet import WalletService


def test_normalize_adds_prefix(dev_private_key):
    assert WalletService.normalize_private_key(dev_private_key[2:]) == dev_private_key


def test_get_address(dev_private_key, dev_address):
    assert WalletService.get_address(dev_private_key) == dev_address
    assert WalletService.get_address(dev_private_key[2:]) == dev_address


def test_validate_private_key(dev_private_key):
    assert WalletService.validate_private_key(dev_private_key)
    assert not WalletService.validate_private_key("0x1234")


def test_load_account_without_key():
    assert WalletService.load_account(None) is None
    assert WalletService.load_account("  ") is None


def test_load_account_reports_field():
    with pytest.raises(InvalidPrivateKey) as exc_info:
        WalletService.load_account("0xnothex", "l1PrivateKey")
    assert exc_info.value.field == "l1PrivateKey"


def test_describe_signers(dev_private_key, dev_address):
    signers = WalletService.describe_signers(
        ConnectionConfig(network="arbitrumOne", l1_private_key=dev_private_key)
    )

    assert len(signers) == 1
    assert signers[0].field == "l1PrivateKey"
    assert signers[0].address == dev_address
