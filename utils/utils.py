from decimal import Decimal

from web3 import AsyncWeb3

TRUE_VALUES = ("1", "true", "yes", "on")

UNIT_DECIMALS = {
    "wei": 0,
    "kwei": 3,
    "mwei": 6,
    "gwei": 9,
    "szabo": 12,
    "finney": 15,
    "ether": 18,
}


def parse_bool(value, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in TRUE_VALUES
    return bool(value)


def _check_unit(unit: str) -> str:
    if unit not in UNIT_DECIMALS:
        raise ValueError(f"Unsupported unit: {unit}")
    return unit


def to_wei(value: int | float | str | Decimal, unit: str = "ether") -> int:
    return AsyncWeb3.to_wei(Decimal(str(value)), _check_unit(unit))


def from_wei(value: int | str, unit: str = "ether") -> Decimal:
    return Decimal(int(value)) / Decimal(10 ** UNIT_DECIMALS[_check_unit(unit)])


def convert_units(value: int | float | str | Decimal, from_unit: str, to_unit: str) -> Decimal:
    return from_wei(to_wei(value, from_unit), to_unit)


def format_amount(value: Decimal) -> str:
    if value == 0:
        return "0"

    if value > Decimal("1"):
        return f"{value:.2f}".rstrip("0").rstrip(".")

    return f"{value:.9f}".rstrip("0").rstrip(".")


def format_gwei(value_wei: int) -> str:
    return format_amount(from_wei(value_wei, "gwei"))
