from dataclasses import dataclass

from utils.utils import format_gwei


@dataclass
class ProbeResult:
    rpc_url: str
    status: int
    chain_id: int | None = None


@dataclass
class GasFees:
    max_priority_fee: int
    max_fee: int

    def to_dict(self) -> dict:
        return {
            "maxPriorityFeePerGas": format_gwei(self.max_priority_fee),
            "maxFeePerGas": format_gwei(self.max_fee),
        }
