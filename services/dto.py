from dataclasses import dataclass


@dataclass
class SignerData:
    field: str
    address: str
