class ProbeError(Exception):
    def __init__(self, rpc_url: str, message: str, status: int | None = None):
        self.rpc_url = rpc_url
        self.status = status
        super().__init__(f"RPC probe to {rpc_url} failed: {message}")


class ChainIdMismatch(Exception):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Chain ID mismatch: expected {expected}, got {actual}")
