class ResolutionError(ValueError):
    """Base class for connection resolution failures."""


class MissingField(ResolutionError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class UnsupportedProviderForNetwork(ResolutionError):
    def __init__(self, provider: str, network: str):
        self.provider = provider
        self.network = network
        super().__init__(f"{provider} does not support {network}")


class InvalidUrl(ResolutionError):
    def __init__(self, value, field: str | None = None):
        self.value = value
        self.field = field
        label = f" in {field}" if field else ""
        super().__init__(f"Invalid URL{label}: {value!r}")


class InvalidChainId(ResolutionError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Chain ID must be a positive integer, got {value!r}")


class UnknownNetwork(ResolutionError):
    def __init__(self, network):
        self.network = network
        super().__init__(f"Unknown network: {network!r}")


class UnknownProvider(ResolutionError):
    def __init__(self, provider):
        self.provider = provider
        super().__init__(f"Unknown RPC provider: {provider!r}")


class InvalidPrivateKey(ResolutionError):
    def __init__(self, field: str = "privateKey"):
        self.field = field
        super().__init__(f"Invalid private key in {field}")
