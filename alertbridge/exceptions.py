"""Error types raised while bridging notifications."""


class BridgeError(Exception):
    """Base exception for all bridge errors."""


class ConfigError(BridgeError):
    """Required configuration is missing or invalid."""


class DecodeError(BridgeError):
    """Inbound payload is not a well-formed notification."""


class DeliveryError(BridgeError):
    """Base exception for outbound delivery errors."""


class DeliveryTransportError(DeliveryError):
    """The destination webhook could not be reached."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"failed to call discord webhook: {reason}")


class DeliveryResponseReadError(DeliveryError):
    """The destination responded but its body could not be read."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"failed to read discord webhook response body: {reason}")
