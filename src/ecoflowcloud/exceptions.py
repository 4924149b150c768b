"""Exceptions raised by the EcoFlow cloud client."""


class EcoFlowError(Exception):
    """Base class for all client errors."""


class TransportError(EcoFlowError):
    """The HTTP call itself failed (DNS, TCP, TLS, timeout)."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class DecodeError(EcoFlowError):
    """The response body could not be decoded as JSON."""

    def __init__(self, message: str, body: str = "", status: int | None = None):
        super().__init__(message)
        self.body = body
        self.status = status
