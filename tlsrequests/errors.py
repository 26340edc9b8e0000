"""Error taxonomy shared by the TLS builder, the encoders and the client façade."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tlsrequests.response import ResponseData


class RequestsError(RuntimeError):
    """Base class for every failure raised by tlsrequests."""


class ConfigValidationError(RequestsError, ValueError):
    """The TLS configuration is malformed or contradictory."""


class ConfigLoadError(RequestsError):
    """Certificate material could not be read from disk."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class CertificateLoadError(RequestsError):
    """Certificate material was read but could not be parsed or loaded."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


class RequestBuildError(RequestsError):
    """A request could not be constructed (bad URL or encoder failure)."""


class SerializationError(RequestBuildError):
    """A request body could not be encoded."""


class TransportError(RequestsError):
    """The request failed on the wire (connection, TLS, timeout)."""


class BodyReadError(RequestsError):
    """The response body could not be buffered.

    ``partial`` holds the status line and headers gathered before the read failed.
    """

    def __init__(self, message: str, *, partial: "ResponseData") -> None:
        super().__init__(message)
        self.partial = partial


class DeserializationError(RequestsError):
    """Buffered response bytes could not be bound to the requested shape."""
