"""
Client façade that threads encoders and decorators through one TLS-configured transport.

Every call builds a request, applies decorators in order, sends it and returns
a fully-buffered ResponseData. The client holds no per-call state, so one
instance can be shared across threads.
"""

import logging
from dataclasses import dataclass

import httpx

from tlsrequests.decorators import RequestDecorator
from tlsrequests.encoders import BodyEncoder
from tlsrequests.errors import RequestBuildError, TransportError
from tlsrequests.http_client import create_http_client
from tlsrequests.response import ResponseData, build_response_data
from tlsrequests.settings import TLSSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RequestsClient:
    """Typed wrapper around a shared, TLS-configured httpx.Client."""

    _client: httpx.Client

    @classmethod
    def from_settings(cls, settings: TLSSettings) -> "RequestsClient":
        """Factory that builds the client from TLSSettings."""
        return cls(create_http_client(settings))

    def close(self) -> None:
        """Close the underlying HTTP resources."""
        self._client.close()

    def __enter__(self) -> "RequestsClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get(self, url: str, *decorators: RequestDecorator) -> ResponseData:
        """Send a bodyless GET request."""
        try:
            request = self._client.build_request("GET", url)
        except httpx.InvalidURL as exc:
            raise RequestBuildError(f"Get method create request failed for {url!r}: {exc}") from exc
        return self._send(request, decorators)

    def post(self, url: str, encoder: BodyEncoder, *decorators: RequestDecorator) -> ResponseData:
        """Send a POST request whose body is produced by ``encoder``."""
        try:
            request = encoder(url)
        except RequestBuildError:
            logger.debug("Post body encoder failed", extra={"url": url}, exc_info=True)
            raise
        except Exception as exc:
            raise RequestBuildError(f"Post method create request failed for {url!r}: {exc}") from exc
        # Encoders build bare requests; merge the client's default headers underneath.
        for name, value in self._client.headers.items():
            request.headers.setdefault(name, value)
        return self._send(request, decorators)

    def post_form_data(
        self, url: str, encoder: BodyEncoder, *decorators: RequestDecorator
    ) -> ResponseData:
        """Send a multipart POST request. Behaves exactly like ``post``."""
        return self.post(url, encoder, *decorators)

    def _send(self, request: httpx.Request, decorators: tuple[RequestDecorator, ...]) -> ResponseData:
        """Apply decorators, send the request and normalize the response."""
        for decorate in decorators:
            decorate(request)

        method = request.method
        url = str(request.url)
        try:
            response = self._client.send(request, stream=True)
        except httpx.TimeoutException as exc:
            logger.error(
                "HTTP request timed out",
                extra={"method": method, "url": url},
                exc_info=exc,
            )
            raise TransportError(f"HTTP request timed out ({method} {url}).") from exc
        except httpx.RequestError as exc:
            logger.error(
                "HTTP request failed",
                extra={"method": method, "url": url},
                exc_info=exc,
            )
            raise TransportError(f"HTTP do {method.lower()} failed ({url}): {exc!s}") from exc

        logger.debug(
            "HTTP response received",
            extra={"method": method, "url": url, "status_code": response.status_code},
        )
        return build_response_data(response)
