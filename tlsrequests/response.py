"""Fully-buffered response wrapper and the normalizer that produces it."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, get_origin

import httpx
from pydantic import PydanticSchemaGenerationError, TypeAdapter, ValidationError

from tlsrequests.errors import BodyReadError, DeserializationError

logger = logging.getLogger(__name__)


def canonical_header_key(name: str) -> str:
    """Return ``name`` in canonical MIME form, e.g. ``content-type`` -> ``Content-Type``."""
    return "-".join(part.capitalize() for part in name.split("-"))


@dataclass(frozen=True, slots=True)
class ResponseData:
    """Status, headers and the complete body of one HTTP exchange."""

    status: str
    status_code: int
    header: dict[str, list[str]] = field(default_factory=dict)
    data: bytes = b""

    def text(self) -> str:
        """Body bytes as text. No charset negotiation is performed."""
        return self.data.decode("utf-8", errors="replace")

    def bind_json(self, target: Any = None) -> Any:
        """
        Decode the buffered body as JSON.

        Without ``target`` the plain decoded value is returned. Otherwise
        ``target`` must be a type (dataclass, pydantic model, ``dict[str, int]``,
        ...), not an instance; the document is validated against it in strict
        mode, so ``"1"`` does not bind to an ``int`` field. Safe to call
        repeatedly.
        """
        if target is None:
            try:
                return json.loads(self.data)
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise DeserializationError(f"Response body is not valid JSON: {exc}") from exc
        if not isinstance(target, type) and get_origin(target) is None:
            raise TypeError(f"bind_json target must be a type, got {type(target).__name__} instance.")
        try:
            adapter = TypeAdapter(target)
        except PydanticSchemaGenerationError as exc:
            raise TypeError(f"Cannot bind JSON to {target!r}: {exc}") from exc
        try:
            return adapter.validate_json(self.data, strict=True)
        except ValidationError as exc:
            raise DeserializationError(
                f"Response body does not match {getattr(target, '__name__', target)!s}: {exc}"
            ) from exc


def _collect_headers(response: httpx.Response) -> dict[str, list[str]]:
    headers: dict[str, list[str]] = {}
    for name, value in response.headers.multi_items():
        headers.setdefault(canonical_header_key(name), []).append(value)
    return headers


def build_response_data(response: httpx.Response) -> ResponseData:
    """
    Drain and close ``response`` and wrap it in a ResponseData.

    The response is closed on every path. A failed body read raises
    BodyReadError carrying the status line and headers gathered so far.
    """
    status = f"{response.status_code} {response.reason_phrase}".strip()
    headers = _collect_headers(response)
    try:
        body = response.read()
    except (httpx.StreamError, httpx.RequestError) as exc:
        partial = ResponseData(status=status, status_code=response.status_code, header=headers)
        logger.error(
            "Failed to read response body",
            extra={"status_code": response.status_code},
            exc_info=exc,
        )
        raise BodyReadError(f"Read response data failed: {exc}", partial=partial) from exc
    finally:
        response.close()

    return ResponseData(
        status=status,
        status_code=response.status_code,
        header=headers,
        data=body,
    )
