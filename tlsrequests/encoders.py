"""
Body encoders: pluggable callables that build a complete POST request.

Each encoder is ``encoder(url) -> httpx.Request``. The returned request has its
body fully read into memory so it can be sent more than once.
"""

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from tlsrequests.errors import RequestBuildError, SerializationError

logger = logging.getLogger(__name__)

BodyEncoder = Callable[[str], httpx.Request]

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json;charset=utf-8"


@dataclass(frozen=True, slots=True)
class FileAttachment:
    """A named file part for multipart uploads."""

    name: str
    content: bytes
    content_type: str = "application/octet-stream"


def _build_post(url: str, **kwargs: Any) -> httpx.Request:
    try:
        request = httpx.Request("POST", url, **kwargs)
    except httpx.InvalidURL as exc:
        raise RequestBuildError(f"Invalid request URL {url!r}: {exc}") from exc
    # Materialize the body so headers such as Content-Length are final.
    request.read()
    return request


def form_data(data: Mapping[str, Any]) -> BodyEncoder:
    """
    Encode ``data`` as ``application/x-www-form-urlencoded``.

    Keys and values are joined verbatim as ``key=value`` pairs without
    percent-encoding; callers must pre-encode values containing ``&`` or ``=``.
    """

    def encode(url: str) -> httpx.Request:
        body = "&".join(f"{key}={value}" for key, value in data.items())
        return _build_post(
            url,
            content=body.encode("utf-8"),
            headers={"Content-Type": FORM_CONTENT_TYPE},
        )

    return encode


def json_data(value: Any) -> BodyEncoder:
    """Encode ``value`` as a compact UTF-8 JSON document."""

    def encode(url: str) -> httpx.Request:
        try:
            body = json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
        except (TypeError, ValueError) as exc:
            raise SerializationError(f"Failed to encode JSON body: {exc}") from exc
        return _build_post(
            url,
            content=body.encode("utf-8"),
            headers={"Content-Type": JSON_CONTENT_TYPE},
        )

    return encode


def multipart_data(
    fields: Mapping[str, str] | None = None,
    files: Mapping[str, FileAttachment] | None = None,
) -> BodyEncoder:
    """
    Encode scalar ``fields`` and named ``files`` as ``multipart/form-data``.

    The boundary is chosen by httpx and the body is finalized before the
    request is returned, so ``Content-Type`` and ``Content-Length`` are valid.
    """
    field_items = {key: str(value) for key, value in (fields or {}).items()}
    file_items = {
        field_name: (attachment.name, attachment.content, attachment.content_type)
        for field_name, attachment in (files or {}).items()
    }

    def encode(url: str) -> httpx.Request:
        if file_items:
            request = _build_post(url, data=field_items, files=file_items)
        elif not field_items:
            raise RequestBuildError("Multipart body needs at least one field or file.")
        else:
            # httpx only switches to multipart when files are present; a part
            # without filename or content type renders as a plain form field.
            parts = {key: (None, value.encode("utf-8"), None) for key, value in field_items.items()}
            request = _build_post(url, files=parts)
        logger.debug(
            "Built multipart body",
            extra={"fields": len(field_items), "files": len(file_items)},
        )
        return request

    return encode
