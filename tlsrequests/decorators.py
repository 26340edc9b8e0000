"""
Request decorators: callables that mutate an already-built request in place.

Decorators run in the order they are passed to the client, after the body
encoder and before the request is sent. A later decorator overrides headers
set by the encoder or by an earlier decorator.
"""

import dataclasses
import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import httpx
from pydantic import BaseModel

logger = logging.getLogger(__name__)

RequestDecorator = Callable[[httpx.Request], None]


def add_header(headers: Mapping[str, str]) -> RequestDecorator:
    """Set (not append) each header in ``headers``."""

    def decorate(request: httpx.Request) -> None:
        for name, value in headers.items():
            request.headers[name] = value

    return decorate


def _is_unsupported(value: Any) -> bool:
    if isinstance(value, str):
        return False
    if isinstance(value, (bytes, bytearray, Mapping, Sequence, set, frozenset, BaseModel)):
        return True
    return dataclasses.is_dataclass(value)


def _record_fields(record: Any) -> dict[str, Any]:
    if isinstance(record, BaseModel):
        return {name: getattr(record, name) for name in type(record).model_fields}
    return {field.name: getattr(record, field.name) for field in dataclasses.fields(record)}


def _flatten_record(record: Any) -> dict[str, str]:
    params: dict[str, str] = {}
    for name, value in _record_fields(record).items():
        if value is None:
            continue
        if _is_unsupported(value):
            logger.warning(
                "Skipping non-scalar query parameter field",
                extra={"field": name, "record": type(record).__name__},
            )
            continue
        params[name] = str(value)
    return params


def _noop(request: httpx.Request) -> None:
    return None


def add_query_param(data: Any) -> RequestDecorator:
    """
    Set query parameters from a flat mapping or a flat record.

    Records are dataclass instances or pydantic models; one parameter is set per
    field using the declared field name. Fields set to None are left out;
    bytes and nested values are skipped with a warning. Anything else yields a decorator that
    does nothing, and a warning is logged instead of failing the call.
    """
    if isinstance(data, Mapping):
        params = {str(key): str(value) for key, value in data.items()}
    elif isinstance(data, BaseModel) or (
        dataclasses.is_dataclass(data) and not isinstance(data, type)
    ):
        params = _flatten_record(data)
    else:
        logger.warning(
            "add_query_param only supports a flat mapping or record",
            extra={"type": type(data).__name__},
        )
        return _noop

    def decorate(request: httpx.Request) -> None:
        url = request.url
        for key, value in params.items():
            url = url.copy_set_param(key, value)
        request.url = url

    return decorate
