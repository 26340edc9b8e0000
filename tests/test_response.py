from dataclasses import dataclass

import httpx
import pytest
from pydantic import BaseModel

from tlsrequests.errors import BodyReadError, DeserializationError
from tlsrequests.response import ResponseData, build_response_data, canonical_header_key


@dataclass
class Item:
    a: int


class ItemModel(BaseModel):
    a: int
    label: str = ""


class _TrackingStream(httpx.SyncByteStream):
    def __init__(self, chunks: list[bytes], fail: bool = False) -> None:
        self._chunks = chunks
        self._fail = fail
        self.close_calls = 0

    def __iter__(self):
        yield from self._chunks
        if self._fail:
            raise httpx.ReadError("connection reset")

    def close(self) -> None:
        self.close_calls += 1


def _response(stream: httpx.SyncByteStream, **kwargs) -> httpx.Response:
    return httpx.Response(200, stream=stream, request=httpx.Request("GET", "http://example/"), **kwargs)


def test_canonical_header_key() -> None:
    assert canonical_header_key("content-type") == "Content-Type"
    assert canonical_header_key("X-REQUEST-ID") == "X-Request-Id"
    assert canonical_header_key("etag") == "Etag"


def test_build_response_data_buffers_and_closes_once() -> None:
    stream = _TrackingStream([b'{"a":', b"1}"])
    response = _response(stream, headers=[("set-cookie", "a=1"), ("Set-Cookie", "b=2")])

    data = build_response_data(response)

    assert data.data == b'{"a":1}'
    assert data.status == "200 OK"
    assert data.header["Set-Cookie"] == ["a=1", "b=2"]
    assert stream.close_calls == 1
    assert response.is_closed


def test_empty_body_is_zero_length_bytes() -> None:
    data = build_response_data(_response(_TrackingStream([])))
    assert data.data == b""
    assert data.text() == ""


def test_body_read_failure_keeps_partial_metadata() -> None:
    stream = _TrackingStream([b"partial"], fail=True)
    response = _response(stream, headers={"X-Test": "1"})

    with pytest.raises(BodyReadError) as exc:
        build_response_data(response)

    partial = exc.value.partial
    assert isinstance(partial, ResponseData)
    assert partial.status_code == 200
    assert partial.header["X-Test"] == ["1"]
    assert partial.data == b""
    assert stream.close_calls == 1


def test_text_does_not_negotiate_charset() -> None:
    data = ResponseData(
        status="200 OK",
        status_code=200,
        header={"Content-Type": ["text/plain; charset=latin-1"]},
        data="héllo".encode("utf-8"),
    )
    assert data.text() == "héllo"


def test_bind_json_into_dataclass_and_model() -> None:
    data = ResponseData(status="200 OK", status_code=200, data=b'{"a": 1, "label": "x"}')

    assert data.bind_json(Item) == Item(a=1)
    assert data.bind_json(ItemModel) == ItemModel(a=1, label="x")
    assert data.bind_json() == {"a": 1, "label": "x"}


def test_bind_json_is_idempotent() -> None:
    data = ResponseData(status="200 OK", status_code=200, data=b'{"a": 5}')
    assert data.bind_json(Item) == data.bind_json(Item)
    assert data.bind_json() == data.bind_json()


@pytest.mark.parametrize("target", [None, Item, dict[str, int]])
def test_bind_json_malformed_body(target) -> None:
    data = ResponseData(status="200 OK", status_code=200, data=b'{"a": ')
    with pytest.raises(DeserializationError):
        data.bind_json(target)


def test_bind_json_structural_mismatch() -> None:
    data = ResponseData(status="200 OK", status_code=200, data=b'{"a": "not-a-number"}')
    with pytest.raises(DeserializationError):
        data.bind_json(Item)
    assert data.bind_json() == {"a": "not-a-number"}


def test_bind_json_does_not_coerce_strings_into_numbers() -> None:
    data = ResponseData(status="200 OK", status_code=200, data=b'{"a":"1"}')
    with pytest.raises(DeserializationError):
        data.bind_json(Item)
    with pytest.raises(DeserializationError):
        data.bind_json(dict[str, int])


def test_bind_json_accepts_generic_alias_targets() -> None:
    data = ResponseData(status="200 OK", status_code=200, data=b'[{"a": 1}, {"a": 2}]')
    assert data.bind_json(list[Item]) == [Item(a=1), Item(a=2)]


def test_bind_json_rejects_instance_target() -> None:
    data = ResponseData(status="200 OK", status_code=200, data=b'{"a": 1}')
    with pytest.raises(TypeError) as exc:
        data.bind_json(Item(a=0))
    assert "must be a type" in str(exc.value)
