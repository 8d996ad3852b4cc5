import json

import pytest

from service_client import ReadError, Response


def _response(body: bytes = b"", raw_headers: list[str] | None = None) -> Response:
    response = Response(200, "OK", raw_headers or [])
    if body:
        response.append(body)
    return response.finish()


def test_header_lookup_is_case_sensitive() -> None:
    response = _response(raw_headers=["Content-Type", "application/json", "X-Request-Id", "abc"])
    assert response.header("Content-Type") == "application/json"
    assert response.header("X-Request-Id") == "abc"
    assert response.header("content-type") is None
    assert response.header("Missing") is None


def test_repeated_header_keeps_last_value() -> None:
    response = _response(raw_headers=["Set-Cookie", "a=1", "Set-Cookie", "b=2"])
    assert response.header("Set-Cookie") == "b=2"
    assert response.raw_headers == ("Set-Cookie", "a=1", "Set-Cookie", "b=2")


def test_header_index_is_built_once() -> None:
    response = _response(raw_headers=["X-One", "1"])
    assert response.header("X-One") == "1"
    index = response._headers
    assert response.header("X-Two") is None
    assert response._headers is index


def test_chunks_are_joined_in_order() -> None:
    response = Response(200, "OK")
    for chunk in (b'{"items":', b"[1,2,", b"3]}"):
        response.append(chunk)
    response.finish()
    assert response.string() == '{"items":[1,2,3]}'
    assert response.json() == {"items": [1, 2, 3]}


def test_multibyte_character_split_across_chunks() -> None:
    encoded = "café ✓".encode("utf-8")
    response = Response(200, "OK")
    for index in range(len(encoded)):
        response.append(encoded[index : index + 1])
    response.finish()
    assert response.string() == "café ✓"


def test_append_after_finish_is_rejected() -> None:
    response = _response(b"done")
    assert response.finished
    with pytest.raises(RuntimeError):
        response.append(b"late")
    assert response.string() == "done"


def test_json_raises_read_error_for_invalid_body() -> None:
    response = _response(b"not json")
    with pytest.raises(ReadError) as excinfo:
        response.json()
    assert isinstance(excinfo.value.cause, json.JSONDecodeError)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_json_passive_returns_none_for_invalid_body() -> None:
    response = _response(b"not json")
    assert response.json_passive() is None
    assert response.string() == "not json"


def test_empty_body_decodes_as_none() -> None:
    response = _response()
    assert response.string() == ""
    assert response.json() is None
    assert response.json_passive() is None


def test_json_passive_returns_parsed_value() -> None:
    response = _response(b'[{"id": 1}]')
    assert response.json_passive() == [{"id": 1}]


@pytest.mark.parametrize("body", [b"NaN", b"Infinity", b"-Infinity", b'{"ratio": NaN}'])
def test_non_standard_constants_are_rejected(body: bytes) -> None:
    response = _response(body)
    with pytest.raises(ReadError):
        response.json()
    assert response.json_passive() is None
