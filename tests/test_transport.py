import json
import logging

import httpx
import pytest

from convogen.errors import DecodeError, HTTPStatusError, NetworkError, SerializationError
from convogen.schema import OpenAIChatRequest, OpenAIChatResponse, OpenAIMessage
from convogen.transport import bearer_http_request

URL = "https://llm.test/v1/chat/completions"


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def _ok_body(content: str = "hello") -> dict:
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4o",
        "choices": [{"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}],
        "usage": {"prompt_tokens": 3, "completion_tokens": 1, "total_tokens": 4},
    }


def test_sends_bearer_auth_and_json_body():
    seen: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["auth"] = request.headers["Authorization"]
        seen["ctype"] = request.headers["Content-Type"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_ok_body())

    res = bearer_http_request("secret", URL, "POST", {"a": 1}, OpenAIChatResponse, client=_client(handler))

    assert seen == {
        "method": "POST",
        "auth": "Bearer secret",
        "ctype": "application/json",
        "body": {"a": 1},
    }
    assert res.choices[0].message.content == "hello"
    assert res.usage.total_tokens == 4


def test_unknown_response_fields_are_tolerated():
    body = _ok_body("x")
    body["service_tier"] = "default"
    body["choices"][0]["message"]["refusal"] = None
    body["brand_new_field"] = {"nested": [1, 2, 3]}

    res = bearer_http_request(
        "k", URL, "POST", {}, OpenAIChatResponse, client=_client(lambda r: httpx.Response(200, json=body))
    )
    assert res.choices[0].message.content == "x"


@pytest.mark.parametrize("status", [199, 300, 401, 404, 429, 500, 503])
def test_non_2xx_status_is_an_error(status):
    client = _client(lambda r: httpx.Response(status, json=_ok_body()))
    with pytest.raises(HTTPStatusError) as ei:
        bearer_http_request("k", URL, "POST", {}, OpenAIChatResponse, client=client)
    assert ei.value.status_code == status
    assert ei.value.url == URL


@pytest.mark.parametrize("status", [200, 201, 299])
def test_2xx_range_is_inclusive(status):
    client = _client(lambda r: httpx.Response(status, json=_ok_body()))
    res = bearer_http_request("k", URL, "POST", {}, OpenAIChatResponse, client=client)
    assert res.choices[0].message.content == "hello"


def test_invalid_json_logs_raw_body(caplog):
    client = _client(lambda r: httpx.Response(200, text="<html>gateway oops</html>"))
    with caplog.at_level(logging.ERROR, logger="convogen.transport"):
        with pytest.raises(DecodeError) as ei:
            bearer_http_request("k", URL, "POST", {}, OpenAIChatResponse, client=client)

    assert ei.value.response_body == "<html>gateway oops</html>"
    assert any("<html>gateway oops</html>" in r.getMessage() for r in caplog.records)


def test_wrong_shape_is_a_decode_error():
    client = _client(lambda r: httpx.Response(200, json={"choices": [{"no_message": True}]}))
    with pytest.raises(DecodeError):
        bearer_http_request("k", URL, "POST", {}, OpenAIChatResponse, client=client)


def test_connection_failure_is_a_network_error(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with caplog.at_level(logging.ERROR, logger="convogen.transport"):
        with pytest.raises(NetworkError):
            bearer_http_request("k", URL, "POST", {}, OpenAIChatResponse, client=_client(handler))
    assert any(URL in r.getMessage() for r in caplog.records)


def test_unserializable_body_never_hits_the_network():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json=_ok_body())

    with pytest.raises(SerializationError):
        bearer_http_request("k", URL, "POST", {"bad": object()}, OpenAIChatResponse, client=_client(handler))
    assert calls == []


def test_request_model_round_trip():
    req = OpenAIChatRequest(
        model="gpt-4o",
        messages=[OpenAIMessage(role="system", content="be terse"), OpenAIMessage(role="user", content="ping")],
    )
    back = OpenAIChatRequest.model_validate_json(req.model_dump_json())
    assert back.model == req.model
    assert back.messages == req.messages


class _BrokenStream(httpx.SyncByteStream):
    def __iter__(self):
        yield b'{"choices": ['
        raise httpx.ReadError("connection reset while reading body")


def test_body_read_failure_is_a_network_error(caplog):
    client = _client(lambda r: httpx.Response(200, stream=_BrokenStream()))
    with caplog.at_level(logging.ERROR, logger="convogen.transport"):
        with pytest.raises(NetworkError) as ei:
            bearer_http_request("k", URL, "POST", {}, OpenAIChatResponse, client=client)

    assert ei.value.url == URL
    assert any("failed to read response body" in r.getMessage() for r in caplog.records)
