from __future__ import annotations

import json

import httpx
import pytest
from openai import OpenAI

from chat_backend.errors import EmptyReply, ProviderError, ProviderFailure, TransportError
from chat_backend.llm import CompletionClient

BASE_URL = "https://llm.test/v1"


def _make_client(handler) -> CompletionClient:
    openai_client = OpenAI(
        api_key="test-key",
        base_url=BASE_URL,
        max_retries=0,
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    return CompletionClient(openai_client, model="jamba-mini", max_tokens=256)


def _completion(content):
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "jamba-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def test_complete_sends_single_user_turn_and_trims_reply():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_completion("  Hi there!  \n"))

    reply = _make_client(handler).complete("Hello")

    assert reply == "Hi there!"
    assert seen["url"] == f"{BASE_URL}/chat/completions"
    assert seen["auth"] == "Bearer test-key"
    assert seen["body"]["model"] == "jamba-mini"
    assert seen["body"]["max_tokens"] == 256
    assert seen["body"]["messages"] == [{"role": "user", "content": "Hello"}]


def test_non_2xx_raises_provider_error_with_status_and_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"detail": "upstream exploded"})

    with pytest.raises(ProviderError) as exc_info:
        _make_client(handler).complete("Hello")

    assert exc_info.value.status == 500
    assert "upstream exploded" in exc_info.value.body


def test_unauthorized_is_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"detail": "bad key"})

    with pytest.raises(ProviderError) as exc_info:
        _make_client(handler).complete("Hello")

    assert exc_info.value.status == 401


@pytest.mark.parametrize(
    "payload",
    [
        _completion("   "),
        _completion(None),
        {"id": "chatcmpl-1", "object": "chat.completion", "created": 0, "model": "jamba-mini", "choices": []},
    ],
)
def test_empty_reply(payload):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=payload)

    with pytest.raises(EmptyReply):
        _make_client(handler).complete("Hello")


@pytest.mark.parametrize("error_cls", [httpx.ConnectError, httpx.ReadTimeout])
def test_network_failure_is_transport_error(error_cls):
    def handler(request: httpx.Request) -> httpx.Response:
        raise error_cls("network down", request=request)

    with pytest.raises(TransportError):
        _make_client(handler).complete("Hello")


@pytest.mark.parametrize(
    "response_kwargs",
    [
        {"content": b"{not json", "headers": {"content-type": "application/json"}},
        {"json": {"choices": [{"message": {"content": 123}}]}},
        {"json": {"choices": None}},
        {"json": {"choices": {"0": "not a list"}}},
    ],
)
def test_malformed_2xx_is_provider_failure(response_kwargs):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, **response_kwargs)

    with pytest.raises(ProviderFailure):
        _make_client(handler).complete("Hello")
