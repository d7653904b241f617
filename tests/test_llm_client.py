import json

import httpx
import pytest

from sentinel.services.llm_client import LLMClient, LLMUnavailable


def _client(handler, api_key="test-key"):
    return LLMClient(api_key=api_key, transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_generate_returns_message_content():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": " Looks safe. "}}]})

    client = _client(handler)
    try:
        out = await client.generate("Is this safe?")
    finally:
        await client.aclose()
    assert out == "Looks safe."
    assert seen["auth"] == "Bearer test-key"
    assert seen["body"]["messages"] == [{"role": "user", "content": "Is this safe?"}]
    assert "model" in seen["body"]


@pytest.mark.asyncio
async def test_generate_raises_on_http_error():
    client = _client(lambda request: httpx.Response(500, text="upstream down"))
    with pytest.raises(LLMUnavailable):
        await client.generate("prompt")
    await client.aclose()


@pytest.mark.asyncio
async def test_generate_raises_on_transport_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    client = _client(handler)
    with pytest.raises(LLMUnavailable):
        await client.generate("prompt")
    await client.aclose()


@pytest.mark.asyncio
async def test_generate_raises_on_unexpected_payload():
    client = _client(lambda request: httpx.Response(200, json={"error": "nope"}))
    with pytest.raises(LLMUnavailable):
        await client.generate("prompt")
    await client.aclose()


@pytest.mark.asyncio
async def test_generate_requires_api_key():
    client = _client(lambda request: httpx.Response(200, json={}))
    client.api_key = ""
    with pytest.raises(LLMUnavailable):
        await client.generate("prompt")


@pytest.mark.asyncio
async def test_close_without_client_does_not_create_one(monkeypatch):
    from sentinel.services import llm_client

    monkeypatch.setattr(llm_client, "_client", None)
    await llm_client.close_llm_client()
    assert llm_client._client is None


@pytest.mark.asyncio
async def test_close_releases_shared_client(monkeypatch):
    from sentinel.services import llm_client

    closed = []

    class FakeClient:
        async def aclose(self):
            closed.append(True)

    monkeypatch.setattr(llm_client, "_client", FakeClient())
    await llm_client.close_llm_client()
    assert closed == [True]
    assert llm_client._client is None
