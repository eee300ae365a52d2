"""Tests for LMStudioProvider with the OpenAI client mocked out."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from codeshift.providers import (
    LMStudioConfig,
    LMStudioProvider,
    ProviderRegistry,
    ProviderRequest,
    create_prompt,
    stream_code_translation,
)

from conftest import collect

LLAMA = "lmstudio-community/Meta-Llama-3-8B-Instruct-GGUF"


class FakeStream:
    """Stands in for openai.AsyncStream[ChatCompletionChunk]."""

    def __init__(self, pieces):
        self._pieces = pieces
        self.closed = False

    def __aiter__(self):
        return self._chunks()

    async def _chunks(self):
        for piece in self._pieces:
            if piece is None:
                yield SimpleNamespace(choices=[])
            else:
                yield SimpleNamespace(choices=[SimpleNamespace(delta=SimpleNamespace(content=piece))])

    async def close(self):
        self.closed = True


def _provider(stream, config=None):
    provider = LMStudioProvider(config)
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=stream)
    provider._client = client
    return provider, client


def _request(**overrides):
    fields = {
        "input_language": "JavaScript",
        "output_language": "Python",
        "input_code": "console.log(1)",
        "model": LLAMA,
    }
    fields.update(overrides)
    return ProviderRequest(**fields)


def _run(provider, request):
    async def run():
        return await collect(await provider.stream_translate(request))

    return asyncio.run(run())


def test_streams_content_deltas_as_utf8_bytes():
    stream = FakeStream(["print", None, "", "(1) # é"])
    provider, _ = _provider(stream)

    assert _run(provider, _request()) == "print(1) # é".encode("utf-8")
    assert stream.closed


def test_sends_single_system_message_with_prompt():
    provider, client = _provider(FakeStream([]))
    request = _request()

    _run(provider, request)

    client.chat.completions.create.assert_awaited_once_with(
        model=LLAMA,
        messages=[
            {
                "role": "system",
                "content": create_prompt("JavaScript", "Python", "console.log(1)"),
            }
        ],
        stream=True,
    )


def test_temperature_is_forwarded_when_configured():
    provider, client = _provider(FakeStream([]), LMStudioConfig(temperature=0.2))
    _run(provider, _request())
    assert client.chat.completions.create.await_args.kwargs["temperature"] == 0.2


def test_request_api_key_uses_client_copy():
    provider, client = _provider(FakeStream([]))
    keyed = MagicMock()
    keyed.chat.completions.create = AsyncMock(return_value=FakeStream(["ok"]))
    client.with_options.return_value = keyed

    assert _run(provider, _request(api_key="user-key")) == b"ok"
    client.with_options.assert_called_once_with(api_key="user-key")
    client.chat.completions.create.assert_not_awaited()


def test_stream_is_closed_when_consumer_stops_early():
    stream = FakeStream(["a", "b", "c"])
    provider, _ = _provider(stream)

    async def run():
        chunks = await provider.stream_translate(_request())
        first = await chunks.__anext__()
        await chunks.aclose()
        return first

    assert asyncio.run(run()) == b"a"
    assert stream.closed


def test_upstream_errors_propagate_from_stream_translate():
    error = openai.APIConnectionError(
        request=httpx.Request("POST", "http://localhost:1234/v1/chat/completions")
    )
    provider = LMStudioProvider()
    provider._client = MagicMock()
    provider._client.chat.completions.create = AsyncMock(side_effect=error)

    with pytest.raises(openai.APIConnectionError) as excinfo:
        asyncio.run(provider.stream_translate(_request()))
    assert excinfo.value is error


def test_orchestrator_routes_known_model_to_lmstudio():
    provider, client = _provider(FakeStream(["for i in range(10):"]))
    registry = ProviderRegistry([provider])

    async def run():
        return await collect(
            await stream_code_translation(
                registry,
                input_language="JavaScript",
                output_language="Python",
                input_code="for (let i=0;i<10;i++){console.log(i)}",
                model=LLAMA,
                provider="lmstudio",
            )
        )

    assert asyncio.run(run()) == b"for i in range(10):"
    assert client.chat.completions.create.await_args.kwargs["model"] == LLAMA


def test_is_available_checks_models_endpoint():
    provider = LMStudioProvider(LMStudioConfig(base_url="http://box:1234/v1"))
    with patch("codeshift.providers.lmstudio.httpx.get") as get:
        get.return_value = SimpleNamespace(status_code=200)
        assert provider.is_available()
    get.assert_called_once_with("http://box:1234/v1/models", timeout=5.0)


def test_is_available_false_on_connection_error():
    provider = LMStudioProvider()
    with patch(
        "codeshift.providers.lmstudio.httpx.get",
        side_effect=httpx.ConnectError("refused"),
    ):
        assert not provider.is_available()


def test_list_models_reads_openai_model_list():
    provider = LMStudioProvider()
    response = httpx.Response(
        200,
        json={"object": "list", "data": [{"id": LLAMA, "object": "model"}, {"object": "model"}]},
        request=httpx.Request("GET", "http://localhost:1234/v1/models"),
    )
    with patch("codeshift.providers.lmstudio.httpx.get", return_value=response):
        assert provider.list_models() == [LLAMA]


def _models_response(**kwargs):
    return httpx.Response(
        200, request=httpx.Request("GET", "http://localhost:1234/v1/models"), **kwargs
    )


def test_list_models_rejects_non_json_body():
    provider = LMStudioProvider()
    response = _models_response(text="<html><body>Not LM Studio</body></html>")
    with patch("codeshift.providers.lmstudio.httpx.get", return_value=response):
        with pytest.raises(httpx.DecodingError, match="did not return JSON"):
            provider.list_models()


@pytest.mark.parametrize("payload", [[LLAMA], {"data": "none"}, {"models": []}])
def test_list_models_rejects_unexpected_shape(payload):
    provider = LMStudioProvider()
    with patch("codeshift.providers.lmstudio.httpx.get", return_value=_models_response(json=payload)):
        with pytest.raises(httpx.DecodingError, match="did not return a model list"):
            provider.list_models()


def test_list_models_skips_entries_that_are_not_objects():
    provider = LMStudioProvider()
    response = _models_response(json={"data": [LLAMA, {"id": 3}, {"id": LLAMA}]})
    with patch("codeshift.providers.lmstudio.httpx.get", return_value=response):
        assert provider.list_models() == [LLAMA]
