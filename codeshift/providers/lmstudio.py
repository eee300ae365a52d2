"""LM Studio provider using the OpenAI-compatible API."""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncIterator
from typing import Any

import httpx
from openai import AsyncOpenAI, AsyncStream
from openai.types.chat import ChatCompletionChunk

from codeshift.providers.base import Provider, ProviderRequest
from codeshift.providers.config import LMStudioConfig
from codeshift.providers.prompts import create_prompt

logger = logging.getLogger(__name__)


class LMStudioProvider(Provider):
    """Provider that streams completions from LM Studio's local server."""

    def __init__(self, config: LMStudioConfig | None = None) -> None:
        self._config = config or LMStudioConfig()
        self._client = AsyncOpenAI(
            base_url=self._config.base_url,
            api_key=self._config.api_key,
            timeout=self._config.timeout,
        )

    @property
    def id(self) -> str:
        return "lmstudio"

    @property
    def config(self) -> LMStudioConfig:
        return self._config

    async def stream_translate(self, request: ProviderRequest) -> AsyncIterator[bytes]:
        """Send one streamed chat completion and relay its text as bytes.

        The prompt is the only message (as the system instruction); there is
        no conversation history. The completion request is awaited here, so
        a refused connection or a model the server does not know raises
        before any bytes are produced.

        Raises:
            openai.APIError: If the LM Studio API returns an error.
        """
        prompt = create_prompt(
            request.input_language,
            request.output_language,
            request.input_code,
        )

        client = self._client
        if request.api_key:
            client = client.with_options(api_key=request.api_key)

        params: dict[str, Any] = {
            "model": request.model,
            "messages": [{"role": "system", "content": prompt}],
            "stream": True,
        }
        if self._config.temperature is not None:
            params["temperature"] = self._config.temperature

        logger.info(
            "[INFO] Streaming %s -> %s translation from LM Studio (model: %s, %d chars)",
            request.input_language,
            request.output_language,
            request.model,
            len(request.input_code),
        )
        stream = await client.chat.completions.create(**params)
        return _relay(stream, request.model)

    def is_available(self) -> bool:
        """Check connectivity by hitting the /v1/models endpoint.

        Returns:
            True if LM Studio is reachable and responds, False otherwise.
        """
        try:
            resp = httpx.get(f"{self._config.base_url}/models", timeout=5.0)
            return resp.status_code == 200
        except (httpx.ConnectError, httpx.TimeoutException, OSError):
            return False

    def list_models(self) -> list[str]:
        """Return the ids of the models the LM Studio server currently exposes.

        Raises:
            httpx.HTTPError: If the server is unreachable, answers with an
                error, or (``httpx.DecodingError``) the body is not an
                OpenAI-style model list.
        """
        resp = httpx.get(f"{self._config.base_url}/models", timeout=5.0)
        resp.raise_for_status()
        try:
            payload = resp.json()
        except ValueError as exc:
            raise httpx.DecodingError(
                f"{resp.url} did not return JSON: {exc}", request=resp.request
            ) from exc

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list):
            raise httpx.DecodingError(
                f"{resp.url} did not return a model list", request=resp.request
            )
        return [
            item["id"]
            for item in data
            if isinstance(item, dict) and isinstance(item.get("id"), str)
        ]


async def _relay(
    stream: AsyncStream[ChatCompletionChunk], model: str
) -> AsyncIterator[bytes]:
    start_time = time.perf_counter()
    sent = 0
    try:
        async for chunk in stream:
            if not chunk.choices:
                continue
            content = chunk.choices[0].delta.content
            if not content:
                continue
            data = content.encode("utf-8")
            sent += len(data)
            yield data
    finally:
        # Also runs when the consumer stops early; closes the HTTP response.
        await stream.close()
        logger.info(
            "[INFO] LM Studio stream for %s closed after %d bytes (%.2fs)",
            model,
            sent,
            time.perf_counter() - start_time,
        )
