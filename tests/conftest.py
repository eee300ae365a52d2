from __future__ import annotations

from collections.abc import AsyncIterator

import pytest

from codeshift.providers.base import Provider, ProviderRegistry, ProviderRequest


class FakeProvider(Provider):
    """Records requests and streams canned chunks instead of calling a server."""

    def __init__(self, provider_id="lmstudio", chunks=(b"print(", b"1)"), error=None):
        self._id = provider_id
        self._chunks = list(chunks)
        self._error = error
        self.requests: list[ProviderRequest] = []
        self.available = True

    @property
    def id(self):
        return self._id

    async def stream_translate(self, request):
        self.requests.append(request)
        if self._error is not None:
            raise self._error
        return self._stream()

    async def _stream(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk

    def is_available(self):
        return self.available


async def collect(stream: AsyncIterator[bytes]) -> bytes:
    return b"".join([chunk async for chunk in stream])


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def registry(fake_provider):
    return ProviderRegistry([fake_provider])
