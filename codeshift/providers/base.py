"""Abstract base class for translation providers and the registry holding them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass

from codeshift.errors import UnknownProviderError


@dataclass(frozen=True)
class ProviderRequest:
    """One translation call, already resolved to a concrete model id."""

    input_language: str
    output_language: str
    input_code: str
    model: str
    api_key: str | None = None


class Provider(ABC):
    """Abstract interface that all translation providers must implement."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Identifier that model configs refer to (e.g. "lmstudio")."""
        ...

    @abstractmethod
    async def stream_translate(self, request: ProviderRequest) -> AsyncIterator[bytes]:
        """Start a streamed translation.

        Args:
            request: The normalized translation request.

        Returns:
            An async iterator of UTF-8 encoded output chunks, produced as the
            model generates them.
        """
        ...

    def is_available(self) -> bool:
        """Check if this provider is reachable and properly configured."""
        return True


class ProviderRegistry:
    """Mapping of provider id to provider, built once at start-up."""

    def __init__(self, providers: list[Provider] | None = None) -> None:
        self._providers: dict[str, Provider] = {}
        for provider in providers or []:
            self.register(provider)

    def register(self, provider: Provider) -> None:
        # Re-registering an id replaces the previous provider.
        self._providers[provider.id] = provider

    def get(self, provider_id: str) -> Provider:
        try:
            return self._providers[provider_id]
        except KeyError:
            raise UnknownProviderError(provider_id) from None

    def ids(self) -> list[str]:
        return list(self._providers)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __iter__(self) -> Iterator[Provider]:
        return iter(self._providers.values())

    def __len__(self) -> int:
        return len(self._providers)
