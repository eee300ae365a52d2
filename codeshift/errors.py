"""Errors raised while resolving a translation request.

Failures from the upstream completion client (``openai.APIError`` and the
``httpx`` transport errors underneath it) are not wrapped here; they reach the
caller unchanged.
"""

from __future__ import annotations


class TranslationError(ValueError):
    """Base class for requests that cannot be routed to a provider."""


class UnknownProviderError(TranslationError):
    def __init__(self, provider_id: str) -> None:
        super().__init__(f"Unknown provider: {provider_id}")
        self.provider_id = provider_id


class UnknownModelError(TranslationError):
    def __init__(self, model_id: str) -> None:
        super().__init__(f"Unknown model: {model_id}")
        self.model_id = model_id


class ProviderModelMismatchError(TranslationError):
    """The model is configured for a different provider than the one requested."""

    def __init__(self, model_id: str, provider_id: str) -> None:
        super().__init__(f"Model {model_id} does not belong to provider {provider_id}")
        self.model_id = model_id
        self.provider_id = provider_id


class InputTooLongError(TranslationError):
    def __init__(self, model_id: str, length: int, limit: int) -> None:
        super().__init__(
            f"Input is {length:,} characters; {model_id} accepts at most {limit:,}"
        )
        self.model_id = model_id
        self.length = length
        self.limit = limit
