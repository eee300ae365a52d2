"""Route a translation request to the provider that serves its model."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any

from codeshift.errors import ProviderModelMismatchError
from codeshift.models import get_model_config
from codeshift.providers.base import ProviderRegistry, ProviderRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TranslateBody:
    """Public request shape: ``{inputLanguage, outputLanguage, inputCode, model, provider, apiKey}``."""

    input_language: str
    output_language: str
    input_code: str
    model: str
    provider: str
    api_key: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> TranslateBody:
        """Parse the camelCase JSON body sent by the front-end.

        Raises:
            ValueError: If ``data`` is not an object, or a required field is
                missing or not a string.
        """
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")

        fields = {
            "input_language": "inputLanguage",
            "output_language": "outputLanguage",
            "input_code": "inputCode",
            "model": "model",
            "provider": "provider",
        }
        values: dict[str, str] = {}
        for attr, key in fields.items():
            value = data.get(key)
            if not isinstance(value, str):
                raise ValueError(f"'{key}' must be a string")
            values[attr] = value

        api_key = data.get("apiKey") or None
        if api_key is not None and not isinstance(api_key, str):
            raise ValueError("'apiKey' must be a string")

        return cls(api_key=api_key, **values)


async def stream_code_translation(
    registry: ProviderRegistry,
    *,
    input_language: str,
    output_language: str,
    input_code: str,
    model: str,
    provider: str,
    api_key: str | None = None,
) -> AsyncIterator[bytes]:
    """Validate the model/provider pair and start the provider's stream.

    Args:
        registry: Providers available to this process.
        input_language: Source language, or "Natural Language".
        output_language: Target language, or "Natural Language".
        input_code: Code (or description) to translate.
        model: Model id from the model table.
        provider: Provider id the caller expects to serve ``model``.
        api_key: Optional key forwarded to the provider.

    Returns:
        The provider's byte stream, unmodified.

    Raises:
        UnknownProviderError: If ``provider`` is not registered.
        UnknownModelError: If ``model`` is not in the model table.
        ProviderModelMismatchError: If ``model`` belongs to another provider.
    """
    backend = registry.get(provider)
    model_config = get_model_config(model)

    if model_config.provider != provider:
        raise ProviderModelMismatchError(model_config.id, provider)

    logger.debug("Routing %s to provider %s", model_config.id, backend.id)
    return await backend.stream_translate(
        ProviderRequest(
            input_language=input_language,
            output_language=output_language,
            input_code=input_code,
            model=model_config.id,
            api_key=api_key,
        )
    )


async def stream_body(registry: ProviderRegistry, body: TranslateBody) -> AsyncIterator[bytes]:
    """:func:`stream_code_translation` for an already parsed request body."""
    return await stream_code_translation(
        registry,
        input_language=body.input_language,
        output_language=body.output_language,
        input_code=body.input_code,
        model=body.model,
        provider=body.provider,
        api_key=body.api_key,
    )
