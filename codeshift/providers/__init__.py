"""Translation providers: Strategy pattern for swappable model backends."""

from codeshift.providers.base import Provider, ProviderRegistry, ProviderRequest
from codeshift.providers.config import LMStudioConfig, ProviderConfig, build_registry
from codeshift.providers.lmstudio import LMStudioProvider
from codeshift.providers.orchestrator import (
    TranslateBody,
    stream_body,
    stream_code_translation,
)
from codeshift.providers.prompts import NATURAL_LANGUAGE, TranslationMode, create_prompt

__all__ = [
    "LMStudioConfig",
    "LMStudioProvider",
    "NATURAL_LANGUAGE",
    "Provider",
    "ProviderConfig",
    "ProviderRegistry",
    "ProviderRequest",
    "TranslateBody",
    "TranslationMode",
    "build_registry",
    "create_prompt",
    "stream_body",
    "stream_code_translation",
]
