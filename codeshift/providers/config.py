"""Configuration dataclasses and factory function for translation providers."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codeshift.providers.base import ProviderRegistry

logger = logging.getLogger(__name__)

ENV_PREFIX = "CODESHIFT_"


@dataclass
class LMStudioConfig:
    """Configuration for the LM Studio OpenAI-compatible server."""

    base_url: str = "http://localhost:1234/v1"
    api_key: str = "lm-studio"
    timeout: float = 60.0
    temperature: float | None = None


@dataclass
class ProviderConfig:
    """Top-level provider configuration."""

    lmstudio: LMStudioConfig = field(default_factory=LMStudioConfig)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> ProviderConfig:
        """Defaults overridden by ``CODESHIFT_LMSTUDIO_*`` environment variables."""
        env = os.environ if environ is None else environ
        lmstudio = LMStudioConfig()

        base_url = env.get(f"{ENV_PREFIX}LMSTUDIO_BASE_URL")
        if base_url:
            lmstudio.base_url = base_url.rstrip("/")

        api_key = env.get(f"{ENV_PREFIX}LMSTUDIO_API_KEY")
        if api_key:
            lmstudio.api_key = api_key

        timeout = env.get(f"{ENV_PREFIX}LMSTUDIO_TIMEOUT")
        if timeout:
            try:
                lmstudio.timeout = float(timeout)
            except ValueError:
                raise ValueError(
                    f"{ENV_PREFIX}LMSTUDIO_TIMEOUT must be a number, got {timeout!r}"
                ) from None

        return cls(lmstudio=lmstudio)


def build_registry(config: ProviderConfig | None = None) -> ProviderRegistry:
    """Factory function: returns a registry holding every built-in provider.

    Args:
        config: Provider configuration. Uses defaults if None.

    Returns:
        A ProviderRegistry ready to be handed to the orchestrator.
    """
    # Import here to avoid circular imports
    from codeshift.providers.base import ProviderRegistry
    from codeshift.providers.lmstudio import LMStudioProvider

    if config is None:
        config = ProviderConfig()

    registry = ProviderRegistry()
    registry.register(LMStudioProvider(config.lmstudio))
    logger.info("Registered providers: %s", ", ".join(registry.ids()))
    return registry
