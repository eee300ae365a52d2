"""Model registry: which models exist and which provider serves each."""

from codeshift.models.catalog import (
    MODELS,
    ModelConfig,
    find_model,
    get_model_config,
    models_for_provider,
)

__all__ = [
    "MODELS",
    "ModelConfig",
    "find_model",
    "get_model_config",
    "models_for_provider",
]
