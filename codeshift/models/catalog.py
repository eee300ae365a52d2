"""Static table of the models the translator can route to."""

from __future__ import annotations

from dataclasses import dataclass

from codeshift.errors import UnknownModelError


@dataclass(frozen=True)
class ModelConfig:
    """A model served by one provider."""

    id: str
    label: str
    provider: str
    max_code_length: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "provider": self.provider,
            "maxCodeLength": self.max_code_length,
        }


MODELS: tuple[ModelConfig, ...] = (
    ModelConfig(
        id="lmstudio-community/Meta-Llama-3-8B-Instruct-GGUF",
        label="Llama 3 8B",
        provider="lmstudio",
        max_code_length=8000,
    ),
    ModelConfig(
        id="lmstudio-community/gemma-2-9b-it-GGUF",
        label="Gemma 2 9B",
        provider="lmstudio",
        max_code_length=8000,
    ),
)


def find_model(model_id: str) -> ModelConfig | None:
    """Return the config for ``model_id``, or None when it is not in the table."""
    for model in MODELS:
        if model.id == model_id:
            return model
    return None


def get_model_config(model_id: str) -> ModelConfig:
    """Like :func:`find_model` but raises :class:`UnknownModelError` when absent."""
    model = find_model(model_id)
    if model is None:
        raise UnknownModelError(model_id)
    return model


def models_for_provider(provider_id: str) -> list[ModelConfig]:
    return [m for m in MODELS if m.provider == provider_id]
