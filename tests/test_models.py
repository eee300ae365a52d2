"""Tests for the static model table."""

import dataclasses

import pytest

from codeshift.errors import UnknownModelError
from codeshift.models import MODELS, find_model, get_model_config, models_for_provider


def test_model_ids_are_unique():
    ids = [m.id for m in MODELS]
    assert len(ids) == len(set(ids))


@pytest.mark.parametrize("model", MODELS, ids=lambda m: m.id)
def test_get_model_config_returns_registered_provider(model):
    config = get_model_config(model.id)
    assert config is model
    assert config.provider == model.provider


def test_find_model_returns_none_for_unknown_id():
    assert find_model("no-such-model") is None


def test_get_model_config_raises_for_unknown_id():
    with pytest.raises(UnknownModelError, match="Unknown model: no-such-model"):
        get_model_config("no-such-model")


def test_model_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        MODELS[0].provider = "other"


def test_models_for_provider():
    lmstudio = models_for_provider("lmstudio")
    assert {m.id for m in lmstudio} == {
        "lmstudio-community/Meta-Llama-3-8B-Instruct-GGUF",
        "lmstudio-community/gemma-2-9b-it-GGUF",
    }
    assert models_for_provider("unknown") == []


def test_to_dict_uses_public_field_names():
    data = get_model_config("lmstudio-community/gemma-2-9b-it-GGUF").to_dict()
    assert data == {
        "id": "lmstudio-community/gemma-2-9b-it-GGUF",
        "label": "Gemma 2 9B",
        "provider": "lmstudio",
        "maxCodeLength": 8000,
    }
