"""Tests for DispatcherConfig."""

import json
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from msnet_router.config import DispatcherConfig


def test_defaults():
    config = DispatcherConfig(router_model_path="router.pt", expert_model_dir="experts")

    assert config.top_k == 2
    assert config.input_shape == (1, 3, 32, 32)
    assert config.input_size == 3072
    assert isinstance(config.router_model_path, Path)
    assert config.fallback_on_expert_error is True


def test_is_immutable():
    config = DispatcherConfig(router_model_path="router.pt", expert_model_dir="experts")
    with pytest.raises(FrozenInstanceError):
        config.top_k = 5


@pytest.mark.parametrize("kwargs", [
    {"top_k": 0},
    {"input_height": 0},
    {"num_threads": 0},
    {"top_k": 4, "num_classes": 3},
])
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(ValueError):
        DispatcherConfig(router_model_path="r.pt", expert_model_dir="e", **kwargs)


def test_extension_gets_leading_dot():
    config = DispatcherConfig(router_model_path="r.pt", expert_model_dir="e", model_extension="pt")
    assert config.model_extension == ".pt"


def test_json_round_trip(tmp_path):
    config = DispatcherConfig(
        router_model_path=tmp_path / "router.pt",
        expert_model_dir=tmp_path / "experts",
        top_k=3,
        num_classes=100,
        use_cuda=True,
    )
    path = tmp_path / "config.json"
    config.to_json(path)

    saved = json.loads(path.read_text())
    assert saved["router_model_path"] == str(tmp_path / "router.pt")
    assert DispatcherConfig.from_json(path) == config


def test_unknown_keys_are_rejected():
    with pytest.raises(TypeError):
        DispatcherConfig.from_dict(
            {"router_model_path": "r.pt", "expert_model_dir": "e", "topk": 2}
        )
