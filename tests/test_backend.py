"""Tests for the TorchScript backend."""

import numpy as np
import pytest
import torch
from torch import nn

from msnet_router.experts.backend import ModelHandle, TorchScriptBackend


class _TinyNet(nn.Module):
    def __init__(self):
        super().__init__()
        self.linear = nn.Linear(12, 4)
        with torch.no_grad():
            self.linear.weight.zero_()
            self.linear.bias.copy_(torch.tensor([0.1, 0.9, 0.2, 0.05]))
            self.linear.weight[2, 0] = 1.0

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        return self.linear(torch.flatten(x, 1))


@pytest.fixture
def scripted_model(tmp_path):
    path = tmp_path / "1_2.pt"
    torch.jit.script(_TinyNet()).save(str(path))
    return path


def test_load_and_run(scripted_model):
    backend = TorchScriptBackend(input_shape=(1, 3, 2, 2))
    model = backend.load(scripted_model)

    logits = model.run(np.zeros(12, dtype=np.float32))

    assert isinstance(model, ModelHandle)
    assert model.name == "1_2"
    assert logits.shape == (4,)
    assert logits.dtype == np.float32
    np.testing.assert_allclose(logits, [0.1, 0.9, 0.2, 0.05], rtol=1e-6)


def test_input_reaches_the_model(scripted_model):
    model = TorchScriptBackend(input_shape=(1, 3, 2, 2)).load(scripted_model)
    image = np.zeros(12, dtype=np.float32)
    image[0] = 2.0

    logits = model.run(image)

    assert logits[2] == pytest.approx(2.2)


def test_cuda_request_without_cuda_falls_back_to_cpu(monkeypatch):
    monkeypatch.setattr(torch.cuda, "is_available", lambda: False)
    backend = TorchScriptBackend(use_cuda=True)
    assert backend.device.type == "cpu"


def test_missing_file_raises(tmp_path):
    backend = TorchScriptBackend()
    with pytest.raises((ValueError, RuntimeError)):
        backend.load(tmp_path / "nope.pt")
