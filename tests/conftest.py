"""
Pytest configuration and fixtures for the dispatcher tests.
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from msnet_router.config import DispatcherConfig  # noqa: E402


class FakeModel:
    """Model handle returning scripted logits and recording every call."""

    def __init__(self, name: str, logits: Optional[List[float]] = None, error: Exception = None):
        self.name = name
        self.logits = logits if logits is not None else [0.0, 0.0, 0.0, 0.0]
        self.error = error
        self.calls: List[np.ndarray] = []

    def run(self, input_buffer: np.ndarray) -> np.ndarray:
        self.calls.append(input_buffer)
        if self.error is not None:
            raise self.error
        return np.asarray(self.logits, dtype=np.float32)


class FakeBackend:
    """Backend that hands out FakeModels by file stem."""

    def __init__(self, models: Dict[str, FakeModel] = None, fail_on: str = None):
        self.models = models or {}
        self.fail_on = fail_on
        self.loaded: List[Path] = []

    def load(self, path: Path) -> FakeModel:
        path = Path(path)
        self.loaded.append(path)
        if path.stem == self.fail_on:
            raise RuntimeError(f"corrupted model {path.name}")
        return self.models.get(path.stem) or FakeModel(path.stem)


@pytest.fixture
def small_config(tmp_path) -> DispatcherConfig:
    """A 1x2x2 input config (4 values) pointing at tmp_path."""
    return DispatcherConfig(
        router_model_path=tmp_path / "router.pt",
        expert_model_dir=tmp_path / "experts",
        input_channels=1,
        input_height=2,
        input_width=2,
    )


@pytest.fixture
def router_logits() -> List[float]:
    return [0.1, 0.9, 0.2, 0.05]


@pytest.fixture
def sample_input() -> List[float]:
    return [0.0, 0.25, 0.5, 1.0]


@pytest.fixture
def model_dir(tmp_path) -> Path:
    """Directory with a router file and an experts/ folder of model files."""
    (tmp_path / "router.pt").write_bytes(b"router")
    experts = tmp_path / "experts"
    experts.mkdir()
    for name in ("1_2.pt", "0_3.pt", "README.txt", "1_2.onnx"):
        (experts / name).write_bytes(b"model")
    return tmp_path
