"""
Inference backend for router and expert models.

The dispatcher only needs ``run(input) -> logits`` from a model, so any
engine can be plugged in by implementing :class:`ModelBackend`. The default
backend loads TorchScript artifacts with ``torch.jit.load``.
"""

import logging
from pathlib import Path
from typing import Protocol, Sequence, runtime_checkable

import numpy as np
import torch

logger = logging.getLogger(__name__)


@runtime_checkable
class ModelHandle(Protocol):
    """A loaded model that maps a flat input buffer to flat logits."""

    name: str

    def run(self, input_buffer: np.ndarray) -> np.ndarray:
        ...


class ModelBackend(Protocol):
    """Loads model artifacts into :class:`ModelHandle` objects."""

    def load(self, path: Path) -> ModelHandle:
        ...


class TorchScriptModel:
    """
    TorchScript module bound to a device and a fixed NCHW input shape.
    """

    def __init__(self, name: str, module: torch.jit.ScriptModule,
                 input_shape: Sequence[int], device: torch.device):
        self.name = name
        self.module = module
        self.input_shape = tuple(input_shape)
        self.device = device

    def run(self, input_buffer: np.ndarray) -> np.ndarray:
        tensor = torch.as_tensor(
            np.asarray(input_buffer, dtype=np.float32)
        ).reshape(self.input_shape).to(self.device)

        with torch.no_grad():
            output = self.module(tensor)

        # Some exports return (logits, aux...) tuples
        if isinstance(output, (tuple, list)):
            output = output[0]
        return output.detach().float().cpu().numpy().reshape(-1)

    def __repr__(self) -> str:
        return f"TorchScriptModel(name={self.name!r}, device={self.device})"


class TorchScriptBackend:
    """
    Loads ``.pt`` TorchScript models for single-image inference.

    Thread count is configured once for the process; a single intra-op
    thread keeps results deterministic when several dispatchers share a host.
    """

    def __init__(
        self,
        input_shape: Sequence[int] = (1, 3, 32, 32),
        use_cuda: bool = False,
        device_id: int = 0,
        num_threads: int = 1,
    ):
        self.input_shape = tuple(input_shape)
        torch.set_num_threads(num_threads)

        if use_cuda and torch.cuda.is_available():
            self.device = torch.device(f"cuda:{device_id}")
            logger.info("CUDA execution enabled on device %d", device_id)
        else:
            if use_cuda:
                logger.warning("CUDA requested but not available, running on CPU")
            self.device = torch.device("cpu")

    @classmethod
    def from_config(cls, config) -> "TorchScriptBackend":
        return cls(
            input_shape=config.input_shape,
            use_cuda=config.use_cuda,
            device_id=config.device_id,
            num_threads=config.num_threads,
        )

    def load(self, path: Path) -> TorchScriptModel:
        path = Path(path)
        module = torch.jit.load(str(path), map_location=self.device)
        module.eval()
        return TorchScriptModel(path.stem, module, self.input_shape, self.device)
