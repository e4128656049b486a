"""
MSNet Router - Mixture of Experts inference dispatcher for image classifiers.

Core package for router-guided expert refinement:
Router Inference → Top-K → Expert Selection → Expert Inference → Logit Fusion
"""

from .config import DispatcherConfig
from .errors import (
    DispatcherInitError,
    InvalidInputError,
    LogitShapeError,
    ModelLoadError,
    MSNetError,
    NoExpertsFoundError,
)
from .gating.dispatcher import DispatchResult, DispatchState, MoEDispatcher

__version__ = "1.0.0"

__all__ = [
    "DispatcherConfig",
    "MoEDispatcher",
    "DispatchResult",
    "DispatchState",
    "MSNetError",
    "DispatcherInitError",
    "NoExpertsFoundError",
    "ModelLoadError",
    "InvalidInputError",
    "LogitShapeError",
]
