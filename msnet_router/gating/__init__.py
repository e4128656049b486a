"""
Gating components.

This package contains the stages of a single dispatch:
- top_k_predictions: rank router logits
- select_expert: match the router's top-2 against expert coverage
- average_logits / argmax: fuse router and expert outputs
- MoEDispatcher: main orchestrator

All components can be imported directly from this package:
    from msnet_router.gating import MoEDispatcher, top_k_predictions
"""

from .topk import TopKResult, top_k_predictions
from .selection import select_expert
from .fusion import argmax, average_logits
from .dispatcher import DispatchResult, DispatchState, MoEDispatcher

__all__ = [
    "TopKResult",
    "top_k_predictions",
    "select_expert",
    "average_logits",
    "argmax",
    "DispatchResult",
    "DispatchState",
    "MoEDispatcher",
]
