"""
Result types for the MSNet Classifier SDK.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class PredictionResult:
    """Result of a single prediction request."""

    class_index: int
    """Final predicted class after fusion."""

    top_k_indices: List[int] = field(default_factory=list)
    """Router's top-k classes, most confident first."""

    top_k_scores: List[float] = field(default_factory=list)
    """Router logits for :attr:`top_k_indices`."""

    expert: Optional[str] = None
    """Key of the expert whose output was fused, or None for router-only."""

    routing_path: str = "router"
    """Human-readable routing trace, e.g. 'router -> expert:5_23'."""

    logits: Optional[List[float]] = None
    """Fused logits, if requested."""

    processing_time_ms: float = 0.0
    """End-to-end processing time in milliseconds."""

    def __repr__(self) -> str:
        return (
            f"PredictionResult("
            f"class_index={self.class_index}, "
            f"expert={self.expert!r}, "
            f"top_k={self.top_k_indices}, "
            f"time={self.processing_time_ms:.1f}ms)"
        )
