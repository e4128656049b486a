"""
Top-K selection over raw logits.
"""

from typing import List, NamedTuple, Sequence

import numpy as np

from msnet_router.errors import LogitShapeError


class TopKResult(NamedTuple):
    """Parallel class indices and scores, highest score first."""
    indices: List[int]
    scores: List[float]


def top_k_predictions(logits: Sequence[float], k: int) -> TopKResult:
    """
    Return the *k* highest-scoring class indices with their scores.

    Equal scores keep their original order, so the lower class index ranks
    first. The input is not modified.

    Raises:
        ValueError: If k < 1.
        LogitShapeError: If k exceeds the number of logits.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")

    scores = np.asarray(logits, dtype=np.float64).reshape(-1)
    if k > scores.size:
        raise LogitShapeError(f"Requested top-{k} from {scores.size} logits")

    # Stable sort on the negated scores == descending, ties by index
    order = np.argsort(-scores, kind="stable")[:k]
    return TopKResult(
        indices=[int(i) for i in order],
        scores=[float(scores[i]) for i in order],
    )
