"""
Logit fusion.
"""

from typing import Sequence

import numpy as np

from msnet_router.errors import LogitShapeError


def average_logits(all_logits: Sequence[Sequence[float]]) -> np.ndarray:
    """
    Element-wise mean of one or more equal-length logit vectors.

    Raises:
        LogitShapeError: If no vectors are given or their lengths differ.
    """
    if len(all_logits) == 0:
        raise LogitShapeError("Cannot average an empty set of logits")

    vectors = [np.asarray(v, dtype=np.float64).reshape(-1) for v in all_logits]
    lengths = {v.size for v in vectors}
    if len(lengths) != 1:
        raise LogitShapeError(f"Logit vectors differ in length: {sorted(lengths)}")

    if len(vectors) == 1:
        return vectors[0].copy()
    return np.mean(np.stack(vectors), axis=0)


def argmax(logits: Sequence[float]) -> int:
    """Index of the largest value; the lowest index wins ties."""
    scores = np.asarray(logits).reshape(-1)
    if scores.size == 0:
        raise LogitShapeError("Cannot take argmax of empty logits")
    return int(np.argmax(scores))
