"""Tests for top-k selection over logits."""

import numpy as np
import pytest

from msnet_router.errors import LogitShapeError
from msnet_router.gating.topk import top_k_predictions


def test_top2_of_router_logits(router_logits):
    result = top_k_predictions(router_logits, 2)

    assert result.indices == [1, 2]
    assert result.scores == pytest.approx([0.9, 0.2])


def test_full_ranking_is_descending():
    logits = [0.3, -1.0, 2.5, 0.0, 1.1]
    result = top_k_predictions(logits, len(logits))

    assert result.indices == [2, 4, 0, 3, 1]
    assert all(a >= b for a, b in zip(result.scores, result.scores[1:]))


def test_ties_rank_lower_index_first():
    result = top_k_predictions([0.5, 0.9, 0.5, 0.9], 4)
    assert result.indices == [1, 3, 0, 2]


def test_all_equal_scores_return_leading_indices():
    result = top_k_predictions([0.25] * 6, 3)
    assert result.indices == [0, 1, 2]


@pytest.mark.parametrize("k", [2, 3, 5, 8])
def test_returns_k_unique_indices(k):
    rng = np.random.default_rng(7)
    logits = rng.normal(size=8)

    result = top_k_predictions(logits, k)

    assert len(result.indices) == k
    assert len(set(result.indices)) == k
    assert len(result.scores) == k


def test_input_is_not_mutated():
    logits = np.array([0.1, 0.7, 0.3])
    before = logits.copy()

    top_k_predictions(logits, 2)

    np.testing.assert_array_equal(logits, before)


def test_k_larger_than_logits_is_rejected():
    with pytest.raises(LogitShapeError):
        top_k_predictions([0.1, 0.2], 3)


def test_k_below_one_is_rejected():
    with pytest.raises(ValueError):
        top_k_predictions([0.1, 0.2], 0)
