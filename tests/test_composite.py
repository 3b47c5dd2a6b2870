"""Tests for combining pillar scores into the total."""

import pytest

from construct_analyzer.evaluators.composite import (
    calculate_total_score,
    calculate_unweighted_total,
    calculate_weighted_total,
)
from construct_analyzer.models.model_eval import TotalScorePolicy


def test_unweighted_mean():
    """Test the arithmetic mean of pillar scores."""
    assert calculate_unweighted_total({"A": 80.0, "B": 60.0, "C": 100.0}) == 80.0


def test_unweighted_no_pillars():
    """Test that no pillars means a total of 0."""
    assert calculate_unweighted_total({}) == 0.0


def test_weighted_mean():
    """Test the pillar-weighted mean."""
    total = calculate_weighted_total({"A": 100.0, "B": 40.0}, {"A": 1.0, "B": 3.0})
    assert total == pytest.approx(55.0)


def test_weighted_missing_weight_falls_back():
    """Test that a pillar without weight switches the whole total to unweighted."""
    total = calculate_weighted_total({"A": 100.0, "B": 40.0}, {"A": 1.0, "B": None})
    assert total == 70.0


def test_weighted_zero_weights_fall_back():
    """Test that all-zero pillar weights fall back to the unweighted mean."""
    total = calculate_weighted_total({"A": 100.0, "B": 40.0}, {"A": 0.0, "B": 0.0})
    assert total == 70.0


def test_weighted_no_pillars():
    """Test that no pillars means a total of 0 under the weighted policy."""
    assert calculate_weighted_total({}, {}) == 0.0


def test_single_pillar_policies_agree():
    """Test that one pillar's score is the total under both policies."""
    scores = {"POPULARITY": 62.5}
    weights = {"POPULARITY": 7.0}

    assert calculate_total_score(scores, weights, TotalScorePolicy.UNWEIGHTED) == 62.5
    assert calculate_total_score(scores, weights, TotalScorePolicy.WEIGHTED) == 62.5


def test_total_score_default_policy_is_unweighted():
    """Test that pillar weights are ignored by default."""
    total = calculate_total_score({"A": 100.0, "B": 40.0}, {"A": 1.0, "B": 3.0})
    assert total == 70.0
