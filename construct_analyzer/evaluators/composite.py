"""Composite scoring functions for combining pillar scores."""

import logging
from collections.abc import Mapping

from construct_analyzer.consts import MAX_SCORE
from construct_analyzer.models.model_eval import TotalScorePolicy

logger = logging.getLogger(__name__)


def calculate_unweighted_total(pillar_scores: Mapping[str, float]) -> float:
    """Calculate the arithmetic mean of pillar scores.

    Args:
        pillar_scores: Pillar name -> score (0-100 each)

    Returns:
        Mean score between 0-100, or 0 when there are no pillars
    """
    if not pillar_scores:
        return 0.0
    return min(MAX_SCORE, sum(pillar_scores.values()) / len(pillar_scores))


def calculate_weighted_total(
    pillar_scores: Mapping[str, float],
    pillar_weights: Mapping[str, float | None],
) -> float:
    """Calculate the pillar-weighted mean of pillar scores.

    Falls back to the unweighted mean when any pillar has no weight or the
    weights sum to 0, so one call never mixes the two policies.

    Args:
        pillar_scores: Pillar name -> score (0-100 each)
        pillar_weights: Pillar name -> weight (None if not configured)

    Returns:
        Weighted score between 0-100
    """
    weights = [pillar_weights.get(name) for name in pillar_scores]
    if any(weight is None for weight in weights):
        logger.debug("Pillar without weight, falling back to unweighted total")
        return calculate_unweighted_total(pillar_scores)

    total_weight = sum(weights)
    if total_weight <= 0:
        logger.debug("Pillar weights sum to 0, falling back to unweighted total")
        return calculate_unweighted_total(pillar_scores)

    weighted_sum = sum(score * weight for score, weight in zip(pillar_scores.values(), weights))
    return min(MAX_SCORE, weighted_sum / total_weight)


def calculate_total_score(
    pillar_scores: Mapping[str, float],
    pillar_weights: Mapping[str, float | None],
    policy: TotalScorePolicy = TotalScorePolicy.UNWEIGHTED,
) -> float:
    """Combine pillar scores into the overall score using the configured policy.

    Args:
        pillar_scores: Pillar name -> score (0-100 each)
        pillar_weights: Pillar name -> weight, used by the weighted policy
        policy: Total score policy from the configuration

    Returns:
        Overall score between 0-100
    """
    if policy == TotalScorePolicy.WEIGHTED:
        return calculate_weighted_total(pillar_scores, pillar_weights)
    return calculate_unweighted_total(pillar_scores)
