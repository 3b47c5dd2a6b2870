"""Pillar aggregator: combines weighted signal points into a 0-100 pillar score."""

from collections.abc import Mapping, Sequence
from typing import Any

from construct_analyzer.consts import MAX_SCORE
from construct_analyzer.evaluators.base import Categorizer
from construct_analyzer.evaluators.signal import SignalEvaluator
from construct_analyzer.models.model_config import Pillar
from construct_analyzer.models.model_eval import WeightOverrides
from construct_analyzer.models.model_result import PillarResult, SignalEvaluation


def _weighted_totals(evaluations: Sequence[SignalEvaluation]) -> tuple[float, float]:
    """Sum points * weight and weight over all evaluations."""
    weighted_sum = sum(evaluation.points * evaluation.weight for evaluation in evaluations)
    total_weight = sum(evaluation.weight for evaluation in evaluations)
    return weighted_sum, total_weight


def calculate_pillar_score(evaluations: Sequence[SignalEvaluation]) -> float:
    """Calculate the weighted average of signal points.

    Signals without data count with 0 points but keep their weight. The
    result is capped (not rescaled) at 100, and a pillar whose weights sum
    to 0 scores 0.

    Args:
        evaluations: Evaluated signals of one pillar

    Returns:
        Pillar score between 0-100
    """
    weighted_sum, total_weight = _weighted_totals(evaluations)
    if total_weight <= 0:
        return 0.0
    return min(MAX_SCORE, weighted_sum / total_weight)


class PillarAggregator:
    """Evaluates every enabled signal of a pillar and aggregates the points."""

    def __init__(self, signal_evaluator: SignalEvaluator | None = None) -> None:
        self.signal_evaluator = signal_evaluator or SignalEvaluator()

    def aggregate(
        self,
        pillar: Pillar,
        categorizers: Mapping[str, Categorizer],
        raw_data: Mapping[str, Any],
        weight_overrides: WeightOverrides,
    ) -> PillarResult:
        """Score one pillar.

        Args:
            pillar: Pillar configuration
            categorizers: Signal name -> compiled categorizer
            raw_data: Signal name -> raw value for one package
            weight_overrides: Per-call weights replacing configured ones

        Returns:
            PillarResult with the score and every signal evaluation
        """
        evaluations = [
            self.signal_evaluator.evaluate(
                pillar.name,
                signal,
                categorizers[signal.name],
                raw_data,
                weight_overrides.resolve(signal.name, signal.weight),
            )
            for signal in pillar.enabled_signals
        ]

        weighted_sum, total_weight = _weighted_totals(evaluations)
        return PillarResult(
            name=pillar.name,
            score=calculate_pillar_score(evaluations),
            weighted_sum=weighted_sum,
            total_weight=total_weight,
            signals=tuple(evaluations),
        )
