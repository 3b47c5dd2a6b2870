"""Scoring engine orchestrating categorizers, pillar and total aggregation."""

import logging
from collections.abc import Mapping
from typing import Any

from construct_analyzer.config.loader import (
    ConfigurationError,
    get_default_config,
    get_enabled_signal_names,
)
from construct_analyzer.evaluators.base import Categorizer
from construct_analyzer.evaluators.buckets import (
    HigherIsBetterCategorizer,
    LowerIsBetterCategorizer,
)
from construct_analyzer.evaluators.checklist import ChecklistCategorizer
from construct_analyzer.evaluators.composite import calculate_total_score
from construct_analyzer.evaluators.pillar import PillarAggregator
from construct_analyzer.evaluators.signal import SignalEvaluator
from construct_analyzer.models.model_config import (
    ChecklistBenchmark,
    HigherIsBetterBenchmark,
    LowerIsBetterBenchmark,
    ScoringConfig,
    Signal,
)
from construct_analyzer.models.model_eval import WeightOverrides
from construct_analyzer.models.model_package import PackageData
from construct_analyzer.models.model_result import PillarResult, ScoreResult

logger = logging.getLogger(__name__)


def build_categorizer(signal: Signal) -> Categorizer:
    """Compile a signal's benchmark into a categorizer.

    Args:
        signal: Signal configuration

    Returns:
        Categorizer for the signal's benchmark variant

    Raises:
        ConfigurationError: If the benchmark is neither a known variant nor
            an object with a callable ``evaluate``
    """
    benchmark = signal.benchmark
    if isinstance(benchmark, HigherIsBetterBenchmark):
        return HigherIsBetterCategorizer(benchmark.thresholds)
    if isinstance(benchmark, LowerIsBetterBenchmark):
        return LowerIsBetterCategorizer(benchmark.thresholds)
    if isinstance(benchmark, ChecklistBenchmark):
        return ChecklistCategorizer(items=dict(benchmark.items), starting_score=benchmark.starting_score)
    if callable(getattr(benchmark, "evaluate", None)):
        return benchmark

    msg = f"Signal '{signal.name}' has no usable categorizer: {benchmark!r}"
    raise ConfigurationError(msg)


class ScoringEngine:
    """Scores packages against one immutable configuration.

    The engine compiles every enabled signal's benchmark once, at
    construction, and keeps no per-call state. Concurrent ``analyze`` calls
    for different packages are safe without locking.

    Flow per call:
    - Evaluate every enabled signal (level + points)
    - Aggregate weighted points per pillar
    - Combine pillar scores with the configured total policy
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        """Initialize engine and compile categorizers.

        Args:
            config: Scoring configuration (defaults to the built-in one)

        Raises:
            ConfigurationError: If a signal's categorizer cannot be built
        """
        self.config = config if config is not None else get_default_config()
        self.pillar_aggregator = PillarAggregator(SignalEvaluator())
        self._categorizers = {
            pillar.name: {signal.name: build_categorizer(signal) for signal in pillar.enabled_signals}
            for pillar in self.config.pillars
        }
        self._signal_names = get_enabled_signal_names(self.config)

    def _resolve_overrides(
        self, weight_overrides: WeightOverrides | Mapping[str, float] | None
    ) -> WeightOverrides:
        """Validate per-call weight overrides."""
        if weight_overrides is None:
            return WeightOverrides()
        if not isinstance(weight_overrides, WeightOverrides):
            weight_overrides = WeightOverrides.model_validate(dict(weight_overrides))

        unknown = weight_overrides.names() - self._signal_names
        if unknown:
            logger.debug(f"Ignoring weight overrides for unknown or disabled signals: {sorted(unknown)}")
        return weight_overrides

    def evaluate_pillars(
        self,
        raw_data: Mapping[str, Any],
        weight_overrides: WeightOverrides | Mapping[str, float] | None = None,
    ) -> list[PillarResult]:
        """Score every pillar, keeping per-signal detail.

        Args:
            raw_data: Signal name -> raw value for one package
            weight_overrides: Optional per-call signal weights

        Returns:
            One PillarResult per configured pillar, in configured order
        """
        overrides = self._resolve_overrides(weight_overrides)
        return [
            self.pillar_aggregator.aggregate(pillar, self._categorizers[pillar.name], raw_data, overrides)
            for pillar in self.config.pillars
        ]

    def analyze(
        self,
        raw_data: Mapping[str, Any],
        weight_overrides: WeightOverrides | Mapping[str, float] | None = None,
        package_name: str | None = None,
        version: str | None = None,
    ) -> ScoreResult:
        """Score one package.

        Args:
            raw_data: Signal name -> raw value; missing names mean "no data"
            weight_overrides: Optional per-call signal weights
            package_name: Identifying name carried into the result
            version: Identifying version carried into the result

        Returns:
            Fresh ScoreResult with total, pillar and signal scores
        """
        pillar_results = self.evaluate_pillars(raw_data, weight_overrides)

        pillar_scores = {pillar.name: pillar.score for pillar in pillar_results}
        pillar_weights = {pillar.name: pillar.weight for pillar in self.config.pillars}
        total_score = calculate_total_score(
            pillar_scores, pillar_weights, self.config.total_score_policy
        )

        result = ScoreResult(
            package_name=package_name,
            version=version,
            total_score=total_score,
            pillar_scores=pillar_scores,
            signal_scores={
                pillar.name: {
                    evaluation.name: evaluation.level
                    for evaluation in pillar.signals
                    if evaluation.level is not None
                }
                for pillar in pillar_results
            },
            signal_weights={
                pillar.name: {evaluation.name: evaluation.weight for evaluation in pillar.signals}
                for pillar in pillar_results
            },
            missing_signals={
                pillar.name: [evaluation.name for evaluation in pillar.signals if not evaluation.has_data]
                for pillar in pillar_results
            },
        )
        logger.debug(f"Scored {package_name or '<unnamed>'}: total={total_score:.1f}")
        return result

    def analyze_package(
        self,
        package: PackageData,
        weight_overrides: WeightOverrides | Mapping[str, float] | None = None,
    ) -> ScoreResult:
        """Score a collected package, carrying its name and version."""
        return self.analyze(
            package.signals,
            weight_overrides,
            package_name=package.package_name,
            version=package.version,
        )

    def analyze_batch(
        self,
        packages: list[PackageData],
        weight_overrides: WeightOverrides | Mapping[str, float] | None = None,
    ) -> list[ScoreResult]:
        """Score multiple packages with the same overrides.

        Args:
            packages: Collected packages
            weight_overrides: Optional per-call signal weights

        Returns:
            One ScoreResult per package, in input order
        """
        return [self.analyze_package(package, weight_overrides) for package in packages]


def analyze(
    config: ScoringConfig,
    raw_data: Mapping[str, Any],
    weight_overrides: WeightOverrides | Mapping[str, float] | None = None,
) -> ScoreResult:
    """Score raw package data against a configuration in one call."""
    return ScoringEngine(config).analyze(raw_data, weight_overrides)
