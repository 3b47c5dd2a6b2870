"""Tests for pydantic models."""

import math

import pytest
from pydantic import TypeAdapter, ValidationError

from construct_analyzer.models.model_config import (
    Benchmark,
    ChecklistBenchmark,
    ChecklistItem,
    HigherIsBetterBenchmark,
    LowerIsBetterBenchmark,
    Pillar,
    ScoringConfig,
    Signal,
)
from construct_analyzer.models.model_eval import TotalScorePolicy, WeightOverrides
from construct_analyzer.models.model_package import PackageData
from construct_analyzer.models.model_result import ScoreResult, SignalEvaluation


def _signal(name: str, weight: float = 1.0) -> Signal:
    return Signal(name=name, weight=weight, benchmark=HigherIsBetterBenchmark(thresholds=(4, 3, 2, 1)))


class TestBenchmarks:
    """Tests for benchmark variants."""

    def test_higher_is_better_requires_descending(self) -> None:
        with pytest.raises(ValidationError, match="strictly descending"):
            HigherIsBetterBenchmark(thresholds=(1, 2, 3, 4))

    def test_higher_is_better_rejects_ties(self) -> None:
        with pytest.raises(ValidationError):
            HigherIsBetterBenchmark(thresholds=(4, 3, 3, 1))

    def test_lower_is_better_requires_ascending(self) -> None:
        with pytest.raises(ValidationError, match="strictly ascending"):
            LowerIsBetterBenchmark(thresholds=(52, 12, 4, 1))

    def test_threshold_count(self) -> None:
        with pytest.raises(ValidationError):
            HigherIsBetterBenchmark(thresholds=(4, 3, 2))

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_thresholds_rejected(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            HigherIsBetterBenchmark(thresholds=(bad, 251, 41, 6))
        with pytest.raises(ValidationError):
            LowerIsBetterBenchmark(thresholds=(1, 4, 12, bad))

    def test_non_finite_keyed_threshold_rejected(self) -> None:
        with pytest.raises(ValidationError):
            HigherIsBetterBenchmark(thresholds={"five": math.nan, "four": 251, "three": 41, "two": 6})

    def test_keyed_thresholds(self) -> None:
        benchmark = HigherIsBetterBenchmark(
            thresholds={"five": 2500, "four": 251, "three": 41, "two": 6}
        )
        assert benchmark.thresholds == (2500, 251, 41, 6)

    def test_keyed_thresholds_missing_key(self) -> None:
        with pytest.raises(ValidationError, match="missing"):
            HigherIsBetterBenchmark(thresholds={"five": 2500, "four": 251, "three": 41})

    def test_checklist_starting_score_range(self) -> None:
        with pytest.raises(ValidationError):
            ChecklistBenchmark(starting_score=0)
        with pytest.raises(ValidationError):
            ChecklistBenchmark(starting_score=6)

    def test_discriminated_union(self) -> None:
        adapter = TypeAdapter(Benchmark)
        benchmark = adapter.validate_python({"kind": "lower_is_better", "thresholds": [1, 4, 12, 52]})
        assert isinstance(benchmark, LowerIsBetterBenchmark)

        with pytest.raises(ValidationError):
            adapter.validate_python({"kind": "sideways", "thresholds": [1, 4, 12, 52]})

    def test_checklist_item_defaults_absent(self) -> None:
        assert ChecklistItem(value=3).present is False

    def test_fractional_checklist_values(self) -> None:
        assert ChecklistItem(present=True, value=2.5).value == 2.5
        assert ChecklistBenchmark(items={"partial_docs": 0.5}).items == {"partial_docs": 0.5}

    def test_non_finite_checklist_values_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ChecklistItem(present=True, value=math.inf)
        with pytest.raises(ValidationError):
            ChecklistBenchmark(items={"x": math.nan})


class TestSignalAndPillar:
    """Tests for Signal and Pillar."""

    def test_signal_weight_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            _signal("a", weight=0)
        with pytest.raises(ValidationError):
            _signal("a", weight=-1)

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_signal_weight_must_be_finite(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            _signal("a", weight=bad)

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_pillar_weight_must_be_finite(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            Pillar(name="P", weight=bad)

    def test_signal_defaults_enabled(self) -> None:
        assert _signal("a").enabled is True

    def test_pillar_weight_non_negative(self) -> None:
        with pytest.raises(ValidationError):
            Pillar(name="P", weight=-0.5)

    def test_duplicate_signal_names(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate signal 'a'"):
            Pillar(name="P", signals=(_signal("a"), _signal("a")))

    def test_same_signal_name_in_different_pillars(self) -> None:
        config = ScoringConfig(
            pillars=(Pillar(name="A", signals=(_signal("x"),)), Pillar(name="B", signals=(_signal("x"),)))
        )
        assert len(config.pillars) == 2

    def test_duplicate_pillar_names(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate pillar names"):
            ScoringConfig(pillars=(Pillar(name="A"), Pillar(name="A")))

    def test_enabled_signals(self) -> None:
        disabled = Signal(
            name="b", weight=1, enabled=False, benchmark=HigherIsBetterBenchmark(thresholds=(4, 3, 2, 1))
        )
        pillar = Pillar(name="P", signals=(_signal("a"), disabled))
        assert [signal.name for signal in pillar.enabled_signals] == ["a"]

    def test_config_is_frozen(self) -> None:
        config = ScoringConfig()
        with pytest.raises(ValidationError):
            config.total_score_policy = TotalScorePolicy.WEIGHTED

    def test_config_default_policy(self) -> None:
        assert ScoringConfig().total_score_policy == TotalScorePolicy.UNWEIGHTED


class TestWeightOverrides:
    """Tests for WeightOverrides."""

    def test_resolve(self) -> None:
        overrides = WeightOverrides({"a": 2.5})
        assert overrides.resolve("a", 1.0) == 2.5
        assert overrides.resolve("b", 1.0) == 1.0
        assert "a" in overrides
        assert overrides.names() == {"a"}

    def test_zero_allowed(self) -> None:
        assert WeightOverrides({"a": 0}).resolve("a", 3.0) == 0

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
    def test_non_finite_rejected(self, bad: float) -> None:
        with pytest.raises(ValidationError, match="finite"):
            WeightOverrides({"a": 1, "b": bad})

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            WeightOverrides({"a": 1, "b": -2})


class TestResults:
    """Tests for result and package models."""

    def test_signal_evaluation_level_range(self) -> None:
        with pytest.raises(ValidationError):
            SignalEvaluation(pillar="P", name="a", level=6, points=0, weight=1, has_data=True)

    def test_score_result_bounds(self) -> None:
        with pytest.raises(ValidationError):
            ScoreResult(total_score=100.5)

    def test_package_data_requires_name(self) -> None:
        with pytest.raises(ValidationError):
            PackageData(package_name="")

    def test_package_data_defaults(self) -> None:
        package = PackageData(package_name="cdk-nag")
        assert package.version is None
        assert package.signals == {}
