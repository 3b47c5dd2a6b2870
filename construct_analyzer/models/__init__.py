"""Pydantic models for the construct analyzer."""

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
from construct_analyzer.models.model_eval import (
    TotalScorePolicy,
    WeightOverrides,
)
from construct_analyzer.models.model_package import PackageData
from construct_analyzer.models.model_result import (
    PillarResult,
    ScoreResult,
    SignalEvaluation,
)

__all__ = [
    # Configuration models
    "Benchmark",
    "ChecklistBenchmark",
    "ChecklistItem",
    "HigherIsBetterBenchmark",
    "LowerIsBetterBenchmark",
    "Pillar",
    "ScoringConfig",
    "Signal",
    # Evaluation models
    "TotalScorePolicy",
    "WeightOverrides",
    # Package input
    "PackageData",
    # Result models
    "PillarResult",
    "ScoreResult",
    "SignalEvaluation",
]
