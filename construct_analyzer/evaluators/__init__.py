"""Evaluators module for turning raw package signals into scores.

Raw signal values arrive in incompatible units (counts, durations,
booleans, checklists). Scoring runs in three stages:
- Categorizers map each raw value to a 1-5 level
- The pillar aggregator turns weighted level points into a 0-100 pillar score
- The composite functions combine pillar scores into one 0-100 total

All stages are pure functions of the configuration and the raw data.
"""

from construct_analyzer.evaluators.base import Categorizer
from construct_analyzer.evaluators.buckets import (
    HigherIsBetterCategorizer,
    LowerIsBetterCategorizer,
    categorize_higher_is_better,
    categorize_lower_is_better,
)
from construct_analyzer.evaluators.checklist import (
    ChecklistCategorizer,
    categorize_by_checklist,
)
from construct_analyzer.evaluators.composite import (
    calculate_total_score,
    calculate_unweighted_total,
    calculate_weighted_total,
)
from construct_analyzer.evaluators.pillar import PillarAggregator, calculate_pillar_score
from construct_analyzer.evaluators.registry import ScoringEngine, analyze, build_categorizer
from construct_analyzer.evaluators.signal import SignalEvaluator, level_to_points

__all__ = [
    # Protocol
    "Categorizer",
    # Categorizers
    "HigherIsBetterCategorizer",
    "LowerIsBetterCategorizer",
    "ChecklistCategorizer",
    "categorize_higher_is_better",
    "categorize_lower_is_better",
    "categorize_by_checklist",
    # Signal and pillar evaluation
    "SignalEvaluator",
    "level_to_points",
    "PillarAggregator",
    "calculate_pillar_score",
    # Composite scoring
    "calculate_total_score",
    "calculate_unweighted_total",
    "calculate_weighted_total",
    # Orchestration
    "ScoringEngine",
    "analyze",
    "build_categorizer",
]
