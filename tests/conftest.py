"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from construct_analyzer.models.model_config import (
    ChecklistBenchmark,
    HigherIsBetterBenchmark,
    LowerIsBetterBenchmark,
    Pillar,
    ScoringConfig,
    Signal,
)
from construct_analyzer.models.model_eval import TotalScorePolicy


@pytest.fixture
def popularity_pillar() -> Pillar:
    """Single POPULARITY pillar with downloads and stars."""
    return Pillar(
        name="POPULARITY",
        weight=1.0,
        signals=(
            Signal(
                name="weeklyDownloads",
                weight=3,
                benchmark=HigherIsBetterBenchmark(thresholds=(2500, 251, 41, 6)),
            ),
            Signal(
                name="githubStars",
                weight=2,
                benchmark=HigherIsBetterBenchmark(thresholds=(638, 28, 4, 1)),
            ),
        ),
    )


@pytest.fixture
def popularity_config(popularity_pillar: Pillar) -> ScoringConfig:
    """Configuration with only the POPULARITY pillar."""
    return ScoringConfig(pillars=(popularity_pillar,))


@pytest.fixture
def popularity_raw_data() -> dict[str, Any]:
    """Raw data scoring 90 against the popularity config."""
    return {"weeklyDownloads": 3000, "githubStars": 500}


@pytest.fixture
def multi_pillar_config(popularity_pillar: Pillar) -> ScoringConfig:
    """Three pillars with different benchmark kinds and weights."""
    maintenance = Pillar(
        name="MAINTENANCE",
        weight=2.0,
        signals=(
            Signal(
                name="timeToFirstResponse",
                weight=3,
                benchmark=LowerIsBetterBenchmark(thresholds=(1, 4, 12, 52)),
            ),
            Signal(
                name="commitFrequency",
                weight=3,
                enabled=False,
                benchmark=HigherIsBetterBenchmark(thresholds=(20, 6, 1, 0)),
            ),
        ),
    )
    quality = Pillar(
        name="QUALITY",
        weight=1.0,
        signals=(
            Signal(
                name="documentation",
                weight=3,
                benchmark=ChecklistBenchmark(
                    items={"has_readme": 1, "has_api_docs": 1, "has_example": 1}
                ),
            ),
            Signal(
                name="stableVersioning",
                weight=2,
                benchmark=ChecklistBenchmark(
                    starting_score=4,
                    items={"is_stable_version": 1, "is_deprecated": -4},
                ),
            ),
        ),
    )
    return ScoringConfig(
        pillars=(maintenance, quality, popularity_pillar),
        total_score_policy=TotalScorePolicy.UNWEIGHTED,
    )


@pytest.fixture
def multi_pillar_raw_data() -> dict[str, Any]:
    """Raw data covering every enabled signal of the multi-pillar config."""
    return {
        "timeToFirstResponse": 2,
        "documentation": {"has_readme": True, "has_api_docs": True, "has_example": False},
        "stableVersioning": {"is_stable_version": True, "is_deprecated": False},
        "weeklyDownloads": 300,
        "githubStars": 30,
    }
