"""Human-maintained scoring configuration.

This file contains the default pillars, signals and benchmarks. Benchmarks
are curated by hand from the observed distribution of construct libraries
and should be revisited as the ecosystem grows. Signals whose raw values
are not collected yet are kept here but disabled.
"""

from typing import Final

from construct_analyzer.consts import DEFAULT_PILLAR_WEIGHT
from construct_analyzer.models.model_config import (
    ChecklistBenchmark,
    HigherIsBetterBenchmark,
    LowerIsBetterBenchmark,
    Pillar,
    ScoringConfig,
    Signal,
)

MAINTENANCE_PILLAR: Final[Pillar] = Pillar(
    name="MAINTENANCE",
    description="Is the project actively looked after?",
    weight=DEFAULT_PILLAR_WEIGHT,
    signals=(
        Signal(
            name="time_to_first_response",
            weight=3.0,
            description="Average time to first response on issues (weeks)",
            benchmark=LowerIsBetterBenchmark(thresholds=(1, 4, 12, 52)),
        ),
        Signal(
            name="commit_frequency",
            weight=3.0,
            enabled=False,
            description="Number of commits per month",
            benchmark=HigherIsBetterBenchmark(thresholds=(20, 6, 1, 0)),
        ),
        Signal(
            name="release_frequency",
            weight=3.0,
            description="Number of releases in the past year",
            benchmark=HigherIsBetterBenchmark(thresholds=(55, 34, 5, 1)),
        ),
        Signal(
            name="lockfile_update_recency",
            weight=3.0,
            enabled=False,
            description="Days since the lockfile was last updated",
            benchmark=LowerIsBetterBenchmark(thresholds=(30, 90, 180, 365)),
        ),
        Signal(
            name="open_issues_ratio",
            weight=2.0,
            enabled=False,
            description="Percentage of open issues vs total issues",
            benchmark=LowerIsBetterBenchmark(thresholds=(25, 50, 75, 100)),
        ),
        Signal(
            name="median_pr_merge_time",
            weight=2.0,
            enabled=False,
            description="Median time to merge pull requests (days)",
            benchmark=LowerIsBetterBenchmark(thresholds=(7, 28, 90, 180)),
        ),
        Signal(
            name="number_of_contributors_maintenance",
            weight=2.0,
            description="Human contributors in the last month (bots excluded)",
            benchmark=HigherIsBetterBenchmark(thresholds=(4, 2, 1, 0)),
        ),
        Signal(
            name="most_recent_commit",
            weight=2.0,
            enabled=False,
            description="Days since the most recent commit",
            benchmark=LowerIsBetterBenchmark(thresholds=(7, 30, 90, 180)),
        ),
    ),
)

QUALITY_PILLAR: Final[Pillar] = Pillar(
    name="QUALITY",
    description="Is the project well documented, tested and versioned?",
    weight=DEFAULT_PILLAR_WEIGHT,
    signals=(
        Signal(
            name="documentation_completeness",
            weight=3.0,
            description="Presence of README, API reference and examples",
            benchmark=ChecklistBenchmark(
                items={
                    "has_readme": 1,
                    "has_api_docs": 1,
                    "has_example": 1,
                    "multiple_examples": 1,
                },
            ),
        ),
        Signal(
            name="test_coverage",
            weight=3.0,
            enabled=False,
            description="Presence of unit tests and snapshot tests",
            benchmark=ChecklistBenchmark(items={"has_unit_tests": 3, "has_snapshot_tests": 3}),
        ),
        Signal(
            name="ci_build_status",
            weight=3.0,
            enabled=False,
            description="CI build passing status",
            benchmark=ChecklistBenchmark(items={"build_passing": 4}),
        ),
        Signal(
            name="author_track_record",
            weight=3.0,
            enabled=False,
            description="Number of packages published by the author",
            benchmark=HigherIsBetterBenchmark(thresholds=(20, 11, 5, 2)),
        ),
        Signal(
            name="changelog_present",
            weight=3.0,
            enabled=False,
            description="Presence of a changelog file",
            benchmark=ChecklistBenchmark(items={"has_changelog": 4}),
        ),
        Signal(
            name="stable_versioning",
            weight=2.0,
            description="Version >= 1.0 and not deprecated",
            # >=1.x active: 5, <1.0 active: 4, deprecated: 1
            benchmark=ChecklistBenchmark(
                starting_score=4,
                items={"is_stable_version": 1, "is_deprecated": -4},
            ),
        ),
        Signal(
            name="license_and_gitignore",
            weight=1.0,
            enabled=False,
            description="Presence of a license and .gitignore/.npmignore",
            benchmark=ChecklistBenchmark(items={"has_license": 3, "has_ignore_file": 3}),
        ),
        Signal(
            name="multi_language_support",
            weight=1.0,
            enabled=False,
            description="Number of supported programming languages",
            benchmark=HigherIsBetterBenchmark(thresholds=(4, 3, 2, 1)),
        ),
    ),
)

POPULARITY_PILLAR: Final[Pillar] = Pillar(
    name="POPULARITY",
    description="Is the project used and appreciated?",
    weight=DEFAULT_PILLAR_WEIGHT,
    signals=(
        Signal(
            name="weekly_downloads",
            weight=3.0,
            description="Weekly download count from npm",
            benchmark=HigherIsBetterBenchmark(thresholds=(2500, 251, 41, 6)),
        ),
        Signal(
            name="github_stars",
            weight=2.0,
            description="GitHub repository stars",
            benchmark=HigherIsBetterBenchmark(thresholds=(638, 28, 4, 1)),
        ),
        Signal(
            name="number_of_contributors_popularity",
            weight=1.0,
            enabled=False,
            description="GitHub contributors",
            benchmark=HigherIsBetterBenchmark(thresholds=(4, 2, 1, 0)),
        ),
    ),
)

DEFAULT_CONFIG: Final[ScoringConfig] = ScoringConfig(
    pillars=(MAINTENANCE_PILLAR, QUALITY_PILLAR, POPULARITY_PILLAR),
)
