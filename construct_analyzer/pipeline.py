"""Pipeline orchestration for scoring collected package data.

This module coordinates the steps around the scoring engine:
1. Resolve the scoring configuration (explicit path, env var or built-in)
2. Load already-collected package data from JSON
3. Score each package with one shared engine
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from construct_analyzer.config.loader import resolve_config
from construct_analyzer.evaluators.registry import ScoringEngine
from construct_analyzer.models.model_eval import TotalScorePolicy, WeightOverrides
from construct_analyzer.models.model_package import PackageData
from construct_analyzer.models.model_result import ScoreResult

logger = logging.getLogger(__name__)


def load_package_data(path: Path | str) -> PackageData:
    """Load collected package data from a JSON file.

    Expected shape: {"package_name": ..., "version": ..., "signals": {...}}

    Args:
        path: Path to the package data file.

    Returns:
        Validated PackageData.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or has the wrong shape.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"Package data file not found: {path}"
        raise FileNotFoundError(msg)

    data = json.loads(path.read_text(encoding="utf-8"))
    package = PackageData.model_validate(data)
    logger.info(f"Loaded {package.package_name} ({len(package.signals)} signals) from {path}")
    return package


def build_engine(
    config_path: Path | str | None = None,
    policy: TotalScorePolicy | str | None = None,
) -> ScoringEngine:
    """Build a scoring engine from the resolved configuration.

    Args:
        config_path: Optional JSON configuration path.
        policy: Optional total score policy replacing the configured one.

    Returns:
        ScoringEngine ready to score packages.
    """
    config = resolve_config(config_path)
    if policy is not None:
        config = config.model_copy(update={"total_score_policy": TotalScorePolicy(policy)})
    return ScoringEngine(config)


def run_analysis(
    package_path: Path | str,
    config_path: Path | str | None = None,
    weight_overrides: WeightOverrides | Mapping[str, float] | None = None,
    policy: TotalScorePolicy | str | None = None,
) -> ScoreResult:
    """Score one collected package file.

    Args:
        package_path: Path to the package data JSON.
        config_path: Optional JSON configuration path.
        weight_overrides: Optional per-call signal weights.
        policy: Optional total score policy replacing the configured one.

    Returns:
        ScoreResult for the package.
    """
    engine = build_engine(config_path, policy)
    package = load_package_data(package_path)
    return engine.analyze_package(package, weight_overrides)


def run_batch_analysis(
    package_paths: list[Path | str],
    config_path: Path | str | None = None,
    weight_overrides: WeightOverrides | Mapping[str, float] | None = None,
    policy: TotalScorePolicy | str | None = None,
) -> list[ScoreResult]:
    """Score several collected package files with one engine.

    Args:
        package_paths: Paths to package data JSON files.
        config_path: Optional JSON configuration path.
        weight_overrides: Optional per-call signal weights.
        policy: Optional total score policy replacing the configured one.

    Returns:
        One ScoreResult per file, in input order.
    """
    engine = build_engine(config_path, policy)
    packages = [load_package_data(path) for path in package_paths]

    logger.info(f"Scoring {len(packages)} packages")
    results = engine.analyze_batch(packages, weight_overrides)
    logger.info("Scoring complete")
    return results
