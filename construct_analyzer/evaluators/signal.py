"""Signal evaluator: categorizes one signal's raw value into a level and points."""

import logging
from collections.abc import Mapping
from typing import Any

from construct_analyzer.consts import MAX_LEVEL, MIN_LEVEL, POINTS_PER_LEVEL
from construct_analyzer.evaluators.base import Categorizer
from construct_analyzer.models.model_config import Signal
from construct_analyzer.models.model_result import SignalEvaluation

logger = logging.getLogger(__name__)


def _is_level(level: Any) -> bool:
    return isinstance(level, int) and not isinstance(level, bool) and MIN_LEVEL <= level <= MAX_LEVEL


def level_to_points(level: int | None) -> float:
    """Convert a level to points: 1 -> 0, 2 -> 25, ... 5 -> 100.

    An undefined level is worth 0 points.
    """
    if level is None:
        return 0.0
    return float((level - MIN_LEVEL) * POINTS_PER_LEVEL)


class SignalEvaluator:
    """Evaluates one configured signal against a package's raw data.

    A signal absent from the raw data is not an error: it is reported with
    an undefined level and 0 points, and still keeps its weight so that the
    pillar score reflects the missing data.
    """

    def evaluate(
        self,
        pillar_name: str,
        signal: Signal,
        categorizer: Categorizer,
        raw_data: Mapping[str, Any],
        weight: float,
    ) -> SignalEvaluation:
        """Categorize a signal and convert its level to points.

        Args:
            pillar_name: Name of the pillar the signal belongs to
            signal: Signal configuration
            categorizer: Compiled categorizer for the signal's benchmark
            raw_data: Signal name -> raw value for one package
            weight: Effective weight (after overrides)

        Returns:
            SignalEvaluation with level, points and weight
        """
        if signal.name not in raw_data:
            logger.warning(f"No data for signal '{signal.name}' in pillar '{pillar_name}'")
            return SignalEvaluation(
                pillar=pillar_name,
                name=signal.name,
                level=None,
                points=0.0,
                weight=weight,
                has_data=False,
            )

        raw_value = raw_data[signal.name]
        level = categorizer.evaluate(raw_value)
        if level is not None and not _is_level(level):
            logger.warning(
                f"Categorizer for signal '{signal.name}' in pillar '{pillar_name}' "
                f"returned {level!r}, expected a level between {MIN_LEVEL}-{MAX_LEVEL}"
            )
            level = None
        elif level is None and raw_value is not None:
            logger.warning(
                f"Signal '{signal.name}' in pillar '{pillar_name}' could not be categorized "
                f"from value {raw_value!r}"
            )

        points = level_to_points(level)
        logger.debug(f"{pillar_name}/{signal.name}: level={level} points={points} weight={weight}")

        return SignalEvaluation(
            pillar=pillar_name,
            name=signal.name,
            level=level,
            points=points,
            weight=weight,
            has_data=True,
        )
