"""Threshold-bucket categorizers for numeric signals."""

import logging
import math
from dataclasses import dataclass
from typing import Any

from construct_analyzer.consts import MAX_LEVEL, MIN_LEVEL

logger = logging.getLogger(__name__)

# Lower bounds (or upper bounds, for lower-is-better) of levels 5, 4, 3 and 2
Thresholds = tuple[float, float, float, float]


def _as_number(value: Any) -> float | None:
    """Coerce a raw value to something comparable, or None if it is not a number."""
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        if math.isnan(value):
            logger.debug("NaN raw value cannot be categorized")
            return None
        return value
    logger.debug(f"Non-numeric raw value cannot be categorized: {value!r}")
    return None


def categorize_higher_is_better(thresholds: Thresholds, value: Any) -> int | None:
    """Categorize a value where larger is better.

    Each threshold is inclusive: a value equal to a threshold belongs to
    the higher level.

    Args:
        thresholds: Strictly descending [five, four, three, two]
        value: Raw value; None means no data

    Returns:
        Level 1-5, or None if value is missing or not numeric
    """
    number = _as_number(value)
    if number is None:
        return None

    for level, threshold in zip(range(MAX_LEVEL, MIN_LEVEL, -1), thresholds):
        if number >= threshold:
            return level
    return MIN_LEVEL


def categorize_lower_is_better(thresholds: Thresholds, value: Any) -> int | None:
    """Categorize a value where smaller is better (e.g. response time).

    Args:
        thresholds: Strictly ascending [five, four, three, two]
        value: Raw value; None means no data

    Returns:
        Level 1-5, or None if value is missing or not numeric
    """
    number = _as_number(value)
    if number is None:
        return None

    for level, threshold in zip(range(MAX_LEVEL, MIN_LEVEL, -1), thresholds):
        if number <= threshold:
            return level
    return MIN_LEVEL


@dataclass(frozen=True)
class HigherIsBetterCategorizer:
    """Ascending-threshold bucket categorizer."""

    thresholds: Thresholds

    def evaluate(self, value: Any) -> int | None:
        return categorize_higher_is_better(self.thresholds, value)


@dataclass(frozen=True)
class LowerIsBetterCategorizer:
    """Descending-threshold bucket categorizer."""

    thresholds: Thresholds

    def evaluate(self, value: Any) -> int | None:
        return categorize_lower_is_better(self.thresholds, value)
