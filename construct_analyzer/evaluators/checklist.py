"""Additive checklist categorizer for presence/absence signals."""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from construct_analyzer.consts import DEFAULT_STARTING_SCORE, MAX_LEVEL, MIN_LEVEL
from construct_analyzer.models.model_config import ChecklistItem

logger = logging.getLogger(__name__)


def clamp_level(score: float) -> int:
    """Clamp a raw checklist total into the 1-5 level range.

    Fractional totals are floored after clamping, so 3.5 is level 3.
    """
    return math.floor(max(MIN_LEVEL, min(MAX_LEVEL, score)))


def categorize_by_checklist(
    checklist: Mapping[str, ChecklistItem],
    starting_score: int = DEFAULT_STARTING_SCORE,
) -> int:
    """Categorize a checklist by summing the values of present items.

    Args:
        checklist: Item name -> ChecklistItem
        starting_score: Score before any item is counted

    Returns:
        Level 1-5; never None, an empty checklist yields the starting score
    """
    total = starting_score + math.fsum(item.value for item in checklist.values() if item.present)
    return clamp_level(total)


@dataclass(frozen=True)
class ChecklistCategorizer:
    """Checklist categorizer built from a ChecklistBenchmark.

    Accepted raw values:
    - None: every configured item absent
    - bool: presence of every configured item
    - mapping of item name -> bool, ChecklistItem or {"present", "value"} record
    """

    items: Mapping[str, float] = field(default_factory=dict)
    starting_score: int = DEFAULT_STARTING_SCORE

    def evaluate(self, value: Any) -> int:
        return categorize_by_checklist(self.build_checklist(value), self.starting_score)

    def build_checklist(self, value: Any) -> dict[str, ChecklistItem]:
        """Merge a raw checklist input with the configured item values."""
        checklist = {
            name: ChecklistItem(present=False, value=points) for name, points in self.items.items()
        }

        if value is None:
            return checklist

        if isinstance(value, bool):
            return {
                name: ChecklistItem(present=value, value=item.value)
                for name, item in checklist.items()
            }

        if not isinstance(value, Mapping):
            logger.warning(
                f"Unsupported checklist input of type {type(value).__name__}, "
                f"treating all items as absent"
            )
            return checklist

        for name, entry in value.items():
            item = self._parse_entry(name, entry)
            if item is not None:
                checklist[name] = item

        return checklist

    def _parse_entry(self, name: str, entry: Any) -> ChecklistItem | None:
        """Parse one raw checklist entry, or None if it cannot be used."""
        if isinstance(entry, ChecklistItem):
            return entry

        if isinstance(entry, bool):
            if name not in self.items:
                logger.debug(f"Ignoring presence flag for unconfigured checklist item '{name}'")
                return None
            return ChecklistItem(present=entry, value=self.items[name])

        if isinstance(entry, Mapping):
            record = dict(entry)
            if name in self.items:
                record.setdefault("value", self.items[name])
            try:
                return ChecklistItem.model_validate(record)
            except ValidationError as e:
                logger.warning(f"Invalid checklist record for '{name}': {e.error_count()} error(s)")
                return None

        logger.warning(f"Unsupported checklist entry for '{name}': {entry!r}")
        return None
