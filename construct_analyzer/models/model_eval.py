"""Evaluation context models for scoring packages."""

import math
from enum import Enum

from pydantic import Field, RootModel, model_validator


class TotalScorePolicy(str, Enum):
    """How pillar scores are combined into the overall score."""

    UNWEIGHTED = "unweighted"  # Arithmetic mean of pillar scores
    WEIGHTED = "weighted"  # Mean weighted by Pillar.weight


class WeightOverrides(RootModel[dict[str, float]]):
    """Per-call replacement weights keyed by signal name.

    Signals without an entry keep the weight from the configuration.
    """

    root: dict[str, float] = Field(default_factory=dict)

    @model_validator(mode="after")
    def weights_finite_non_negative(self) -> "WeightOverrides":
        """Validate that every override is a finite, non-negative number."""
        non_finite = sorted(name for name, weight in self.root.items() if not math.isfinite(weight))
        if non_finite:
            msg = f"Weight overrides must be finite, got NaN or infinity for: {non_finite}"
            raise ValueError(msg)

        negative = sorted(name for name, weight in self.root.items() if weight < 0)
        if negative:
            msg = f"Weight overrides must be non-negative, got negative values for: {negative}"
            raise ValueError(msg)
        return self

    def resolve(self, signal_name: str, default: float) -> float:
        """Get the effective weight for a signal."""
        return self.root.get(signal_name, default)

    def __contains__(self, signal_name: object) -> bool:
        return signal_name in self.root

    def names(self) -> set[str]:
        """Get all signal names with an override."""
        return set(self.root)
