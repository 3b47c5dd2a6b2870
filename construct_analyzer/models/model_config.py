"""Configuration models: pillars, signals and the benchmarks that categorize them."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator, model_validator

from construct_analyzer.consts import (
    DEFAULT_STARTING_SCORE,
    MAX_LEVEL,
    MIN_LEVEL,
    THRESHOLD_KEYS,
)
from construct_analyzer.models.model_eval import TotalScorePolicy


class ChecklistItem(BaseModel):
    """A single checklist entry.

    Used both as raw input from data collection and as the normalized form
    the checklist categorizer sums over.
    """

    model_config = ConfigDict(frozen=True)

    present: bool = Field(default=False, description="Whether the item holds for the package")
    value: FiniteFloat = Field(description="Points added when present (negative for penalties)")


# === Benchmarks (categorizer configuration) ===


class _BucketBenchmark(BaseModel):
    """Shared shape of the two threshold-bucket benchmarks."""

    model_config = ConfigDict(frozen=True)

    thresholds: tuple[FiniteFloat, FiniteFloat, FiniteFloat, FiniteFloat] = Field(
        description="Lower bounds for levels [5, 4, 3, 2]; anything else is level 1"
    )

    @field_validator("thresholds", mode="before")
    @classmethod
    def accept_keyed_thresholds(cls, value: Any) -> Any:
        """Accept the keyed form {'five': .., 'four': .., 'three': .., 'two': ..}."""
        if isinstance(value, dict):
            missing = [key for key in THRESHOLD_KEYS if key not in value]
            if missing:
                msg = f"Keyed thresholds are missing: {missing}"
                raise ValueError(msg)
            return [value[key] for key in THRESHOLD_KEYS]
        return value


class HigherIsBetterBenchmark(_BucketBenchmark):
    """Ascending buckets: larger raw values earn higher levels."""

    kind: Literal["higher_is_better"] = "higher_is_better"

    @field_validator("thresholds")
    @classmethod
    def strictly_descending(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        """Validate t5 > t4 > t3 > t2."""
        if any(upper <= lower for upper, lower in zip(value, value[1:])):
            msg = f"higher_is_better thresholds must be strictly descending, got {list(value)}"
            raise ValueError(msg)
        return value


class LowerIsBetterBenchmark(_BucketBenchmark):
    """Descending buckets: smaller raw values earn higher levels (latency, age)."""

    kind: Literal["lower_is_better"] = "lower_is_better"

    @field_validator("thresholds")
    @classmethod
    def strictly_ascending(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        """Validate t5 < t4 < t3 < t2."""
        if any(lower >= upper for lower, upper in zip(value, value[1:])):
            msg = f"lower_is_better thresholds must be strictly ascending, got {list(value)}"
            raise ValueError(msg)
        return value


class ChecklistBenchmark(BaseModel):
    """Additive checklist: starting score plus the value of every present item."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["checklist"] = "checklist"
    starting_score: int = Field(default=DEFAULT_STARTING_SCORE, ge=MIN_LEVEL, le=MAX_LEVEL)
    items: dict[str, FiniteFloat] = Field(
        default_factory=dict, description="Item name -> points when present"
    )


Benchmark = Annotated[
    HigherIsBetterBenchmark | LowerIsBetterBenchmark | ChecklistBenchmark,
    Field(discriminator="kind"),
]


# === Pillars and signals ===


class Signal(BaseModel):
    """One measurable attribute of a package."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Key into the package's raw data")
    weight: float = Field(
        gt=0.0, allow_inf_nan=False, description="Default importance within the pillar"
    )
    description: str = Field(default="")
    enabled: bool = Field(default=True, description="Disabled signals are skipped entirely")
    benchmark: Benchmark


class Pillar(BaseModel):
    """A top-level scoring category composed of signals."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    description: str = Field(default="")
    weight: float | None = Field(
        default=None, ge=0.0, allow_inf_nan=False, description="Only used by the weighted total policy"
    )
    signals: tuple[Signal, ...] = Field(default=())

    @model_validator(mode="after")
    def signal_names_unique(self) -> "Pillar":
        """Validate that signal names are unique within the pillar."""
        seen: set[str] = set()
        for signal in self.signals:
            if signal.name in seen:
                msg = f"Duplicate signal '{signal.name}' in pillar '{self.name}'"
                raise ValueError(msg)
            seen.add(signal.name)
        return self

    @property
    def enabled_signals(self) -> tuple[Signal, ...]:
        """Signals that take part in scoring, in configured order."""
        return tuple(signal for signal in self.signals if signal.enabled)


class ScoringConfig(BaseModel):
    """The full, read-only scoring configuration."""

    model_config = ConfigDict(frozen=True)

    pillars: tuple[Pillar, ...] = Field(default=())
    total_score_policy: TotalScorePolicy = Field(default=TotalScorePolicy.UNWEIGHTED)

    @model_validator(mode="after")
    def pillar_names_unique(self) -> "ScoringConfig":
        """Validate that pillar names are unique."""
        names = [pillar.name for pillar in self.pillars]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            msg = f"Duplicate pillar names: {duplicates}"
            raise ValueError(msg)
        return self
