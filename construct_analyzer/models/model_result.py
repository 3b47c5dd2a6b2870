"""Result models produced by the scoring engine."""

from pydantic import BaseModel, ConfigDict, Field

from construct_analyzer.consts import MAX_LEVEL, MAX_SCORE, MIN_LEVEL


class SignalEvaluation(BaseModel):
    """Outcome of categorizing one signal for one package."""

    model_config = ConfigDict(frozen=True)

    pillar: str
    name: str
    level: int | None = Field(
        default=None, ge=MIN_LEVEL, le=MAX_LEVEL, description="None when it could not be evaluated"
    )
    points: float = Field(default=0.0, ge=0.0, le=MAX_SCORE)
    weight: float = Field(ge=0.0, description="Effective weight after overrides")
    has_data: bool = Field(description="Whether the raw data contained this signal")


class PillarResult(BaseModel):
    """Aggregated score of one pillar."""

    model_config = ConfigDict(frozen=True)

    name: str
    score: float = Field(ge=0.0, le=MAX_SCORE)
    weighted_sum: float = Field(ge=0.0)
    total_weight: float = Field(ge=0.0)
    signals: tuple[SignalEvaluation, ...] = Field(default=())


class ScoreResult(BaseModel):
    """Overall score for a package with per-pillar and per-signal detail.

    Scores are not rounded; presentation decides how to display them.
    """

    model_config = ConfigDict(frozen=True)

    package_name: str | None = None
    version: str | None = None
    total_score: float = Field(default=0.0, ge=0.0, le=MAX_SCORE)
    pillar_scores: dict[str, float] = Field(default_factory=dict)
    signal_scores: dict[str, dict[str, int]] = Field(
        default_factory=dict, description="pillar -> signal -> level (undefined levels omitted)"
    )
    signal_weights: dict[str, dict[str, float]] = Field(
        default_factory=dict, description="pillar -> signal -> effective weight"
    )
    missing_signals: dict[str, list[str]] = Field(
        default_factory=dict, description="pillar -> enabled signals with no raw data"
    )
