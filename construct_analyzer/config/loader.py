"""Loading and validation of scoring configurations.

A configuration is loaded once, validated up front and treated as read-only
afterwards. Any structural problem surfaces here as a ConfigurationError,
before a single package is scored.
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from construct_analyzer.config.human_maintained import DEFAULT_CONFIG
from construct_analyzer.consts import CONFIG_PATH_ENV_VAR
from construct_analyzer.models.model_config import Pillar, ScoringConfig, Signal

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a scoring configuration is malformed."""


def parse_config(data: Mapping[str, Any]) -> ScoringConfig:
    """Validate a configuration mapping (e.g. decoded JSON).

    Args:
        data: Mapping with "pillars" and optionally "total_score_policy".

    Returns:
        Validated, immutable ScoringConfig.

    Raises:
        ConfigurationError: If the mapping does not describe a valid configuration.
    """
    try:
        return ScoringConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid scoring configuration: {e}"
        raise ConfigurationError(msg) from e


def load_config(path: Path | str) -> ScoringConfig:
    """Load a configuration from a JSON file.

    Args:
        path: Path to the JSON configuration file.

    Returns:
        Validated ScoringConfig.

    Raises:
        ConfigurationError: If the file is missing, not JSON, or invalid.
    """
    path = Path(path)
    if not path.is_file():
        msg = f"Configuration file not found: {path}"
        raise ConfigurationError(msg)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        msg = f"Configuration file is not valid JSON: {path} ({e})"
        raise ConfigurationError(msg) from e

    if not isinstance(data, dict):
        msg = f"Configuration file must contain a JSON object: {path}"
        raise ConfigurationError(msg)

    config = parse_config(data)
    logger.info(f"Loaded scoring configuration from {path} ({len(config.pillars)} pillars)")
    return config


def get_default_config() -> ScoringConfig:
    """Get the built-in configuration."""
    return DEFAULT_CONFIG


def resolve_config(path: Path | str | None = None) -> ScoringConfig:
    """Resolve the configuration to use.

    Order: explicit path, then the CONSTRUCT_ANALYZER_CONFIG environment
    variable, then the built-in configuration.
    """
    if path is None:
        env_path = os.getenv(CONFIG_PATH_ENV_VAR, "").strip()
        if env_path:
            logger.debug(f"Using configuration from ${CONFIG_PATH_ENV_VAR}: {env_path}")
            path = env_path

    if path is None:
        return get_default_config()
    return load_config(path)


def get_pillar(config: ScoringConfig, name: str) -> Pillar | None:
    """Get pillar by name."""
    for pillar in config.pillars:
        if pillar.name == name:
            return pillar
    return None


def get_signal(config: ScoringConfig, name: str) -> Signal | None:
    """Get the first signal with this name, searching pillars in order."""
    for pillar in config.pillars:
        for signal in pillar.signals:
            if signal.name == name:
                return signal
    return None


def get_enabled_signal_names(config: ScoringConfig) -> set[str]:
    """Get names of all signals that take part in scoring."""
    return {signal.name for pillar in config.pillars for signal in pillar.enabled_signals}
