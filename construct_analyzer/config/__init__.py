"""Scoring configuration: curated defaults and file loading."""

from construct_analyzer.config.human_maintained import DEFAULT_CONFIG
from construct_analyzer.config.loader import (
    ConfigurationError,
    get_default_config,
    get_enabled_signal_names,
    get_pillar,
    get_signal,
    load_config,
    parse_config,
    resolve_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "get_default_config",
    "get_enabled_signal_names",
    "get_pillar",
    "get_signal",
    "load_config",
    "parse_config",
    "resolve_config",
]
