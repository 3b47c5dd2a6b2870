from typing import Final

# Star-rating bounds for a categorized signal
MIN_LEVEL: Final[int] = 1
MAX_LEVEL: Final[int] = 5

# (level - 1) * POINTS_PER_LEVEL maps 1..5 onto 0..100
POINTS_PER_LEVEL: Final[int] = 25
MAX_SCORE: Final[float] = 100.0

# Checklist categorizers start here before adding item values
DEFAULT_STARTING_SCORE: Final[int] = 1

# Keyed threshold form accepted in configuration files: [five, four, three, two]
THRESHOLD_KEYS: Final[tuple[str, ...]] = ("five", "four", "three", "two")

# Default pillar weight used by the weighted total policy in the built-in config
DEFAULT_PILLAR_WEIGHT: Final[float] = 1.0

# Environment configuration
CONFIG_PATH_ENV_VAR: Final[str] = "CONSTRUCT_ANALYZER_CONFIG"  # JSON config used when no --config is given
LOG_LEVEL_ENV_VAR: Final[str] = "CONSTRUCT_ANALYZER_LOG_LEVEL"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
LOG_FORMAT: Final[str] = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
