"""
Configuration settings for the numeric utilities.

**Conceptual**: This module provides a strongly-typed configuration object
that loads from environment variables (via .env files). Settings are validated
at construction, so a bad value fails fast at startup instead of surfacing
later as a confusing error.

Only two knobs exist today:
  - the seed of the process-wide random generator behind get_random_integer
    (unset means "seed from OS entropy"),
  - the log level used by the command-line actions.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from project root (dev/local environments); a missing file is fine
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class NumericSettings:
    """
    Settings for the numtasks library and its actions.

    **Why a seed setting?** get_random_integer is the only non-deterministic
    function in the library. Fixing the seed makes CLI runs and ad-hoc
    experiments reproducible without touching code.

    Attributes:
        random_seed: Seed for the shared random generator. None (default)
                     seeds from OS entropy.
        log_level: Level name passed to configure_logging by the actions.
                   Default "WARNING".
    """
    random_seed: Optional[int] = None
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError(
                f"random_seed must be non-negative, got: {self.random_seed}"
            )
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )

    @classmethod
    def from_env(cls) -> "NumericSettings":
        """
        Load settings from environment variables.

        **Environment variables**:
          - NUMTASKS_RANDOM_SEED (optional): Non-negative integer seed.
            Unset or empty means "seed from OS entropy".
          - NUMTASKS_LOG_LEVEL (optional): Logging level name.
            Defaults to "WARNING" if not set.

        Returns:
            NumericSettings object with values loaded from environment.

        Raises:
            ValueError: If NUMTASKS_RANDOM_SEED is not an integer, or a value
                        fails validation.

        Usage example:
            >>> # In .env file:
            >>> # NUMTASKS_RANDOM_SEED=42
            >>>
            >>> settings = NumericSettings.from_env()
            >>> print(settings.random_seed)  # 42
        """
        seed_str = os.getenv("NUMTASKS_RANDOM_SEED", "").strip()
        log_level = os.getenv("NUMTASKS_LOG_LEVEL", "WARNING").strip().upper()

        random_seed = None
        if seed_str:
            try:
                random_seed = int(seed_str)
            except ValueError:
                raise ValueError(
                    f"NUMTASKS_RANDOM_SEED must be an integer, got: {seed_str}"
                )

        return cls(random_seed=random_seed, log_level=log_level)


# Lazily loaded singleton. Tests can build NumericSettings(...) directly or
# call reset_settings() after changing the environment.
_default_settings: Optional[NumericSettings] = None


def get_settings() -> NumericSettings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global NumericSettings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = NumericSettings.from_env()
        logger.debug("Loaded settings: %s", _default_settings)

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("NUMTASKS_RANDOM_SEED", "7")
          reset_settings()
          assert get_settings().random_seed == 7
      ```
    """
    global _default_settings
    _default_settings = None
