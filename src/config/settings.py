"""
Configuration settings for the calculator self-check.

**Conceptual**: This module provides strongly-typed configuration objects that
load from environment variables (via .env files). All settings are validated
when they are constructed, so a bad value fails at startup with a message that
names the variable, not halfway through a run.

**Why centralized config?**
  - Single source of truth for run parameters (sample count, seed, output dir).
  - Easy to test (construct Settings directly instead of reading the environment).
  - Reproducible runs: the seed lives in config, not in code.

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (no-op if the file does not exist)
PROJECT_ROOT = Path(__file__).parent.parent.parent
load_dotenv(dotenv_path=PROJECT_ROOT / ".env")


def _int_from_env(name: str, default: str) -> int:
    """Read an integer environment variable, raising ValueError naming it if malformed."""
    raw = os.getenv(name, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got: {raw}")


@dataclass(frozen=True)
class SelfCheckSettings:
    """
    Configuration for the calculator self-check run.

    **Conceptual**: The self-check verifies fixed scenarios plus algebraic
    properties on random samples. These settings control how many samples are
    drawn, which seed drives the draw, and where saved results go.

    Attributes:
        property_samples: Random operand pairs per property check (default 200).
                          Must be non-negative; 0 checks only the fixed edge pairs.
        random_seed: Seed for the numpy random generator (default 12345).
                     Must be non-negative.
        results_dir: Directory for saved result CSVs (default data/results
                     under the project root). Relative paths resolve against
                     the project root.
    """
    property_samples: int = 200
    random_seed: int = 12345
    results_dir: Path = field(default_factory=lambda: PROJECT_ROOT / "data" / "results")

    def __post_init__(self):
        """Validate settings after initialization."""
        if self.property_samples < 0:
            raise ValueError(
                f"property_samples must be non-negative, got: {self.property_samples}"
            )
        # numpy seed sequences reject negative entropy
        if self.random_seed < 0:
            raise ValueError(
                f"CALCULATOR_RANDOM_SEED must be non-negative, got: {self.random_seed}"
            )

    @classmethod
    def from_env(cls) -> "SelfCheckSettings":
        """
        Load self-check settings from environment variables.

        **Environment variables** (all optional):
          - CALCULATOR_PROPERTY_SAMPLES: Random pairs per property (default 200).
          - CALCULATOR_RANDOM_SEED: Seed for the random draw (default 12345).
          - CALCULATOR_RESULTS_DIR: Output directory (default data/results).

        Returns:
            SelfCheckSettings object with values loaded from environment.

        Raises:
            ValueError: If a numeric variable is not an integer or is negative.

        Usage example:
            >>> # In .env file:
            >>> # CALCULATOR_PROPERTY_SAMPLES=1000
            >>>
            >>> settings = SelfCheckSettings.from_env()
            >>> print(settings.property_samples)  # 1000
        """
        property_samples = _int_from_env("CALCULATOR_PROPERTY_SAMPLES", "200")
        random_seed = _int_from_env("CALCULATOR_RANDOM_SEED", "12345")

        results_dir = Path(os.getenv("CALCULATOR_RESULTS_DIR", "data/results"))
        if not results_dir.is_absolute():
            results_dir = PROJECT_ROOT / results_dir

        return cls(
            property_samples=property_samples,
            random_seed=random_seed,
            results_dir=results_dir,
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the project.

    **Usage pattern**:
      ```python
      from src.config.settings import get_settings

      settings = get_settings()
      samples = settings.self_check.property_samples
      ```

    Attributes:
        self_check: Settings for actions/run_calculator_self_check.py.
    """
    self_check: SelfCheckSettings = field(default_factory=SelfCheckSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load global settings from environment variables.

        Raises:
            ValueError: If any subsystem settings are invalid.
        """
        return cls(self_check=SelfCheckSettings.from_env())


# Loaded lazily on first get_settings() call. Tests call reset_settings() or
# construct Settings directly.
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached.

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds invalid values.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    The next get_settings() call reloads from the environment.
    """
    global _default_settings
    _default_settings = None
