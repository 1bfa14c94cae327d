"""
Runtime options for the console application.

Populated from the command line in main.py; the core does not read any
configuration.
"""

from dataclasses import dataclass
from pathlib import Path

from .utils.formatting import DEFAULT_PRECISION

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    """Console application settings."""
    precision: int = DEFAULT_PRECISION   # Decimals shown for results
    log_level: str = "WARNING"
    log_file: Path | None = None
    demo: bool = False

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0 (got {self.precision})")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        object.__setattr__(self, "log_level", self.log_level.upper())
