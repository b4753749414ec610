"""
Runtime configuration.

All settings can be overridden via environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


def _env_int(name: str) -> Optional[int]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except ValueError:
        return default


@dataclass
class StuckConfig:
    """Configuration for a running character."""

    # Storage
    state_path: Path = field(
        default_factory=lambda: Path(os.getenv("STUCK_STATE_PATH", "~/.stuck/state.json")).expanduser()
    )

    # Reproducible runs when set
    seed: Optional[int] = field(default_factory=lambda: _env_int("STUCK_SEED"))

    # Roaming area (points); defaults to a portrait phone screen
    width: float = field(default_factory=lambda: _env_float("STUCK_WIDTH", 390.0))
    height: float = field(default_factory=lambda: _env_float("STUCK_HEIGHT", 844.0))

    log_level: str = field(default_factory=lambda: os.getenv("STUCK_LOG_LEVEL", "WARNING").upper())

    @classmethod
    def from_env(cls) -> "StuckConfig":
        """Create config from environment variables."""
        return cls()

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []
        if self.width <= 0 or self.height <= 0:
            errors.append("STUCK_WIDTH and STUCK_HEIGHT must be positive")
        if self.log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Unknown STUCK_LOG_LEVEL: {self.log_level}")
        return errors


# Singleton config instance
_config: Optional[StuckConfig] = None


def get_config() -> StuckConfig:
    """Get the global configuration."""
    global _config
    if _config is None:
        _config = StuckConfig.from_env()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the environment is re-read."""
    global _config
    _config = None
