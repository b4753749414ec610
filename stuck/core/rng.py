"""Random source abstraction.

Weighted selection and the randomized path generators are the only places
nondeterminism enters the engine. Both take an injectable source so tests
can pass a seeded ``random.Random``.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Subset of ``random.Random`` the engine relies on."""

    def random(self) -> float: ...

    def uniform(self, a: float, b: float) -> float: ...

    def randrange(self, stop: int) -> int: ...

    def choice(self, seq: Sequence[T]) -> T: ...


class RandomMode(str, Enum):
    """Randomness mode."""
    SEEDED = "seeded"      # Reproducible - for tests and replays
    REALISTIC = "realistic"


# =============================================================================
# Configuration
# =============================================================================

@dataclass
class RandomConfig:
    """Configuration for the engine's default random source."""
    mode: RandomMode = RandomMode.REALISTIC
    seed: Optional[int] = None


_config = RandomConfig()


def set_config(config: RandomConfig) -> None:
    """Set the default random configuration."""
    global _config
    _config = config


def get_config() -> RandomConfig:
    """Get the current random configuration."""
    return _config


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create a random source.

    An explicit seed wins; otherwise the configured seed is used when the
    mode is SEEDED, and an OS-seeded generator otherwise.
    """
    if seed is None and _config.mode == RandomMode.SEEDED:
        seed = _config.seed
    return random.Random(seed)
