"""
Personality Drift.

A slow, bounded accumulator fed by one weather observation per day. The
drift vector leans the intensity of each personality axis but can never
move a character to a different variant.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Tuple

from pydantic import ValidationError

from stuck.core.enums import WeatherCondition
from stuck.persistence.schemas import DriftRecord
from stuck.persistence.storage import KeyValueStore

logger = logging.getLogger(__name__)


DRIFT_LIMIT = 0.3
MAX_DAILY_DRIFT = 0.01
STORAGE_KEY = "Stuck.WeatherDriftMatrix"


def clamp(value: float, min_val: float = -DRIFT_LIMIT, max_val: float = DRIFT_LIMIT) -> float:
    """Clamp value between min and max."""
    return max(min_val, min(max_val, value))


# (I, N, F, P) per condition. Gloomy weather pulls inward; bright weather outward.
DAILY_DRIFT_DELTAS: Dict[WeatherCondition, Tuple[float, float, float, float]] = {
    WeatherCondition.RAINY: (0.005, 0.0, 0.005, 0.005),
    WeatherCondition.SNOWY: (0.005, 0.0, 0.005, 0.005),
    WeatherCondition.CLOUDY: (0.005, 0.0, 0.005, 0.005),
    WeatherCondition.SUNNY: (-0.005, 0.0, -0.005, -0.005),
    WeatherCondition.WINDY: (-0.005, 0.0, -0.005, -0.005),
    WeatherCondition.STORMY: (0.003, 0.0, 0.003, 0.0),
    WeatherCondition.EXTREME_COLD: (0.004, 0.0, 0.002, 0.004),
    WeatherCondition.EXTREME_HOT: (0.004, 0.0, 0.002, 0.004),
}


@dataclass(frozen=True)
class DriftVector:
    """Four bounded drift scalars, one per personality axis.

    Positive values lean toward I, N, F and P respectively.
    """
    I: float = 0.0
    N: float = 0.0
    F: float = 0.0
    P: float = 0.0

    def __post_init__(self):
        for axis in ("I", "N", "F", "P"):
            value = getattr(self, axis)
            if not math.isfinite(value):
                value = 0.0
            object.__setattr__(self, axis, clamp(float(value)))

    @classmethod
    def zero(cls) -> DriftVector:
        return cls()

    def to_list(self) -> List[float]:
        return [self.I, self.N, self.F, self.P]

    @classmethod
    def from_list(cls, values) -> DriftVector:
        """Build from the first four values of a sequence."""
        i, n, f, p = (float(v) for v in list(values)[:4])
        return cls(i, n, f, p)

    def get(self, axis: str) -> float:
        return getattr(self, axis.upper())

    def plus(self, delta: Tuple[float, float, float, float]) -> DriftVector:
        """Apply a per-axis delta, capped at MAX_DAILY_DRIFT, then clamp."""
        capped = [clamp(d, -MAX_DAILY_DRIFT, MAX_DAILY_DRIFT) for d in delta]
        return DriftVector(*(v + d for v, d in zip(self.to_list(), capped)))

    def __str__(self) -> str:
        return f"I={self.I:+.3f} N={self.N:+.3f} F={self.F:+.3f} P={self.P:+.3f}"


def parse_drift(raw) -> DriftVector:
    """Validate stored drift values; missing or malformed data is the zero vector."""
    if raw is None:
        return DriftVector.zero()
    try:
        record = DriftRecord(values=raw)
    except ValidationError as e:
        logger.warning(f"Resetting malformed drift data {raw!r}: {e.error_count()} error(s)")
        return DriftVector.zero()
    return DriftVector.from_list(record.values)


class DriftAccumulator:
    """Holds the drift vector and applies daily weather observations.

    The once-per-day gate lives with the caller (see PersonalityService);
    every single update here is bounded by MAX_DAILY_DRIFT regardless.
    """

    def __init__(self, vector: DriftVector | None = None):
        self.vector = vector or DriftVector.zero()

    def record_daily(self, condition: WeatherCondition) -> DriftVector:
        """Apply one day's weather and return the new vector."""
        before = self.vector
        self.vector = before.plus(DAILY_DRIFT_DELTAS[condition])
        logger.debug(f"Drift {condition.value}: {before} -> {self.vector}")
        return self.vector

    def reset(self) -> None:
        self.vector = DriftVector.zero()

    # =========================================================================
    # Persistence
    # =========================================================================

    def save(self, store: KeyValueStore) -> None:
        store.set(STORAGE_KEY, self.vector.to_list())

    @classmethod
    def load(cls, store: KeyValueStore) -> DriftAccumulator:
        """Load from storage; missing or malformed data yields the zero vector."""
        return cls(parse_drift(store.get(STORAGE_KEY)))
