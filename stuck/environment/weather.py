"""Weather effects and the offline weather fallback.

Weather adds fixed deltas to path base weights. When no live weather is
available the character still gets a plausible condition from a fixed
fallback distribution.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Dict, Optional

from pydantic import ValidationError

from stuck.core.enums import PathType, WeatherCondition
from stuck.core.rng import RandomSource, make_rng
from stuck.persistence.schemas import WeatherCacheRecord
from stuck.persistence.storage import KeyValueStore

logger = logging.getLogger(__name__)


# =============================================================================
# Path Modifiers
# =============================================================================

WEATHER_PATH_MODIFIERS: Dict[WeatherCondition, Dict[PathType, int]] = {
    WeatherCondition.SUNNY: {PathType.SPRINT: 20, PathType.BURST: 15},
    WeatherCondition.RAINY: {PathType.RANDOM_DRIFT: -30, PathType.ALONG_EDGE: 10},
    WeatherCondition.SNOWY: {PathType.STRAIGHT: -20, PathType.ARC: 15},
    WeatherCondition.STORMY: {PathType.SPRINT: 40, PathType.BURST: 30},
    WeatherCondition.WINDY: {PathType.RANDOM_DRIFT: 25},
    WeatherCondition.CLOUDY: {PathType.RANDOM_DRIFT: 10},
    WeatherCondition.EXTREME_COLD: {},
    WeatherCondition.EXTREME_HOT: {},
}


def weather_path_modifiers(condition: WeatherCondition) -> Dict[PathType, int]:
    """Additive per-path weight deltas for a weather condition.

    Path types not in the result have a delta of 0. A fresh dict is
    returned so callers may merge into it.
    """
    return dict(WEATHER_PATH_MODIFIERS.get(condition, {}))


# =============================================================================
# Weather Reports
# =============================================================================

@dataclass(frozen=True)
class WeatherReport:
    """One weather observation."""
    condition: WeatherCondition
    temperature: float = 20.0   # Celsius
    wind_speed: float = 0.0     # m/s


# (cumulative upper bound, report) - rolled with a single uniform draw
FALLBACK_WEATHER = (
    (0.70, WeatherReport(WeatherCondition.SUNNY, temperature=22, wind_speed=2)),
    (0.85, WeatherReport(WeatherCondition.RAINY, temperature=18, wind_speed=3)),
    (0.92, WeatherReport(WeatherCondition.SNOWY, temperature=-2, wind_speed=1)),
    (0.96, WeatherReport(WeatherCondition.STORMY, temperature=15, wind_speed=12)),
    (1.00, WeatherReport(WeatherCondition.WINDY, temperature=16, wind_speed=8)),
)


def fallback_weather(rng: Optional[RandomSource] = None) -> WeatherReport:
    """Roll a weather report when live weather is unavailable."""
    rng = rng or make_rng()
    roll = rng.random()
    for upper, report in FALLBACK_WEATHER:
        if roll < upper:
            return report
    return FALLBACK_WEATHER[-1][1]


class WeatherCache:
    """Remembers the last report for up to an hour."""

    CACHE_KEY = "Stuck.WeatherCache"
    CACHE_INTERVAL = 3600.0  # seconds

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self, now: Optional[float] = None) -> Optional[WeatherReport]:
        """Return the cached report if it is fresh and valid."""
        raw = self.store.get(self.CACHE_KEY)
        if raw is None:
            return None
        now = time.time() if now is None else now
        try:
            record = WeatherCacheRecord.model_validate(raw)
            condition = WeatherCondition(record.condition)
        except (ValidationError, ValueError) as e:
            logger.warning(f"Discarding invalid weather cache: {e}")
            return None
        if now - record.fetched_at >= self.CACHE_INTERVAL:
            return None
        return WeatherReport(condition, record.temperature, record.wind_speed)

    def save(self, report: WeatherReport, now: Optional[float] = None) -> None:
        record = WeatherCacheRecord(
            condition=report.condition.value,
            temperature=report.temperature,
            wind_speed=report.wind_speed,
            fetched_at=time.time() if now is None else now,
        )
        self.store.set(self.CACHE_KEY, record.model_dump())

    def current(self, rng: Optional[RandomSource] = None, now: Optional[float] = None) -> WeatherReport:
        """Cached report, or a fresh fallback roll that is then cached."""
        cached = self.load(now)
        if cached is not None:
            return cached
        report = fallback_weather(rng)
        logger.info(f"Weather fallback rolled {report.condition.value}")
        self.save(report, now)
        return report
