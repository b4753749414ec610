"""Tests for the weather fallback and cache."""

import random
from collections import Counter

from stuck.core import WeatherCondition
from stuck.environment import WeatherCache, WeatherReport, fallback_weather
from stuck.persistence import MemoryStore


class TestFallbackWeather:
    def test_only_fallback_conditions(self):
        rng = random.Random(8)
        conditions = {fallback_weather(rng).condition for _ in range(2000)}
        assert conditions == {
            WeatherCondition.SUNNY,
            WeatherCondition.RAINY,
            WeatherCondition.SNOWY,
            WeatherCondition.STORMY,
            WeatherCondition.WINDY,
        }

    def test_mostly_sunny(self):
        rng = random.Random(21)
        counts = Counter(fallback_weather(rng).condition for _ in range(20000))
        assert 0.68 < counts[WeatherCondition.SUNNY] / 20000 < 0.72

    def test_reports_carry_fixed_readings(self):
        class Fixed:
            def __init__(self, value):
                self.value = value

            def random(self):
                return self.value

        assert fallback_weather(Fixed(0.9)) == WeatherReport(WeatherCondition.SNOWY, -2, 1)
        assert fallback_weather(Fixed(0.99)) == WeatherReport(WeatherCondition.WINDY, 16, 8)


class TestWeatherCache:
    def test_fresh_cache_is_used(self):
        cache = WeatherCache(MemoryStore())
        report = WeatherReport(WeatherCondition.CLOUDY, 12, 4)
        cache.save(report, now=1000.0)
        assert cache.load(now=1000.0 + 3599) == report

    def test_stale_cache_is_ignored(self):
        cache = WeatherCache(MemoryStore())
        cache.save(WeatherReport(WeatherCondition.CLOUDY), now=1000.0)
        assert cache.load(now=1000.0 + 3600) is None

    def test_invalid_cache_is_ignored(self):
        store = MemoryStore({WeatherCache.CACHE_KEY: {"condition": "hail", "fetched_at": 0}})
        assert WeatherCache(store).load(now=1.0) is None
        store.set(WeatherCache.CACHE_KEY, "not a record")
        assert WeatherCache(store).load(now=1.0) is None

    def test_current_rolls_and_caches(self):
        store = MemoryStore()
        cache = WeatherCache(store)
        first = cache.current(random.Random(3), now=50.0)
        assert WeatherCache.CACHE_KEY in store
        # Cached value is returned regardless of the random source
        assert cache.current(random.Random(4), now=60.0) == first
