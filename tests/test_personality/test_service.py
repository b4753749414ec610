"""Tests for PersonalityService: identity resolution and the drift gate."""

import random
from datetime import date, datetime, timedelta, timezone

import pytest

from stuck.core import WeatherCondition
from stuck.persistence import GameStorage, MemoryStore
from stuck.personality import DriftVector, PersonalityService, PersonalityVariant
from stuck.personality.drift import STORAGE_KEY as DRIFT_KEY


class FailingDriftStore(MemoryStore):
    """Store whose drift writes fail until it is repaired."""

    broken = True

    def set(self, key, value):
        if self.broken and key == DRIFT_KEY:
            raise OSError("disk full")
        super().set(key, value)


class TestIdentity:
    def test_assigns_and_persists_variant(self, store):
        service = PersonalityService(store, rng=random.Random(11))
        first = service.current_variant()
        assert GameStorage(store).personality_id == first.value
        # A different random source must not change the stored identity
        again = PersonalityService(store, rng=random.Random(99)).current_variant()
        assert again == first

    def test_uses_stored_variant(self):
        store = MemoryStore({GameStorage.PERSONALITY_ID_KEY: "ISTJ"})
        assert PersonalityService(store).current_variant() == PersonalityVariant.ISTJ

    def test_invalid_stored_variant_is_replaced(self):
        store = MemoryStore({GameStorage.PERSONALITY_ID_KEY: "NOPE"})
        variant = PersonalityService(store, rng=random.Random(1)).current_variant()
        assert GameStorage(store).personality_id == variant.value

    def test_initialize_if_needed_runs_once(self, store):
        service = PersonalityService(store, rng=random.Random(2))
        born = datetime(2026, 1, 1, 8, 0)
        service.initialize_if_needed(born)
        service.initialize_if_needed(born + timedelta(days=3))
        assert service.storage.created_at == born
        assert service.storage.personality_id is not None

    def test_timezone_aware_birth_time(self, store):
        service = PersonalityService(store, rng=random.Random(3))
        service.initialize_if_needed(datetime.now(timezone.utc))
        assert service.storage.lifespan_hours() == 0

    def test_load_state(self, store):
        service = PersonalityService(store, rng=random.Random(2))
        service.save_drift(DriftVector(0.1, 0.0, 0.0, 0.0))
        state = service.load_state()
        assert state.variant == service.current_variant()
        assert state.drift == DriftVector(0.1, 0.0, 0.0, 0.0)


class TestDailyDrift:
    def test_once_per_day(self, store):
        service = PersonalityService(store)
        today = date(2026, 3, 1)
        assert service.record_daily_drift(WeatherCondition.RAINY, today) is True
        assert service.record_daily_drift(WeatherCondition.RAINY, today) is False
        assert service.load_drift().I == 0.005

    def test_next_day_records_again(self, store):
        service = PersonalityService(store)
        day = date(2026, 3, 1)
        service.record_daily_drift(WeatherCondition.SUNNY, day)
        service.record_daily_drift(WeatherCondition.SUNNY, day + timedelta(days=1))
        assert service.load_drift().I == -0.01

    def test_save_load_round_trip(self, store):
        service = PersonalityService(store)
        vector = DriftVector(-0.2, 0.01, 0.0, 0.3)
        service.save_drift(vector)
        assert service.load_drift() == vector

    def test_start_new_life_clears_everything(self, store):
        service = PersonalityService(store, rng=random.Random(4))
        service.initialize_if_needed(datetime(2026, 1, 1))
        service.record_daily_drift(WeatherCondition.SNOWY, date(2026, 1, 1))

        service.start_new_life()

        assert service.storage.personality_id is None
        assert service.storage.created_at is None
        assert service.storage.last_drift_date is None
        assert service.load_drift() == DriftVector.zero()

    def test_failed_save_leaves_day_unrecorded(self):
        store = FailingDriftStore()
        service = PersonalityService(store)
        today = date(2026, 3, 1)
        with pytest.raises(OSError):
            service.record_daily_drift(WeatherCondition.RAINY, today)
        assert service.storage.last_drift_date is None

        store.broken = False
        assert service.record_daily_drift(WeatherCondition.RAINY, today) is True
        assert service.load_drift().I == 0.005
