"""
Personality Service.

Resolves the character's persisted identity at startup and owns the
once-per-day drift gate. This is the only place personality state is
written back to storage.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from stuck.core.enums import WeatherCondition
from stuck.core.rng import RandomSource, make_rng
from stuck.persistence.game_storage import GameStorage
from stuck.persistence.storage import KeyValueStore
from stuck.personality.drift import STORAGE_KEY as DRIFT_STORAGE_KEY
from stuck.personality.drift import DriftAccumulator, DriftVector
from stuck.personality.generation import parse_variant, random_variant
from stuck.personality.state import PersonalityState
from stuck.personality.variants import PersonalityVariant

logger = logging.getLogger(__name__)


class PersonalityService:
    """Persisted personality for one character."""

    def __init__(self, store: KeyValueStore, rng: Optional[RandomSource] = None):
        self.store = store
        self.storage = GameStorage(store)
        self.rng = rng or make_rng()

    def current_variant(self) -> PersonalityVariant:
        """Stored variant, or a new uniformly random one that is then stored."""
        variant = parse_variant(self.storage.personality_id)
        if variant is not None:
            return variant
        variant = random_variant(self.rng)
        self.storage.personality_id = variant.value
        logger.info(f"Assigned personality {variant.value}")
        return variant

    def initialize_if_needed(self, now: Optional[datetime] = None) -> None:
        """Stamp the birth time and assign a variant on first launch."""
        if self.storage.created_at is None:
            self.storage.created_at = now or datetime.now()
            self.current_variant()

    def load_state(self) -> PersonalityState:
        """Variant plus drift, ready to hand to the engines."""
        return PersonalityState(variant=self.current_variant(), drift=self.load_drift())

    # =========================================================================
    # Drift
    # =========================================================================

    def load_drift(self) -> DriftVector:
        return DriftAccumulator.load(self.store).vector

    def save_drift(self, vector: DriftVector) -> None:
        DriftAccumulator(vector).save(self.store)

    def record_daily_drift(self, condition: WeatherCondition, today: Optional[date] = None) -> bool:
        """
        Apply today's weather to the drift, at most once per calendar day.

        Returns:
            True if the drift was updated, False if today was already recorded
        """
        today = today or date.today()
        if self.storage.last_drift_date == today:
            return False
        accumulator = DriftAccumulator.load(self.store)
        accumulator.record_daily(condition)
        accumulator.save(self.store)
        self.storage.last_drift_date = today
        logger.info(f"Recorded {condition.value} drift for {today}: {accumulator.vector}")
        return True

    def start_new_life(self) -> None:
        """Forget the current character: identity, birth time and drift."""
        self.storage.clear_for_new_life()
        self.store.delete(DRIFT_STORAGE_KEY)
        logger.info("Cleared character for a new life")
