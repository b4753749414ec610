"""Character identity and bookkeeping keys over a key-value store."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from stuck.persistence.schemas import LifeSnapshot
from stuck.persistence.storage import KeyValueStore

logger = logging.getLogger(__name__)


class GameStorage:
    """Typed accessors for the persisted character state.

    Dates are stored as ISO strings; unparseable values read as None.
    """

    CREATED_AT_KEY = "Stuck.CreatedAt"
    PERSONALITY_ID_KEY = "Stuck.PersonalityId"
    LAST_DRIFT_DATE_KEY = "Stuck.LastDriftDate"
    SNAPSHOT_KEY = "Stuck.CurrentLifeSnapshot"

    def __init__(self, store: KeyValueStore):
        self.store = store

    # =========================================================================
    # Identity
    # =========================================================================

    @property
    def personality_id(self) -> Optional[str]:
        value = self.store.get(self.PERSONALITY_ID_KEY)
        return value if isinstance(value, str) else None

    @personality_id.setter
    def personality_id(self, value: Optional[str]) -> None:
        if value is None:
            self.store.delete(self.PERSONALITY_ID_KEY)
        else:
            self.store.set(self.PERSONALITY_ID_KEY, value)

    @property
    def created_at(self) -> Optional[datetime]:
        return self._read_datetime(self.CREATED_AT_KEY)

    @created_at.setter
    def created_at(self, value: Optional[datetime]) -> None:
        if value is None:
            self.store.delete(self.CREATED_AT_KEY)
        else:
            self.store.set(self.CREATED_AT_KEY, value.isoformat())

    def lifespan_hours(self, now: Optional[datetime] = None) -> int:
        """Whole hours since the character was created (0 if never)."""
        created = self.created_at
        if created is None:
            return 0
        now = now or datetime.now(created.tzinfo)
        return max(0, int((now - created).total_seconds() // 3600))

    # =========================================================================
    # Drift gate
    # =========================================================================

    @property
    def last_drift_date(self) -> Optional[date]:
        value = self.store.get(self.LAST_DRIFT_DATE_KEY)
        if not isinstance(value, str):
            return None
        try:
            return date.fromisoformat(value)
        except ValueError:
            logger.warning(f"Ignoring invalid last drift date {value!r}")
            return None

    @last_drift_date.setter
    def last_drift_date(self, value: Optional[date]) -> None:
        if value is None:
            self.store.delete(self.LAST_DRIFT_DATE_KEY)
        else:
            self.store.set(self.LAST_DRIFT_DATE_KEY, value.isoformat())

    # =========================================================================
    # Life cycle
    # =========================================================================

    def snapshot(self, now: Optional[datetime] = None) -> Optional[LifeSnapshot]:
        """Current life summary, or None before the first launch."""
        pid, created = self.personality_id, self.created_at
        if pid is None or created is None:
            return None
        return LifeSnapshot(
            personality_id=pid,
            lifespan_hours=self.lifespan_hours(now),
            created_at=created,
        )

    def save_snapshot(self, now: Optional[datetime] = None) -> None:
        snapshot = self.snapshot(now)
        if snapshot is not None:
            self.store.set(self.SNAPSHOT_KEY, snapshot.model_dump(mode="json"))

    def clear_for_new_life(self) -> None:
        self.created_at = None
        self.personality_id = None
        self.last_drift_date = None

    def _read_datetime(self, key: str) -> Optional[datetime]:
        value = self.store.get(key)
        if not isinstance(value, str):
            return None
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            logger.warning(f"Ignoring invalid timestamp under {key}: {value!r}")
            return None
