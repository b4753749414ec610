"""Pydantic schemas for persisted state."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, StrictFloat


class DriftRecord(BaseModel):
    """Stored drift vector: I, N, F, P in order.

    Extra trailing values are tolerated and ignored. Integers pass; booleans
    and numeric strings do not.
    """

    values: List[StrictFloat] = Field(min_length=4)


class WeatherCacheRecord(BaseModel):
    """Last weather report with the time it was fetched."""

    condition: str
    temperature: float = 20.0
    wind_speed: float = 0.0
    fetched_at: float  # Unix timestamp


class LifeSnapshot(BaseModel):
    """Snapshot of the current life for backup collaborators."""

    personality_id: str
    lifespan_hours: int = Field(default=0, ge=0)
    created_at: datetime
    ended_at: Optional[datetime] = None
