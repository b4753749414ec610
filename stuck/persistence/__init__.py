"""Persistence: key-value stores and the typed state kept in them."""

from stuck.persistence.game_storage import GameStorage
from stuck.persistence.schemas import DriftRecord, LifeSnapshot, WeatherCacheRecord
from stuck.persistence.storage import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "DriftRecord",
    "GameStorage",
    "JsonFileStore",
    "KeyValueStore",
    "LifeSnapshot",
    "MemoryStore",
    "WeatherCacheRecord",
]
