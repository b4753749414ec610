"""Shared pytest fixtures for Stuck tests."""

import random

import pytest

from stuck.behavior import PathEngine, WeightEngine
from stuck.core import Bounds
from stuck.persistence import MemoryStore
from stuck.personality import PersonalityState, PersonalityVariant


# =============================================================================
# Randomness
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so draws replay exactly."""
    return random.Random(1234)


@pytest.fixture
def weight_engine(rng) -> WeightEngine:
    return WeightEngine(rng)


# =============================================================================
# Geometry
# =============================================================================


@pytest.fixture
def screen_bounds() -> Bounds:
    """Portrait phone-sized roaming area."""
    return Bounds.from_size(390, 844)


@pytest.fixture
def square_bounds() -> Bounds:
    return Bounds.from_size(200, 200)


@pytest.fixture
def path_engine(screen_bounds, rng) -> PathEngine:
    return PathEngine(screen_bounds, rng=rng)


# =============================================================================
# State
# =============================================================================


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def infp_state() -> PersonalityState:
    return PersonalityState(PersonalityVariant.INFP)
