"""Stuck - a roaming character driven by personality, weather and time."""

from stuck.behavior import (
    Behavior,
    BehaviorCycle,
    Environment,
    PathEngine,
    WeightEngine,
    generate_path,
)
from stuck.core import (
    ActionType,
    BehaviorMacroState,
    Bounds,
    PathType,
    Vec2,
    WeatherCondition,
)
from stuck.environment import battery_speed_modifier, time_coefficient, weather_path_modifiers
from stuck.personality import (
    DriftAccumulator,
    DriftVector,
    PersonalityConfig,
    PersonalityService,
    PersonalityState,
    PersonalityVariant,
    config_for,
)

__version__ = "0.1.0"

__all__ = [
    "ActionType",
    "Behavior",
    "BehaviorCycle",
    "BehaviorMacroState",
    "Bounds",
    "DriftAccumulator",
    "DriftVector",
    "Environment",
    "PathEngine",
    "PathType",
    "PersonalityConfig",
    "PersonalityService",
    "PersonalityState",
    "PersonalityVariant",
    "Vec2",
    "WeatherCondition",
    "WeightEngine",
    "battery_speed_modifier",
    "config_for",
    "generate_path",
    "time_coefficient",
    "weather_path_modifiers",
]
