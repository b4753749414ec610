"""Core value types shared by every engine."""

from stuck.core.enums import (
    AIR_PERFORMANCES,
    ActionType,
    BehaviorMacroState,
    PathType,
    WeatherCondition,
    canonical_path_order,
)
from stuck.core.rng import RandomConfig, RandomMode, RandomSource, get_config, make_rng, set_config
from stuck.core.vec2 import Bounds, Vec2

__all__ = [
    "AIR_PERFORMANCES",
    "ActionType",
    "BehaviorMacroState",
    "Bounds",
    "PathType",
    "RandomConfig",
    "RandomMode",
    "RandomSource",
    "Vec2",
    "WeatherCondition",
    "canonical_path_order",
    "get_config",
    "make_rng",
    "set_config",
]
