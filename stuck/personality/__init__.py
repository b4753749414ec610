"""
Personality System.

Every character has one of 16 fixed personality variants. The variant
selects a static behavior configuration (path weights, idle frequency,
special actions, haptic style). A slowly accumulating drift vector, fed by
daily weather, shades how strongly each axis is expressed without ever
changing the variant.

Example usage:
    from stuck.personality import PersonalityState, PersonalityVariant

    state = PersonalityState(PersonalityVariant.INFP)
    state.config.idle_frequency      # IdleFrequency.VERY_HIGH
    state.axis_intensity("I")        # 1.0 plus any drift
"""

from stuck.personality.variants import (
    DRIFT_AXES,
    IDLE_WEIGHTS,
    HapticStyle,
    IdleFrequency,
    PersonalityVariant,
)

from stuck.personality.config import (
    CONFIG_DEFINITIONS,
    PersonalityConfig,
    config_for,
)

from stuck.personality.drift import (
    DAILY_DRIFT_DELTAS,
    DRIFT_LIMIT,
    MAX_DAILY_DRIFT,
    DriftAccumulator,
    DriftVector,
    parse_drift,
)

from stuck.personality.state import PersonalityState

from stuck.personality.service import PersonalityService

from stuck.personality.generation import (
    ALL_VARIANTS,
    generate_personality,
    parse_variant,
    random_variant,
)


__all__ = [
    # Variants
    "DRIFT_AXES",
    "IDLE_WEIGHTS",
    "HapticStyle",
    "IdleFrequency",
    "PersonalityVariant",
    # Configs
    "CONFIG_DEFINITIONS",
    "PersonalityConfig",
    "config_for",
    # Drift
    "DAILY_DRIFT_DELTAS",
    "DRIFT_LIMIT",
    "MAX_DAILY_DRIFT",
    "DriftAccumulator",
    "DriftVector",
    "parse_drift",
    # State
    "PersonalityState",
    # Service
    "PersonalityService",
    # Generation
    "ALL_VARIANTS",
    "generate_personality",
    "parse_variant",
    "random_variant",
]
