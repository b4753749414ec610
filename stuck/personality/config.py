"""
Personality Configurations.

Static per-variant behavior tables: path base weights, idle frequency,
eligible special actions and haptic style. One immutable record per
variant, looked up by variant and never mutated.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

from stuck.core.enums import ActionType, PathType
from stuck.personality.variants import HapticStyle, IdleFrequency, PersonalityVariant


@dataclass(frozen=True)
class PersonalityConfig:
    """
    Behavior configuration for one variant.

    Attributes:
        variant: The variant this record belongs to
        path_weights: PathType -> non-negative base weight. Path types
                      that are absent are ineligible (weight 0).
        idle_frequency: Idle tier driving the macro-state split
        special_actions: Ordered eligible special actions (may be empty)
        haptic_style: Tag passed to the haptic collaborator
    """

    variant: PersonalityVariant
    path_weights: Mapping[PathType, int] = field(default_factory=dict)
    idle_frequency: IdleFrequency = IdleFrequency.MEDIUM
    special_actions: Tuple[ActionType, ...] = ()
    haptic_style: HapticStyle = HapticStyle.SOFT

    def __post_init__(self):
        # Freeze the mapping so shared table entries cannot be edited
        object.__setattr__(self, "path_weights", MappingProxyType(dict(self.path_weights)))
        object.__setattr__(self, "special_actions", tuple(self.special_actions))

    @property
    def idle_weight(self) -> int:
        return self.idle_frequency.idle_weight

    def base_weight(self, path: PathType) -> int:
        """Base weight for a path type (0 when ineligible)."""
        return self.path_weights.get(path, 0)


# =============================================================================
# Configuration Definitions
# =============================================================================

CONFIG_DEFINITIONS: Mapping[PersonalityVariant, PersonalityConfig] = MappingProxyType({
    # =========================================================================
    # Analysts
    # =========================================================================
    PersonalityVariant.INTJ: PersonalityConfig(
        variant=PersonalityVariant.INTJ,
        path_weights={PathType.STRAIGHT: 70, PathType.RIGHT_ANGLE: 20},
        idle_frequency=IdleFrequency.MEDIUM,
        special_actions=(ActionType.OBSERVE,),
        haptic_style=HapticStyle.SHARP,
    ),
    PersonalityVariant.INTP: PersonalityConfig(
        variant=PersonalityVariant.INTP,
        path_weights={PathType.RANDOM_DRIFT: 30},
        idle_frequency=IdleFrequency.VERY_HIGH,
        special_actions=(ActionType.STARE, ActionType.CROUCH_CIRCLE),
        haptic_style=HapticStyle.SOFT,
    ),
    PersonalityVariant.ENTJ: PersonalityConfig(
        variant=PersonalityVariant.ENTJ,
        path_weights={PathType.SPRINT: 50, PathType.BURST: 40},
        idle_frequency=IdleFrequency.LOW,
        special_actions=(ActionType.STAND_PROUD, ActionType.HIT_WALL),
        haptic_style=HapticStyle.HEAVY,
    ),
    PersonalityVariant.ENTP: PersonalityConfig(
        variant=PersonalityVariant.ENTP,
        path_weights={PathType.CENTER_BOUNCE: 40, PathType.DIAGONAL: 40},
        idle_frequency=IdleFrequency.MEDIUM,
        special_actions=(ActionType.DANCE, ActionType.BOUNCE),
        haptic_style=HapticStyle.DOUBLE_TAP,
    ),
    # =========================================================================
    # Diplomats
    # =========================================================================
    PersonalityVariant.INFJ: PersonalityConfig(
        variant=PersonalityVariant.INFJ,
        path_weights={PathType.ALONG_EDGE: 60},
        idle_frequency=IdleFrequency.HIGH,
        special_actions=(ActionType.OBSERVE, ActionType.EDGE_SLIDE),
        haptic_style=HapticStyle.PULSE,
    ),
    PersonalityVariant.INFP: PersonalityConfig(
        variant=PersonalityVariant.INFP,
        path_weights={PathType.ARC: 40},
        idle_frequency=IdleFrequency.VERY_HIGH,
        special_actions=(ActionType.SIT, ActionType.STARE, ActionType.CURL_UP),
        haptic_style=HapticStyle.ETHEREAL,
    ),
    PersonalityVariant.ENFJ: PersonalityConfig(
        variant=PersonalityVariant.ENFJ,
        path_weights={PathType.CENTER_BOUNCE: 50},
        idle_frequency=IdleFrequency.LOW,
        special_actions=(
            ActionType.STAND_WAVE, ActionType.WAVE, ActionType.JUMP, ActionType.AIR_BASKETBALL,
        ),
        haptic_style=HapticStyle.SUCCESS,
    ),
    PersonalityVariant.ENFP: PersonalityConfig(
        variant=PersonalityVariant.ENFP,
        path_weights={PathType.FULL_SCREEN_CHAOS: 70},
        idle_frequency=IdleFrequency.VERY_LOW,
        special_actions=(
            ActionType.RANDOM_SPRINT, ActionType.JUMP, ActionType.HANDSTAND, ActionType.AIR_GENERIC,
        ),
        haptic_style=HapticStyle.BURST,
    ),
    # =========================================================================
    # Sentinels
    # =========================================================================
    PersonalityVariant.ISTJ: PersonalityConfig(
        variant=PersonalityVariant.ISTJ,
        path_weights={PathType.FIXED_PENDULUM: 80},
        idle_frequency=IdleFrequency.MEDIUM,
        special_actions=(ActionType.UMBRELLA,),
        haptic_style=HapticStyle.RIGID,
    ),
    PersonalityVariant.ISFJ: PersonalityConfig(
        variant=PersonalityVariant.ISFJ,
        path_weights={PathType.RANDOM_DRIFT: 70},
        idle_frequency=IdleFrequency.HIGH,
        special_actions=(ActionType.CROUCH_CIRCLE, ActionType.EDGE_HOLD),
        haptic_style=HapticStyle.WARM,
    ),
    PersonalityVariant.ESTJ: PersonalityConfig(
        variant=PersonalityVariant.ESTJ,
        path_weights={PathType.DIAGONAL: 60, PathType.SPRINT: 40},
        idle_frequency=IdleFrequency.LOW,
        special_actions=(ActionType.HIT_WALL,),
        haptic_style=HapticStyle.THUD,
    ),
    PersonalityVariant.ESFJ: PersonalityConfig(
        variant=PersonalityVariant.ESFJ,
        path_weights={PathType.CLOCKWISE_EDGE: 80},
        idle_frequency=IdleFrequency.MEDIUM,
        special_actions=(ActionType.OBSERVE,),
        haptic_style=HapticStyle.CYCLIC,
    ),
    # =========================================================================
    # Explorers
    # =========================================================================
    PersonalityVariant.ISTP: PersonalityConfig(
        variant=PersonalityVariant.ISTP,
        path_weights={PathType.BURST: 30},
        idle_frequency=IdleFrequency.VERY_HIGH,
        special_actions=(),  # Falls back to the caller's default action
        haptic_style=HapticStyle.IMPACTFUL,
    ),
    PersonalityVariant.ISFP: PersonalityConfig(
        variant=PersonalityVariant.ISFP,
        path_weights={PathType.CURVE: 50, PathType.S_CURVE: 30},
        idle_frequency=IdleFrequency.MEDIUM,
        special_actions=(ActionType.CATCH_SNOW, ActionType.CATCH_RAINDROP, ActionType.AIR_PIANO),
        haptic_style=HapticStyle.FLUID,
    ),
    PersonalityVariant.ESTP: PersonalityConfig(
        variant=PersonalityVariant.ESTP,
        path_weights={PathType.SPRINT: 60, PathType.BURST: 30},
        idle_frequency=IdleFrequency.VERY_LOW,
        special_actions=(ActionType.HIT_WALL,),
        haptic_style=HapticStyle.VIOLENT,
    ),
    PersonalityVariant.ESFP: PersonalityConfig(
        variant=PersonalityVariant.ESFP,
        path_weights={PathType.UPPER_HALF_JUMP: 50},
        idle_frequency=IdleFrequency.LOW,
        special_actions=(ActionType.JUMP, ActionType.DANCE, ActionType.WAVE),
        haptic_style=HapticStyle.SPARKLING,
    ),
})


def config_for(variant: PersonalityVariant) -> PersonalityConfig:
    """Get the static configuration for a variant."""
    return CONFIG_DEFINITIONS[variant]
