"""Behavior selection and procedural motion.

- weights: weighted choice of macro state, path type and action
- paths: geometry for every path type
- poses: action -> pose contract for the renderer
- cycle: the loop tying them together
"""

from stuck.behavior.cycle import (
    AchievementEvent,
    Behavior,
    BehaviorCycle,
    Environment,
    achievement_events,
)
from stuck.behavior.paths import MARGIN, PathEngine, generate_path, interpolate
from stuck.behavior.poses import (
    ACTION_POSES,
    PoseKind,
    PoseRequest,
    pose_for_action,
    segment_durations,
    walk_duration,
    walking_frames,
)
from stuck.behavior.weights import (
    FALLBACK_PATH,
    SPECIAL_WEIGHT,
    WeightEngine,
    effective_path_weights,
    macro_state_weights,
)

__all__ = [
    "ACTION_POSES",
    "AchievementEvent",
    "Behavior",
    "BehaviorCycle",
    "Environment",
    "FALLBACK_PATH",
    "MARGIN",
    "PathEngine",
    "PoseKind",
    "PoseRequest",
    "SPECIAL_WEIGHT",
    "WeightEngine",
    "achievement_events",
    "effective_path_weights",
    "generate_path",
    "interpolate",
    "macro_state_weights",
    "pose_for_action",
    "segment_durations",
    "walk_duration",
    "walking_frames",
]
