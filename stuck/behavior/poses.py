"""Pose contract handed to the renderer.

The renderer owns joint geometry; the engine only names which pose an
action should show and how long movement along a path takes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from stuck.core.enums import ActionType
from stuck.core.rng import RandomSource, make_rng
from stuck.core.vec2 import Vec2

WALK_SPEED = 80.0  # points per second at modifier 1.0
WALK_FRAME_INTERVAL = 0.15  # seconds between walking pose frames


class PoseKind(str, Enum):
    """Procedural pose archetypes the renderer knows how to draw."""
    STANDING = "standing"
    WALKING = "walking"
    SITTING = "sitting"
    CROUCHING = "crouching"
    CROUCH_COVER = "crouchCover"
    WAVING = "waving"
    JUMPING = "jumping"
    HIT_WALL = "hitWall"
    SLEEPING = "sleeping"
    TAI_CHI = "taiChi"
    YOGA = "yoga"
    AIR_SHOT = "airShot"
    FLIP = "flip"
    SPLIT = "split"
    DANCE = "dance"
    BOW_HEAD = "bowHead"
    UMBRELLA = "umbrella"
    STARTLED_JUMP = "startledJump"
    WIPE_SWEAT = "wipeSweat"
    EXHALE = "exhale"
    CURL_UP = "curlUp"
    RUB_HANDS = "rubHands"
    CATCH_SNOW = "catchSnow"
    HANDSTAND = "handstand"
    ROLL = "roll"
    STAND_PROUD = "standProud"
    EDGE_HOLD = "edgeHold"
    AIR_PERFORMANCE = "airPerformance"

    @property
    def is_animated(self) -> bool:
        """Whether the pose takes an animation phase."""
        return self in _PHASED_POSES


_PHASED_POSES = frozenset({
    PoseKind.WALKING, PoseKind.WAVING, PoseKind.JUMPING, PoseKind.TAI_CHI,
    PoseKind.YOGA, PoseKind.AIR_SHOT, PoseKind.FLIP, PoseKind.DANCE,
    PoseKind.RUB_HANDS, PoseKind.ROLL, PoseKind.AIR_PERFORMANCE,
})


ACTION_POSES = {
    ActionType.SIT: PoseKind.SITTING,
    ActionType.STARE: PoseKind.SITTING,
    ActionType.OBSERVE: PoseKind.SITTING,
    ActionType.CROUCH_CIRCLE: PoseKind.CROUCHING,
    ActionType.CROUCH_COVER: PoseKind.CROUCH_COVER,
    ActionType.WAVE: PoseKind.WAVING,
    ActionType.STAND_WAVE: PoseKind.WAVING,
    ActionType.JUMP: PoseKind.JUMPING,
    ActionType.HIT_WALL: PoseKind.HIT_WALL,
    ActionType.SLEEP: PoseKind.SLEEPING,
    ActionType.TAI_CHI: PoseKind.TAI_CHI,
    ActionType.YOGA: PoseKind.YOGA,
    ActionType.AIR_SHOT: PoseKind.AIR_SHOT,
    ActionType.FLIP: PoseKind.FLIP,
    ActionType.SPLIT: PoseKind.SPLIT,
    ActionType.DANCE: PoseKind.DANCE,
    ActionType.BOW_HEAD: PoseKind.BOW_HEAD,
    ActionType.UMBRELLA: PoseKind.UMBRELLA,
    ActionType.STARTLED_JUMP: PoseKind.STARTLED_JUMP,
    ActionType.WIPE_SWEAT: PoseKind.WIPE_SWEAT,
    ActionType.EXHALE: PoseKind.EXHALE,
    ActionType.CURL_UP: PoseKind.CURL_UP,
    ActionType.RUB_HANDS: PoseKind.RUB_HANDS,
    ActionType.CATCH_SNOW: PoseKind.CATCH_SNOW,
    ActionType.CATCH_RAINDROP: PoseKind.CATCH_SNOW,
    ActionType.HANDSTAND: PoseKind.HANDSTAND,
    ActionType.ROLL: PoseKind.ROLL,
    ActionType.STAND_PROUD: PoseKind.STAND_PROUD,
    ActionType.EDGE_HOLD: PoseKind.EDGE_HOLD,
    ActionType.AIR_PIANO: PoseKind.AIR_PERFORMANCE,
    ActionType.AIR_BASKETBALL: PoseKind.AIR_PERFORMANCE,
    ActionType.AIR_GENERIC: PoseKind.AIR_PERFORMANCE,
}


@dataclass(frozen=True)
class PoseRequest:
    """What the renderer should draw for an action.

    Attributes:
        kind: Pose archetype
        phase: Animation phase 0-1 (None for static poses)
        variant: Sub-kind, e.g. "piano" for an air performance
    """
    kind: PoseKind
    phase: Optional[float] = None
    variant: Optional[str] = None


def pose_for_action(action: ActionType, rng: Optional[RandomSource] = None) -> PoseRequest:
    """Map an action to the pose the renderer should show.

    Actions without a dedicated pose stand.
    """
    kind = ACTION_POSES.get(action, PoseKind.STANDING)
    phase = None
    if kind == PoseKind.JUMPING:
        phase = 0.5  # Apex
    elif kind.is_animated:
        phase = (rng or make_rng()).random()
    variant = None
    if kind == PoseKind.AIR_PERFORMANCE:
        variant = {
            ActionType.AIR_PIANO: "piano",
            ActionType.AIR_BASKETBALL: "basketball",
        }.get(action, "generic")
    return PoseRequest(kind=kind, phase=phase, variant=variant)


def walk_duration(start: Vec2, end: Vec2, speed_modifier: float = 1.0) -> float:
    """Seconds to walk between two points."""
    if not speed_modifier > 0:
        speed_modifier = 1.0
    return start.distance_to(end) / (WALK_SPEED * speed_modifier)


def segment_durations(points: List[Vec2], speed_modifier: float = 1.0) -> List[float]:
    """Walk time for each consecutive pair of points."""
    return [walk_duration(a, b, speed_modifier) for a, b in zip(points, points[1:])]


def walking_frames(duration: float) -> List[PoseRequest]:
    """Alternating walking poses, one per frame interval (at least two)."""
    steps = max(2, int(duration / WALK_FRAME_INTERVAL))
    return [PoseRequest(PoseKind.WALKING, phase=(i % 2) * 0.5) for i in range(steps)]
