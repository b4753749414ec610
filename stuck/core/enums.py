"""Behavior enumerations.

Values are the camelCase identifiers used in logs and stored data.
"""

from enum import Enum


class BehaviorMacroState(str, Enum):
    """Top-level behavior mode, re-selected after every completed behavior."""
    MOVING = "moving"
    IDLE = "idle"
    SPECIAL = "special"


class PathType(str, Enum):
    """Archetypes of translational motion (decoupled from actions)."""
    STRAIGHT = "straight"
    RIGHT_ANGLE = "rightAngle"
    ARC = "arc"
    SPIRAL = "spiral"
    S_CURVE = "sCurve"
    ALONG_EDGE = "alongEdge"
    RANDOM_DRIFT = "randomDrift"
    CENTER_BOUNCE = "centerBounce"
    FULL_SCREEN_CHAOS = "fullScreenChaos"
    FIXED_PENDULUM = "fixedPendulum"
    DIAGONAL = "diagonal"
    CLOCKWISE_EDGE = "clockwiseEdge"
    BURST = "burst"
    CURVE = "curve"
    SPRINT = "sprint"
    UPPER_HALF_JUMP = "upperHalfJump"

    @property
    def is_randomized(self) -> bool:
        """Whether the generated points depend on the random source."""
        return self in (PathType.RANDOM_DRIFT, PathType.FULL_SCREEN_CHAOS)


def canonical_path_order(paths) -> list[PathType]:
    """Sort path types by value; weighted draws walk candidates in this order."""
    return sorted(paths, key=lambda p: p.value)


class ActionType(str, Enum):
    """Archetypes of stationary or semi-stationary poses."""
    WALK = "walk"
    STROLL = "stroll"
    PAUSE = "pause"
    HIT_WALL = "hitWall"
    TAI_CHI = "taiChi"
    YOGA = "yoga"
    AIR_SHOT = "airShot"
    FLIP = "flip"
    SPLIT = "split"
    CROUCH_CIRCLE = "crouchCircle"
    MEASURE_STEPS = "measureSteps"
    DANCE = "dance"
    SLEEP = "sleep"
    SIT = "sit"
    STARE = "stare"
    BOW_HEAD = "bowHead"
    UMBRELLA = "umbrella"
    CROUCH_COVER = "crouchCover"
    STARTLED_JUMP = "startledJump"
    WIPE_SWEAT = "wipeSweat"
    EXHALE = "exhale"
    CURL_UP = "curlUp"
    RUB_HANDS = "rubHands"
    CATCH_SNOW = "catchSnow"
    WAVE = "wave"
    HANDSTAND = "handstand"
    ROLL = "roll"
    STAND_PROUD = "standProud"
    BOUNCE = "bounce"
    OBSERVE = "observe"
    EDGE_SLIDE = "edgeSlide"
    STAND_WAVE = "standWave"
    RANDOM_SPRINT = "randomSprint"
    JUMP = "jump"
    EDGE_HOLD = "edgeHold"
    CATCH_RAINDROP = "catchRaindrop"
    AIR_PIANO = "airPiano"
    AIR_BASKETBALL = "airBasketball"
    AIR_GENERIC = "airGeneric"


AIR_PERFORMANCES = frozenset({
    ActionType.AIR_PIANO,
    ActionType.AIR_BASKETBALL,
    ActionType.AIR_GENERIC,
})


class WeatherCondition(str, Enum):
    """Weather categories reported by the weather collaborator."""
    SUNNY = "sunny"
    RAINY = "rainy"
    SNOWY = "snowy"
    STORMY = "stormy"
    WINDY = "windy"
    CLOUDY = "cloudy"
    EXTREME_COLD = "extremeCold"
    EXTREME_HOT = "extremeHot"
