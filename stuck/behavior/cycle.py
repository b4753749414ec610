"""Behavior cycle - the select / expand / report loop.

Each call to ``next_behavior`` runs one full selection: macro state, then a
path (expanded into points) or an action. The renderer animates the result
and calls back for the next one. Collaborators such as haptics or
achievements subscribe as observers instead of being called directly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from stuck.behavior.paths import PathEngine
from stuck.behavior.poses import PoseKind, PoseRequest, pose_for_action, segment_durations, walking_frames
from stuck.behavior.weights import WeightEngine
from stuck.core.enums import AIR_PERFORMANCES, ActionType, BehaviorMacroState, PathType, WeatherCondition
from stuck.core.rng import RandomSource, make_rng
from stuck.core.vec2 import Bounds, Vec2
from stuck.environment.weather import weather_path_modifiers
from stuck.personality.state import PersonalityState

logger = logging.getLogger(__name__)

IDLE_EXTRA_ACTIONS = (ActionType.SIT, ActionType.STARE)
IDLE_FALLBACK = ActionType.STARE
SPECIAL_FALLBACK = ActionType.WAVE

IDLE_DURATION = (2.0, 5.0)      # seconds
SPECIAL_DURATION = (1.5, 4.0)


class AchievementEvent(str, Enum):
    """Behaviors the achievement collaborator counts."""
    WALL_HIT = "wall_hit"
    DANCE = "dance"
    AIR_PERFORMANCE = "air_performance"


@dataclass(frozen=True)
class Environment:
    """Environmental signals for one stretch of behavior cycles.

    Attributes:
        weather: Current weather condition
        time_coefficient: Multiplier from time of day
        battery_modifier: Multiplier from device power state
    """
    weather: WeatherCondition = WeatherCondition.SUNNY
    time_coefficient: float = 1.0
    battery_modifier: float = 1.0

    @property
    def weather_modifiers(self) -> Dict[PathType, int]:
        return weather_path_modifiers(self.weather)


@dataclass
class Behavior:
    """One selected behavior, ready to render.

    Moving behaviors carry a path; idle and special behaviors carry an
    action and a pose.
    """
    state: BehaviorMacroState
    path_type: Optional[PathType] = None
    points: List[Vec2] = field(default_factory=list)
    segment_durations: List[float] = field(default_factory=list)
    action: Optional[ActionType] = None
    pose: Optional[PoseRequest] = None
    duration: float = 0.0
    events: Tuple[AchievementEvent, ...] = ()

    @property
    def label(self) -> str:
        """Path or action name."""
        if self.path_type is not None:
            return self.path_type.value
        if self.action is not None:
            return self.action.value
        return "-"

    def frames(self) -> List[PoseRequest]:
        """Pose frames to play: alternating walk frames while moving."""
        if self.state == BehaviorMacroState.MOVING:
            return walking_frames(self.duration)
        return [self.pose] if self.pose is not None else []


def achievement_events(path_type: Optional[PathType], action: Optional[ActionType]) -> Tuple[AchievementEvent, ...]:
    """Classify a behavior for the achievement collaborator."""
    events = []
    if path_type in (PathType.BURST, PathType.SPRINT) or action == ActionType.HIT_WALL:
        events.append(AchievementEvent.WALL_HIT)
    if action == ActionType.DANCE:
        events.append(AchievementEvent.DANCE)
    if action in AIR_PERFORMANCES:
        events.append(AchievementEvent.AIR_PERFORMANCE)
    return tuple(events)


class BehaviorCycle:
    """Drives one character's behavior.

    Holds the only motion state the engine needs between cycles: the
    current position and heading.
    """

    def __init__(
        self,
        personality: PersonalityState,
        bounds: Bounds,
        environment: Optional[Environment] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.personality = personality
        self.environment = environment or Environment()
        self.rng = rng or make_rng()
        self.weights = WeightEngine(self.rng)
        self.paths = PathEngine(bounds, rng=self.rng)
        self.position = bounds.center
        self.heading = 0.0
        self._observers: List[Callable[[Behavior], None]] = []

    @property
    def bounds(self) -> Bounds:
        return self.paths.bounds

    def resize(self, bounds: Bounds) -> None:
        """Adopt new bounds; non-positive sizes are ignored."""
        if not (bounds.width > 0 and bounds.height > 0):
            logger.debug(f"Ignoring resize to {bounds}")
            return
        self.paths = PathEngine(bounds, rng=self.rng)

    def on_behavior(self, callback: Callable[[Behavior], None]) -> None:
        """Register an observer for every selected behavior."""
        self._observers.append(callback)

    def next_behavior(self) -> Behavior:
        """Select and expand the next behavior."""
        config = self.personality.config
        state = self.weights.select_macro_state(config)
        if state == BehaviorMacroState.MOVING:
            behavior = self._move()
        elif state == BehaviorMacroState.IDLE:
            behavior = self._idle()
        else:
            behavior = self._special()
        logger.debug(f"{behavior.state.value} {behavior.label} for {behavior.duration:.2f}s")
        for callback in self._observers:
            callback(behavior)
        return behavior

    # =========================================================================
    # State handlers
    # =========================================================================

    def _move(self) -> Behavior:
        env = self.environment
        path_type = self.weights.select_path(
            self.personality.config,
            env.weather_modifiers,
            env.time_coefficient,
            env.battery_modifier,
        )
        points = self.paths.generate_path(path_type, self.position, self.heading)
        route = points if points[0] == self.position else [self.position] + points
        if len(route) < 2:
            return self._idle()

        # Heading follows the last segment that actually moved
        for a, b in zip(route, route[1:]):
            if a != b:
                self.heading = a.heading_to(b)
        self.position = route[-1]

        durations = segment_durations(route, env.battery_modifier)
        return Behavior(
            state=BehaviorMacroState.MOVING,
            path_type=path_type,
            points=points,
            pose=PoseRequest(PoseKind.WALKING, phase=0.0),
            segment_durations=durations,
            duration=sum(durations),
            events=achievement_events(path_type, None),
        )

    def _idle(self) -> Behavior:
        candidates = list(self.personality.config.special_actions) + list(IDLE_EXTRA_ACTIONS)
        action = self.weights.select_action(candidates) or IDLE_FALLBACK
        return self._stationary(BehaviorMacroState.IDLE, action, IDLE_DURATION)

    def _special(self) -> Behavior:
        action = self.weights.select_action(self.personality.config.special_actions) or SPECIAL_FALLBACK
        return self._stationary(BehaviorMacroState.SPECIAL, action, SPECIAL_DURATION)

    def _stationary(
        self,
        state: BehaviorMacroState,
        action: ActionType,
        duration_range: Tuple[float, float],
    ) -> Behavior:
        return Behavior(
            state=state,
            action=action,
            pose=pose_for_action(action, self.rng),
            duration=self.rng.uniform(*duration_range),
            events=achievement_events(None, action),
        )
