"""Weight Engine - weighted behavior selection.

P(path) = normalize(max(0, (base_weight + weather_modifier) * time_coefficient * battery_modifier))

Macro-state selection uses integer weights derived from the variant's idle
tier. All draws come from the injected random source, and candidates are
always walked in canonical order so a seeded source replays exactly.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple, TypeVar

from stuck.core.enums import BehaviorMacroState, PathType, canonical_path_order
from stuck.core.rng import RandomSource, make_rng
from stuck.personality.config import PersonalityConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

SPECIAL_WEIGHT = 10
MACRO_BUDGET = 100  # moving + idle

FALLBACK_PATH = PathType.STRAIGHT


def macro_state_weights(config: PersonalityConfig) -> Tuple[int, int, int]:
    """(moving, idle, special) integer weights for a configuration."""
    idle_weight = config.idle_weight
    return MACRO_BUDGET - idle_weight, idle_weight, SPECIAL_WEIGHT


def effective_path_weights(
    config: PersonalityConfig,
    weather_modifiers: Optional[Mapping[PathType, int]] = None,
    time_coefficient: float = 1.0,
    battery_modifier: float = 1.0,
) -> List[Tuple[PathType, float]]:
    """Effective weight of every eligible path, in canonical order.

    Only path types with a non-zero base weight are candidates; weather
    modifiers for other path types are ignored.
    """
    weather_modifiers = weather_modifiers or {}
    candidates = [p for p, base in config.path_weights.items() if base != 0]
    weights = []
    for path in canonical_path_order(candidates):
        modifier = weather_modifiers.get(path, 0)
        raw = (config.base_weight(path) + modifier) * time_coefficient * battery_modifier
        # NaN coefficients compare false and fall to zero
        weights.append((path, raw if raw > 0 else 0.0))
    return weights


class WeightEngine:
    """Selects macro states, paths and actions.

    Stateless apart from the random source; the personality configuration
    and environmental signals are passed into every call.
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng or make_rng()

    def select_macro_state(self, config: PersonalityConfig) -> BehaviorMacroState:
        """Draw moving / idle / special from the idle-tier weights."""
        moving, idle, special = macro_state_weights(config)
        r = self.rng.randrange(moving + idle + special)
        if r < moving:
            state = BehaviorMacroState.MOVING
        elif r < moving + idle:
            state = BehaviorMacroState.IDLE
        else:
            state = BehaviorMacroState.SPECIAL
        logger.debug(f"{config.variant.value} macro state: {state.value} (r={r})")
        return state

    def select_path(
        self,
        config: PersonalityConfig,
        weather_modifiers: Optional[Mapping[PathType, int]] = None,
        time_coefficient: float = 1.0,
        battery_modifier: float = 1.0,
    ) -> PathType:
        """
        Weighted draw of a path type.

        Args:
            config: Variant configuration providing base weights
            weather_modifiers: Additive per-path deltas (missing = 0)
            time_coefficient: Multiplier from time of day
            battery_modifier: Multiplier from device power state

        Returns:
            A path type with positive effective weight, or STRAIGHT when no
            candidate has positive weight.
        """
        weights = effective_path_weights(config, weather_modifiers, time_coefficient, battery_modifier)
        total = sum(w for _, w in weights)
        if not total > 0:
            logger.debug(f"{config.variant.value} has no positive path weight, using {FALLBACK_PATH.value}")
            return FALLBACK_PATH

        r = self.rng.random() * total
        accumulated = 0.0
        chosen = None
        for path, weight in weights:
            if weight <= 0:
                continue
            chosen = path
            accumulated += weight
            if r < accumulated:
                break
        logger.debug(f"{config.variant.value} path: {chosen.value} (r={r:.2f}/{total:.2f})")
        return chosen

    def select_action(self, candidates: Sequence[T]) -> Optional[T]:
        """Uniform pick among candidates; None when there are none."""
        if not candidates:
            return None
        return self.rng.choice(list(candidates))
