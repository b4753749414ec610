"""Tests for the Weight Engine."""

import random
from collections import Counter

import pytest

from stuck.behavior import FALLBACK_PATH, WeightEngine, effective_path_weights, macro_state_weights
from stuck.core import ActionType, BehaviorMacroState, PathType, WeatherCondition
from stuck.environment import weather_path_modifiers
from stuck.personality import CONFIG_DEFINITIONS, PersonalityConfig, PersonalityVariant, config_for


class TestMacroState:
    def test_weights(self):
        assert macro_state_weights(config_for(PersonalityVariant.INFP)) == (35, 65, 10)
        assert macro_state_weights(config_for(PersonalityVariant.ENFP)) == (95, 5, 10)

    def test_very_high_idle_proportion(self):
        """Idle tier veryHigh -> idle about 65/110 of the time."""
        engine = WeightEngine(random.Random(42))
        config = config_for(PersonalityVariant.INFP)
        n = 100_000
        counts = Counter(engine.select_macro_state(config) for _ in range(n))
        assert counts[BehaviorMacroState.IDLE] / n == pytest.approx(65 / 110, abs=0.01)
        assert counts[BehaviorMacroState.SPECIAL] / n == pytest.approx(10 / 110, abs=0.01)

    def test_very_low_moving_proportion(self):
        """Idle tier veryLow -> moving about 95/110 of the time."""
        engine = WeightEngine(random.Random(43))
        config = config_for(PersonalityVariant.ESTP)
        n = 100_000
        counts = Counter(engine.select_macro_state(config) for _ in range(n))
        assert counts[BehaviorMacroState.MOVING] / n == pytest.approx(95 / 110, abs=0.01)

    def test_bucket_boundaries(self):
        class Fixed:
            def __init__(self, value):
                self.value = value

            def randrange(self, stop):
                return self.value

        config = config_for(PersonalityVariant.INTJ)  # medium: 70 / 30 / 10
        assert WeightEngine(Fixed(69)).select_macro_state(config) == BehaviorMacroState.MOVING
        assert WeightEngine(Fixed(70)).select_macro_state(config) == BehaviorMacroState.IDLE
        assert WeightEngine(Fixed(99)).select_macro_state(config) == BehaviorMacroState.IDLE
        assert WeightEngine(Fixed(100)).select_macro_state(config) == BehaviorMacroState.SPECIAL


class TestEffectiveWeights:
    def test_formula(self):
        config = config_for(PersonalityVariant.ENTJ)  # sprint 50, burst 40
        mods = weather_path_modifiers(WeatherCondition.SUNNY)  # sprint +20, burst +15
        weights = dict(effective_path_weights(config, mods, time_coefficient=1.2, battery_modifier=0.4))
        assert weights[PathType.SPRINT] == pytest.approx(70 * 1.2 * 0.4)
        assert weights[PathType.BURST] == pytest.approx(55 * 1.2 * 0.4)

    def test_canonical_order(self):
        config = config_for(PersonalityVariant.ISFP)  # curve, sCurve
        paths = [p for p, _ in effective_path_weights(config)]
        assert paths == [PathType.CURVE, PathType.S_CURVE]

    def test_negative_weights_floor_at_zero(self):
        config = config_for(PersonalityVariant.INTP)  # randomDrift 30
        weights = effective_path_weights(config, weather_path_modifiers(WeatherCondition.RAINY))
        assert weights == [(PathType.RANDOM_DRIFT, 0.0)]

    def test_modifiers_for_ineligible_paths_ignored(self):
        config = config_for(PersonalityVariant.INFJ)  # alongEdge only
        weights = effective_path_weights(config, {PathType.SPRINT: 100})
        assert [p for p, _ in weights] == [PathType.ALONG_EDGE]


class TestSelectPath:
    def test_only_eligible_paths(self, weight_engine):
        for variant, config in CONFIG_DEFINITIONS.items():
            for _ in range(50):
                assert weight_engine.select_path(config) in config.path_weights

    def test_zero_total_falls_back_to_straight(self, weight_engine):
        config = config_for(PersonalityVariant.INTP)
        mods = weather_path_modifiers(WeatherCondition.RAINY)
        assert weight_engine.select_path(config, mods) == FALLBACK_PATH == PathType.STRAIGHT

    def test_zero_coefficient_falls_back(self, weight_engine):
        config = config_for(PersonalityVariant.ESFP)
        assert weight_engine.select_path(config, time_coefficient=0.0) == PathType.STRAIGHT

    def test_empty_config_falls_back(self, weight_engine):
        config = PersonalityConfig(variant=PersonalityVariant.INTJ, path_weights={})
        assert weight_engine.select_path(config) == PathType.STRAIGHT

    def test_never_returns_zero_weight_path(self):
        """A zeroed candidate is never drawn while another is positive."""
        config = PersonalityConfig(
            variant=PersonalityVariant.INTJ,
            path_weights={PathType.ARC: 10, PathType.STRAIGHT: 10},
        )
        engine = WeightEngine(random.Random(5))
        mods = {PathType.ARC: -10}
        for _ in range(2000):
            assert engine.select_path(config, mods) == PathType.STRAIGHT

    def test_all_environment_combinations(self):
        engine = WeightEngine(random.Random(9))
        for config in CONFIG_DEFINITIONS.values():
            for condition in WeatherCondition:
                mods = weather_path_modifiers(condition)
                for coefficient in (0.2, 0.6, 1.0, 1.2):
                    for battery in (0.4, 1.0, 1.1):
                        weights = dict(effective_path_weights(config, mods, coefficient, battery))
                        path = engine.select_path(config, mods, coefficient, battery)
                        if any(w > 0 for w in weights.values()):
                            assert weights[path] > 0
                        else:
                            assert path == PathType.STRAIGHT

    def test_proportions_follow_weights(self):
        engine = WeightEngine(random.Random(17))
        config = config_for(PersonalityVariant.INTJ)  # straight 70, rightAngle 20
        n = 50_000
        counts = Counter(engine.select_path(config) for _ in range(n))
        assert counts[PathType.STRAIGHT] / n == pytest.approx(70 / 90, abs=0.01)

    def test_seeded_draws_replay(self):
        config = config_for(PersonalityVariant.ESTJ)
        a = WeightEngine(random.Random(1))
        b = WeightEngine(random.Random(1))
        assert [a.select_path(config) for _ in range(100)] == [b.select_path(config) for _ in range(100)]

    def test_walk_uses_canonical_order(self):
        class Fixed:
            def __init__(self, value):
                self.value = value

            def random(self):
                return self.value

        # arc (40) sorts before straight (40): low draws land on arc
        config = PersonalityConfig(
            variant=PersonalityVariant.INTJ,
            path_weights={PathType.STRAIGHT: 40, PathType.ARC: 40},
        )
        assert WeightEngine(Fixed(0.1)).select_path(config) == PathType.ARC
        assert WeightEngine(Fixed(0.9)).select_path(config) == PathType.STRAIGHT


class TestSelectAction:
    def test_empty_returns_none(self, weight_engine):
        assert weight_engine.select_action([]) is None

    def test_uniform_over_candidates(self):
        engine = WeightEngine(random.Random(3))
        candidates = [ActionType.SIT, ActionType.STARE, ActionType.CURL_UP]
        n = 30_000
        counts = Counter(engine.select_action(candidates) for _ in range(n))
        assert set(counts) == set(candidates)
        for action in candidates:
            assert counts[action] / n == pytest.approx(1 / 3, abs=0.02)
