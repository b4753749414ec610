"""Tests for personality variants and their static configurations."""

import pytest

from stuck.core import ActionType, PathType
from stuck.personality import (
    CONFIG_DEFINITIONS,
    IDLE_WEIGHTS,
    HapticStyle,
    IdleFrequency,
    PersonalityVariant,
    config_for,
)


class TestVariants:
    def test_sixteen_variants(self):
        assert len(list(PersonalityVariant)) == 16
        assert len({v.value for v in PersonalityVariant}) == 16

    def test_has_pole(self):
        assert PersonalityVariant.INFP.has_pole("I")
        assert PersonalityVariant.INFP.has_pole("p")
        assert not PersonalityVariant.ESTJ.has_pole("N")

    def test_idle_weight_table(self):
        assert [f.idle_weight for f in IdleFrequency] == [5, 15, 30, 50, 65]
        assert set(IDLE_WEIGHTS) == set(IdleFrequency)


class TestConfigDefinitions:
    def test_every_variant_has_config(self):
        assert set(CONFIG_DEFINITIONS) == set(PersonalityVariant)

    @pytest.mark.parametrize("variant", list(PersonalityVariant))
    def test_config_is_well_formed(self, variant):
        """Idle tier is one of the five values and weights are non-negative ints."""
        config = config_for(variant)
        assert config.variant == variant
        assert config.idle_weight in {5, 15, 30, 50, 65}
        assert config.path_weights, f"{variant.value} has no paths"
        for path, weight in config.path_weights.items():
            assert isinstance(path, PathType)
            assert isinstance(weight, int)
            assert weight >= 0
        assert all(isinstance(a, ActionType) for a in config.special_actions)
        assert isinstance(config.haptic_style, HapticStyle)

    def test_haptic_styles_are_unique(self):
        styles = [c.haptic_style for c in CONFIG_DEFINITIONS.values()]
        assert len(set(styles)) == 16

    def test_known_entries(self):
        intj = config_for(PersonalityVariant.INTJ)
        assert dict(intj.path_weights) == {PathType.STRAIGHT: 70, PathType.RIGHT_ANGLE: 20}
        assert intj.idle_frequency == IdleFrequency.MEDIUM
        assert intj.special_actions == (ActionType.OBSERVE,)

        enfp = config_for(PersonalityVariant.ENFP)
        assert enfp.idle_frequency == IdleFrequency.VERY_LOW
        assert enfp.base_weight(PathType.FULL_SCREEN_CHAOS) == 70
        assert enfp.base_weight(PathType.STRAIGHT) == 0

    def test_istp_has_no_special_actions(self):
        assert config_for(PersonalityVariant.ISTP).special_actions == ()

    def test_config_is_immutable(self):
        config = config_for(PersonalityVariant.ISTJ)
        with pytest.raises(TypeError):
            config.path_weights[PathType.STRAIGHT] = 10
        with pytest.raises(AttributeError):
            config.idle_frequency = IdleFrequency.LOW
