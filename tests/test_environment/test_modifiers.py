"""Tests for weather modifiers, the time coefficient and the power modifier."""

from datetime import datetime

import pytest

from stuck.core import PathType, WeatherCondition
from stuck.environment import (
    WEATHER_PATH_MODIFIERS,
    battery_speed_modifier,
    is_low_power,
    time_coefficient,
    time_coefficient_at,
    weather_path_modifiers,
)


class TestWeatherPathModifiers:
    def test_every_condition_defined(self):
        assert set(WEATHER_PATH_MODIFIERS) == set(WeatherCondition)

    def test_table(self):
        assert weather_path_modifiers(WeatherCondition.SUNNY) == {PathType.SPRINT: 20, PathType.BURST: 15}
        assert weather_path_modifiers(WeatherCondition.RAINY) == {
            PathType.RANDOM_DRIFT: -30, PathType.ALONG_EDGE: 10,
        }
        assert weather_path_modifiers(WeatherCondition.SNOWY) == {PathType.STRAIGHT: -20, PathType.ARC: 15}
        assert weather_path_modifiers(WeatherCondition.STORMY) == {PathType.SPRINT: 40, PathType.BURST: 30}
        assert weather_path_modifiers(WeatherCondition.WINDY) == {PathType.RANDOM_DRIFT: 25}
        assert weather_path_modifiers(WeatherCondition.CLOUDY) == {PathType.RANDOM_DRIFT: 10}

    def test_extreme_temperatures_have_no_effect(self):
        assert weather_path_modifiers(WeatherCondition.EXTREME_COLD) == {}
        assert weather_path_modifiers(WeatherCondition.EXTREME_HOT) == {}

    def test_result_is_a_copy(self):
        mods = weather_path_modifiers(WeatherCondition.SUNNY)
        mods[PathType.SPRINT] = 999
        assert weather_path_modifiers(WeatherCondition.SUNNY)[PathType.SPRINT] == 20


class TestTimeCoefficient:
    def test_reference_hours(self):
        assert time_coefficient(3) == 0.2
        assert time_coefficient(15) == 1.2
        assert time_coefficient(9) == 1.0
        assert time_coefficient(23) == 0.6

    @pytest.mark.parametrize("hour,expected", [
        (0, 0.2), (5, 0.2),
        (6, 0.6), (7, 0.6),
        (8, 1.0), (13, 1.0),
        (14, 1.2), (17, 1.2),
        (18, 1.0), (21, 1.0),
        (22, 0.6),
    ])
    def test_window_edges(self, hour, expected):
        assert time_coefficient(hour) == expected

    def test_afternoon_wins_over_daytime(self):
        assert all(time_coefficient(h) == 1.2 for h in range(14, 18))

    def test_at_datetime(self):
        assert time_coefficient_at(datetime(2026, 5, 1, 15, 30)) == 1.2


class TestBatteryModifier:
    def test_charging_wins(self):
        assert battery_speed_modifier(0.05, charging=True) == 1.1

    def test_low_power(self):
        assert battery_speed_modifier(0.2) == 0.4
        assert battery_speed_modifier(0.1) == 0.4

    def test_normal(self):
        assert battery_speed_modifier(0.21) == 1.0

    def test_unknown_state_is_not_low_power(self):
        assert not is_low_power(0.0, state_known=False)
        assert battery_speed_modifier(0.0, state_known=False) == 1.0
