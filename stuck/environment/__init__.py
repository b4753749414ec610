"""Environmental signals: weather, time of day and device power."""

from stuck.environment.power import (
    CHARGING_MODIFIER,
    LOW_POWER_MODIFIER,
    NORMAL_MODIFIER,
    battery_speed_modifier,
    is_low_power,
)
from stuck.environment.time_of_day import time_coefficient, time_coefficient_at
from stuck.environment.weather import (
    FALLBACK_WEATHER,
    WEATHER_PATH_MODIFIERS,
    WeatherCache,
    WeatherReport,
    fallback_weather,
    weather_path_modifiers,
)

__all__ = [
    "CHARGING_MODIFIER",
    "FALLBACK_WEATHER",
    "LOW_POWER_MODIFIER",
    "NORMAL_MODIFIER",
    "WEATHER_PATH_MODIFIERS",
    "WeatherCache",
    "WeatherReport",
    "battery_speed_modifier",
    "fallback_weather",
    "is_low_power",
    "time_coefficient",
    "time_coefficient_at",
    "weather_path_modifiers",
]
