"""Battery-derived speed modifier.

The engine only consumes the scalar; this module holds the policy that
turns device power state into it.
"""

LOW_POWER_LEVEL = 0.2

CHARGING_MODIFIER = 1.1
LOW_POWER_MODIFIER = 0.4
NORMAL_MODIFIER = 1.0


def is_low_power(level: float, state_known: bool = True) -> bool:
    """Battery at or below 20%. Unknown battery state is never low power."""
    if not state_known:
        return False
    return level <= LOW_POWER_LEVEL


def battery_speed_modifier(level: float, charging: bool = False, state_known: bool = True) -> float:
    """
    Speed/weight modifier from power state.

    Args:
        level: Battery level 0.0-1.0
        charging: Charging or full
        state_known: False when the platform cannot report battery state

    Returns:
        1.1 while charging, 0.4 in low power, 1.0 otherwise
    """
    if charging:
        return CHARGING_MODIFIER
    if is_low_power(level, state_known):
        return LOW_POWER_MODIFIER
    return NORMAL_MODIFIER
