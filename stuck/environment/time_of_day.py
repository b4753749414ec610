"""Time-of-day activity coefficient."""

from datetime import datetime
from typing import Optional

NIGHT_COEFFICIENT = 0.2       # [0, 6)
AFTERNOON_COEFFICIENT = 1.2   # [14, 18)
DAYTIME_COEFFICIENT = 1.0     # [8, 22)
DEFAULT_COEFFICIENT = 0.6     # dawn and late evening


def time_coefficient(hour: int) -> float:
    """Multiplicative weight coefficient for an hour of day (0-23).

    The afternoon window sits inside the daytime window and is checked
    first so it wins.
    """
    if 0 <= hour < 6:
        return NIGHT_COEFFICIENT
    if 14 <= hour < 18:
        return AFTERNOON_COEFFICIENT
    if 8 <= hour < 22:
        return DAYTIME_COEFFICIENT
    return DEFAULT_COEFFICIENT


def time_coefficient_at(moment: Optional[datetime] = None) -> float:
    """Coefficient for a wall-clock moment (default: now, local time)."""
    moment = moment or datetime.now()
    return time_coefficient(moment.hour)
