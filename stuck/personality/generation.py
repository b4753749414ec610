"""
Personality Generation.

New characters get a variant drawn uniformly from the 16 types.
"""

from typing import Optional

from stuck.core.rng import RandomSource, make_rng
from stuck.personality.state import PersonalityState
from stuck.personality.variants import PersonalityVariant

ALL_VARIANTS = list(PersonalityVariant)


def random_variant(rng: Optional[RandomSource] = None) -> PersonalityVariant:
    """Pick a variant uniformly at random."""
    rng = rng or make_rng()
    return rng.choice(ALL_VARIANTS)


def parse_variant(value: Optional[str]) -> Optional[PersonalityVariant]:
    """Parse a stored identifier; unknown or empty values give None."""
    if not value:
        return None
    try:
        return PersonalityVariant(str(value).upper())
    except ValueError:
        return None


def generate_personality(rng: Optional[RandomSource] = None) -> PersonalityState:
    """Create a fresh personality with zero drift."""
    return PersonalityState(variant=random_variant(rng))
