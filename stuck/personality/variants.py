"""
Personality Variants.

The 16 fixed categorical personalities (MBTI types) plus the ordinal and
tag enumerations their static configurations are built from.
"""

from enum import Enum


class PersonalityVariant(str, Enum):
    """
    The 16 personality variants.

    A character is assigned one variant on first launch and keeps it for its
    whole life. The four letters select the pole on each axis:
    I/E, S/N, T/F, J/P.
    """

    # Analysts
    INTJ = "INTJ"
    INTP = "INTP"
    ENTJ = "ENTJ"
    ENTP = "ENTP"

    # Diplomats
    INFJ = "INFJ"
    INFP = "INFP"
    ENFJ = "ENFJ"
    ENFP = "ENFP"

    # Sentinels
    ISTJ = "ISTJ"
    ISFJ = "ISFJ"
    ESTJ = "ESTJ"
    ESFJ = "ESFJ"

    # Explorers
    ISTP = "ISTP"
    ISFP = "ISFP"
    ESTP = "ESTP"
    ESFP = "ESFP"

    def has_pole(self, letter: str) -> bool:
        """Check whether the variant sits on the given letter's pole."""
        return letter.upper() in self.value


class IdleFrequency(str, Enum):
    """
    How often a variant stops to idle.

    Five ordinal tiers; each maps to the idle weight used when choosing a
    macro state.
    """

    VERY_LOW = "veryLow"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "veryHigh"

    @property
    def idle_weight(self) -> int:
        """Idle weight out of a 100 moving+idle budget."""
        return IDLE_WEIGHTS[self]


IDLE_WEIGHTS = {
    IdleFrequency.VERY_LOW: 5,
    IdleFrequency.LOW: 15,
    IdleFrequency.MEDIUM: 30,
    IdleFrequency.HIGH: 50,
    IdleFrequency.VERY_HIGH: 65,
}


class HapticStyle(str, Enum):
    """Haptic feedback tag handed to the haptic collaborator."""

    SHARP = "sharp"
    SOFT = "soft"
    HEAVY = "heavy"
    DOUBLE_TAP = "doubleTap"
    PULSE = "pulse"
    ETHEREAL = "ethereal"
    SUCCESS = "success"
    BURST = "burst"
    RIGID = "rigid"
    WARM = "warm"
    THUD = "thud"
    CYCLIC = "cyclic"
    IMPACTFUL = "impactful"
    FLUID = "fluid"
    VIOLENT = "violent"
    SPARKLING = "sparkling"


# Drift axes, labeled by the pole a positive value leans toward
DRIFT_AXES = ("I", "N", "F", "P")
