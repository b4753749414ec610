"""
Personality State.

The caller-owned handle for "who this character is": the assigned variant
and its accumulated drift. Engines receive it explicitly instead of reading
a process-wide current personality.
"""

from dataclasses import dataclass, field

from stuck.personality.config import PersonalityConfig, config_for
from stuck.personality.drift import DriftVector, parse_drift
from stuck.personality.variants import DRIFT_AXES, PersonalityVariant


@dataclass
class PersonalityState:
    """
    A character's personality.

    The variant is fixed for the character's life. Drift shifts how strongly
    each axis is expressed but its bound (±0.3) is smaller than the ±1 pole,
    so the sign of every axis, and therefore the variant, never changes.
    """

    variant: PersonalityVariant
    drift: DriftVector = field(default_factory=DriftVector.zero)

    @property
    def config(self) -> PersonalityConfig:
        """Static behavior configuration for this variant."""
        return config_for(self.variant)

    def axis_pole(self, axis: str) -> float:
        """+1.0 if the variant sits on the labeled pole of the axis, else -1.0."""
        axis = axis.upper()
        if axis not in DRIFT_AXES:
            raise ValueError(f"Unknown personality axis: {axis}")
        return 1.0 if self.variant.has_pole(axis) else -1.0

    def axis_intensity(self, axis: str) -> float:
        """
        Signed intensity of an axis, pole plus drift.

        Returns:
            Value in [-1.3, -0.7] or [0.7, 1.3]; positive leans toward the
            axis label (I, N, F or P).
        """
        return self.axis_pole(axis) + self.drift.get(axis)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "variant": self.variant.value,
            "drift": self.drift.to_list(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PersonalityState":
        """Create from dictionary. Malformed drift reads as the zero vector."""
        variant = PersonalityVariant(data["variant"])
        return cls(variant=variant, drift=parse_drift(data.get("drift")))

    def __str__(self) -> str:
        return f"{self.variant.value} ({self.drift})"
