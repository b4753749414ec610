"""2D vector and rectangle types for the roaming area.

All positions in the engine use Vec2. Units are screen points.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec2:
    """Immutable 2D vector.

    Coordinate system:
        Origin (0, 0) = Bottom-left corner of the roaming area
        +X = Right
        +Y = Up

    Headings are radians from +X, counterclockwise.
    """
    x: float = 0.0
    y: float = 0.0

    # =========================================================================
    # Arithmetic Operations
    # =========================================================================

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    # =========================================================================
    # Vector Operations
    # =========================================================================

    def length(self) -> float:
        """Magnitude of vector."""
        return math.hypot(self.x, self.y)

    def distance_to(self, other: Vec2) -> float:
        """Euclidean distance to another point."""
        return (other - self).length()

    def angle(self) -> float:
        """Angle in radians from positive X axis (-π to π)."""
        return math.atan2(self.y, self.x)

    def heading_to(self, other: Vec2) -> float:
        """Heading in radians from this point toward another."""
        return (other - self).angle()

    def lerp(self, other: Vec2, t: float) -> Vec2:
        """Linear interpolation to another vector."""
        return Vec2(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t
        )

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    # =========================================================================
    # Utility
    # =========================================================================

    def __repr__(self) -> str:
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"

    @classmethod
    def zero(cls) -> Vec2:
        """Zero vector."""
        return cls(0, 0)

    @classmethod
    def from_angle(cls, radians: float, length: float = 1.0) -> Vec2:
        """Create vector from angle and length."""
        return cls(math.cos(radians) * length, math.sin(radians) * length)


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned rectangle the character roams in.

    Attributes:
        min_x, min_y: Bottom-left corner
        max_x, max_y: Top-right corner
    """
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @classmethod
    def from_size(cls, width: float, height: float) -> Bounds:
        """Rectangle anchored at the origin."""
        return cls(0.0, 0.0, width, height)

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def mid_x(self) -> float:
        return (self.min_x + self.max_x) / 2

    @property
    def mid_y(self) -> float:
        return (self.min_y + self.max_y) / 2

    @property
    def center(self) -> Vec2:
        return Vec2(self.mid_x, self.mid_y)

    def is_degenerate(self, margin: float = 0.0) -> bool:
        """True when the rectangle shrunk by margin has no positive area.

        NaN extents are treated as degenerate.
        """
        usable_w = self.width - 2 * margin
        usable_h = self.height - 2 * margin
        if not (math.isfinite(usable_w) and math.isfinite(usable_h)):
            return True
        return usable_w < 0 or usable_h < 0

    def inset(self, margin: float) -> Bounds:
        """Rectangle shrunk by margin on every side."""
        return Bounds(self.min_x + margin, self.min_y + margin, self.max_x - margin, self.max_y - margin)

    def clamp(self, point: Vec2, margin: float = 0.0) -> Vec2:
        """Clamp a point into the rectangle shrunk by margin."""
        return Vec2(
            min(max(point.x, self.min_x + margin), self.max_x - margin),
            min(max(point.y, self.min_y + margin), self.max_y - margin),
        )

    def contains(self, point: Vec2, margin: float = 0.0, tolerance: float = 1e-9) -> bool:
        """Check whether a point lies inside the rectangle shrunk by margin."""
        return (
            self.min_x + margin - tolerance <= point.x <= self.max_x - margin + tolerance
            and self.min_y + margin - tolerance <= point.y <= self.max_y - margin + tolerance
        )

    def __str__(self) -> str:
        return f"[{self.min_x:.0f},{self.min_y:.0f} → {self.max_x:.0f},{self.max_y:.0f}]"
