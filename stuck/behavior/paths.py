"""Path Engine - turns a path type into a sequence of target points.

Paths are decoupled from actions: the engine only knows geometry. Every
generated point except a leading ``start`` is clamped into the roaming
area shrunk by MARGIN, so renderers can animate point to point without
their own bounds checks.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, List, Optional

from stuck.core.enums import PathType
from stuck.core.rng import RandomSource, make_rng
from stuck.core.vec2 import Bounds, Vec2

logger = logging.getLogger(__name__)

MARGIN = 40.0
DEFAULT_SEGMENT_COUNT = 8

# Geometry constants (screen points unless noted)
STRAIGHT_FRACTION = 0.3      # of the shorter side
BURST_FRACTION = 0.4
SPRINT_FRACTION = 0.5
ARC_RADIUS = 40.0
ARC_STEP = math.pi / 6
DRIFT_STEP = 25.0
CHAOS_MARGIN = 60.0
PENDULUM_INSET = 50.0
DIAGONAL_LENGTH = 80.0
CURVE_STEP = 35.0
SPIRAL_STEP = 15.0
UPPER_HALF_DROP = 80.0


def interpolate(a: Vec2, b: Vec2, steps: int) -> List[Vec2]:
    """Points at t = i/steps for i in 1..steps (excludes a, includes b)."""
    if steps <= 0:
        return [b]
    return [a.lerp(b, i / steps) for i in range(1, steps + 1)]


class PathEngine:
    """Generates point sequences for each PathType inside fixed bounds.

    Attributes:
        bounds: Roaming area
        margin: Inset every generated point is clamped into
        rng: Random source for the randomized path types
    """

    def __init__(
        self,
        bounds: Bounds,
        rng: Optional[RandomSource] = None,
        margin: float = MARGIN,
    ):
        self.bounds = bounds
        self.margin = margin
        self.rng = rng or make_rng()
        self._generators: Dict[PathType, Callable[[Vec2, float], List[Vec2]]] = {
            PathType.STRAIGHT: self._straight,
            PathType.RIGHT_ANGLE: self._right_angle,
            PathType.ARC: self._arc,
            PathType.S_CURVE: self._s_curve,
            PathType.ALONG_EDGE: self._along_edge,
            PathType.RANDOM_DRIFT: self._random_drift,
            PathType.CENTER_BOUNCE: self._center_bounce,
            PathType.FULL_SCREEN_CHAOS: self._full_screen_chaos,
            PathType.FIXED_PENDULUM: self._fixed_pendulum,
            PathType.DIAGONAL: self._diagonal,
            PathType.CLOCKWISE_EDGE: self._clockwise_edge,
            PathType.BURST: self._burst,
            PathType.CURVE: self._curve,
            PathType.SPRINT: self._sprint,
            PathType.UPPER_HALF_JUMP: self._upper_half_jump,
            PathType.SPIRAL: self._spiral,
        }

    def generate_path(
        self,
        path_type: PathType,
        start: Vec2,
        direction: float = 0.0,
        segment_count: int = DEFAULT_SEGMENT_COUNT,
    ) -> List[Vec2]:
        """
        Generate the points for one move.

        Args:
            path_type: Which archetype to generate
            start: Current position (returned unmodified where a path is
                   anchored at it)
            direction: Current heading in radians
            segment_count: Hint only; each path type has a fixed count

        Returns:
            At least two points. Degenerate bounds give [start, start].
        """
        if not start.is_finite():
            start = self.bounds.center if self.bounds.center.is_finite() else Vec2.zero()
        if self.bounds.is_degenerate(self.margin):
            logger.debug(f"Degenerate bounds {self.bounds}, holding at {start}")
            return [start, start]
        if not math.isfinite(direction):
            direction = 0.0
        points = self._generators[path_type](start, direction)
        logger.debug(f"{path_type.value}: {len(points)} points from {start}")
        return points

    # =========================================================================
    # Helpers
    # =========================================================================

    def clamp(self, point: Vec2) -> Vec2:
        return self.bounds.clamp(point, self.margin)

    def _leg(self, a: Vec2, b: Vec2, steps: int) -> List[Vec2]:
        """Interpolated leg with every point clamped."""
        return [self.clamp(p) for p in interpolate(a, b, steps)]

    def _short_side(self) -> float:
        return min(self.bounds.width, self.bounds.height)

    def _heading_end(self, start: Vec2, direction: float, length: float) -> Vec2:
        return self.clamp(start + Vec2.from_angle(direction, length))

    def _inset_corners(self) -> List[Vec2]:
        """Top-left, top-right, bottom-right, bottom-left of the inset area."""
        area = self.bounds.inset(self.margin)
        return [
            Vec2(area.min_x, area.max_y),
            Vec2(area.max_x, area.max_y),
            Vec2(area.max_x, area.min_y),
            Vec2(area.min_x, area.min_y),
        ]

    # =========================================================================
    # Single-leg paths
    # =========================================================================

    def _straight(self, start: Vec2, direction: float) -> List[Vec2]:
        end = self._heading_end(start, direction, self._short_side() * STRAIGHT_FRACTION)
        return self._leg(start, end, 5)

    def _diagonal(self, start: Vec2, direction: float) -> List[Vec2]:
        end = self._heading_end(start, direction, DIAGONAL_LENGTH)
        return self._leg(start, end, 6)

    def _sprint(self, start: Vec2, direction: float) -> List[Vec2]:
        end = self._heading_end(start, direction, self._short_side() * SPRINT_FRACTION)
        return self._leg(start, end, 4)

    def _burst(self, start: Vec2, direction: float) -> List[Vec2]:
        end = self._heading_end(start, direction, self._short_side() * BURST_FRACTION)
        return [start, end]

    # =========================================================================
    # Shaped paths
    # =========================================================================

    def _right_angle(self, start: Vec2, direction: float) -> List[Vec2]:
        # Step toward the center on both axes, then turn vertically
        b = self.bounds
        corner = Vec2(
            start.x + (50 if start.x < b.mid_x else -50),
            start.y + (40 if start.y < b.mid_y else -40),
        )
        end = Vec2(
            self.clamp(corner).x,
            corner.y + (30 if corner.y < b.mid_y else -30),
        )
        return [start] + self._leg(self.clamp(corner), self.clamp(end), 3)

    def _arc(self, start: Vec2, direction: float) -> List[Vec2]:
        points = [start]
        angle = direction
        for _ in range(5):
            angle += ARC_STEP
            points.append(self.clamp(start + Vec2.from_angle(angle, ARC_RADIUS)))
        return points

    def _s_curve(self, start: Vec2, direction: float) -> List[Vec2]:
        c1 = self.clamp(start + Vec2(30, 20))
        c2 = self.clamp(start + Vec2(60, -10))
        end = self.clamp(start + Vec2(80, 15))
        return self._leg(start, c1, 2) + self._leg(c1, c2, 2) + self._leg(c2, end, 2)

    def _curve(self, start: Vec2, direction: float) -> List[Vec2]:
        # Widening zig-zag: alternate the heading while the reach grows
        points = [start]
        angle = direction
        for i in range(6):
            angle += (1 if i % 2 == 0 else -1) * math.pi / 8
            points.append(self.clamp(start + Vec2.from_angle(angle, CURVE_STEP * (i + 1))))
        return points

    def _spiral(self, start: Vec2, direction: float) -> List[Vec2]:
        points = [start]
        for i in range(1, 7):
            points.append(self.clamp(start + Vec2.from_angle(i * math.pi / 4, SPIRAL_STEP * i)))
        return points

    def _center_bounce(self, start: Vec2, direction: float) -> List[Vec2]:
        center = self.clamp(self.bounds.center)
        away = self.clamp(center + (center - start) * 0.5)
        return [start] + self._leg(start, center, 3) + self._leg(center, away, 2)

    # =========================================================================
    # Edge-following paths
    # =========================================================================

    def _along_edge(self, start: Vec2, direction: float) -> List[Vec2]:
        corners = self._inset_corners()
        nearest = min(range(len(corners)), key=lambda i: start.distance_to(corners[i]))
        return [start] + [corners[(nearest + i) % len(corners)] for i in range(4)]

    def _clockwise_edge(self, start: Vec2, direction: float) -> List[Vec2]:
        top_left, top_right, bottom_right, bottom_left = self._inset_corners()
        return [start, top_right, top_left, bottom_left, bottom_right, top_right]

    def _fixed_pendulum(self, start: Vec2, direction: float) -> List[Vec2]:
        b = self.bounds
        left = self.clamp(Vec2(b.min_x + PENDULUM_INSET, start.y))
        right = self.clamp(Vec2(b.max_x - PENDULUM_INSET, start.y))
        return [start, left, right, left]

    def _upper_half_jump(self, start: Vec2, direction: float) -> List[Vec2]:
        b = self.bounds
        top = b.max_y - UPPER_HALF_DROP
        offsets = (-40, 40, -30, 30)
        return [start] + [self.clamp(Vec2(b.mid_x + dx, top)) for dx in offsets]

    # =========================================================================
    # Randomized paths
    # =========================================================================

    def _random_drift(self, start: Vec2, direction: float) -> List[Vec2]:
        points = [start]
        current = self.clamp(start)
        for _ in range(4):
            current = self.clamp(Vec2(
                current.x + self.rng.uniform(-DRIFT_STEP, DRIFT_STEP),
                current.y + self.rng.uniform(-DRIFT_STEP, DRIFT_STEP),
            ))
            points.append(current)
        return points

    def _full_screen_chaos(self, start: Vec2, direction: float) -> List[Vec2]:
        b = self.bounds
        points = [start]
        for _ in range(3):
            points.append(self.clamp(Vec2(
                self.rng.uniform(b.min_x + CHAOS_MARGIN, b.max_x - CHAOS_MARGIN),
                self.rng.uniform(b.min_y + CHAOS_MARGIN, b.max_y - CHAOS_MARGIN),
            )))
        return points


def generate_path(
    path_type: PathType,
    start: Vec2,
    direction: float,
    bounds: Bounds,
    segment_count: int = DEFAULT_SEGMENT_COUNT,
    rng: Optional[RandomSource] = None,
) -> List[Vec2]:
    """One-shot helper around PathEngine.generate_path."""
    return PathEngine(bounds, rng=rng).generate_path(path_type, start, direction, segment_count)
