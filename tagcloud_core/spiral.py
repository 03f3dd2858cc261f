"""
Archimedean spiral point generator for TagCloud Layout.
Produces candidate centers moving outward from the cloud center.
"""

import math
from typing import Iterator

from .geometry import Point, Size


DEFAULT_EXPANSION_RATE = 1.0
DEFAULT_MAX_ANGLE_STEP = 0.1
DEFAULT_MIN_ANGLE_STEP = 0.005


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class ArchimedeanSpiral:
    """
    Stateful spiral r = expansion_rate * angle around a fixed center.

    The angle only ever grows. Each call advances it by a step chosen so the
    distance between neighbouring points stays near half the smallest side
    of the rectangle being placed, clamped to [min_angle_step, max_angle_step].
    """

    def __init__(self, center: Point,
                 expansion_rate: float = DEFAULT_EXPANSION_RATE,
                 min_angle_step: float = DEFAULT_MIN_ANGLE_STEP,
                 max_angle_step: float = DEFAULT_MAX_ANGLE_STEP):
        self.center = center
        self.expansion_rate = expansion_rate
        self.min_angle_step = min_angle_step
        self.max_angle_step = max_angle_step
        self._angle = 0.0

    @property
    def angle(self) -> float:
        """Angle of the most recently produced point."""
        return self._angle

    @property
    def radius(self) -> float:
        return self.expansion_rate * self._angle

    def angle_step(self, size: Size) -> float:
        """
        Angular increment used for the next point of a rectangle of this size.

        Args:
            size: Size of the rectangle currently being placed

        Returns:
            Step in radians within [min_angle_step, max_angle_step]
        """
        target_gap = size.min_side / 2
        step = target_gap / max(self.radius, 1.0)
        return min(self.max_angle_step, max(self.min_angle_step, step))

    def next_point(self, size: Size) -> Point:
        """Advance the angle and return the next point on the spiral."""
        self._angle += self.angle_step(size)
        radius = self.radius

        x = self.center.x + _round_half_up(radius * math.cos(self._angle))
        y = self.center.y + _round_half_up(radius * math.sin(self._angle))
        return Point(x, y)

    def points(self, size: Size) -> Iterator[Point]:
        """Infinite stream of points for a fixed rectangle size."""
        while True:
            yield self.next_point(size)
