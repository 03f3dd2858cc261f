"""
Circular cloud layout engine for TagCloud Layout.
Places rectangles one at a time into a dense cluster around a center point.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .geometry import Point, Rectangle, Size
from .spiral import (ArchimedeanSpiral, DEFAULT_EXPANSION_RATE,
                     DEFAULT_MAX_ANGLE_STEP, DEFAULT_MIN_ANGLE_STEP)


SizeLike = Union[Size, Tuple[int, int]]


class LayoutError(Exception):
    """Base class for layout failures."""


class InvalidSize(LayoutError, ValueError):
    """Requested rectangle size has a non-positive side."""

    def __init__(self, size):
        self.size = size
        super().__init__(f"Rectangle size must be positive, got {size.width}x{size.height}")


class PlacementExhausted(LayoutError, RuntimeError):
    """Spiral search gave up before finding a free position."""

    def __init__(self, size: Size, attempts: int):
        self.size = size
        self.attempts = attempts
        super().__init__(
            f"No free position for {size.width}x{size.height} after {attempts:,} attempts")


@dataclass
class LayoutConfig:
    """Tunables of the spiral search."""
    expansion_rate: float = DEFAULT_EXPANSION_RATE  # Spiral radius per radian
    max_angle_step: float = DEFAULT_MAX_ANGLE_STEP  # Radians
    min_angle_step: float = DEFAULT_MIN_ANGLE_STEP  # Radians
    max_search_attempts: Optional[int] = 2_000_000  # None searches forever

    def __post_init__(self):
        """Validate tunables."""
        if self.expansion_rate < 0:
            raise ValueError(f"expansion_rate must be >= 0, got {self.expansion_rate}")
        if self.min_angle_step <= 0 or self.max_angle_step <= 0:
            raise ValueError("Angle steps must be positive")
        if self.min_angle_step > self.max_angle_step:
            raise ValueError(
                f"min_angle_step ({self.min_angle_step}) exceeds max_angle_step ({self.max_angle_step})")
        if self.max_search_attempts is not None and self.max_search_attempts <= 0:
            raise ValueError(f"max_search_attempts must be positive, got {self.max_search_attempts}")


def _as_size(size: SizeLike) -> Size:
    if isinstance(size, Size):
        return size
    width, height = size
    return Size(width, height)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class CircularCloudLayouter:
    """Greedy spiral layout engine for a single tag cloud."""

    def __init__(self, center: Point = Point(0, 0), config: Optional[LayoutConfig] = None):
        """
        Initialize a layout session bound to one center point.

        Args:
            center: Anchor every rectangle grows around
            config: Spiral tunables, defaults to LayoutConfig()
        """
        self._center = center
        self._config = config or LayoutConfig()
        self._spiral = ArchimedeanSpiral(
            center,
            expansion_rate=self._config.expansion_rate,
            min_angle_step=self._config.min_angle_step,
            max_angle_step=self._config.max_angle_step,
        )
        self._rectangles: List[Rectangle] = []
        self.logger = logging.getLogger(__name__)
        self.logger.debug(f"Layout session created at ({center.x}, {center.y})")

    @property
    def center(self) -> Point:
        return self._center

    @property
    def config(self) -> LayoutConfig:
        return self._config

    @property
    def rectangles(self) -> Tuple[Rectangle, ...]:
        """Snapshot of placed rectangles in placement order."""
        return tuple(self._rectangles)

    def __len__(self) -> int:
        return len(self._rectangles)

    def put_next_rectangle(self, size: SizeLike) -> Rectangle:
        """
        Place the next rectangle of the cloud.

        Args:
            size: Rectangle size, a Size or a (width, height) tuple

        Returns:
            Placed rectangle, which does not intersect any earlier one

        Raises:
            InvalidSize: If width or height is not positive
            PlacementExhausted: If the search exceeds max_search_attempts
        """
        size = _as_size(size)
        if not size.is_valid():
            raise InvalidSize(size)

        if not self._rectangles:
            rectangle = Rectangle.centered_at(self._center, size)
        else:
            candidate = self._find_free_candidate(size)
            rectangle = self._move_to_center(candidate)

        self._rectangles.append(rectangle)
        self.logger.debug(
            f"Placed #{len(self._rectangles)} {size.width}x{size.height} at ({rectangle.x}, {rectangle.y})")
        return rectangle

    def _intersects_placed(self, rectangle: Rectangle) -> bool:
        return any(rectangle.intersects(placed) for placed in self._rectangles)

    def _find_free_candidate(self, size: Size) -> Rectangle:
        """Walk the spiral until a candidate clears every placed rectangle."""
        limit = self._config.max_search_attempts
        attempts = 0

        while limit is None or attempts < limit:
            attempts += 1
            point = self._spiral.next_point(size)
            candidate = Rectangle.centered_at(point, size)
            if not self._intersects_placed(candidate):
                return candidate

        self.logger.error(
            f"Search exhausted after {attempts:,} attempts at spiral angle {self._spiral.angle:.2f}")
        raise PlacementExhausted(size, attempts)

    def _move_to_center(self, candidate: Rectangle) -> Rectangle:
        """Step the candidate one unit per axis toward the center until it collides."""
        current = candidate

        while True:
            position = current.center
            step_x = _sign(self._center.x - position.x)
            step_y = _sign(self._center.y - position.y)
            if step_x == 0 and step_y == 0:
                break

            moved = current.translated(step_x, step_y)
            if self._intersects_placed(moved):
                break
            current = moved

        return current


def layout_rectangles(sizes: Iterable[SizeLike], center: Point = Point(0, 0),
                      config: Optional[LayoutConfig] = None) -> List[Rectangle]:
    """
    Lay out a whole sequence of sizes in a fresh session.

    Args:
        sizes: Rectangle sizes in placement order
        center: Cloud center
        config: Spiral tunables

    Returns:
        Placed rectangles in the same order as sizes
    """
    layouter = CircularCloudLayouter(center, config)
    return [layouter.put_next_rectangle(size) for size in sizes]
