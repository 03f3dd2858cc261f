"""
Geometry primitives for TagCloud Layout.
Integer points, sizes and axis-aligned rectangles.
"""

from dataclasses import dataclass
from typing import Iterable, Sequence


@dataclass(frozen=True)
class Point:
    """Integer point on the layout plane."""
    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Requested extent of a rectangle."""
    width: int
    height: int

    def is_valid(self) -> bool:
        """Both sides must be strictly positive."""
        return self.width > 0 and self.height > 0

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def min_side(self) -> int:
        return min(self.width, self.height)


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its top-left corner and extent."""
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def centered_at(cls, center: Point, size: Size) -> "Rectangle":
        """
        Build a rectangle whose center is the given point.

        Args:
            center: Desired center
            size: Rectangle extent

        Returns:
            Rectangle with top-left at center minus the integer half-extents
        """
        return cls(center.x - size.width // 2, center.y - size.height // 2,
                   size.width, size.height)

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width // 2, self.y + self.height // 2)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    def intersects(self, other: "Rectangle") -> bool:
        """True when the open interiors overlap; touching edges do not count."""
        return (self.left < other.right and other.left < self.right and
                self.top < other.bottom and other.top < self.bottom)

    def contains_point(self, point: Point) -> bool:
        """Closed containment test, edges included."""
        return (self.left <= point.x <= self.right and
                self.top <= point.y <= self.bottom)

    def translated(self, dx: int, dy: int) -> "Rectangle":
        return Rectangle(self.x + dx, self.y + dy, self.width, self.height)


def bounding_rectangle(rectangles: Iterable[Rectangle]) -> Rectangle:
    """
    Smallest rectangle covering every rectangle in the sequence.

    Raises:
        ValueError: If the sequence is empty
    """
    rectangles = list(rectangles)
    if not rectangles:
        raise ValueError("Cannot compute bounding rectangle of an empty sequence")

    left = min(rect.left for rect in rectangles)
    top = min(rect.top for rect in rectangles)
    right = max(rect.right for rect in rectangles)
    bottom = max(rect.bottom for rect in rectangles)
    return Rectangle(left, top, right - left, bottom - top)


def cloud_density(rectangles: Sequence[Rectangle]) -> float:
    """Summed rectangle area divided by the bounding rectangle area."""
    bounds = bounding_rectangle(rectangles)
    total_area = sum(rect.area for rect in rectangles)
    return total_area / bounds.area
