"""Axis-aligned rectangle geometry."""

from __future__ import annotations

from dataclasses import dataclass

from geometry.vector import Vec2


@dataclass(slots=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner.

    The y axis points down, so ``bottom`` is ``y + height``.
    """

    x: float
    y: float
    width: float
    height: float

    def left(self) -> float:
        return self.x

    def right(self) -> float:
        return self.x + self.width

    def top(self) -> float:
        return self.y

    def bottom(self) -> float:
        return self.y + self.height

    def top_left(self) -> Vec2:
        return Vec2(self.left(), self.top())

    def top_right(self) -> Vec2:
        return Vec2(self.right(), self.top())

    def bottom_left(self) -> Vec2:
        return Vec2(self.left(), self.bottom())

    def bottom_right(self) -> Vec2:
        return Vec2(self.right(), self.bottom())

    def center(self) -> Vec2:
        return Vec2(self.x + self.width / 2, self.y + self.height / 2)

    def area(self) -> float:
        return self.width * self.height

    def contains(self, point: Vec2) -> bool:
        """Return whether a point is inside the rectangle, edges included."""
        return self.left() <= point.x <= self.right() and self.top() <= point.y <= self.bottom()

    def move_vec(self, offset: Vec2) -> None:
        """Translate the rectangle in place."""
        self.x += offset.x
        self.y += offset.y

    def intersect_area(self, other: Rect) -> float:
        """Return the overlapping area of two rectangles, 0 when disjoint."""
        overlap_w = min(self.right(), other.right()) - max(self.left(), other.left())
        overlap_h = min(self.bottom(), other.bottom()) - max(self.top(), other.top())
        if overlap_w < 0 or overlap_h < 0:
            return 0.0
        return overlap_w * overlap_h

    def intersect(self, other: Rect) -> Rect | None:
        """Return the intersection rectangle, or None when they do not touch."""
        if (
            self.right() < other.left()
            or self.left() > other.right()
            or self.bottom() < other.top()
            or self.top() > other.bottom()
        ):
            return None
        x = max(self.x, other.x)
        y = max(self.y, other.y)
        return Rect(
            x=x,
            y=y,
            width=min(self.right(), other.right()) - x,
            height=min(self.bottom(), other.bottom()) - y,
        )
