"""Two-component vector math."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np

from geometry.config import get_config
from geometry.interpolate import Interpolator, linear


def _divide(value: float, divisor: float) -> float:
    # IEEE division: zero divisors yield inf/nan instead of raising.
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(value) / np.float64(divisor))


@dataclass(slots=True)
class Vec2:
    """A 2-dimensional vector."""

    x: float
    y: float

    @classmethod
    def new(cls, x: float, y: float) -> Vec2:
        return cls(x, y)

    @classmethod
    def zero(cls) -> Vec2:
        """Create a new vector of length 0."""
        return cls(0, 0)

    @classmethod
    def unit_x(cls) -> Vec2:
        """Create the unit vector in the x direction."""
        return cls(1, 0)

    @classmethod
    def unit_y(cls) -> Vec2:
        """Create the unit vector in the y direction."""
        return cls(0, 1)

    @classmethod
    def from_polar(cls, angle: float, magnitude: float) -> Vec2:
        """Create a new vector from polar coordinates."""
        return cls(magnitude * math.cos(angle), magnitude * math.sin(angle))

    @classmethod
    def from_tuple(cls, pair: tuple[float, float]) -> Vec2:
        x, y = pair
        return cls(x, y)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def dot(self, other: Vec2) -> float:
        """Calculate the dot product between this and another vector."""
        return (self.x * other.x) + (self.y * other.y)

    def length_sqr(self) -> float:
        """Calculate the length squared of the vector, avoiding a square root."""
        return self.dot(self)

    def length(self) -> float:
        """Calculate the length of the vector."""
        return math.sqrt(self.length_sqr())

    def normalize(self) -> None:
        """Normalise the vector in place.

        A zero-length vector becomes ``[nan, nan]``; callers guard against it
        where finiteness matters.
        """
        length = self.length()
        self.x = _divide(self.x, length)
        self.y = _divide(self.y, length)

    def scale(self, scalar: float) -> Vec2:
        """Return the vector scaled by a scalar value."""
        return Vec2(self.x * scalar, self.y * scalar)

    def unit(self) -> Vec2:
        """Return a unit vector in the direction of this vector."""
        length = self.length()
        return Vec2(_divide(self.x, length), _divide(self.y, length))

    def rotate(self, angle: float) -> None:
        """Rotate the vector in place by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        old_x, old_y = self.x, self.y
        self.x = old_x * cos_a - old_y * sin_a
        self.y = old_x * sin_a + old_y * cos_a

    def angle(self) -> float:
        """Return the angle of the vector measured from the y axis towards x."""
        return math.atan2(self.x, self.y)

    def lerp(self, other: Vec2, t: float, interpolate: Interpolator = linear) -> Vec2:
        return lerp(self, other, t, interpolate)

    def is_close(self, other: Vec2, abs_tol: float | None = None) -> bool:
        """Return whether both components are within ``abs_tol`` of ``other``."""
        tolerance = get_config().abs_tolerance if abs_tol is None else abs_tol
        return math.isclose(self.x, other.x, abs_tol=tolerance) and math.isclose(
            self.y, other.y, abs_tol=tolerance
        )

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"


def lerp(start: Vec2, end: Vec2, t: float, interpolate: Interpolator = linear) -> Vec2:
    """Interpolate each component of two vectors with ``interpolate``."""
    return Vec2(interpolate(start.x, end.x, t), interpolate(start.y, end.y, t))


__all__ = ["Vec2", "lerp"]
