"""Circle value type."""

from __future__ import annotations

from dataclasses import dataclass

from geometry.vector import Vec2


@dataclass(slots=True)
class Circle:
    """Circle with center and radius.

    Not hashable: ``center`` is a mutable :class:`Vec2`.
    """

    center: Vec2
    radius: float
