"""Geometry package exception types."""

from __future__ import annotations


class GeometryError(Exception):
    """Base class for geometry package errors."""


class GridIndexError(GeometryError, IndexError):
    """Raised when a grid is indexed outside its bounds."""

    def __init__(self, x: object, y: object, width: int, height: int) -> None:
        super().__init__(f"grid index ({x!r}, {y!r}) out of bounds for {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class GridShapeError(GeometryError, ValueError):
    """Raised when grid dimensions are invalid for the requested operation."""


__all__ = ["GeometryError", "GridIndexError", "GridShapeError"]
