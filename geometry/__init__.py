"""Planar geometry primitives and dense 2D grids."""

from geometry.circle import Circle
from geometry.config import GeometryConfig, get_config, load_config, set_config
from geometry.errors import GeometryError, GridIndexError, GridShapeError
from geometry.grid import CellRef, Coordinates, Grid
from geometry.interpolate import Interpolator, linear
from geometry.logging import configure_logging, setup_logging
from geometry.rect import Rect
from geometry.vector import Vec2, lerp
from geometry.wrapping_grid import WrappingGrid

__all__ = [
    "CellRef",
    "Circle",
    "Coordinates",
    "GeometryConfig",
    "GeometryError",
    "Grid",
    "GridIndexError",
    "GridShapeError",
    "Interpolator",
    "Rect",
    "Vec2",
    "WrappingGrid",
    "configure_logging",
    "get_config",
    "lerp",
    "linear",
    "load_config",
    "set_config",
    "setup_logging",
]
