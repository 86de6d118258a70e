"""Toroidal view over a grid: coordinates wrap around every edge."""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable, Iterator
from typing import Any

import numpy as np

from geometry.errors import GridShapeError
from geometry.grid import CellRef, Coordinate, Coordinates, Grid

logger = logging.getLogger(__name__)


class WrappingGrid:
    """Grid wrapper that accepts any signed coordinate.

    ``x`` is reduced modulo ``width`` and ``y`` modulo ``height`` into the
    inner grid's range, so ``(-1, 0)`` addresses ``(width - 1, 0)`` and
    ``(width, 0)`` addresses ``(0, 0)``. Everything else forwards to the
    wrapped :class:`Grid`.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: Grid) -> None:
        if grid.width == 0 or grid.height == 0:
            logger.warning(
                "wrapping_grid_rejected width=%d height=%d reason=empty_dimension",
                grid.width,
                grid.height,
                extra={
                    "grid_width": grid.width,
                    "grid_height": grid.height,
                    "reason": "empty_dimension",
                },
            )
            raise GridShapeError(f"cannot wrap a {grid.width}x{grid.height} grid")
        self._grid = grid

    @property
    def inner(self) -> Grid:
        return self._grid

    def into_inner(self) -> Grid:
        """Return the wrapped grid."""
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    @property
    def shape(self) -> Coordinate:
        return self._grid.shape

    @property
    def dtype(self) -> np.dtype:
        return self._grid.dtype

    def __len__(self) -> int:
        return len(self._grid)

    def iter(self) -> Iterator[Any]:
        return self._grid.iter()

    __iter__ = iter

    def iter_mut(self) -> Iterator[CellRef]:
        return self._grid.iter_mut()

    def apply(self, func: Callable[[Any], Any]) -> None:
        self._grid.apply(func)

    def as_array(self) -> np.ndarray:
        return self._grid.as_array()

    def coordinates(self) -> Coordinates:
        return self._grid.coordinates()

    def copy(self) -> WrappingGrid:
        return WrappingGrid(self._grid.copy())

    def wrap(self, x: int, y: int) -> Coordinate:
        """Map signed coordinates into ``[0, width) x [0, height)``."""
        # Python's % is already Euclidean for a positive modulus.
        return (operator.index(x) % self._grid.width, operator.index(y) % self._grid.height)

    def _wrap_key(self, key: object) -> Coordinate:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(f"grid indices must be (x, y) pairs, not {key!r}")
        return self.wrap(*key)

    def __getitem__(self, key: Coordinate) -> Any:
        return self._grid[self._wrap_key(key)]

    def __setitem__(self, key: Coordinate, value: Any) -> None:
        self._grid[self._wrap_key(key)] = value

    def __repr__(self) -> str:
        return f"WrappingGrid({self._grid!r})"


__all__ = ["WrappingGrid"]
