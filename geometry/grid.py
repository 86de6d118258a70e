"""Fixed-size dense 2D grid with row-major storage."""

from __future__ import annotations

import copy
import logging
import operator
from collections.abc import Callable, Iterator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike

from geometry.config import get_config
from geometry.errors import GridIndexError, GridShapeError

logger = logging.getLogger(__name__)

Coordinate = tuple[int, int]


def _reject(width: int, height: int, reason: str) -> None:
    logger.warning(
        "grid_rejected width=%d height=%d reason=%s",
        width,
        height,
        reason,
        extra={"grid_width": width, "grid_height": height, "reason": reason},
    )


def _check_dimensions(width: int, height: int) -> tuple[int, int]:
    width = operator.index(width)
    height = operator.index(height)
    if width < 0 or height < 0:
        _reject(width, height, "negative_dimension")
        raise GridShapeError(f"grid dimensions must be non-negative, got {width}x{height}")
    return width, height


def _unpack_key(key: object) -> Coordinate:
    if not isinstance(key, tuple) or len(key) != 2:
        raise TypeError(f"grid indices must be (x, y) pairs, not {key!r}")
    x, y = key
    return operator.index(x), operator.index(y)


class Grid:
    """Dense ``width`` x ``height`` container addressed by ``(x, y)``.

    Cells live in one flat numpy array at index ``x + y * width``, so ``x``
    varies fastest. Indexing is bounds-checked and never wraps; negative
    coordinates raise :class:`GridIndexError` like any other out-of-range one.
    """

    __slots__ = ("_width", "_height", "_data")

    def __init__(self, width: int, height: int, data: np.ndarray) -> None:
        width, height = _check_dimensions(width, height)
        if data.ndim != 1 or data.shape[0] != width * height:
            _reject(width, height, "storage_mismatch")
            raise GridShapeError(
                f"grid storage of shape {data.shape} does not hold {width}x{height} cells"
            )
        self._width = width
        self._height = height
        self._data = data
        if get_config().grid_trace_enabled:
            logger.debug(
                "grid_created width=%d height=%d dtype=%s",
                width,
                height,
                data.dtype,
                extra={"grid_width": width, "grid_height": height, "dtype": str(data.dtype)},
            )

    @classmethod
    def from_elem(cls, width: int, height: int, elem: Any, dtype: DTypeLike = object) -> Grid:
        """Construct a grid with every cell holding a copy of ``elem``."""
        width, height = _check_dimensions(width, height)
        data = np.empty(width * height, dtype=dtype)
        if data.dtype == object:
            for index in range(data.shape[0]):
                data[index] = copy.copy(elem)
        else:
            data.fill(elem)
        return cls(width, height, data)

    @classmethod
    def from_fn(
        cls,
        width: int,
        height: int,
        generator: Callable[[int, int], Any],
        dtype: DTypeLike = object,
    ) -> Grid:
        """Construct a grid from ``generator(x, y)``, called once per cell in row-major order."""
        width, height = _check_dimensions(width, height)
        data = np.empty(width * height, dtype=dtype)
        for index in range(data.shape[0]):
            data[index] = generator(index % width, index // width)
        return cls(width, height, data)

    @classmethod
    def from_array(cls, array: ArrayLike, dtype: DTypeLike | None = None) -> Grid:
        """Construct a grid from a 2D array-like of shape ``(height, width)``."""
        values = np.asarray(array, dtype=dtype)
        if values.ndim != 2:
            logger.warning(
                "grid_rejected ndim=%d reason=not_2d",
                values.ndim,
                extra={"ndim": values.ndim, "reason": "not_2d"},
            )
            raise GridShapeError(f"expected a 2D array, got {values.ndim} dimensions")
        height, width = values.shape
        return cls(width, height, values.reshape(-1).copy())

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> Coordinate:
        """Return ``(width, height)``."""
        return (self._width, self._height)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    def __len__(self) -> int:
        return self._data.shape[0]

    def iter(self) -> Iterator[Any]:
        """Return a fresh iterator over the elements in row-major order."""
        return iter(self._data)

    __iter__ = iter

    def iter_mut(self) -> Iterator[CellRef]:
        """Return a fresh iterator of writable cell handles in row-major order."""
        return (CellRef(self, index) for index in range(self._data.shape[0]))

    def apply(self, func: Callable[[Any], Any]) -> None:
        """Replace every element with ``func(element)`` in row-major order."""
        data = self._data
        for index in range(data.shape[0]):
            data[index] = func(data[index])

    def as_array(self) -> np.ndarray:
        """Return a writable ``(height, width)`` view of the storage."""
        return self._data.reshape(self._height, self._width)

    def coordinates(self) -> Coordinates:
        """Return a fresh iterator over the coordinates of the grid."""
        return Coordinates(self._width, self._height)

    def copy(self) -> Grid:
        return Grid(self._width, self._height, self._data.copy())

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise GridIndexError(x, y, self._width, self._height)
        return x + y * self._width

    def __getitem__(self, key: Coordinate) -> Any:
        return self._data[self._offset(*_unpack_key(key))]

    def __setitem__(self, key: Coordinate, value: Any) -> None:
        self._data[self._offset(*_unpack_key(key))] = value

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height}, dtype={self._data.dtype})"


class CellRef:
    """Writable handle to one grid cell."""

    __slots__ = ("_grid", "_index")

    def __init__(self, grid: Grid, index: int) -> None:
        self._grid = grid
        self._index = index

    @property
    def coordinate(self) -> Coordinate:
        width = self._grid.width
        return (self._index % width, self._index // width)

    @property
    def value(self) -> Any:
        return self._grid._data[self._index]

    @value.setter
    def value(self, value: Any) -> None:
        self._grid._data[self._index] = value


class Coordinates:
    """Row-major iterator over ``(x, y)`` pairs with an exact remaining count."""

    __slots__ = ("_width", "_height", "_x", "_y")

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._x = 0
        self._y = 0

    def __iter__(self) -> Coordinates:
        return self

    def __next__(self) -> Coordinate:
        if self._width == 0 or self._y >= self._height:
            raise StopIteration
        coordinate = (self._x, self._y)
        self._x += 1
        if self._x == self._width:
            self._x = 0
            self._y += 1
        return coordinate

    def __len__(self) -> int:
        return max(0, self._width * self._height - self._x - self._width * self._y)

    def __length_hint__(self) -> int:
        return len(self)


__all__ = ["CellRef", "Coordinate", "Coordinates", "Grid"]
