"""Interpolation capability used for per-component blending."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class Interpolator(Protocol):
    """Blend two endpoint values by a parameter in ``[0, 1]``."""

    def __call__(self, start: T, end: T, t: float) -> T: ...


def linear(start: Any, end: Any, t: float) -> Any:
    """Return ``start + (end - start) * t``."""
    return start + (end - start) * t


__all__ = ["Interpolator", "linear"]
