from __future__ import annotations

import pytest

from geometry.config import GeometryConfig, set_config
from geometry.grid import Grid


@pytest.fixture(autouse=True)
def default_config() -> GeometryConfig:
    return set_config(GeometryConfig())


@pytest.fixture
def numbered_grid() -> Grid:
    return Grid.from_fn(3, 2, lambda x, y: x + 10 * y)
