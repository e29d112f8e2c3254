# tests/conftest.py

from __future__ import annotations

import pytest
from PySide6.QtCore import QCoreApplication

from gridwalk.domain.grid import Grid
from gridwalk.utils.layouts import create_open_grid, grid_from_rows


@pytest.fixture(scope="session")
def qapp() -> QCoreApplication:
    """One Qt application object for every test that needs signals or timers."""
    app = QCoreApplication.instance() or QCoreApplication([])
    return app


@pytest.fixture
def open_grid() -> Grid:
    """5x5 grid, no walls, occupant at (0, 0), goal at (4, 4)."""
    return create_open_grid(5, 5)


@pytest.fixture
def split_grid() -> Grid:
    """3x3 grid split by a solid wall at x == 1."""
    return grid_from_rows([
        ".#.",
        "S#G",
        ".#.",
    ])


@pytest.fixture
def detour_grid() -> Grid:
    """Occupant and goal separated by a wall with a single gap at the bottom."""
    return grid_from_rows([
        "S.#..",
        "..#..",
        "..#.G",
        ".....",
    ])
