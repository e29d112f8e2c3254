"""Neighbor generation for 4-connected grid movement."""

from typing import List, Tuple
from .types import Coord
from .grid import Grid

# Expansion order: up, down, left, right
DIRECTIONS: Tuple[Tuple[int, int], ...] = ((0, 1), (0, -1), (-1, 0), (1, 0))

# Uniform cost of a single orthogonal move
STEP_COST = 1


def get_neighbors(coord: Coord, grid: Grid) -> List[Coord]:
    """
    Get in-bounds, non-wall neighbors of a coordinate.

    Walkability of the returned cells is left to the caller, so that
    occupant-marked cells can be told apart from walls.
    """
    x, y = coord
    neighbors = []

    for dx, dy in DIRECTIONS:
        new_x, new_y = x + dx, y + dy
        if not grid.is_in_bounds(new_x, new_y):
            continue
        if grid.is_wall(new_x, new_y):
            continue
        neighbors.append((new_x, new_y))

    return neighbors


def is_adjacent(a: Coord, b: Coord) -> bool:
    """True iff a and b differ by exactly one unit on exactly one axis."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def get_direction_vector(from_coord: Coord, to_coord: Coord) -> Tuple[int, int]:
    """Get the direction vector between two coordinates."""
    dx = to_coord[0] - from_coord[0]
    dy = to_coord[1] - from_coord[1]

    # Normalize to -1, 0, or 1
    if dx != 0:
        dx = 1 if dx > 0 else -1
    if dy != 0:
        dy = 1 if dy > 0 else -1

    return (dx, dy)
