"""Path reconstruction and validation utilities."""

from typing import List, Sequence, Tuple
from .types import Coord, SearchNode
from .grid import Grid
from .neighbors import get_direction_vector, is_adjacent


def reconstruct_path(nodes: Sequence[SearchNode], goal_index: int) -> List[Coord]:
    """
    Reconstruct the path from the goal back to the start using parent indices.
    Returns the path from start to goal (reversed from parent chain).
    """
    path = []
    index = goal_index

    while index is not None:
        node = nodes[index]
        path.append(node.coord)
        index = node.parent

    # Reverse to get path from start to goal
    path.reverse()
    return path


def get_path_directions(path: Sequence[Coord]) -> List[Tuple[int, int]]:
    """
    Get direction vectors for each segment of the path.
    Returns list of (dx, dy) tuples representing movement directions.
    """
    return [get_direction_vector(path[i - 1], path[i]) for i in range(1, len(path))]


def validate_path(path: Sequence[Coord], grid: Grid) -> bool:
    """
    Validate that a path is in bounds, wall-free and contiguous.
    Returns True if path is valid.
    """
    if not path:
        return False

    for x, y in path:
        if not grid.is_in_bounds(x, y) or grid.is_wall(x, y):
            return False

    for i in range(1, len(path)):
        if not is_adjacent(path[i - 1], path[i]):
            return False

    return True
