"""Core A* pathfinding algorithm implementation."""

import logging
from typing import List, Optional, Set

from .types import Coord, SearchNode, SearchResult
from .grid import Grid
from .priority_queue import PriorityQueue
from .heuristics import manhattan_distance
from .neighbors import get_neighbors, STEP_COST
from .path import reconstruct_path

logger = logging.getLogger(__name__)


class AStarSearch:
    """
    A* search over a Grid, 4-connected with uniform step cost.
    Framework-agnostic pure Python implementation.

    The search can be driven one expansion at a time with ``step`` (useful
    for visualizing the frontier) or run to completion with ``run_complete``.
    Nodes live in an arena list and refer to their predecessor by index.
    """

    def __init__(self):
        self.reset()

    def reset(self):
        """Reset the algorithm state."""
        self.open_set = PriorityQueue()
        self.closed_set: Set[Coord] = set()
        self.visited: Set[Coord] = set()
        self.nodes: List[SearchNode] = []
        self.grid: Optional[Grid] = None
        self.start_coord: Optional[Coord] = None
        self.goal_coord: Optional[Coord] = None
        self.nodes_explored = 0
        self.current_coord: Optional[Coord] = None
        self._result: Optional[SearchResult] = None

    def initialize(self, grid: Grid, start: Coord, goal: Coord):
        """
        Initialize the search with start and goal positions.

        The start cell is not checked for walkability; it is normally the
        occupant's own cell. Raises ValueError if either endpoint is out of
        bounds.
        """
        if not grid.is_in_bounds(*start):
            raise ValueError(f"Start coordinate {start} is out of bounds")
        if not grid.is_in_bounds(*goal):
            raise ValueError(f"Goal coordinate {goal} is out of bounds")

        self.reset()
        self.grid = grid
        self.start_coord = start
        self.goal_coord = goal

        start_node = SearchNode(coord=start, g=0, h=manhattan_distance(start, goal))
        self.nodes.append(start_node)
        self.open_set.put(start, start_node.f, start_node.h, 0)

    def step(self) -> Optional[SearchResult]:
        """
        Expand one frontier node.
        Returns the SearchResult once the search is complete, None otherwise.
        """
        if self.grid is None:
            raise RuntimeError("Search not initialized")
        if self._result is not None:
            return self._result

        popped = self.open_set.get()
        if popped is None:
            self.current_coord = None
            self._result = SearchResult(
                path=None, visited=set(self.visited), nodes_explored=self.nodes_explored
            )
            return self._result

        current_coord, current_index = popped
        current_node = self.nodes[current_index]
        self.current_coord = current_coord
        self.nodes_explored += 1

        # Move current from open to closed
        self.closed_set.add(current_coord)
        self.visited.add(current_coord)

        if current_coord == self.goal_coord:
            self._result = SearchResult(
                path=reconstruct_path(self.nodes, current_index),
                visited=set(self.visited),
                nodes_explored=self.nodes_explored,
            )
            return self._result

        for neighbor in get_neighbors(current_coord, self.grid):
            if neighbor in self.closed_set:
                continue
            if not self.grid.is_walkable(*neighbor):
                continue

            tentative_g = current_node.g + STEP_COST
            existing_index = self.open_set.get_data(neighbor)

            if existing_index is None:
                node = SearchNode(
                    coord=neighbor,
                    g=tentative_g,
                    h=manhattan_distance(neighbor, self.goal_coord),
                    parent=current_index,
                )
                self.nodes.append(node)
                self.open_set.put(neighbor, node.f, node.h, len(self.nodes) - 1)
            elif tentative_g < self.nodes[existing_index].g:
                node = self.nodes[existing_index]
                node.g = tentative_g
                node.parent = current_index
                self.open_set.put(neighbor, node.f, node.h, existing_index)

        return None  # Search continues

    def run_complete(self) -> SearchResult:
        """Run the search until the goal is reached or the frontier is empty."""
        while True:
            result = self.step()
            if result is not None:
                return result

    def is_complete(self) -> bool:
        """Check if the search has finished (success or failure)."""
        return self._result is not None

    def open_coords(self) -> List[Coord]:
        """Coordinates currently in the open frontier."""
        return self.open_set.coords()

    def closed_coords(self) -> Set[Coord]:
        """Coordinates finalized so far."""
        return set(self.closed_set)


def find_path(grid: Grid, start: Coord, goal: Coord) -> SearchResult:
    """
    Run A* from start to goal.

    Args:
        grid: Grid to search in
        start: Starting coordinate
        goal: Goal coordinate

    Returns:
        SearchResult whose ``path`` runs start to goal inclusive, or is None
        when the goal is unreachable. ``visited`` holds every expanded cell.
    """
    search = AStarSearch()
    try:
        search.initialize(grid, start, goal)
    except ValueError as e:
        logger.warning("Path search rejected: %s", e)
        return SearchResult(path=None, visited=set(), nodes_explored=0)

    result = search.run_complete()
    if result.found:
        logger.info("Path found! Steps: %d", result.length)
        for i, coord in enumerate(result.path):
            logger.debug("Step %d: %s", i, coord)
    else:
        logger.info("No path from %s to %s (%d cells explored)",
                    start, goal, result.nodes_explored)
    return result
