# tests/test_astar.py
"""
Tests for the A* pathfinder.

Path lengths are checked against a brute-force BFS over the same walkability
rule, on hand-built and seeded random grids.
"""

from __future__ import annotations

import random
from collections import deque
from typing import Dict, Optional, Set

import pytest

from gridwalk.domain.astar import AStarSearch, find_path
from gridwalk.domain.grid import Grid
from gridwalk.domain.heuristics import manhattan_distance
from gridwalk.domain.neighbors import get_neighbors
from gridwalk.domain.path import get_path_directions, validate_path
from gridwalk.domain.types import CellKind, Coord
from gridwalk.utils.layouts import grid_from_rows


def bfs_distances(grid: Grid, start: Coord) -> Dict[Coord, int]:
    """Shortest move counts from start to every reachable walkable cell."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for dx, dy in ((0, 1), (0, -1), (-1, 0), (1, 0)):
            nxt = (x + dx, y + dy)
            if nxt not in distances and grid.is_walkable(*nxt):
                distances[nxt] = distances[(x, y)] + 1
                queue.append(nxt)
    return distances


def random_grid(seed: int, width: int, height: int, density: float) -> Grid:
    rng = random.Random(seed)
    grid = Grid(width, height)
    for x in range(width):
        for y in range(height):
            if rng.random() < density:
                grid.set_kind(x, y, CellKind.WALL)
    return grid


def assert_contiguous(path) -> None:
    for a, b in zip(path, path[1:]):
        assert abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1, f"{a} -> {b} is not one step"


def test_manhattan_distance() -> None:
    assert manhattan_distance((0, 0), (4, 4)) == 8
    assert manhattan_distance((3, 1), (1, 2)) == 3
    assert manhattan_distance((2, 2), (2, 2)) == 0


def test_neighbors_skip_walls_and_bounds() -> None:
    grid = Grid(3, 3)
    grid.set_kind(1, 2, CellKind.WALL)

    assert get_neighbors((1, 1), grid) == [(1, 0), (0, 1), (2, 1)]
    assert get_neighbors((0, 0), grid) == [(0, 1), (1, 0)]


def test_open_grid_corner_to_corner(open_grid: Grid) -> None:
    result = find_path(open_grid, (0, 0), (4, 4))

    assert result.found
    assert result.length == 9
    assert result.path[0] == (0, 0)
    assert result.path[-1] == (4, 4)
    assert_contiguous(result.path)
    assert (0, 0) in result.visited and (4, 4) in result.visited


def test_start_equals_goal_returns_single_cell(open_grid: Grid) -> None:
    result = find_path(open_grid, (2, 3), (2, 3))

    assert result.path == [(2, 3)]
    assert result.visited == {(2, 3)}
    assert result.nodes_explored == 1


def test_split_grid_has_no_path(split_grid: Grid) -> None:
    result = find_path(split_grid, split_grid.occupant, split_grid.goal)

    assert result.path is None
    assert not result.found
    assert result.length == 0
    assert result.visited == {(0, 0), (0, 1), (0, 2)}


def test_detour_around_wall(detour_grid: Grid) -> None:
    result = find_path(detour_grid, detour_grid.occupant, detour_grid.goal)

    assert result.found
    assert result.length == 9
    assert (2, 3) in result.path
    assert validate_path(result.path, detour_grid)
    for x, y in result.path:
        assert detour_grid.classify(x, y) is not CellKind.WALL


def test_tie_break_prefers_lower_h_then_insertion_order() -> None:
    grid = Grid(2, 2)

    result = find_path(grid, (0, 0), (1, 1))

    # (0, 1) enters the frontier before (1, 0); then (1, 1) wins on h
    assert result.path == [(0, 0), (0, 1), (1, 1)]
    assert result.visited == {(0, 0), (0, 1), (1, 1)}


def test_search_is_deterministic(detour_grid: Grid) -> None:
    first = find_path(detour_grid, detour_grid.occupant, detour_grid.goal)
    second = find_path(detour_grid, detour_grid.occupant, detour_grid.goal)

    assert first.path == second.path
    assert first.visited == second.visited


def test_out_of_bounds_endpoint_is_no_path(open_grid: Grid) -> None:
    assert find_path(open_grid, (0, 0), (9, 9)).path is None
    assert find_path(open_grid, (-1, 0), (4, 4)).path is None


def test_occupied_cells_are_not_path_candidates() -> None:
    grid = grid_from_rows([
        "S..",
        ".#.",
        "..G",
    ])
    grid.set_kind(1, 0, CellKind.OCCUPANT)

    result = find_path(grid, (0, 0), (2, 2))

    assert result.path == [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2)]


@pytest.mark.parametrize("seed", range(25))
def test_path_length_matches_bfs_on_random_grids(seed: int) -> None:
    grid = random_grid(seed, width=8, height=7, density=0.3)
    rng = random.Random(seed * 31 + 7)
    free = grid.find(CellKind.EMPTY)
    start, goal = rng.sample(free, 2)

    result = find_path(grid, start, goal)
    distances = bfs_distances(grid, start)

    if goal in distances:
        assert result.found
        assert result.length == distances[goal] + 1
        assert result.path[0] == start and result.path[-1] == goal
        assert_contiguous(result.path)
        assert validate_path(result.path, grid)
    else:
        assert result.path is None
        assert result.visited == set(distances)


def test_enclosed_goal_visits_whole_reachable_region() -> None:
    grid = grid_from_rows([
        "S.....",
        "...###",
        "...#G#",
        "...###",
    ])

    result = find_path(grid, grid.occupant, grid.goal)

    expected: Set[Coord] = {(x, y) for y in range(4) for x in range(3)}
    expected |= {(3, 0), (4, 0), (5, 0)}
    assert result.path is None
    assert result.visited == expected
    assert result.nodes_explored == len(expected)


def test_incremental_search_exposes_frontier(open_grid: Grid) -> None:
    search = AStarSearch()
    search.initialize(open_grid, (0, 0), (4, 4))

    assert search.open_coords() == [(0, 0)]
    assert search.step() is None
    assert search.current_coord == (0, 0)
    assert search.closed_coords() == {(0, 0)}
    assert search.open_coords() == [(0, 1), (1, 0)]

    result = search.run_complete()
    assert search.is_complete()
    assert result.length == 9
    assert search.step() is result


def test_step_before_initialize_raises() -> None:
    with pytest.raises(RuntimeError):
        AStarSearch().step()


def test_initialize_rejects_out_of_bounds(open_grid: Grid) -> None:
    with pytest.raises(ValueError):
        AStarSearch().initialize(open_grid, (0, 0), (5, 0))


@pytest.mark.parametrize("seed", range(10))
def test_closed_nodes_carry_shortest_cost(seed: int) -> None:
    grid = random_grid(seed, width=9, height=9, density=0.25)
    free = grid.find(CellKind.EMPTY)
    start, goal = free[0], free[-1]

    search = AStarSearch()
    search.initialize(grid, start, goal)
    search.run_complete()
    distances = bfs_distances(grid, start)

    for node in search.nodes:
        assert node.f == node.g + node.h
        if node.coord in search.closed_set:
            assert node.g == distances[node.coord]


def test_node_parent_chain_matches_path(detour_grid: Grid) -> None:
    search = AStarSearch()
    search.initialize(detour_grid, detour_grid.occupant, detour_grid.goal)
    result = search.run_complete()

    by_coord: Dict[Coord, Optional[int]] = {n.coord: n.parent for n in search.nodes}
    assert by_coord[result.path[0]] is None
    for prev, coord in zip(result.path, result.path[1:]):
        assert search.nodes[by_coord[coord]].coord == prev


def test_path_directions() -> None:
    path = [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert get_path_directions(path) == [(1, 0), (0, 1), (-1, 0)]


def test_validate_path_rejects_gaps_and_walls() -> None:
    grid = Grid(3, 1)
    grid.set_kind(1, 0, CellKind.WALL)

    assert not validate_path([], grid)
    assert not validate_path([(0, 0), (2, 0)], grid)
    assert not validate_path([(0, 0), (1, 0), (2, 0)], grid)
    assert validate_path([(2, 0)], grid)
