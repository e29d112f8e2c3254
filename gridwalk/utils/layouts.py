"""Fixed map layouts for building grids."""

from typing import Callable, Dict, Optional, Sequence
from ..domain.types import Coord, CellKind
from ..domain.grid import Grid

# Demo map, indexed [x][y] with cell codes (0 empty, 1 wall, 3 goal).
# The occupant starts at (0, 0).
DEMO_MATRIX = (
    (0, 0, 0, 0, 1, 0, 0, 0, 0, 0),
    (0, 1, 1, 0, 1, 0, 1, 1, 1, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 1, 0),
    (1, 1, 1, 0, 1, 1, 1, 0, 1, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 1, 1, 1, 1, 1, 1, 1, 1, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (1, 1, 0, 1, 1, 1, 0, 1, 1, 1),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 0, 0, 0, 3),
)

# Characters accepted by grid_from_rows
ROW_SYMBOLS: Dict[str, CellKind] = {
    ".": CellKind.EMPTY,
    "#": CellKind.WALL,
    "S": CellKind.OCCUPANT,
    "G": CellKind.GOAL,
}


def create_empty_grid(width: int, height: int,
                      occupant: Optional[Coord] = None,
                      goal: Optional[Coord] = None) -> Grid:
    """
    Create a new grid with no walls.

    Args:
        width: Grid width (must be > 0)
        height: Grid height (must be > 0)
        occupant: Optional occupant start cell
        goal: Optional goal cell

    Raises:
        ValueError: If width or height <= 0, or a marker is out of bounds
    """
    grid = Grid(width, height)
    if goal is not None and not grid.place_goal(goal):
        raise ValueError(f"Goal position {goal} is out of bounds")
    if occupant is not None and not grid.place_occupant(occupant):
        raise ValueError(f"Occupant position {occupant} is out of bounds")
    return grid


def create_open_grid(width: int, height: int) -> Grid:
    """Empty grid with the occupant in one corner and the goal in the opposite one."""
    if width * height < 2:
        raise ValueError(f"Grid {width}x{height} has no room for both occupant and goal")
    return create_empty_grid(width, height, occupant=(0, 0), goal=(width - 1, height - 1))


def grid_from_rows(rows: Sequence[str]) -> Grid:
    """
    Build a grid from text rows.

    Row index is y and character index is x. Symbols: ``.`` empty,
    ``#`` wall, ``S`` occupant start, ``G`` goal. At most one ``S`` and one
    ``G`` may appear.

    Raises:
        ValueError: If rows are empty, ragged, contain unknown symbols or
            more than one occupant/goal
    """
    if not rows or not rows[0]:
        raise ValueError("Layout must have at least one non-empty row")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("Layout rows must all have the same length")

    grid = Grid(width, len(rows))
    for y, row in enumerate(rows):
        for x, symbol in enumerate(row):
            kind = ROW_SYMBOLS.get(symbol)
            if kind is None:
                raise ValueError(f"Unknown layout symbol {symbol!r} at {(x, y)}")
            if kind == CellKind.OCCUPANT:
                if grid.occupant is not None:
                    raise ValueError("Layout has more than one occupant")
                grid.place_occupant((x, y))
            elif kind == CellKind.GOAL:
                if grid.goal is not None:
                    raise ValueError("Layout has more than one goal")
                grid.place_goal((x, y))
            else:
                grid.set_kind(x, y, kind)
    return grid


def grid_from_matrix(matrix: Sequence[Sequence[int]], occupant: Coord) -> Grid:
    """
    Build a grid from a matrix of cell codes indexed ``[x][y]``.

    Raises:
        ValueError: If the matrix is empty or ragged, holds an unknown code,
            has no goal, or the occupant cell is a wall or out of bounds
    """
    if not matrix or not matrix[0]:
        raise ValueError("Matrix must not be empty")
    height = len(matrix[0])
    if any(len(column) != height for column in matrix):
        raise ValueError("Matrix columns must all have the same length")

    grid = Grid(len(matrix), height)
    for x, column in enumerate(matrix):
        for y, code in enumerate(column):
            try:
                kind = CellKind(code)
            except ValueError:
                raise ValueError(f"Unknown cell code {code!r} at {(x, y)}") from None
            if kind == CellKind.GOAL:
                grid.place_goal((x, y))
            elif kind != CellKind.OCCUPANT:
                grid.set_kind(x, y, kind)

    if grid.goal is None:
        raise ValueError("Matrix has no goal cell")
    if not grid.is_in_bounds(*occupant) or grid.is_wall(*occupant):
        raise ValueError(f"Occupant position {occupant} is not a free cell")
    grid.place_occupant(occupant)
    return grid


def create_demo_grid() -> Grid:
    """The fixed 10x10 demo map."""
    return grid_from_matrix(DEMO_MATRIX, occupant=(0, 0))


# Named layouts for the command line and controller
LAYOUTS: Dict[str, Callable[[int, int], Grid]] = {
    "demo": lambda width, height: create_demo_grid(),
    "open": create_open_grid,
}


def create_layout(name: str, width: int = 10, height: int = 10) -> Grid:
    """
    Create a named layout.

    ``width`` and ``height`` are ignored by fixed layouts such as ``demo``.
    """
    try:
        factory = LAYOUTS[name]
    except KeyError:
        raise ValueError(f"Unknown layout: {name}") from None
    return factory(width, height)
