"""Grid model: cell classification and bounds-checked walkability queries."""

from typing import List, Optional

import numpy as np

from .types import Coord, CellKind


class Grid:
    """
    Navigable 2-D grid of classified cells.

    Cells are stored in a numpy array indexed ``[x, y]``. Every query checks
    bounds before touching the array, so out-of-range coordinates answer
    ``False``/``None`` instead of raising.

    The grid also tracks the occupant's current cell, its canonical start cell
    and the goal cell. These are kept in sync by ``place_occupant``,
    ``place_goal`` and ``move_occupant``.
    """

    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells = np.full((width, height), CellKind.EMPTY, dtype=np.int8)
        self._occupant: Optional[Coord] = None
        self._occupant_start: Optional[Coord] = None
        self._goal: Optional[Coord] = None

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def occupant(self) -> Optional[Coord]:
        """Current occupant cell, or None before one is placed."""
        return self._occupant

    @property
    def occupant_start(self) -> Optional[Coord]:
        """Cell the occupant was originally placed on."""
        return self._occupant_start

    @property
    def goal(self) -> Optional[Coord]:
        return self._goal

    # Queries

    def is_in_bounds(self, x: int, y: int) -> bool:
        """Check if coordinate is within grid bounds."""
        return 0 <= x < self._width and 0 <= y < self._height

    def is_walkable(self, x: int, y: int) -> bool:
        """True iff the cell is in bounds and Empty or Goal."""
        if not self.is_in_bounds(x, y):
            return False
        return self._cells[x, y] in (CellKind.EMPTY, CellKind.GOAL)

    def is_wall(self, x: int, y: int) -> bool:
        """True iff the cell is in bounds and a Wall."""
        return self.is_in_bounds(x, y) and self._cells[x, y] == CellKind.WALL

    def classify(self, x: int, y: int) -> Optional[CellKind]:
        """Get the kind of a cell, returns None if out of bounds."""
        if not self.is_in_bounds(x, y):
            return None
        return CellKind(int(self._cells[x, y]))

    def find(self, kind: CellKind) -> List[Coord]:
        """All coordinates of the given kind, in x-major order."""
        return [(int(x), int(y)) for x, y in np.argwhere(self._cells == kind)]

    def count(self, kind: CellKind) -> int:
        return int(np.count_nonzero(self._cells == kind))

    def walkable_mask(self) -> np.ndarray:
        """Boolean array, indexed [x, y], of walkable cells."""
        return (self._cells == CellKind.EMPTY) | (self._cells == CellKind.GOAL)

    # Mutation

    def set_kind(self, x: int, y: int, kind: CellKind) -> bool:
        """
        Overwrite the classification of a cell.

        Returns False without touching the grid if the coordinate is out of
        bounds. Tracked occupant/goal positions are not updated here; use
        ``place_occupant``/``place_goal``/``move_occupant`` for that.
        """
        if not self.is_in_bounds(x, y):
            return False
        self._cells[x, y] = CellKind(kind)
        return True

    def place_occupant(self, coord: Coord) -> bool:
        """
        Place the occupant at its canonical start cell.

        A Goal cell keeps its Goal marker, as in ``move_occupant``.
        """
        x, y = coord
        if not self.is_in_bounds(x, y):
            return False
        if self._occupant is not None and self._occupant != coord:
            self._clear_occupant_cell(self._occupant)
        if self._cells[x, y] != CellKind.GOAL:
            self._cells[x, y] = CellKind.OCCUPANT
        self._occupant = coord
        self._occupant_start = coord
        return True

    def place_goal(self, coord: Coord) -> bool:
        x, y = coord
        if not self.is_in_bounds(x, y):
            return False
        if self._goal is not None and self._cells[self._goal] == CellKind.GOAL:
            stays = CellKind.OCCUPANT if self._goal == self._occupant else CellKind.EMPTY
            self._cells[self._goal] = stays
        self._cells[x, y] = CellKind.GOAL
        self._goal = coord
        return True

    def move_occupant(self, coord: Coord) -> bool:
        """
        Relocate the occupant marker to ``coord``.

        The old cell reverts to Empty unless it is a Wall or the Goal. The new
        cell becomes Occupant unless it is the Goal, which stays marked.
        """
        x, y = coord
        if not self.is_in_bounds(x, y):
            return False
        if self._occupant is not None and self._occupant != coord:
            self._clear_occupant_cell(self._occupant)
        if self._cells[x, y] != CellKind.GOAL:
            self._cells[x, y] = CellKind.OCCUPANT
        self._occupant = coord
        if self._occupant_start is None:
            self._occupant_start = coord
        return True

    def reset_occupant(self) -> Optional[Coord]:
        """Move the occupant back to its canonical start cell."""
        if self._occupant_start is None:
            return None
        self.move_occupant(self._occupant_start)
        return self._occupant_start

    def copy(self) -> 'Grid':
        """Independent snapshot of this grid."""
        clone = Grid(self._width, self._height)
        clone._cells = self._cells.copy()
        clone._occupant = self._occupant
        clone._occupant_start = self._occupant_start
        clone._goal = self._goal
        return clone

    def _clear_occupant_cell(self, coord: Coord):
        if self._cells[coord] not in (CellKind.WALL, CellKind.GOAL):
            self._cells[coord] = CellKind.EMPTY

    def __repr__(self) -> str:
        return (f"Grid({self._width}x{self._height}, occupant={self._occupant}, "
                f"goal={self._goal}, walls={self.count(CellKind.WALL)})")
