"""Priority queue for the A* open frontier with deterministic tie-breaking."""

import heapq
import itertools
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass

from .types import Coord


@dataclass
class PriorityItem:
    """
    Item in the priority queue.

    Comparison order:
    1. f_cost (lower is better)
    2. h_cost (lower is better - favor nodes closer to the goal)
    3. sequence (earlier insertion wins)
    """
    f_cost: float
    h_cost: float
    sequence: int
    coord: Coord
    data: Any

    def __lt__(self, other: 'PriorityItem') -> bool:
        """Define comparison for heap ordering."""
        if self.f_cost != other.f_cost:
            return self.f_cost < other.f_cost
        if self.h_cost != other.h_cost:
            return self.h_cost < other.h_cost
        return self.sequence < other.sequence


class PriorityQueue:
    """
    Binary heap keyed by coordinate.

    Priority updates use lazy invalidation: the superseded heap entry is marked
    removed and skipped when popped. An updated coordinate keeps the sequence
    number it was first inserted with, so ties stay in frontier insertion
    order.
    """

    _REMOVED = object()  # Sentinel for superseded entries

    def __init__(self):
        self._heap: List[PriorityItem] = []
        self._entry_finder: Dict[Coord, PriorityItem] = {}
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._entry_finder)

    def __contains__(self, coord: Coord) -> bool:
        return coord in self._entry_finder

    def is_empty(self) -> bool:
        """Check if the queue is empty."""
        return len(self._entry_finder) == 0

    def size(self) -> int:
        """Get the number of live items in the queue."""
        return len(self._entry_finder)

    def put(self, coord: Coord, f_cost: float, h_cost: float, data: Any) -> bool:
        """
        Add a coordinate to the queue or lower its priority.

        An existing entry is only replaced when the new f_cost is strictly
        lower. Returns True if the queue changed.
        """
        existing = self._entry_finder.get(coord)
        if existing is not None:
            if existing.f_cost <= f_cost:
                return False
            existing.data = self._REMOVED
            sequence = existing.sequence
        else:
            sequence = next(self._counter)

        entry = PriorityItem(f_cost, h_cost, sequence, coord, data)
        self._entry_finder[coord] = entry
        heapq.heappush(self._heap, entry)
        return True

    def get(self) -> Optional[Tuple[Coord, Any]]:
        """
        Remove and return the (coord, data) with the best priority.
        Returns None if queue is empty.
        """
        while self._heap:
            entry = heapq.heappop(self._heap)
            if entry.data is not self._REMOVED:
                del self._entry_finder[entry.coord]
                return (entry.coord, entry.data)
        return None

    def peek(self) -> Optional[Tuple[Coord, Any]]:
        """Look at the next (coord, data) without removing it."""
        while self._heap:
            entry = self._heap[0]
            if entry.data is not self._REMOVED:
                return (entry.coord, entry.data)
            # Remove stale entry and continue
            heapq.heappop(self._heap)
        return None

    def get_data(self, coord: Coord) -> Optional[Any]:
        """Get the payload stored for a coordinate, or None if not present."""
        entry = self._entry_finder.get(coord)
        return entry.data if entry is not None else None

    def clear(self):
        """Remove all items from the queue."""
        self._heap.clear()
        self._entry_finder.clear()
        self._counter = itertools.count()

    def coords(self) -> List[Coord]:
        """Coordinates currently queued, in insertion order."""
        entries = sorted(self._entry_finder.values(), key=lambda e: e.sequence)
        return [entry.coord for entry in entries]
