"""Grid pathfinding engine: A* search over a classified grid and path walking.

The ``domain`` package is framework-agnostic; ``app`` wires it to Qt signals
and timers.
"""

from .domain.types import (
    Coord, CellKind, SearchNode, SearchResult,
    WalkerConfig, WalkerEvent, WalkerEventKind,
)
from .domain.grid import Grid
from .domain.astar import AStarSearch, find_path
from .domain.fsm import WalkerState
from .domain.walker import PathWalker

__version__ = "1.0.0"

__all__ = [
    "Coord", "CellKind", "SearchNode", "SearchResult",
    "WalkerConfig", "WalkerEvent", "WalkerEventKind",
    "Grid", "AStarSearch", "find_path", "WalkerState", "PathWalker",
]
