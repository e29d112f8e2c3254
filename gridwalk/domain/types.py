"""Core type definitions for grid pathfinding and path walking."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple, Set, List

# Coordinate type for grid positions
Coord = Tuple[int, int]

# Interpolated walker position in cell units
Position = Tuple[float, float]


class CellKind(IntEnum):
    """Classification of a single grid cell. Values are the stored codes."""
    EMPTY = 0
    WALL = 1
    OCCUPANT = 2
    GOAL = 3


@dataclass
class SearchNode:
    """
    A node in the A* search arena.

    The predecessor is stored as an index into the arena that owns the node
    rather than as a reference, so chains never form ownership cycles.
    """
    coord: Coord
    g: float = 0.0  # Cost from start
    h: float = 0.0  # Heuristic estimate to goal
    parent: Optional[int] = None

    @property
    def f(self) -> float:
        """Total cost, always derived from the current g and h."""
        return self.g + self.h


@dataclass
class SearchResult:
    """Result of a pathfinding operation."""
    path: Optional[List[Coord]] = None
    visited: Set[Coord] = field(default_factory=set)
    nodes_explored: int = 0

    @property
    def found(self) -> bool:
        """Whether a path was found."""
        return self.path is not None and len(self.path) > 0

    @property
    def length(self) -> int:
        """Number of waypoints in the path, 0 when there is none."""
        return len(self.path) if self.path else 0


@dataclass
class WalkerConfig:
    """Configuration for path walking."""
    move_speed: float = 2.0  # cells per second
    arrival_tolerance: float = 0.1  # cells

    def __post_init__(self):
        if self.move_speed <= 0:
            raise ValueError(f"move_speed must be positive, got {self.move_speed}")
        if self.arrival_tolerance < 0:
            raise ValueError(
                f"arrival_tolerance must not be negative, got {self.arrival_tolerance}"
            )


class WalkerEventKind(Enum):
    """Kinds of events produced by a path walker step."""
    PROGRESSING = "progressing"
    ARRIVED = "arrived"
    FINISHED = "finished"


@dataclass(frozen=True)
class WalkerEvent:
    """Event emitted by PathWalker.step()."""
    kind: WalkerEventKind
    waypoint: Optional[Coord] = None

    @classmethod
    def progressing(cls) -> 'WalkerEvent':
        return cls(WalkerEventKind.PROGRESSING)

    @classmethod
    def arrived(cls, waypoint: Coord) -> 'WalkerEvent':
        return cls(WalkerEventKind.ARRIVED, waypoint)

    @classmethod
    def finished(cls) -> 'WalkerEvent':
        return cls(WalkerEventKind.FINISHED)

    @property
    def is_arrival(self) -> bool:
        return self.kind is WalkerEventKind.ARRIVED

    @property
    def is_finished(self) -> bool:
        return self.kind is WalkerEventKind.FINISHED
