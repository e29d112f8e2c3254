"""Movement over a found path, one waypoint at a time."""

import math
from typing import Callable, List, Optional, Sequence

from .types import Coord, Position, WalkerConfig, WalkerEvent
from .fsm import WalkerState, WalkerStateMachine


def move_towards(current: Position, target: Position, max_distance: float) -> Position:
    """Move current toward target by at most max_distance, without overshooting."""
    dx = target[0] - current[0]
    dy = target[1] - current[1]
    distance = math.hypot(dx, dy)
    if distance <= max_distance or distance == 0:
        return (float(target[0]), float(target[1]))
    ratio = max_distance / distance
    return (current[0] + dx * ratio, current[1] + dy * ratio)


class PathWalker:
    """
    Consumes a path one waypoint at a time.

    ``step`` is meant to be called once per external tick with the time that
    elapsed since the previous tick. Each call returns at most one event:
    ``Arrived(waypoint)`` when the interpolated position reaches the current
    waypoint, ``Progressing`` while moving toward it, and ``Finished`` on the
    call after the last arrival. While idle or finished ``step`` returns None.

    The walker does not search; hand it a path from ``find_path``.
    """

    def __init__(self, config: Optional[WalkerConfig] = None, position: Coord = (0, 0)):
        self.config = config or WalkerConfig()
        self._fsm = WalkerStateMachine()
        self._path: List[Coord] = []
        self._cursor = 0
        self._position: Position = (float(position[0]), float(position[1]))

    # Properties

    @property
    def state(self) -> WalkerState:
        return self._fsm.current_state

    @property
    def position(self) -> Position:
        """Interpolated position in cell units."""
        return self._position

    @property
    def cursor(self) -> int:
        """Index of the next waypoint to arrive at."""
        return self._cursor

    @property
    def path(self) -> List[Coord]:
        return list(self._path)

    @property
    def current_waypoint(self) -> Optional[Coord]:
        if self._cursor < len(self._path):
            return self._path[self._cursor]
        return None

    @property
    def is_walking(self) -> bool:
        return self._fsm.is_walking()

    def on_state_enter(self, state: WalkerState, callback: Optional[Callable[[], None]]):
        """Register a callback fired whenever the walker enters ``state``."""
        self._fsm.on_state_enter(state, callback)

    # Control

    def start(self, path: Sequence[Coord]) -> Optional[WalkerEvent]:
        """
        Begin walking ``path`` from its first waypoint.

        Any walk in progress is abandoned. An empty path finishes at once and
        the Finished event is returned here; otherwise returns None.
        """
        self._path = list(path)
        self._cursor = 0
        self._fsm.start()
        if not self._path:
            self._fsm.finish()
            return WalkerEvent.finished()
        return None

    def step(self, elapsed: float) -> Optional[WalkerEvent]:
        """
        Advance the walk by ``elapsed`` seconds.

        A single-waypoint path is the cell the walker already stands on, so
        it snaps there and returns Finished without an Arrived event.
        """
        if not self._fsm.is_walking():
            return None

        if len(self._path) == 1:
            waypoint = self._path[0]
            self._position = (float(waypoint[0]), float(waypoint[1]))
            self._cursor = 1
            self._fsm.finish()
            return WalkerEvent.finished()

        if self._cursor >= len(self._path):
            self._fsm.finish()
            return WalkerEvent.finished()

        target = self._path[self._cursor]
        self._position = move_towards(
            self._position, target, self.config.move_speed * max(elapsed, 0.0)
        )

        distance = math.hypot(target[0] - self._position[0], target[1] - self._position[1])
        if distance <= self.config.arrival_tolerance:
            self._position = (float(target[0]), float(target[1]))
            self._cursor += 1
            return WalkerEvent.arrived(target)

        return WalkerEvent.progressing()

    def stop(self) -> bool:
        """Halt progression, keeping position and cursor. Returns True if a walk was stopped."""
        return self._fsm.stop()

    def reset(self, to_coordinate: Coord):
        """Clear the walk and place the walker back on ``to_coordinate``."""
        self._path = []
        self._cursor = 0
        self._position = (float(to_coordinate[0]), float(to_coordinate[1]))
        self._fsm.reset_to_idle()
