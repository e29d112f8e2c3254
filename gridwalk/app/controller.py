"""Application controller connecting commands and ticks to the pathfinding core."""

import logging
from dataclasses import dataclass, fields, replace
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from ..domain.types import Coord, SearchResult, WalkerConfig, WalkerEvent
from ..domain.grid import Grid
from ..domain.astar import find_path
from ..domain.fsm import WalkerState
from ..domain.walker import PathWalker
from ..utils.layouts import create_layout

logger = logging.getLogger(__name__)

NO_PATH_MESSAGE = "No path found!"
COMPLETED_MESSAGE = "Completed !!!"


@dataclass
class ControllerConfig:
    """Configuration for the controller tick."""
    tick_interval_ms: int = 16


class NavigationController(QObject):
    """
    Controller that runs path searches and drives the occupant along them.

    Signals:
        grid_updated: Emitted when the grid needs to be redrawn
        path_found: Emitted with the SearchResult of a successful search
        no_path: Emitted with the SearchResult of a failed search
        waypoint_reached: Emitted with each waypoint the occupant arrives at
        walk_finished: Emitted when the occupant reaches the end of the path
        message: Emitted with user-facing status text
        error_occurred: Emitted when a command fails
    """

    # Qt Signals
    grid_updated = Signal()
    path_found = Signal(object)  # SearchResult
    no_path = Signal(object)  # SearchResult
    waypoint_reached = Signal(object)  # Coord
    walk_finished = Signal()
    message = Signal(str)
    error_occurred = Signal(str)

    def __init__(self, grid: Optional[Grid] = None,
                 walker_config: Optional[WalkerConfig] = None,
                 config: Optional[ControllerConfig] = None):
        super().__init__()

        self._config = config or ControllerConfig()
        self._grid: Optional[Grid] = None
        self._last_result: Optional[SearchResult] = None
        self._walker = PathWalker(walker_config)
        self._walker.on_state_enter(WalkerState.FINISHED, self._on_walk_finished)

        # Timer for walk ticks
        self._timer = QTimer(self)
        self._timer.timeout.connect(self._on_timer_tick)

        if grid is not None:
            self.load_grid(grid)

    # Properties

    @property
    def grid(self) -> Optional[Grid]:
        """Get the current grid."""
        return self._grid

    @property
    def walker(self) -> PathWalker:
        return self._walker

    @property
    def last_result(self) -> Optional[SearchResult]:
        """Result of the most recent search."""
        return self._last_result

    @property
    def config(self) -> ControllerConfig:
        return self._config

    @property
    def is_ticking(self) -> bool:
        return self._timer.isActive()

    @property
    def speed(self) -> float:
        """Walker speed in cells per second."""
        return self._walker.config.move_speed

    @speed.setter
    def speed(self, cells_per_second: float):
        self._walker.config.move_speed = max(0.1, min(50.0, cells_per_second))

    # Grid Management

    def load_grid(self, grid: Grid):
        """Replace the grid wholesale and put the walker on the occupant."""
        self._timer.stop()
        self._grid = grid
        self._last_result = None
        self._walker.reset(grid.occupant or (0, 0))
        logger.info("Loaded %r", grid)
        self.grid_updated.emit()

    def load_layout(self, name: str, width: int = 10, height: int = 10) -> bool:
        """Build and load a named layout."""
        try:
            self.load_grid(create_layout(name, width, height))
            return True
        except ValueError as e:
            self.error_occurred.emit(f"Failed to create layout: {e}")
            return False

    # Commands

    def find_path(self) -> Optional[SearchResult]:
        """Search from the occupant's current cell to the goal."""
        if self._grid is None:
            self.error_occurred.emit("No grid loaded")
            return None
        if self._grid.occupant is None or self._grid.goal is None:
            self.error_occurred.emit("Grid needs an occupant and a goal")
            return None

        logger.debug("Finding path %s -> %s", self._grid.occupant, self._grid.goal)
        try:
            result = find_path(self._grid, self._grid.occupant, self._grid.goal)
        except Exception as e:
            self.error_occurred.emit(f"Path search failed: {e}")
            return None
        self._last_result = result

        if result.found:
            self.path_found.emit(result)
        else:
            self.no_path.emit(result)
            self.message.emit(NO_PATH_MESSAGE)
        return result

    def start_movement(self) -> bool:
        """Find a path and start walking it, restarting any walk in progress."""
        self._timer.stop()
        result = self.find_path()
        if result is None or not result.found:
            return False

        try:
            event = self._walker.start(result.path)
        except Exception as e:
            self.error_occurred.emit(f"Failed to start walk: {e}")
            return False
        if event is not None:
            self._handle_event(event)
            return True

        logger.info("Walking %d waypoints", result.length)
        self._timer.start(self._config.tick_interval_ms)
        return True

    def stop_movement(self) -> bool:
        """Halt the walk, leaving the occupant where it is."""
        self._timer.stop()
        stopped = self._walker.stop()
        if stopped:
            logger.info("Walk stopped at %s", self._walker.position)
        return stopped

    def reset_position(self) -> Optional[Coord]:
        """Stop walking and put the occupant back on its start cell."""
        self.stop_movement()
        if self._grid is None:
            return None
        start = self._grid.reset_occupant()
        if start is not None:
            self._walker.reset(start)
        self._last_result = None
        self.grid_updated.emit()
        return start

    def advance(self, elapsed: float) -> Optional[WalkerEvent]:
        """Run one walker tick of ``elapsed`` seconds."""
        try:
            event = self._walker.step(elapsed)
        except Exception as e:
            self._timer.stop()
            self.error_occurred.emit(f"Walk error: {e}")
            return None
        if event is not None:
            self._handle_event(event)
        return event

    # Configuration

    def update_config(self, **kwargs) -> bool:
        """
        Update controller or walker configuration.

        Walker settings are rebuilt through WalkerConfig so they are
        validated; on a bad value nothing changes and error_occurred fires.
        Unknown keys are ignored.
        """
        walker_keys = {f.name for f in fields(WalkerConfig)}
        walker_kwargs = {k: v for k, v in kwargs.items() if k in walker_keys}
        try:
            walker_config = replace(self._walker.config, **walker_kwargs)
        except ValueError as e:
            self.error_occurred.emit(f"Invalid walker config: {e}")
            return False

        self._walker.config = walker_config
        for key, value in kwargs.items():
            if key not in walker_keys and hasattr(self._config, key):
                setattr(self._config, key, value)
        if self._timer.isActive():
            self._timer.setInterval(self._config.tick_interval_ms)
        return True

    # Event handling

    def _handle_event(self, event: WalkerEvent):
        if event.is_arrival:
            if self._grid is not None:
                self._grid.move_occupant(event.waypoint)
            self.waypoint_reached.emit(event.waypoint)
            self.grid_updated.emit()
        elif event.is_finished:
            self.walk_finished.emit()
            self.message.emit(COMPLETED_MESSAGE)

    def _on_walk_finished(self):
        """Called when the walker enters FINISHED."""
        self._timer.stop()
        logger.info("Walk finished at %s", self._walker.position)

    def _on_timer_tick(self):
        """Called on each timer tick while walking."""
        if self._walker.is_walking:
            self.advance(self._config.tick_interval_ms / 1000.0)
        else:
            self._timer.stop()
