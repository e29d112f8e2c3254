"""Finite State Machine for path walking phases."""

from enum import Enum
from typing import Callable, Optional, Set


class WalkerState(Enum):
    """States for a path walk."""
    IDLE = "idle"
    WALKING = "walking"
    FINISHED = "finished"


class WalkerStateMachine:
    """
    Finite State Machine for managing path walk states.

    State Transitions:
    IDLE -> WALKING (when a walk is started)
    WALKING -> WALKING (when a walk is restarted)
    WALKING -> IDLE (when stopped or reset)
    WALKING -> FINISHED (when the last waypoint is reached)
    FINISHED -> WALKING (when a new walk is started)
    FINISHED -> IDLE (when reset)
    """

    def __init__(self):
        self._current_state = WalkerState.IDLE
        self._state_callbacks = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> dict[WalkerState, Set[WalkerState]]:
        """Build the valid state transition map."""
        return {
            WalkerState.IDLE: {WalkerState.WALKING, WalkerState.IDLE},
            WalkerState.WALKING: {WalkerState.WALKING, WalkerState.IDLE, WalkerState.FINISHED},
            WalkerState.FINISHED: {WalkerState.WALKING, WalkerState.IDLE},
        }

    @property
    def current_state(self) -> WalkerState:
        """Get the current state."""
        return self._current_state

    def can_transition_to(self, target_state: WalkerState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: WalkerState) -> bool:
        """
        Attempt to transition to the target state.

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        self._current_state = target_state

        if target_state in self._state_callbacks:
            self._state_callbacks[target_state]()

        return True

    def on_state_enter(self, state: WalkerState, callback: Optional[Callable[[], None]]):
        """Register (or clear, with None) a callback for entering a state."""
        if callback is None:
            self._state_callbacks.pop(state, None)
        else:
            self._state_callbacks[state] = callback

    # Convenience methods for common operations

    def is_idle(self) -> bool:
        return self._current_state == WalkerState.IDLE

    def is_walking(self) -> bool:
        return self._current_state == WalkerState.WALKING

    def is_finished(self) -> bool:
        return self._current_state == WalkerState.FINISHED

    def start(self) -> bool:
        return self.transition_to(WalkerState.WALKING)

    def stop(self) -> bool:
        """Halt a walk in progress. Only valid while walking."""
        if not self.is_walking():
            return False
        return self.transition_to(WalkerState.IDLE)

    def finish(self) -> bool:
        return self.transition_to(WalkerState.FINISHED)

    def reset_to_idle(self) -> bool:
        return self.transition_to(WalkerState.IDLE)

    def get_state_description(self) -> str:
        """Get a human-readable description of the current state."""
        descriptions = {
            WalkerState.IDLE: "Ready to walk",
            WalkerState.WALKING: "Walking path",
            WalkerState.FINISHED: "Walk complete",
        }
        return descriptions.get(self._current_state, "Unknown state")
