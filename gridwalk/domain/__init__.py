"""Framework-agnostic pathfinding core."""
