"""Qt glue driving the pathfinding core."""
