"""Grid route planner built around an A* search."""

__version__ = "0.1.0"
