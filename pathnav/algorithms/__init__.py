"""Search algorithms over navigation graphs."""

from pathnav.algorithms.astar import astar

__all__ = ["astar"]
