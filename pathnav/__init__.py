"""pathnav: shortest routes over path networks drawn on an image or map."""

from __future__ import annotations

from pathnav.algorithms.astar import astar
from pathnav.config import DEFAULT_CONFIG, NavigationConfig
from pathnav.engine import PathFinder, StaleGraphError
from pathnav.geo_helpers import DistanceMetric
from pathnav.geometry import GeometryKind, MalformedGeometryError
from pathnav.graph.nav_graph import NavigationGraph, build_graph
from pathnav.navigator import Navigator
from pathnav.route import Route, RouteStatus

__all__ = [
    "DEFAULT_CONFIG",
    "DistanceMetric",
    "GeometryKind",
    "MalformedGeometryError",
    "NavigationConfig",
    "NavigationGraph",
    "Navigator",
    "PathFinder",
    "Route",
    "RouteStatus",
    "StaleGraphError",
    "astar",
    "build_graph",
]
