"""Navigator: owns the current graph and keeps the path finder armed against it."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from pathnav.config import DEFAULT_CONFIG, NavigationConfig
from pathnav.engine import PathFinder
from pathnav.graph.nav_graph import NavigationGraph, build_graph
from pathnav.logging import get_logger
from pathnav.route import Route

logger = get_logger(__name__)


class Navigator:
    """Entry point for drawing layers: rebuild on every edit, then query routes.

    Each `rebuild()` builds a brand-new graph from the complete geometry set and
    re-arms the path finder before returning, so a query can never see a
    previous graph. Before the first rebuild every query returns an
    EMPTY_GRAPH route.

    Example::

        nav = Navigator()
        nav.rebuild(feature_collection)
        route = nav.find_path((0.0, 0.0), (2.0, 1.0))
        if route:
            draw_line(route.coordinates)
    """

    def __init__(self, config: Optional[NavigationConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._graph: Optional[NavigationGraph] = None
        self._finder = PathFinder()

    @property
    def graph(self) -> Optional[NavigationGraph]:
        """The current graph, or None before the first rebuild."""
        return self._graph

    def rebuild(self, geometry: Any) -> NavigationGraph:
        """Replace the graph with one built from ``geometry`` and re-arm.

        Args:
            geometry: A GeoJSON FeatureCollection, Feature(s) or geometries.

        Returns:
            NavigationGraph: The new graph.
        """
        graph = build_graph(geometry, self.config)
        self._graph = graph
        self._finder.arm(graph)
        return graph

    def find_path(self, start: Sequence[float], end: Sequence[float]) -> Route:
        """Find the shortest route between two coordinates on the current graph."""
        route = self._finder.find_path(start, end)
        logger.debug(
            "Route %s -> %s: %s (%d points)",
            tuple(start),
            tuple(end),
            route.status.value,
            len(route),
        )
        return route
