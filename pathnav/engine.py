"""Path search engine: snap query points to the graph and run A* between them."""

from __future__ import annotations

from typing import Optional, Sequence

from pathnav.algorithms.astar import astar
from pathnav.algorithms.base import Cost, NodeID
from pathnav.graph.nav_graph import WEIGHT_ATTR, NavigationGraph
from pathnav.logging import get_logger
from pathnav.route import Route, RouteStatus

logger = get_logger(__name__)


class StaleGraphError(RuntimeError):
    """Raised when an engine is queried after its graph was rebuilt in place."""


class PathFinder:
    """A* route finder armed against one NavigationGraph snapshot.

    The engine must be re-armed with `arm()` after every rebuild. Rebuilding the
    armed graph in place without re-arming makes queries raise
    `StaleGraphError`. An engine with no graph behaves as if the graph were
    empty.

    Edge cost is the stored edge weight; the heuristic is the distance from a
    node to the goal under the graph's own metric. Both come from the same
    distance function, so the heuristic never overestimates and A* returns an
    optimal route.
    """

    def __init__(self, graph: Optional[NavigationGraph] = None) -> None:
        self._graph: Optional[NavigationGraph] = None
        self._armed_version: Optional[int] = None
        if graph is not None:
            self.arm(graph)

    @property
    def graph(self) -> Optional[NavigationGraph]:
        return self._graph

    def arm(self, graph: NavigationGraph) -> None:
        """Point the engine at ``graph`` as it is now."""
        self._graph = graph
        self._armed_version = graph.version
        logger.debug(
            "PathFinder armed: %d nodes, version %d",
            graph.number_of_nodes(),
            graph.version,
        )

    def _check_fresh(self) -> NavigationGraph:
        graph = self._graph
        assert graph is not None
        if graph.version != self._armed_version:
            raise StaleGraphError(
                f"Graph was rebuilt (version {graph.version}) after the engine "
                f"was armed (version {self._armed_version}); call arm() again."
            )
        return graph

    def _heuristic(self, node: NodeID, goal: NodeID) -> Cost:
        graph = self._graph
        assert graph is not None
        return graph.distance(graph.node_coordinate(node), graph.node_coordinate(goal))

    def find_path(
        self, start: Sequence[float], end: Sequence[float]
    ) -> Route:
        """Find the shortest route between two arbitrary coordinates.

        Both coordinates are first snapped to their nearest graph nodes.

        Args:
            start: Start coordinate ``(x, y)``.
            end: Destination coordinate ``(x, y)``.

        Returns:
            Route: FOUND with coordinates start-to-end, UNREACHABLE when the
            snapped nodes are disconnected, or EMPTY_GRAPH when there is
            nothing to search.

        Raises:
            StaleGraphError: If the armed graph was rebuilt since `arm()`.
            ValueError: If a query coordinate is not a pair of finite numbers.
        """
        if self._graph is None:
            logger.debug("find_path called before any graph was armed")
            return Route.empty_graph()

        graph = self._check_fresh()
        start_node = graph.nearest_node(start)
        end_node = graph.nearest_node(end)
        if start_node is None or end_node is None:
            return Route.empty_graph()

        result = astar(
            graph,
            start_node,
            end_node,
            heuristic=self._heuristic,
            weight_attr=WEIGHT_ATTR,
        )
        if result is None:
            logger.debug("No path from %s to %s", start_node, end_node)
            return Route.unreachable(start_node, end_node)

        cost, nodes = result
        return Route(
            status=RouteStatus.FOUND,
            coordinates=tuple(graph.node_coordinate(n) for n in nodes),
            nodes=tuple(nodes),
            cost=cost,
            start_node=start_node,
            end_node=end_node,
        )
