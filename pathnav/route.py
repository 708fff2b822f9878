"""Route results returned by the path search engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Hashable, Optional, Tuple

from pathnav.geo_helpers import Coordinate


class RouteStatus(str, Enum):
    """Outcome of a route query.

    FOUND: a route exists; coordinates hold it start-to-end.
    UNREACHABLE: both points snapped to nodes, but no path connects them.
    EMPTY_GRAPH: no graph is armed, or the graph has no nodes.
    """

    FOUND = "found"
    UNREACHABLE = "unreachable"
    EMPTY_GRAPH = "empty_graph"


@dataclass(frozen=True)
class Route:
    """A computed route, or the explicit absence of one.

    Attributes:
        status: Query outcome.
        coordinates: Node coordinates from start to destination, inclusive.
            Empty unless ``status`` is FOUND; a single point when start and
            end resolve to the same node.
        nodes: Node IDs matching ``coordinates``.
        cost: Total edge weight along the route; None when not found.
        start_node: Node the start coordinate snapped to, if any.
        end_node: Node the end coordinate snapped to, if any.
    """

    status: RouteStatus
    coordinates: Tuple[Coordinate, ...] = ()
    nodes: Tuple[Hashable, ...] = ()
    cost: Optional[float] = None
    start_node: Optional[Hashable] = None
    end_node: Optional[Hashable] = None

    @classmethod
    def empty_graph(cls) -> Route:
        return cls(status=RouteStatus.EMPTY_GRAPH)

    @classmethod
    def unreachable(cls, start_node: Hashable, end_node: Hashable) -> Route:
        return cls(
            status=RouteStatus.UNREACHABLE, start_node=start_node, end_node=end_node
        )

    @property
    def found(self) -> bool:
        return self.status is RouteStatus.FOUND

    def __bool__(self) -> bool:
        return self.found

    def __len__(self) -> int:
        return len(self.coordinates)

    def to_geojson(self) -> Optional[Dict[str, Any]]:
        """Return the route as a GeoJSON Feature, or None when not found.

        A multi-point route becomes a LineString; a single-point route (start
        and end on the same node) becomes a Point.
        """
        if not self.found:
            return None

        if len(self.coordinates) == 1:
            geometry = {"type": "Point", "coordinates": list(self.coordinates[0])}
        else:
            geometry = {
                "type": "LineString",
                "coordinates": [list(c) for c in self.coordinates],
            }
        return {
            "type": "Feature",
            "geometry": geometry,
            "properties": {"cost": self.cost, "nodes": len(self.nodes)},
        }
