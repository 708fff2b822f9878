"""Navigable graph built from drawn line geometry.

`NavigationGraph` extends `networkx.DiGraph` with idempotent coordinate-keyed
nodes, strict edge insertion, explicit bidirectional edges weighted by
geographic distance, and nearest-node lookup. The graph is always rebuilt in
full from the complete geometry set; there is no incremental patching.
"""

from __future__ import annotations

import time
from typing import Any, Dict, Hashable, Optional, Sequence

import networkx as nx
import numpy as np

from pathnav.config import DEFAULT_CONFIG, NavigationConfig
from pathnav.geo_helpers import Coordinate, distances_from, get_distance_func
from pathnav.geometry import ChainParseResult, coerce_coordinate, parse_chains
from pathnav.logging import get_logger

logger = get_logger(__name__)

NodeID = Hashable

WEIGHT_ATTR = "weight"


class NavigationGraph(nx.DiGraph):
    """A directed graph of path nodes keyed by their coordinates.

    This class enforces:
      - Node identity derived from the coordinate (``"x,y"`` string key), so the
        same point in several chains resolves to one node.
      - Idempotent node insertion: re-adding an existing node is a no-op and
        leaves its data untouched.
      - No automatic creation of missing nodes when adding an edge.
      - Every segment stored as two directed edges with equal weight.

    The distance metric and coordinate precision live in the graph attributes
    (``graph.graph``) so they survive copies and serialization.

    Inherits from:
        networkx.DiGraph
    """

    def __init__(
        self,
        incoming_graph_data: Any = None,
        config: Optional[NavigationConfig] = None,
        **attr: Any,
    ) -> None:
        """Initialize a NavigationGraph.

        Args:
            incoming_graph_data: Forwarded to the DiGraph constructor.
            config: Metric and precision settings. Defaults to
                ``DEFAULT_CONFIG`` unless ``attr`` already carries them.
            **attr: Graph attributes forwarded to the DiGraph constructor.
        """
        super().__init__(incoming_graph_data, **attr)
        if config is not None:
            self.graph["metric"] = config.metric.value
            self.graph["coordinate_precision"] = config.coordinate_precision
        else:
            self.graph.setdefault("metric", DEFAULT_CONFIG.metric.value)
            self.graph.setdefault(
                "coordinate_precision", DEFAULT_CONFIG.coordinate_precision
            )
        # Bumped on every rebuild; engines compare it to detect staleness
        self._version: int = 0

    @property
    def config(self) -> NavigationConfig:
        """Settings this graph was built with."""
        return NavigationConfig(
            metric=self.graph["metric"],
            coordinate_precision=self.graph["coordinate_precision"],
        )

    @property
    def version(self) -> int:
        """Rebuild counter of this graph."""
        return self._version

    def distance(self, a: Sequence[float], b: Sequence[float]) -> float:
        """Distance between two coordinates under this graph's metric."""
        return get_distance_func(self.graph["metric"])(a, b)

    #
    # Node management
    #
    def canonical_coordinate(self, coord: Sequence[float]) -> Coordinate:
        """Return ``coord`` as the float pair used for node identity.

        Applies ``coordinate_precision`` rounding when configured and folds
        ``-0.0`` into ``0.0``.
        """
        x, y = float(coord[0]), float(coord[1])
        precision = self.graph["coordinate_precision"]
        if precision is not None:
            x, y = round(x, precision), round(y, precision)
        return x + 0.0, y + 0.0

    def node_key(self, coord: Sequence[float]) -> str:
        """Return the node identity for ``coord``."""
        x, y = self.canonical_coordinate(coord)
        return f"{x!r},{y!r}"

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a node unless it already exists.

        Args:
            node_for_adding: The node to add.
            **attr: Attributes for a newly created node; ignored when the node
                already exists.
        """
        if node_for_adding in self._node:
            return
        super().add_node(node_for_adding, **attr)

    def add_coordinate(self, coord: Sequence[float]) -> NodeID:
        """Insert the node for ``coord`` (idempotent) and return its ID."""
        x, y = self.canonical_coordinate(coord)
        node_id = self.node_key((x, y))
        self.add_node(node_id, x=x, y=y)
        return node_id

    def node_coordinate(self, node: NodeID) -> Coordinate:
        """Return the ``(x, y)`` coordinate of ``node``.

        Raises:
            ValueError: If the node does not exist.
        """
        if node not in self._node:
            raise ValueError(f"Node '{node}' does not exist.")
        data = self._node[node]
        return data["x"], data["y"]

    #
    # Edge management
    #
    def add_edge(self, u_of_edge: NodeID, v_of_edge: NodeID, **attr: Any) -> None:
        """Add a directed edge between two existing nodes.

        Raises:
            ValueError: If either node does not exist.
        """
        if u_of_edge not in self._node:
            raise ValueError(f"Source node '{u_of_edge}' does not exist.")
        if v_of_edge not in self._node:
            raise ValueError(f"Target node '{v_of_edge}' does not exist.")
        super().add_edge(u_of_edge, v_of_edge, **attr)

    def add_bidirectional_edge(self, u: NodeID, v: NodeID, weight: float) -> None:
        """Add ``u -> v`` and ``v -> u``, both carrying ``weight``."""
        self.add_edge(u, v, **{WEIGHT_ATTR: weight})
        self.add_edge(v, u, **{WEIGHT_ATTR: weight})

    def edge_weight(self, u: NodeID, v: NodeID) -> float:
        """Return the weight of the directed edge ``u -> v``.

        Raises:
            ValueError: If no such edge exists.
        """
        try:
            return self._adj[u][v][WEIGHT_ATTR]
        except KeyError:
            raise ValueError(f"No edge from '{u}' to '{v}'.") from None

    #
    # Construction
    #
    def rebuild(self, geometry: Any) -> ChainParseResult:
        """Discard all nodes and edges and rebuild from ``geometry``.

        Each consecutive coordinate pair of every line chain becomes a
        bidirectional edge weighted by the distance between its endpoints.
        Malformed chains are skipped; non-line geometries are ignored.

        Args:
            geometry: A GeoJSON FeatureCollection, Feature(s) or geometries.

        Returns:
            ChainParseResult: The chains ingested and the skip/ignore counts.
        """
        started = time.perf_counter()

        # DiGraph.clear() also wipes graph attributes; keep metric/precision
        graph_attrs = dict(self.graph)
        self.clear()
        self.graph.update(graph_attrs)
        self._version += 1

        parsed = parse_chains(geometry)
        for chain in parsed.chains:
            for start, end in zip(chain, chain[1:]):
                u = self.add_coordinate(start)
                v = self.add_coordinate(end)
                if u == v:
                    continue
                weight = self.distance(self.node_coordinate(u), self.node_coordinate(v))
                self.add_bidirectional_edge(u, v, weight)

        elapsed = time.perf_counter() - started
        stats = self.stats()
        logger.info(
            "Graph built: %d nodes, %d links from %d chains in %.3fs",
            stats["nodes"],
            stats["edges"],
            len(parsed.chains),
            elapsed,
        )
        if parsed.skipped:
            logger.warning("Skipped %d malformed line geometries", parsed.skipped)
        return parsed

    #
    # Queries
    #
    def nearest_node(self, coord: Sequence[float]) -> Optional[NodeID]:
        """Return the node closest to ``coord``, or None if the graph is empty.

        Scans every node; ties go to the node inserted first.

        Raises:
            ValueError: If ``coord`` is not a pair of finite numbers.
        """
        query = coerce_coordinate(coord)
        if not self._node:
            return None

        node_ids = list(self._node)
        count = len(node_ids)
        xs = np.fromiter((d["x"] for d in self._node.values()), float, count)
        ys = np.fromiter((d["y"] for d in self._node.values()), float, count)
        dists = distances_from(query, xs, ys, self.graph["metric"])
        return node_ids[int(np.argmin(dists))]

    def stats(self) -> Dict[str, int]:
        """Return node and directed-edge counts."""
        return {"nodes": self.number_of_nodes(), "edges": self.number_of_edges()}

    def to_dict(self) -> Dict[str, Any]:
        """Convert the graph to a node-link dict suitable for JSON serialization."""
        # Import here to avoid circular import
        from pathnav.io import graph_to_node_link

        return graph_to_node_link(self)


def build_graph(
    geometry: Any, config: Optional[NavigationConfig] = None
) -> NavigationGraph:
    """Build a fresh NavigationGraph from ``geometry``.

    Args:
        geometry: A GeoJSON FeatureCollection, Feature(s) or geometries.
        config: Metric and precision settings (defaults to ``DEFAULT_CONFIG``).

    Returns:
        NavigationGraph: The new graph.
    """
    graph = NavigationGraph(config=config)
    graph.rebuild(geometry)
    return graph
