"""GeoJSON input/output and node-link serialization."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Union

from pathnav.graph.nav_graph import NavigationGraph, NodeID
from pathnav.route import Route


def load_features(source: Union[str, Path]) -> List[Dict[str, Any]]:
    """Load GeoJSON features from a file path or a JSON string.

    A ``str`` that starts with ``{`` or ``[`` (after whitespace) is parsed as
    JSON; anything else is treated as a path.

    Args:
        source: Path to a GeoJSON file, or GeoJSON text.

    Returns:
        List of Feature (or bare geometry) dicts.

    Raises:
        ValueError: If the document is not a FeatureCollection, Feature,
            geometry, or list of those.
    """
    if isinstance(source, str) and source.lstrip()[:1] in ("{", "["):
        data = json.loads(source)
    else:
        with open(source, "r", encoding="utf-8") as fh:
            data = json.load(fh)

    if isinstance(data, list):
        return data
    if not isinstance(data, dict):
        raise ValueError("GeoJSON document must be an object or an array.")
    if data.get("type") == "FeatureCollection":
        features = data.get("features")
        if features is None:
            return []
        if not isinstance(features, list):
            raise ValueError("'features' must be a list in a FeatureCollection.")
        return features
    if "type" not in data:
        raise ValueError("GeoJSON object is missing 'type'.")
    return [data]


def route_to_feature_collection(route: Route) -> Dict[str, Any]:
    """Wrap a route as a FeatureCollection; empty when no route was found."""
    feature = route.to_geojson()
    return {
        "type": "FeatureCollection",
        "features": [feature] if feature is not None else [],
    }


def graph_to_node_link(graph: NavigationGraph) -> Dict[str, Any]:
    """
    Converts a NavigationGraph into a node-link dict representation.

    The returned dict has the following structure:
        {
            "graph": { ... graph attributes (metric, precision) ... },
            "nodes": [
                {"id": node_id, "attr": {"x": ..., "y": ...}},
                ...
            ],
            "links": [
                {
                    "source": <indexed_node>,
                    "target": <indexed_node>,
                    "attr": {"weight": ...},
                },
                ...
            ]
        }

    Args:
        graph: The NavigationGraph to convert.

    Returns:
        A dict containing the 'graph' attributes, list of 'nodes', and list of 'links'.
    """
    node_list = list(graph.nodes)
    node_map = {node_id: i for i, node_id in enumerate(node_list)}

    return {
        "graph": dict(graph.graph),
        "nodes": [
            {"id": node_id, "attr": dict(graph.nodes[node_id])} for node_id in node_list
        ],
        "links": [
            {
                "source": node_map[src],
                "target": node_map[dst],
                "attr": dict(edge_attrs),
            }
            for src, dst, edge_attrs in graph.edges(data=True)
        ],
    }


def node_link_to_graph(data: Dict[str, Any]) -> NavigationGraph:
    """
    Reconstructs a NavigationGraph from its node-link dict representation.

    Args:
        data: A dict in the format produced by `graph_to_node_link`.

    Returns:
        A NavigationGraph with the same nodes, edges and attributes.
    """
    graph = NavigationGraph(**data.get("graph", {}))

    node_map: Dict[int, NodeID] = {}
    for idx, node_obj in enumerate(data.get("nodes", [])):
        node_id = node_obj["id"]
        graph.add_node(node_id, **node_obj["attr"])
        node_map[idx] = node_id

    for edge_obj in data.get("links", []):
        graph.add_edge(
            node_map[edge_obj["source"]],
            node_map[edge_obj["target"]],
            **edge_obj.get("attr", {}),
        )

    return graph
