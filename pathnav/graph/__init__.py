"""Graph store.

This package provides `NavigationGraph`, the coordinate-keyed directed graph
built from drawn line geometry, and `build_graph` to create one from scratch.
"""

from pathnav.graph.nav_graph import NavigationGraph, NodeID, build_graph

__all__ = ["NavigationGraph", "NodeID", "build_graph"]
