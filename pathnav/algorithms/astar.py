"""A* shortest-path search.

Works on any networkx-style directed graph exposing ``_adj``. With an
admissible and consistent heuristic the first time the goal is popped from the
open set its cost is minimal, so the search stops there and the goal is not
expanded. Without a heuristic the search degrades to Dijkstra.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Set, Tuple

import networkx as nx

from pathnav.algorithms.base import Cost, EdgeCost, Heuristic, NodeID


def _zero_heuristic(_node: NodeID, _goal: NodeID) -> Cost:
    return 0.0


def _resolve_path(
    pred: Dict[NodeID, Optional[NodeID]], dst_node: NodeID
) -> List[NodeID]:
    """Walk predecessors back from ``dst_node`` and return the path source-first."""
    path: List[NodeID] = []
    node: Optional[NodeID] = dst_node
    while node is not None:
        path.append(node)
        node = pred[node]
    path.reverse()
    return path


def astar(
    graph: nx.DiGraph,
    src_node: NodeID,
    dst_node: NodeID,
    heuristic: Optional[Heuristic] = None,
    edge_cost: Optional[EdgeCost] = None,
    weight_attr: str = "weight",
) -> Optional[Tuple[Cost, List[NodeID]]]:
    """Find a lowest-cost path from ``src_node`` to ``dst_node``.

    The open set is a binary heap ordered by ``f = g + h``; an insertion
    counter breaks ties so equal-``f`` entries pop first-in, first-out and node
    IDs are never compared. Nodes are finalized (closed) when popped.

    Args:
        graph: Directed graph to search.
        src_node: Start node.
        dst_node: Goal node.
        heuristic: ``heuristic(node, goal)`` estimate of remaining cost. Must
            not overestimate for the result to be optimal. Defaults to zero.
        edge_cost: ``edge_cost(u, v, attr)`` cost of an edge. Defaults to the
            ``weight_attr`` edge attribute.
        weight_attr: Edge attribute read when ``edge_cost`` is not given.

    Returns:
        ``(cost, nodes)`` with nodes ordered from ``src_node`` to ``dst_node``,
        or None if ``dst_node`` is unreachable.

    Raises:
        KeyError: If either endpoint is not in the graph.
        ValueError: If a negative edge cost is encountered.
    """
    outgoing_adjacencies = graph._adj  # type: ignore[attr-defined]
    if src_node not in outgoing_adjacencies:
        raise KeyError(f"Source node '{src_node}' is not in the graph.")
    if dst_node not in outgoing_adjacencies:
        raise KeyError(f"Destination node '{dst_node}' is not in the graph.")

    if src_node == dst_node:
        return 0.0, [src_node]

    h = heuristic or _zero_heuristic
    costs: Dict[NodeID, Cost] = {src_node: 0.0}
    pred: Dict[NodeID, Optional[NodeID]] = {src_node: None}
    closed: Set[NodeID] = set()
    tie = count()
    open_pq: List[Tuple[Cost, int, Cost, NodeID]] = [
        (h(src_node, dst_node), next(tie), 0.0, src_node)
    ]

    while open_pq:
        _, _, current_cost, node_id = heappop(open_pq)
        if node_id in closed or current_cost > costs[node_id]:
            continue

        if node_id == dst_node:
            return current_cost, _resolve_path(pred, dst_node)

        closed.add(node_id)

        for neighbor_id, e_attr in outgoing_adjacencies[node_id].items():
            if neighbor_id in closed:
                continue

            if edge_cost is None:
                step = e_attr[weight_attr]
            else:
                step = edge_cost(node_id, neighbor_id, e_attr)
            if step < 0:
                raise ValueError(
                    f"Negative cost {step} on edge '{node_id}' -> '{neighbor_id}'."
                )

            new_cost = current_cost + step
            if neighbor_id not in costs or new_cost < costs[neighbor_id]:
                costs[neighbor_id] = new_cost
                pred[neighbor_id] = node_id
                estimate = new_cost + h(neighbor_id, dst_node)
                heappush(open_pq, (estimate, next(tie), new_cost, neighbor_id))

    return None
