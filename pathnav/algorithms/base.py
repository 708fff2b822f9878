from typing import Callable, Hashable, Union

Cost = Union[int, float]
NodeID = Hashable

# heuristic(node, goal) -> estimated remaining cost; must never overestimate
Heuristic = Callable[[NodeID, NodeID], Cost]

# edge_cost(u, v, edge_attr) -> cost of traversing u -> v
EdgeCost = Callable[[NodeID, NodeID, dict], Cost]
