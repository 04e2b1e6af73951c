from __future__ import annotations

from typing import Dict, List, Optional, Set

from core.graph import Node
from core.priority_queue import PriorityQueue


def dijkstra(
    source: Node, costs: List[float], relevant_nodes: Optional[Set[Node]] = None
) -> Dict[Node, float]:
    """
    Returns the shortest distances from source to every node it can reach.
    costs[e.id] is the (non-negative) cost of edge e.
    If relevant_nodes is given, nodes outside of it are ignored.
    """
    if any(cost < 0 for cost in costs):
        raise ValueError("Dijkstra's algorithm requires non-negative edge costs.")

    dist: Dict[Node, float] = {}
    queue: PriorityQueue[Node] = PriorityQueue([(0.0, source)])

    while not queue.is_empty():
        distance, v = queue.peek()
        queue.dequeue()
        dist[v] = distance
        for e in v.outgoing_edges:
            w = e.node_to
            if w in dist.keys():
                continue
            if relevant_nodes is not None and w not in relevant_nodes:
                continue
            relaxation = distance + costs[e.id]
            if w not in queue:
                queue.enqueue(w, relaxation)
            else:
                queue.decrease_priority(w, relaxation)
    return dist
