from __future__ import annotations

from typing import Dict, List, Set


class Edge:
    _node_from: Node
    _node_to: Node
    id: int

    def __init__(self, node_from: Node, node_to: Node, id: int):
        self._node_from = node_from
        self._node_to = node_to
        self.id = id

    @property
    def node_from(self) -> Node:
        return self._node_from

    @property
    def node_to(self) -> Node:
        return self._node_to

    def __str__(self):
        return str(self.id)


class Node:
    id: int
    incoming_edges: List[Edge]
    outgoing_edges: List[Edge]

    def __init__(self, id: int):
        self.id = id
        self.incoming_edges = []
        self.outgoing_edges = []

    def __eq__(self, other):
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __str__(self):
        return str(self.id)

    def __repr__(self):
        return f"Node({self.id})"


class DirectedGraph:
    edges: List[Edge]
    nodes: Dict[int, Node]

    def __init__(self):
        self.edges = []
        self.nodes = {}

    def add_edge(self, node_from: int, node_to: int) -> Edge:
        if node_from not in self.nodes.keys():
            self.nodes[node_from] = Node(node_from)
        if node_to not in self.nodes.keys():
            self.nodes[node_to] = Node(node_to)
        index = len(self.edges)
        edge = Edge(self.nodes[node_from], self.nodes[node_to], index)
        self.edges.append(edge)
        self.nodes[node_from].outgoing_edges.append(edge)
        self.nodes[node_to].incoming_edges.append(edge)
        return edge

    def get_reachable_nodes(self, source: Node) -> Set[Node]:
        """
        Returns all nodes that are reachable from source
        """
        nodes_found: Set[Node] = {source}
        queue = [source]
        while queue:
            v = queue.pop()
            for e in v.outgoing_edges:
                if e.node_to not in nodes_found:
                    nodes_found.add(e.node_to)
                    queue.append(e.node_to)
        return nodes_found


def build_sample_graph() -> DirectedGraph:
    """
    Notation: index (cost)
            0 (1)
           0 → → → → 1
           ↓ ↖       ↓
    1 (4)  ↓  3↖(1)  ↓ 2 (1)
           ↓     ↖   ↓
           ↓       ↖ ↓
           2 ← ← ← ← 3
             4 (1)
    Costs are returned by sample_costs().
    """
    graph = DirectedGraph()
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(1, 3)
    graph.add_edge(3, 0)
    graph.add_edge(3, 2)
    return graph


def sample_costs() -> List[float]:
    return [1.0, 4.0, 1.0, 1.0, 1.0]
