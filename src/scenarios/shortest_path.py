from typing import Dict

from core.dijkstra import dijkstra
from core.graph import build_sample_graph, sample_costs


def run_scenario(source_id: int = 0, suppress_log: bool = False) -> Dict[int, float]:
    graph = build_sample_graph()
    if source_id not in graph.nodes:
        raise ValueError(f"The sample graph has no node {source_id}.")

    dist = dijkstra(graph.nodes[source_id], sample_costs())
    distances = {node.id: d for node, d in sorted(dist.items(), key=lambda item: item[0].id)}
    if not suppress_log:
        for node_id, d in distances.items():
            print(f"Node {node_id}: {d}")
    return distances


if __name__ == "__main__":
    run_scenario()
