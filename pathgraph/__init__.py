"""Weighted, undirected graph with single-pair shortest-distance queries.

    from pathgraph import Edge, Graph, Node

    graph = Graph()
    graph.add_node(Node(id=1, x=0, y=0))
    graph.add_node(Node(id=2, x=1, y=0))
    graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=4))
    graph.shortest_path(1, 2)  # 4

Queries never raise. An unknown node, a disconnected target and an
overflowing path cost all return ``UNREACHABLE``.
"""

from .domain.models import UNREACHABLE, DistanceResult, Edge, Node
from .graph.adjacency import Graph

__all__ = ["Graph", "Node", "Edge", "DistanceResult", "UNREACHABLE"]
