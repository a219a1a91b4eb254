"""Graph engine: the adjacency structure and the shortest-path search.

``Graph`` accumulates nodes and edges; ``shortest_distance`` runs
Dijkstra's algorithm over a built graph.
"""

from .adjacency import Graph
from .dijkstra import VisitStatus, saturating_add, shortest_distance

__all__ = ["Graph", "VisitStatus", "saturating_add", "shortest_distance"]
