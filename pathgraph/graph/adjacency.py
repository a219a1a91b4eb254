"""Adjacency structure for the weighted, undirected graph.

Every inserted edge is stored as two directed arcs, one in each
direction, so that a search can walk it both ways.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.models import Edge, Node
from .dijkstra import shortest_distance


@dataclass
class Graph:
    """Weighted, undirected graph over integer node ids.

    The graph starts empty and is filled with ``add_node`` and
    ``add_edge``. Once built it can be queried any number of times.
    Mutating the graph while a query runs on another thread is not
    supported; callers must serialize writes themselves.

    Example:
        graph = Graph()
        graph.add_node(Node(id=1, x=0, y=0))
        graph.add_node(Node(id=2, x=3, y=4))
        graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=5))
        graph.shortest_path(1, 2)  # 5
    """

    _nodes: Dict[int, Node] = field(default_factory=dict, init=False, repr=False)
    _arcs: Dict[int, List[Edge]] = field(default_factory=dict, init=False, repr=False)

    def add_node(self, node: Node) -> None:
        """Insert a node, replacing any node already stored under its id."""
        self._nodes[node.id] = node

    def add_edge(self, edge: Edge) -> None:
        """Insert an undirected edge as two directed arcs.

        Neither endpoint has to be a known node. Parallel edges and
        self-loops are stored as given.
        """
        self._arcs.setdefault(edge.node_a_id, []).append(edge)
        reverse = edge.reversed()
        self._arcs.setdefault(reverse.node_a_id, []).append(reverse)

    def shortest_path(self, from_id: int, to_id: int) -> int:
        """Return the minimum total weight from ``from_id`` to ``to_id``.

        Returns ``UNREACHABLE`` when either id is unknown, when no path
        exists, or when every path is too expensive to represent.
        """
        return shortest_distance(self, from_id, to_id)

    def get_node(self, node_id: int) -> Optional[Node]:
        return self._nodes.get(node_id)

    def node_ids(self) -> Tuple[int, ...]:
        return tuple(self._nodes)

    def nodes(self) -> Iterator[Node]:
        return iter(tuple(self._nodes.values()))

    def arcs(self, node_id: int) -> Tuple[Edge, ...]:
        """Outgoing arcs of a node, in insertion order.

        Ids that only appear as edge endpoints still have arcs.
        """
        return tuple(self._arcs.get(node_id, ()))

    @property
    def arc_count(self) -> int:
        return sum(len(arcs) for arcs in self._arcs.values())

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)
