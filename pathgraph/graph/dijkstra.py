"""Shortest-distance computation using Dijkstra's algorithm.

The search is only correct for non-negative weights. That is a
precondition of the graph and is not checked at runtime.
"""

from __future__ import annotations

import heapq
from enum import Enum, auto
from typing import TYPE_CHECKING, Dict, List, Tuple

from ..domain.models import UNREACHABLE

if TYPE_CHECKING:
    from .adjacency import Graph


class VisitStatus(Enum):
    """Search state of a node during one query."""

    UNVISITED = auto()
    FRONTIER = auto()
    FINALIZED = auto()


def saturating_add(a: int, b: int) -> int:
    """Add two distances, clamping the sum at ``UNREACHABLE``."""
    total = a + b
    if total > UNREACHABLE:
        return UNREACHABLE
    return total


def shortest_distance(graph: Graph, from_id: int, to_id: int) -> int:
    """Compute the minimum total weight between two nodes.

    Parameters
    ----------
    graph:
        A built graph. It is only read.
    from_id:
        Identifier of the source node.
    to_id:
        Identifier of the target node.

    Returns
    -------
    int
        The sum of arc weights along the cheapest path, ``0`` when the
        source is the target, or ``UNREACHABLE`` if either id has no node
        record or no path exists.
    """
    if from_id not in graph or to_id not in graph:
        return UNREACHABLE

    node_ids = graph.node_ids()
    dist: Dict[int, int] = dict.fromkeys(node_ids, UNREACHABLE)
    status: Dict[int, VisitStatus] = dict.fromkeys(node_ids, VisitStatus.UNVISITED)

    dist[from_id] = 0
    status[from_id] = VisitStatus.FRONTIER
    heap: List[Tuple[int, int]] = [(0, from_id)]

    while heap:
        dist_u, u = heapq.heappop(heap)

        # First pop of the target is final since weights are non-negative.
        if u == to_id:
            return dist_u

        if dist[u] < dist_u:
            continue

        status[u] = VisitStatus.FINALIZED

        for arc in graph.arcs(u):
            v = arc.node_b_id
            # Endpoints without a node record are never reachable.
            if v not in status or status[v] is VisitStatus.FINALIZED:
                continue
            candidate = saturating_add(dist_u, arc.weight)
            if candidate < dist[v]:
                dist[v] = candidate
                status[v] = VisitStatus.FRONTIER
                heapq.heappush(heap, (candidate, v))

    return UNREACHABLE
