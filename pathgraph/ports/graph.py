"""Graph ports - Abstractions for graph loading and distance queries.

These protocols define the contracts between the graph engine and the
collaborators that feed it and serve its answers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import DistanceResult, Node
    from ..graph.adjacency import Graph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py

    The repository materializes nodes and edges from persistent storage
    and returns a fully built graph.
    """

    def load(self) -> Graph:
        """Load the graph.

        Returns:
            The built graph, ready to be queried.
        """
        ...

    def get_node(self, node_id: int) -> Optional[Node]:
        """Get a node by id.

        Args:
            node_id: The node id to look up.

        Returns:
            The node, or None if not found.
        """
        ...

    def list_nodes(self) -> Sequence[Node]:
        """List all nodes in the graph."""
        ...


class DistanceSolverPort(Protocol):
    """Port for shortest-distance computation.

    Implementation: adapters/graph/dijkstra_solver.py
    """

    def solve(self, graph: Graph, from_id: int, to_id: int) -> DistanceResult:
        """Find the shortest distance between two nodes.

        Args:
            graph: The built graph.
            from_id: Source node id.
            to_id: Target node id.

        Returns:
            DistanceResult, holding ``UNREACHABLE`` when there is no path.
        """
        ...

    def solve_strict(self, graph: Graph, from_id: int, to_id: int) -> DistanceResult:
        """Like solve(), but raise when no path can be reported."""
        ...
