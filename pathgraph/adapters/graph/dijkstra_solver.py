"""Dijkstra Distance Solver adapter.

This adapter wraps the graph engine's search and adds:
- Domain model output (DistanceResult)
- A strict variant with typed errors
- Logging
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ...domain.errors import NodeNotFoundError, NoPathFoundError
from ...domain.models import DistanceResult
from ...graph.adjacency import Graph
from ...graph.dijkstra import shortest_distance


@dataclass
class DijkstraDistanceSolver:
    """Distance solver using Dijkstra's shortest path algorithm.

    This adapter implements DistanceSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: Graph, from_id: int, to_id: int) -> DistanceResult:
        """Find the shortest distance between two nodes.

        Never raises: unknown nodes, disconnection and saturation all come
        back as ``UNREACHABLE``.

        Args:
            graph: The built graph.
            from_id: Source node id.
            to_id: Target node id.

        Returns:
            DistanceResult with the distance or the sentinel.
        """
        self._logger.debug(
            "Solving distance",
            extra={"from_id": from_id, "to_id": to_id},
        )

        result = DistanceResult(
            from_id=from_id,
            to_id=to_id,
            distance=shortest_distance(graph, from_id, to_id),
        )

        if result.is_reachable:
            self._logger.info(
                "Distance found",
                extra={"from_id": from_id, "to_id": to_id, "distance": result.distance},
            )
        else:
            self._logger.info(
                "Target unreachable",
                extra={"from_id": from_id, "to_id": to_id},
            )
        return result

    def solve_strict(self, graph: Graph, from_id: int, to_id: int) -> DistanceResult:
        """Find the shortest distance, raising when there is none.

        Args:
            graph: The built graph.
            from_id: Source node id.
            to_id: Target node id.

        Returns:
            DistanceResult with a finite distance.

        Raises:
            NodeNotFoundError: If either node is not in the graph.
            NoPathFoundError: If no finite-cost path exists.
        """
        if from_id not in graph:
            raise NodeNotFoundError(
                f"Source node not in graph: {from_id}",
                node_id=from_id,
            )
        if to_id not in graph:
            raise NodeNotFoundError(
                f"Target node not in graph: {to_id}",
                node_id=to_id,
            )

        result = self.solve(graph, from_id, to_id)
        if not result.is_reachable:
            self._logger.warning(
                "No path found",
                extra={"from_id": from_id, "to_id": to_id},
            )
            raise NoPathFoundError(
                f"No path from {from_id} to {to_id}",
                from_id=from_id,
                to_id=to_id,
            )
        return result
