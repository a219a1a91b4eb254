"""Shortest-path service - Query orchestration.

Loads the graph once through the repository, then answers distance
queries against it with the configured solver.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Optional

from ..domain.models import DistanceResult
from ..graph.adjacency import Graph
from ..ports.graph import DistanceSolverPort, GraphRepositoryPort


@dataclass
class ShortestPathService:
    """Service answering distance queries between nodes.

    Attributes:
        graph_repository: Loads the graph
        solver: Computes shortest distances
    """

    graph_repository: GraphRepositoryPort
    solver: DistanceSolverPort

    _graph: Optional[Graph] = field(default=None, init=False, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> Graph:
        """The loaded graph, read-only from here on."""
        if self._graph is None:
            with self._lock:
                if self._graph is None:
                    self._graph = self.graph_repository.load()
                    self._logger.debug("Graph loaded", extra={"nodes": len(self._graph)})
        return self._graph

    def distance(self, from_id: int, to_id: int) -> DistanceResult:
        """Shortest distance between two nodes.

        Returns:
            DistanceResult holding ``UNREACHABLE`` when there is no path.

        Raises:
            GraphLoadError: If the graph cannot be loaded.
        """
        return self.solver.solve(self.graph, from_id, to_id)

    def distance_or_raise(self, from_id: int, to_id: int) -> DistanceResult:
        """Shortest distance between two nodes, raising when there is none.

        Raises:
            GraphLoadError: If the graph cannot be loaded.
            NodeNotFoundError: If either node is unknown.
            NoPathFoundError: If no finite-cost path exists.
        """
        return self.solver.solve_strict(self.graph, from_id, to_id)
