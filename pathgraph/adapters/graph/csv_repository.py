"""CSV Graph Repository adapter.

Reads node and edge rows from two CSV files and builds a Graph:

- nodes file: ``id,x,y``
- edges file: ``node_a_id,node_b_id,weight``

The built graph is cached until clear_cache() is called.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from ...config import GraphConfig, get_config
from ...domain.errors import GraphLoadError
from ...domain.models import Edge, Node
from ...graph.adjacency import Graph

T = TypeVar("T")

NODE_COLUMNS = ("id", "x", "y")
EDGE_COLUMNS = ("node_a_id", "node_b_id", "weight")


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[Graph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> Graph:
        """Load the graph from CSV files.

        Returns:
            The built graph.

        Raises:
            GraphLoadError: If a file cannot be read or a row cannot be parsed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "nodes_path": str(self.config.nodes_path),
                "edges_path": str(self.config.edges_path),
            },
        )

        graph = Graph()
        for node in self._read_nodes():
            graph.add_node(node)
        for edge in self._read_edges():
            graph.add_edge(edge)

        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"nodes": len(graph), "arcs": graph.arc_count},
        )
        return graph

    def _read_nodes(self) -> List[Node]:
        return self._read_records(self.config.nodes_path, NODE_COLUMNS, Node.from_row)

    def _read_edges(self) -> List[Edge]:
        return self._read_records(self.config.edges_path, EDGE_COLUMNS, Edge.from_row)

    def _read_records(
        self,
        path: Path,
        columns: Sequence[str],
        build: Callable[[Dict[str, str]], T],
    ) -> List[T]:
        """Build one record per complete row of a CSV file."""
        records: List[T] = []
        try:
            with path.open(newline="", encoding="utf-8") as f:
                reader = csv.DictReader(f)
                missing = [c for c in columns if c not in (reader.fieldnames or ())]
                if missing:
                    raise GraphLoadError(
                        f"Missing columns {', '.join(missing)} in {path.name}",
                        file_path=str(path),
                    )

                for line_no, row in enumerate(reader, start=2):
                    values = {c: (row.get(c) or "").strip() for c in columns}
                    if not all(values.values()):
                        self._logger.debug(
                            "Skipping incomplete row",
                            extra={"file": path.name, "line": line_no},
                        )
                        continue
                    records.append(build(values))
        except OSError as e:
            raise GraphLoadError(
                f"Failed to read {path.name}",
                file_path=str(path),
                cause=e,
            ) from e
        except csv.Error as e:
            raise GraphLoadError(
                f"Malformed CSV in {path.name}",
                file_path=str(path),
                cause=e,
            ) from e
        except UnicodeDecodeError as e:
            raise GraphLoadError(
                f"Invalid encoding in {path.name}",
                file_path=str(path),
                cause=e,
            ) from e
        except ValueError as e:
            raise GraphLoadError(
                f"Invalid integer in {path.name}",
                file_path=str(path),
                cause=e,
            ) from e
        return records

    def get_node(self, node_id: int) -> Optional[Node]:
        """Get a node by id.

        Args:
            node_id: The node id to look up.

        Returns:
            The node, or None if not found.
        """
        return self.load().get_node(node_id)

    def list_nodes(self) -> Sequence[Node]:
        """List all nodes."""
        return list(self.load().nodes())

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
