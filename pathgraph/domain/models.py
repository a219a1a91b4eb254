"""Immutable domain models for the graph engine.

All models are frozen dataclasses with slots. Nodes and edges are plain
value records: they perform no validation when constructed, referential
integrity is only looked at when a query runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

# Largest signed 32-bit integer, the width distances are stored with.
UNREACHABLE: int = 2**31 - 1


@dataclass(frozen=True, slots=True)
class Node:
    """A point in the graph.

    Attributes:
        id: Unique node identifier
        x: Horizontal position, carried for display only
        y: Vertical position, carried for display only
    """

    id: int
    x: int = 0
    y: int = 0

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Node:
        """Build a node from a persisted record with ``id``, ``x`` and ``y``."""
        return cls(id=int(row["id"]), x=int(row["x"]), y=int(row["y"]))


@dataclass(frozen=True, slots=True)
class Edge:
    """A weighted connection between two nodes.

    Inside a graph the same record type is used for a single directed
    arc: ``node_a_id`` is where the arc starts, ``node_b_id`` where it ends.

    Attributes:
        node_a_id: First endpoint
        node_b_id: Second endpoint
        weight: Non-negative traversal cost
    """

    node_a_id: int
    node_b_id: int
    weight: int

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Edge:
        """Build an edge from a persisted record."""
        return cls(
            node_a_id=int(row["node_a_id"]),
            node_b_id=int(row["node_b_id"]),
            weight=int(row["weight"]),
        )

    def reversed(self) -> Edge:
        """Return the arc going the other way with the same weight."""
        return Edge(
            node_a_id=self.node_b_id,
            node_b_id=self.node_a_id,
            weight=self.weight,
        )


@dataclass(frozen=True, slots=True)
class DistanceResult:
    """Result of a shortest-path query between two nodes.

    Attributes:
        from_id: Source node id
        to_id: Target node id
        distance: Minimum total weight, or ``UNREACHABLE``
    """

    from_id: int
    to_id: int
    distance: int

    @property
    def is_reachable(self) -> bool:
        """Check if a path was found.

        A missing endpoint, a disconnected target and a saturated sum all
        look the same here.
        """
        return self.distance != UNREACHABLE
