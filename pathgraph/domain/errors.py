"""Typed errors raised by the collaborators around the graph engine.

The engine itself never raises: every query returns a distance, with
``UNREACHABLE`` standing in for every failure. These errors are used by
the loading and request-handling layers, which need to report *why*
something went wrong.

All errors inherit from PathGraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PathGraphError(Exception):
    """Base error for the graph engine domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphLoadError(PathGraphError):
    """Graph rows could not be read or parsed.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class NodeNotFoundError(PathGraphError):
    """Node id not present in the graph.

    Attributes:
        node_id: The node id that was not found
    """

    node_id: Optional[int] = None


@dataclass
class NoPathFoundError(PathGraphError):
    """No finite-cost path exists between the requested nodes.

    Attributes:
        from_id: Source node id
        to_id: Target node id
    """

    from_id: Optional[int] = None
    to_id: Optional[int] = None


@dataclass
class ConfigurationError(PathGraphError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
    """

    setting_name: str = ""
