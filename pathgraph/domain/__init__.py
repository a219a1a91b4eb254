"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the package. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphLoadError,
    NodeNotFoundError,
    NoPathFoundError,
    PathGraphError,
)
from .models import UNREACHABLE, DistanceResult, Edge, Node

__all__ = [
    # Models
    "Node",
    "Edge",
    "DistanceResult",
    "UNREACHABLE",
    # Errors
    "PathGraphError",
    "GraphLoadError",
    "NodeNotFoundError",
    "NoPathFoundError",
    "ConfigurationError",
]
