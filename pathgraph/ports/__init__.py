"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the graph engine and external
adapters. They enable dependency injection and make the system testable.
"""

from .graph import DistanceSolverPort, GraphRepositoryPort

__all__ = ["GraphRepositoryPort", "DistanceSolverPort"]
