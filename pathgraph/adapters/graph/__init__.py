"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads graph from CSV files
- DijkstraDistanceSolver: Answers distance queries using Dijkstra's algorithm
"""

from .csv_repository import CSVGraphRepository
from .dijkstra_solver import DijkstraDistanceSolver

__all__ = ["CSVGraphRepository", "DijkstraDistanceSolver"]
