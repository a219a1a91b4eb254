"""Services layer - Application orchestration.

Available services:
- ShortestPathService: Answers distance queries over the loaded graph
"""

from .shortest_path_service import ShortestPathService

__all__ = ["ShortestPathService"]
