"""Shared fixtures for the graph engine tests."""

import logging
from pathlib import Path

import pytest

from pathgraph.config import GraphConfig, reset_config
from pathgraph.container import reset_container
from pathgraph.domain.models import Edge, Node
from pathgraph.graph.adjacency import Graph


NODES_CSV = """id,x,y
1,0,0
2,4,0
3,4,3
4,10,10
"""

EDGES_CSV = """node_a_id,node_b_id,weight
1,2,4
2,3,5
1,3,12
"""


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no test sees configuration cached by another."""
    reset_config()
    reset_container()
    yield
    reset_config()
    reset_container()


@pytest.fixture
def graph_data_dir(tmp_path: Path) -> Path:
    """Directory with a small nodes/edges CSV pair (node 4 is isolated)."""
    (tmp_path / "nodes.csv").write_text(NODES_CSV, encoding="utf-8")
    (tmp_path / "edges.csv").write_text(EDGES_CSV, encoding="utf-8")
    return tmp_path


@pytest.fixture
def graph_config(graph_data_dir: Path) -> GraphConfig:
    return GraphConfig(data_dir=graph_data_dir)


@pytest.fixture
def line_graph() -> Graph:
    """1 --4-- 2 --5-- 3, plus an isolated node 4."""
    graph = Graph()
    for node_id in (1, 2, 3, 4):
        graph.add_node(Node(id=node_id, x=node_id, y=0))
    graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=4))
    graph.add_edge(Edge(node_a_id=2, node_b_id=3, weight=5))
    return graph


@pytest.fixture
def restore_root_logger():
    """Undo root logger changes made by configure_logging."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
