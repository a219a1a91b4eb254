from pathgraph.domain.models import UNREACHABLE, Edge, Node
from pathgraph.graph.adjacency import Graph


def test_new_graph_is_empty():
    graph = Graph()

    assert len(graph) == 0
    assert graph.arc_count == 0
    assert graph.node_ids() == ()


def test_add_node_last_write_wins():
    graph = Graph()
    graph.add_node(Node(id=1, x=0, y=0))
    graph.add_node(Node(id=1, x=5, y=6))

    assert len(graph) == 1
    assert graph.get_node(1) == Node(id=1, x=5, y=6)


def test_add_edge_creates_both_arcs():
    graph = Graph()
    graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=3))

    assert graph.arcs(1) == (Edge(node_a_id=1, node_b_id=2, weight=3),)
    assert graph.arcs(2) == (Edge(node_a_id=2, node_b_id=1, weight=3),)
    assert graph.arc_count == 2


def test_add_edge_does_not_require_known_endpoints():
    graph = Graph()
    graph.add_edge(Edge(node_a_id=10, node_b_id=20, weight=1))

    # Arcs are kept, but the ids are not nodes.
    assert 10 not in graph
    assert 20 not in graph
    assert len(graph.arcs(10)) == 1


def test_parallel_edges_are_kept():
    graph = Graph()
    graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=2))
    graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=7))

    assert [arc.weight for arc in graph.arcs(1)] == [2, 7]
    assert [arc.weight for arc in graph.arcs(2)] == [2, 7]


def test_self_loop_adds_two_arcs_to_same_node():
    graph = Graph()
    graph.add_node(Node(id=1, x=0, y=0))
    graph.add_edge(Edge(node_a_id=1, node_b_id=1, weight=3))

    assert graph.arcs(1) == (
        Edge(node_a_id=1, node_b_id=1, weight=3),
        Edge(node_a_id=1, node_b_id=1, weight=3),
    )
    assert graph.shortest_path(1, 1) == 0


def test_arcs_returns_a_copy(line_graph):
    arcs = line_graph.arcs(2)
    assert isinstance(arcs, tuple)

    line_graph.add_edge(Edge(node_a_id=2, node_b_id=4, weight=1))

    assert len(arcs) == 2
    assert len(line_graph.arcs(2)) == 3


def test_arcs_of_node_without_edges(line_graph):
    assert line_graph.arcs(4) == ()
    assert line_graph.arcs(999) == ()


def test_nodes_iterates_stored_nodes(line_graph):
    assert {node.id for node in line_graph.nodes()} == {1, 2, 3, 4}
    assert 3 in line_graph
    assert "3" not in line_graph


def test_chain_of_edges():
    graph = Graph()
    for node_id in (1, 2, 3):
        graph.add_node(Node(id=node_id, x=0, y=0))
    graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=4))
    graph.add_edge(Edge(node_a_id=2, node_b_id=3, weight=5))

    assert graph.shortest_path(1, 3) == 9


def test_isolated_target_is_unreachable():
    graph = Graph()
    for node_id in (1, 2, 3):
        graph.add_node(Node(id=node_id, x=0, y=0))
    graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=4))

    assert graph.shortest_path(1, 3) == UNREACHABLE


def test_cheaper_parallel_edge_wins():
    graph = Graph()
    graph.add_node(Node(id=1, x=0, y=0))
    graph.add_node(Node(id=2, x=0, y=0))
    graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=2))
    graph.add_edge(Edge(node_a_id=1, node_b_id=2, weight=7))

    assert graph.shortest_path(1, 2) == 2


def test_single_node_distance_to_itself():
    graph = Graph()
    graph.add_node(Node(id=1, x=0, y=0))

    assert graph.shortest_path(1, 1) == 0


def test_unknown_source_leaves_graph_unmodified(line_graph):
    node_ids = line_graph.node_ids()
    arcs = {node_id: line_graph.arcs(node_id) for node_id in node_ids}

    assert line_graph.shortest_path(42, 3) == UNREACHABLE

    assert line_graph.node_ids() == node_ids
    assert {node_id: line_graph.arcs(node_id) for node_id in node_ids} == arcs
    assert 42 not in line_graph
