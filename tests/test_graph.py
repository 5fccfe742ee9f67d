"""
Tests for the graph model: editing, validation and the {nodes, edges} document.
"""

import json

import pytest

from graph import Edge, GraphData, GraphError, GraphFormatError, Node


# ---------------------------------------------------------------------------
# Editing
# ---------------------------------------------------------------------------
def test_insertion_order_is_kept(make_graph):
    g = make_graph([3, 1, 2], [(2, 3, 1), (1, 2, 1)])

    assert g.node_ids() == [3, 1, 2]
    assert [e.pair() for e in g.edges] == [(2, 3), (1, 2)]


def test_duplicate_node_id_is_refused():
    g = GraphData()
    g.create_node(1)
    with pytest.raises(GraphError):
        g.create_node(1)


def test_edge_needs_existing_endpoints():
    g = GraphData()
    g.create_node(1)
    with pytest.raises(GraphError, match="Node 2 does not exist"):
        g.create_edge(1, 2)


@pytest.mark.parametrize("weight", [0, -1, float("inf"), float("nan"), True])
def test_edge_weight_must_be_positive(weight):
    g = GraphData([Node(1), Node(2)])
    with pytest.raises(GraphError):
        g.create_edge(1, 2, weight=weight)


def test_next_node_id():
    g = GraphData()
    assert g.next_node_id() == 1
    g.create_node(5)
    assert g.next_node_id() == 6


def test_move_node():
    g = GraphData([Node(1)])
    g.move_node(1, 10.5, 20)
    assert g.get_node(1).to_dict() == {"id": 1, "x": 10.5, "y": 20}


def test_rename_rewrites_edges(make_graph):
    g = make_graph([1, 2, 3], [(1, 2, 1), (3, 1, 2, True)])
    g.rename_node(1, 10)

    assert g.node_ids() == [10, 2, 3]
    assert [e.pair() for e in g.edges] == [(10, 2), (3, 10)]
    assert g.has_node(10) and not g.has_node(1)


def test_rename_to_taken_id_is_refused(make_graph):
    g = make_graph([1, 2], [])
    with pytest.raises(GraphError):
        g.rename_node(1, 2)


def test_set_weight_finds_either_orientation(make_graph):
    g = make_graph([1, 2], [(1, 2, 1)])
    edge = g.set_weight(2, 1, 4.5)
    assert edge.weight == 4.5

    with pytest.raises(GraphError):
        g.set_weight(1, 2, 0)


def test_outgoing_respects_direction(make_graph):
    g = make_graph([1, 2, 3], [(1, 2, 1, True), (3, 1, 1, True), (2, 3, 1)])

    assert [e.pair() for e in g.outgoing(1)] == [(1, 2)]
    assert [e.pair() for e in g.outgoing(3)] == [(3, 1), (2, 3)]
    assert len(g.incident(1)) == 2


def test_clear(make_graph):
    g = make_graph([1, 2], [(1, 2, 1)])
    g.clear()
    assert g.is_empty()
    assert g.edge_count() == 0
    assert not g.has_node(1)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------
def test_valid_graph_has_no_problems(triangle):
    assert triangle.validate() == []
    assert triangle.is_valid()


def test_validate_reports_structural_problems():
    g = GraphData(
        [Node(1), Node(2), Node(2)],
        [Edge(1, 2, 1), Edge(1, 9, 1), Edge(2, 1, -3)],
    )
    problems = g.validate()

    assert "Duplicate node id 2" in problems
    assert "Edge 1 — 9 references missing node 9" in problems
    assert "Edge 2 — 1 has invalid weight -3" in problems
    assert "Parallel edge 2 — 1 duplicates 1 — 2" in problems


def test_opposite_directed_edges_are_not_parallel(make_graph):
    g = make_graph([1, 2], [(1, 2, 1, True), (2, 1, 1, True)])
    assert g.validate() == []


def test_same_directed_edge_twice_is_parallel():
    g = GraphData([Node(1), Node(2)], [Edge(1, 2, 1, True), Edge(1, 2, 2, True)])
    assert len(g.validate()) == 1


# ---------------------------------------------------------------------------
# Document
# ---------------------------------------------------------------------------
def test_document_shape(make_graph):
    g = make_graph([1, 2], [(1, 2, 3, True)])
    doc = g.to_dict()

    assert doc["nodes"][0] == {"id": 1, "x": 0.0, "y": 20.0}
    assert doc["edges"] == [{"source": 1, "target": 2, "directed": True, "weight": 3}]


def test_json_round_trip_keeps_order(make_graph):
    g = make_graph([4, 2, 9], [(9, 4, 2.5), (2, 9, 1, True)])
    again = GraphData.from_json(g.to_json())

    assert again.to_dict() == g.to_dict()


def test_from_dict_defaults():
    g = GraphData.from_dict({"nodes": [{"id": 1}, {"id": 2}], "edges": [{"source": 1, "target": 2}]})

    edge = g.edges[0]
    assert edge.weight == 1.0
    assert edge.directed is False
    assert g.get_node(1).x == 0.0


def test_from_dict_keeps_semantic_problems_for_validate():
    g = GraphData.from_dict({"nodes": [{"id": 1}], "edges": [{"source": 1, "target": 5}]})
    assert g.validate() == ["Edge 1 — 5 references missing node 5"]


@pytest.mark.parametrize(
    "doc",
    [
        [],
        {"nodes": []},
        {"nodes": [{"x": 1}], "edges": []},
        {"nodes": [{"id": "a"}], "edges": []},
        {"nodes": [{"id": 1, "x": "left"}], "edges": []},
        {"nodes": [{"id": 1}], "edges": [{"source": 1}]},
        {"nodes": [{"id": 1}], "edges": [{"source": 1, "target": 1, "directed": "yes"}]},
        {"nodes": [{"id": 1}], "edges": [{"source": 1, "target": 1, "weight": "heavy"}]},
    ],
)
def test_from_dict_rejects_malformed_documents(doc):
    with pytest.raises(GraphFormatError):
        GraphData.from_dict(doc)


def test_from_json_rejects_invalid_json():
    with pytest.raises(GraphFormatError, match="Invalid JSON"):
        GraphData.from_json("{nodes: ")


def test_copy_is_independent(make_graph):
    g = make_graph([1, 2], [(1, 2, 1)])
    dup = g.copy()
    dup.set_weight(1, 2, 9)

    assert g.edges[0].weight == 1
    assert json.loads(dup.to_json())["edges"][0]["weight"] == 9


# ---------------------------------------------------------------------------
# Edge helpers
# ---------------------------------------------------------------------------
def test_edge_helpers():
    e = Edge(1, 2, 3, directed=True)

    assert e.leaves(1) and not e.leaves(2)
    assert e.other_end(2) == 1
    assert e.other_end(5) is None
    assert e.label() == "1 → 2"
    assert Edge(1, 1).is_self_loop()


def test_find_link_respects_direction(make_graph):
    g = make_graph([1, 2, 3], [(2, 1, 1, True), (1, 2, 5, True), (3, 2, 7)])

    assert g.find_link(1, 2).weight == 5
    assert g.find_link(2, 1).weight == 1
    assert g.find_link(2, 3).weight == 7
    assert g.find_link(1, 3) is None
