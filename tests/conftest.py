import pytest

from graph import GraphData


def build_graph(node_ids, edges):
    """edges: (source, target, weight) or (source, target, weight, directed)."""
    g = GraphData()
    for i, nid in enumerate(node_ids):
        g.create_node(nid, x=40.0 * i, y=20.0)
    for e in edges:
        s, t, w = e[:3]
        directed = e[3] if len(e) > 3 else False
        g.create_edge(s, t, weight=w, directed=directed)
    return g


@pytest.fixture
def make_graph():
    return build_graph


@pytest.fixture
def triangle(make_graph):
    # the classic Kruskal scenario: (1,3) is the expensive, cycle-closing edge
    return make_graph([1, 2, 3], [(1, 2, 1), (2, 3, 1), (1, 3, 5)])


@pytest.fixture
def path_graph(make_graph):
    # 1 → 2 → 3, directed, weights 1 and 2
    return make_graph([1, 2, 3], [(1, 2, 1, True), (2, 3, 2, True)])
