"""
Tests for run_algorithm: precondition checks and delegation.
"""

import logging

import pytest

from algorithms import REGISTRY, get_algorithm, list_algorithms
from algorithms.dijkstra import run_dijkstra
from algorithms.dispatch import run_algorithm
from algorithms.kruskal import run_kruskal
from algorithms.prim import run_prim
from algorithms.scc import run_scc
from graph import Edge


def _only_step(trace):
    assert len(trace) == 1
    return trace[0]


# ---------------------------------------------------------------------------
# Rejections
# ---------------------------------------------------------------------------
def test_no_graph_gives_empty_trace():
    assert run_algorithm("dijkstra", None, 1) == []


@pytest.mark.parametrize("name", ["dijkstra", "prim", "kruskal"])
def test_empty_graph(make_graph, name):
    step = _only_step(run_algorithm(name, make_graph([], []), 1))

    assert step.stats["Status"] == "Error - Empty graph"
    assert step.stats["Algorithm"] == REGISTRY[name].label
    assert step.description == "The graph has no nodes. Add nodes to run the algorithm."


def test_empty_graph_wins_over_unknown_algorithm(make_graph):
    step = _only_step(run_algorithm("bogus", make_graph([], [])))

    assert step.stats == {"Status": "Error - Empty graph"}


@pytest.mark.parametrize("name", ["bogus", "", None])
def test_unknown_algorithm(triangle, name):
    step = _only_step(run_algorithm(name, triangle, 1))

    assert step.stats == {"Status": "Error - Invalid algorithm"}
    assert step.description == "Algorithm not recognised."


@pytest.mark.parametrize("name, engine", [("dijkstra", "Dijkstra"), ("prim", "Prim")])
def test_missing_source(triangle, name, engine):
    step = _only_step(run_algorithm(name, triangle))

    assert step.stats["Status"] == "Error - Source node not selected"
    assert step.description.startswith(f"{engine} needs a source node")


def test_unknown_dijkstra_source(triangle):
    step = _only_step(run_algorithm("dijkstra", triangle, 99))

    assert step.stats["Status"] == "Error - Invalid source node"
    assert step.stats["Source Node"] == 99


def test_unknown_target(triangle):
    step = _only_step(run_algorithm("dijkstra", triangle, 1, 99))

    assert step.stats["Status"] == "Error - Invalid target node"
    assert step.stats["Source Node"] == 1
    assert step.stats["Target Node"] == 99


def test_unknown_prim_start_reported_by_engine(triangle):
    step = _only_step(run_algorithm("prim", triangle, 99))
    assert step.stats["Status"] == "Error - Invalid start node"


def test_parallel_edges_make_the_graph_invalid(make_graph):
    g = make_graph([1, 2], [(1, 2, 1), (2, 1, 3)])
    step = _only_step(run_algorithm("kruskal", g))

    assert step.stats["Status"] == "Error - Invalid graph"
    assert step.stats["Problems"] == 1
    assert "Parallel edge" in step.description


def test_dangling_edge_makes_the_graph_invalid(make_graph):
    g = make_graph([1, 2], [(1, 2, 1)])
    g.edges.append(Edge(2, 7, 1))
    step = _only_step(run_algorithm("dijkstra", g, 1))

    assert step.stats["Status"] == "Error - Invalid graph"
    assert "missing node 7" in step.description


def test_rejections_are_logged(triangle, caplog):
    with caplog.at_level(logging.WARNING, logger="algorithms.dispatch"):
        run_algorithm("dijkstra", triangle)

    assert "Error - Source node not selected" in caplog.text


def test_rejections_never_raise(make_graph):
    g = make_graph([1], [])
    for name in ("dijkstra", "prim", "kruskal", "scc", "nope"):
        for source, target in ((None, None), (1, None), (5, 6), (1, 6)):
            trace = run_algorithm(name, g, source, target)
            assert isinstance(trace, list)


# ---------------------------------------------------------------------------
# Delegation
# ---------------------------------------------------------------------------
def test_delegates_to_each_engine(make_graph):
    g = make_graph(
        [1, 2, 3, 4],
        [(1, 2, 2), (2, 3, 1, True), (3, 4, 4), (1, 4, 7)],
    )

    assert run_algorithm("dijkstra", g, 1, 4) == run_dijkstra(g, 1, 4)
    assert run_algorithm("dijkstra", g, 1) == run_dijkstra(g, 1)
    assert run_algorithm("prim", g, 2) == run_prim(g, 2)
    assert run_algorithm("kruskal", g, 3, 4) == run_kruskal(g)
    assert run_algorithm("scc", g) == run_scc(g)


def test_successful_run_ends_with_a_status(triangle):
    final = run_algorithm("kruskal", triangle)[-1]
    assert final.status == "Complete"
    assert not final.is_error


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------
def test_registry_flags():
    assert get_algorithm("dijkstra").accepts_target
    assert get_algorithm("prim").needs_source
    assert not get_algorithm("prim").accepts_target
    assert not get_algorithm("kruskal").needs_source
    assert get_algorithm(None) is None
    assert [a.key for a in list_algorithms()] == ["dijkstra", "prim", "kruskal", "scc"]


def test_registry_card_is_json_ready():
    card = get_algorithm("kruskal").to_dict()
    assert card["key"] == "kruskal"
    assert card["label"] == "Kruskal - Minimum Spanning Tree"
    assert isinstance(card["pseudocode"], list)
    assert "fn" not in card


@pytest.mark.parametrize("name", [["dijkstra"], {"key": "prim"}, 3])
def test_non_string_algorithm_name(triangle, name):
    assert get_algorithm(name) is None

    step = _only_step(run_algorithm(name, triangle, 1))
    assert step.stats == {"Status": "Error - Invalid algorithm"}
