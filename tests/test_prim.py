"""
Tests for the Prim trace engine.
"""

from algorithms.prim import run_prim


def test_complete_tree(make_graph):
    g = make_graph(
        [1, 2, 3, 4],
        [(1, 2, 1), (2, 3, 2), (3, 4, 1), (4, 1, 3), (1, 3, 5)],
    )
    trace = run_prim(g, 1)

    # start, three additions, summary
    assert len(trace) == 5
    final = trace[-1]
    assert final.description == "Algorithm complete. Minimum spanning tree found."
    assert final.highlighted_edges == ((1, 2), (2, 3), (3, 4))
    assert final.stats["Status"] == "Complete"
    assert final.stats["Tree Edges"] == 3
    assert final.stats["Total Weight"] == 4
    assert final.stats["Visit Order"] == "1 → 2 → 3 → 4"
    assert final.stats["Excluded Edges"] == "4 → 1, 1 → 3"


def test_edge_count_and_weight_match(make_graph):
    g = make_graph(
        [1, 2, 3, 4, 5],
        [(1, 2, 4), (1, 3, 1), (3, 2, 2), (2, 4, 5), (3, 4, 8), (4, 5, 3), (3, 5, 9)],
    )
    final = run_prim(g, 1)[-1]

    assert len(final.highlighted_edges) == g.node_count() - 1
    weight = sum(g.find_edge(s, t).weight for s, t in final.highlighted_edges)
    assert final.stats["Total Weight"] == weight == 11


def test_each_addition_highlights_the_growing_tree(make_graph):
    g = make_graph([1, 2, 3], [(1, 2, 1), (2, 3, 1)])
    trace = run_prim(g, 1)

    assert trace[1].highlighted_edges == ((1, 2),)
    assert trace[2].highlighted_edges == ((1, 2), (2, 3))
    assert trace[2].highlighted_nodes == (2, 3)
    assert trace[2].stats["Added Edge"] == "(2, 3)"
    assert trace[2].stats["Remaining Nodes"] == 0


def test_disconnected_graph_is_incomplete(make_graph):
    g = make_graph([1, 2, 3, 4, 5], [(1, 2, 1), (2, 3, 1), (4, 5, 1)])
    trace = run_prim(g, 1)

    for step in trace:
        for s, t in step.highlighted_edges or ():
            assert {s, t}.isdisjoint({4, 5})

    final = trace[-1]
    assert final.stats["Status"] == "Incomplete - Graph not connected"
    assert len(final.visited_nodes) == 3 < g.node_count()
    assert final.highlighted_edges == ((1, 2), (2, 3))
    assert final.stats["Unvisited Nodes"] == 2
    assert final.stats["Excluded Nodes"] == "4, 5"
    assert final.stats["Excluded Edges"] == "4 → 5"


def test_start_defaults_to_first_node(make_graph):
    g = make_graph([3, 1, 2], [(1, 2, 1), (3, 1, 2)])
    first = run_prim(g)[0]

    assert first.stats["Start Node"] == 3
    assert first.highlighted_nodes == (3,)


def test_unknown_start_is_a_single_error_step(make_graph):
    g = make_graph([1, 2], [(1, 2, 1)])
    trace = run_prim(g, 9)

    assert len(trace) == 1
    assert trace[0].stats["Status"] == "Error - Invalid start node"
    assert "9" in trace[0].description


def test_directed_edges_count_both_ways(make_graph):
    g = make_graph([1, 2], [(2, 1, 4, True)])
    final = run_prim(g, 1)[-1]

    assert final.stats["Status"] == "Complete"
    assert final.highlighted_edges == ((2, 1),)
    assert final.stats["Excluded Edges"] == "None"


def test_ties_go_to_first_edge(make_graph):
    g = make_graph([1, 2, 3], [(1, 3, 1), (1, 2, 1)])
    trace = run_prim(g, 1)

    assert trace[1].highlighted_edges == ((1, 3),)


def test_self_loop_never_qualifies(make_graph):
    g = make_graph([1, 2], [(1, 1, 1), (1, 2, 5)])
    final = run_prim(g, 1)[-1]

    assert final.highlighted_edges == ((1, 2),)
    assert final.stats["Total Weight"] == 5


def test_single_node(make_graph):
    trace = run_prim(make_graph([7], []), 7)

    assert len(trace) == 2
    assert trace[-1].stats["Status"] == "Complete"
    assert trace[-1].stats["Tree Edges"] == 0


def test_empty_graph(make_graph):
    assert run_prim(make_graph([], [])) == []


def test_same_input_same_trace(make_graph):
    g = make_graph([1, 2, 3, 4], [(1, 2, 2), (2, 3, 2), (3, 4, 2), (1, 4, 2)])
    assert run_prim(g, 2) == run_prim(g, 2)
