"""
prim.py — Prim's Minimum Spanning Tree
========================================
Grows a tree from one start node by repeatedly taking the cheapest edge
that crosses the cut between visited and unvisited nodes.

Each iteration re-scans EVERY edge (O(V·E)) instead of keeping a
priority queue; at classroom sizes that's instant, and it keeps the
tie-break rule trivially visible: the first minimum in edge order wins.

Prim works on the underlying undirected connectivity: a directed edge
qualifies as soon as exactly one of its endpoints is visited, whichever
way it points.  (Dijkstra deliberately does NOT do this.)

Emits a step at:
  1. Start node chosen
  2. Each edge added to the tree
  3. Termination  →  "Complete" tree, or "Incomplete" if the graph is
                     disconnected from the start node
"""

from typing import List, Optional, Tuple

from graph import Edge, GraphData
from algorithms.step import AlgorithmStep, TraceBuilder, error_step, format_value
from algorithms.summary import (
    excluded_edges, excluded_nodes, format_edges, format_nodes, format_order,
    format_pairs,
)

LABEL = "Prim - Minimum Spanning Tree"


PSEUDOCODE: List[str] = [
    "def Prim(graph, start):",                                  # 0
    "    visited ← {start};  tree ← []",                        # 1
    "    while |visited| < |V|:",                               # 2
    "        e ← cheapest edge with exactly one end visited",   # 3
    "        if no such edge: return tree (incomplete)",        # 4
    "        tree.append(e)",                                   # 5
    "        visited.add(unvisited end of e)",                  # 6
    "    return tree",                                          # 7
]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
def run_prim(graph: GraphData, start_id: Optional[int] = None) -> List[AlgorithmStep]:

    nodes = graph.node_ids()
    if not nodes:
        return []

    start = start_id if start_id is not None else nodes[0]
    if not graph.has_node(start):
        return [error_step(
            f"Error: start node {start} does not exist in the graph.",
            "Error - Invalid start node", algorithm=LABEL,
        )]

    trace = TraceBuilder()

    visited: set              = {start}
    visit_order: List[int]    = [start]
    tree_edges: List[Edge]    = []
    tree_pairs: List[Tuple[int, int]] = []
    total_weight: float       = 0

    trace.emit(
        f"Start Prim's algorithm from node {start}.",
        highlighted_nodes=[start],
        visited_nodes=[start],
        stats={
            "Algorithm":    LABEL,
            "Start Node":   start,
            "Tree Edges":   0,
            "Total Weight": 0,
            "Visit Order":  str(start),
        },
    )

    while len(visited) < len(nodes):
        best = _cheapest_crossing_edge(graph, visited)

        if best is None:
            _emit_summary(trace, graph, visited, visit_order, tree_edges, tree_pairs,
                          total_weight, complete=False)
            return trace.build()

        edge, inside, outside = best
        pair = edge.pair() if edge.directed else (inside, outside)

        tree_edges.append(edge)
        tree_pairs.append(pair)
        visited.add(outside)
        visit_order.append(outside)
        total_weight += edge.weight

        trace.emit(
            f"Add edge ({pair[0]}, {pair[1]}) with weight {format_value(edge.weight)} to the tree.",
            highlighted_nodes=[inside, outside],
            visited_nodes=visit_order,
            highlighted_edges=tree_pairs,
            stats={
                "Algorithm":       LABEL,
                "Added Edge":      f"({pair[0]}, {pair[1]})",
                "Edge Weight":     format_value(edge.weight),
                "Tree Edges":      len(tree_edges),
                "Total Weight":    format_value(total_weight),
                "Visited Nodes":   len(visited),
                "Remaining Nodes": len(nodes) - len(visited),
                "Visit Order":     format_order(visit_order),
            },
        )

    _emit_summary(trace, graph, visited, visit_order, tree_edges, tree_pairs,
                  total_weight, complete=True)
    return trace.build()


def _cheapest_crossing_edge(
    graph: GraphData,
    visited: set,
) -> Optional[Tuple[Edge, int, int]]:
    """(edge, visited end, unvisited end) of the first minimum-weight crossing edge."""
    best: Optional[Tuple[Edge, int, int]] = None
    for edge in graph.edges:
        src_in = edge.source in visited
        tgt_in = edge.target in visited
        if src_in == tgt_in:
            continue
        inside, outside = (edge.source, edge.target) if src_in else (edge.target, edge.source)
        if best is None or edge.weight < best[0].weight:
            best = (edge, inside, outside)
    return best


# ---------------------------------------------------------------------------
# Termination step
# ---------------------------------------------------------------------------
def _emit_summary(
    trace: TraceBuilder,
    graph: GraphData,
    visited: set,
    visit_order: List[int],
    tree_edges: List[Edge],
    tree_pairs: List[Tuple[int, int]],
    total_weight: float,
    complete: bool,
) -> None:
    unvisited = excluded_nodes(graph, visited)
    listing = {
        "Visit Order":    format_order(visit_order),
        "Chosen Nodes":   format_nodes(visit_order),
        "Excluded Nodes": format_nodes(unvisited),
        "Chosen Edges":   format_pairs(tree_pairs),
        "Excluded Edges": format_edges(excluded_edges(graph, tree_edges)),
    }

    if complete:
        trace.emit(
            "Algorithm complete. Minimum spanning tree found.",
            highlighted_nodes=visit_order,
            visited_nodes=visit_order,
            highlighted_edges=tree_pairs,
            stats={
                "Algorithm":     LABEL,
                "Status":        "Complete",
                "Tree Edges":    len(tree_edges),
                "Total Weight":  format_value(total_weight),
                "Covered Nodes": len(visited),
                **listing,
            },
        )
    else:
        trace.emit(
            "The graph is not connected. The minimum spanning tree cannot be completed.",
            highlighted_nodes=visit_order,
            visited_nodes=visit_order,
            highlighted_edges=tree_pairs,
            stats={
                "Algorithm":       LABEL,
                "Status":          "Incomplete - Graph not connected",
                "Tree Edges":      len(tree_edges),
                "Total Weight":    format_value(total_weight),
                "Visited Nodes":   len(visited),
                "Unvisited Nodes": len(unvisited),
                **listing,
            },
        )
