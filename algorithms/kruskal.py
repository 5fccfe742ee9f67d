"""
kruskal.py — Kruskal's Minimum Spanning Tree
==============================================
Sort every edge by weight, then walk the list and keep each edge whose
endpoints are still in different components (tracked with DisjointSet).

  - The sort is stable: equal weights keep their original edge order.
  - Direction is ignored.  A directed edge 2→1 still joins 1 and 2 for
    cycle detection; a spanning tree is about connectivity only.
  - Stops as soon as the tree has |V| − 1 edges.

Emits a step at:
  1. Edges sorted
  2. Each edge considered
  3. Each edge added  /  each edge skipped because it would close a cycle
  4. Termination  →  "Complete", or "Incomplete" for a disconnected graph
"""

from typing import Dict, List, Tuple

from graph import Edge, GraphData
from algorithms.step import AlgorithmStep, StatValue, TraceBuilder, format_value
from algorithms.summary import (
    excluded_edges, excluded_nodes, format_edges, format_nodes, format_pairs,
    format_tuples,
)
from algorithms.union_find import DisjointSet

LABEL = "Kruskal - Minimum Spanning Tree"


PSEUDOCODE: List[str] = [
    "def Kruskal(graph):",                               # 0
    "    tree ← []",                                     # 1
    "    sort edges by weight (stable)",                 # 2
    "    dsu ← DisjointSet(V)",                          # 3
    "    for (u, v, w) in edges:",                       # 4
    "        if dsu.find(u) ≠ dsu.find(v):",             # 5
    "            tree.append((u, v));  dsu.union(u, v)", # 6
    "            if |tree| = |V| − 1: break",           # 7
    "        else: skip — would create a cycle",         # 8
    "    return tree",                                   # 9
]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
def run_kruskal(graph: GraphData) -> List[AlgorithmStep]:

    nodes = graph.node_ids()
    if not nodes:
        return []

    trace = TraceBuilder()

    ordered = sorted(graph.edges, key=lambda e: e.weight)
    dsu     = DisjointSet(nodes)

    tree_edges: List[Edge]               = []
    processed:  List[Tuple[int, int]]    = []
    total_weight: float                  = 0

    trace.emit(
        "Start Kruskal's algorithm. Sort all edges by weight.",
        stats={
            "Algorithm":        LABEL,
            "Total Edges":      len(ordered),
            "Tree Edges":       0,
            "Total Weight":     0,
            "Processing Order": "",
        },
    )

    for edge in ordered:
        s, t = edge.pair()
        root_s = dsu.find(s)
        root_t = dsu.find(t)

        processed.append((s, t))
        order = format_tuples(processed)

        trace.emit(
            f"Consider edge ({s}, {t}) with weight {format_value(edge.weight)}.",
            highlighted_nodes=[s, t],
            highlighted_edges=[(s, t)],
            stats={
                "Algorithm":        LABEL,
                "Current Edge":     f"({s}, {t})",
                "Edge Weight":      format_value(edge.weight),
                "Tree Edges":       len(tree_edges),
                "Total Weight":     format_value(total_weight),
                "Processing Order": order,
            },
        )

        if root_s != root_t:
            dsu.union(s, t)
            tree_edges.append(edge)
            total_weight += edge.weight

            trace.emit(
                f"Add edge ({s}, {t}) with weight {format_value(edge.weight)} to the tree.",
                highlighted_nodes=[s, t],
                highlighted_edges=[e.pair() for e in tree_edges],
                stats={
                    "Algorithm":        LABEL,
                    "Added Edge":       f"({s}, {t})",
                    "Edge Weight":      format_value(edge.weight),
                    "Tree Edges":       len(tree_edges),
                    "Total Weight":     format_value(total_weight),
                    "Processing Order": order,
                },
            )

            if len(tree_edges) == len(nodes) - 1:
                break
        else:
            trace.emit(
                f"Skip edge ({s}, {t}) because it would create a cycle.",
                highlighted_nodes=[s, t],
                highlighted_edges=[(s, t)],
                stats={
                    "Algorithm":        LABEL,
                    "Skipped Edge":     f"({s}, {t})",
                    "Reason":           "Would create a cycle",
                    "Tree Edges":       len(tree_edges),
                    "Total Weight":     format_value(total_weight),
                    "Processing Order": order,
                },
            )

    _emit_summary(trace, graph, tree_edges, processed, total_weight)
    return trace.build()


# ---------------------------------------------------------------------------
# Termination step
# ---------------------------------------------------------------------------
def _emit_summary(
    trace: TraceBuilder,
    graph: GraphData,
    tree_edges: List[Edge],
    processed: List[Tuple[int, int]],
    total_weight: float,
) -> None:
    nodes    = graph.node_ids()
    complete = len(tree_edges) == len(nodes) - 1

    touched = set()
    for e in tree_edges:
        touched.update(e.pair())
    # a single-node graph is its own spanning tree
    chosen_nodes = list(nodes) if complete else [nid for nid in nodes if nid in touched]
    tree_pairs   = [e.pair() for e in tree_edges]

    stats: Dict[str, StatValue] = {
        "Algorithm":        LABEL,
        "Status":           "Complete" if complete else "Incomplete - Graph not connected",
        "Tree Edges":       len(tree_edges),
        "Total Weight":     format_value(total_weight),
        "Covered Nodes":    len(chosen_nodes),
        "Processing Order": format_tuples(processed),
        "Chosen Nodes":     format_nodes(chosen_nodes),
        "Excluded Nodes":   format_nodes(excluded_nodes(graph, chosen_nodes)),
        "Chosen Edges":     format_pairs(tree_pairs),
        "Excluded Edges":   format_edges(excluded_edges(graph, tree_edges)),
    }

    if complete:
        description = "Algorithm complete. Minimum spanning tree found."
    else:
        description = (
            "Algorithm complete. The graph is not connected, "
            "so a full minimum spanning tree cannot be formed."
        )

    trace.emit(
        description,
        highlighted_nodes=chosen_nodes,
        highlighted_edges=tree_pairs,
        stats=stats,
    )
