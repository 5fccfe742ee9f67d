"""
scc.py — Strongly Connected Components (Kosaraju)
===================================================
Two depth-first passes:
  1. DFS over the graph, recording each node when it FINISHES.
  2. DFS over the reversed graph, starting from nodes in reverse finish
     order; every tree of that second pass is one strongly connected
     component.

Both passes use an explicit stack of frames `[node_id, cursor]`, where
`cursor` is the index of the next neighbour to look at.  That gives the
exact visit / finish order of the textbook recursive version without
Python's recursion limit.

Directed edges are one-way; undirected edges count in both directions.
"""

from typing import Dict, List

from graph import GraphData
from algorithms.step import AlgorithmStep, TraceBuilder, error_step
from algorithms.summary import format_nodes

LABEL = "Strongly Connected Components"


PSEUDOCODE: List[str] = [
    "def Kosaraju(graph):",                                # 0
    "    order ← []",                                      # 1
    "    for v in V: if v unvisited: dfs1(v)",             # 2
    "    dfs1(v): visit v; dfs1(each unvisited nbr);",     # 3
    "             order.append(v)",                        # 4
    "    reset visited",                                   # 5
    "    for v in reversed(order):",                       # 6
    "        if v unvisited: component ← dfs2ᵀ(v)",        # 7
    "    return components",                               # 8
]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
def run_scc(graph: GraphData) -> List[AlgorithmStep]:

    nodes = graph.node_ids()
    if not nodes:
        return []

    if not graph.has_directed_edges():
        return [error_step(
            "The strongly connected components algorithm needs a directed graph. "
            "Add at least one directed edge.",
            "Error - Graph is not directed", algorithm=LABEL,
        )]

    forward, reverse = _adjacency(graph)
    trace = TraceBuilder()

    trace.emit(
        "Start the SCC algorithm. First, run a DFS to get finishing times.",
        stats={
            "Algorithm":        LABEL,
            "Phase":            "First DFS",
            "Components Found": 0,
        },
    )

    # --- pass 1: finishing order ---
    seen: set               = set()
    finish_order: List[int] = []

    def seen_in_order() -> List[int]:
        return [n for n in nodes if n in seen]

    for root in nodes:
        if root in seen:
            continue
        seen.add(root)
        trace.emit(
            f"First DFS: visit node {root}.",
            highlighted_nodes=[root],
            visited_nodes=seen_in_order(),
            stats={
                "Algorithm":     LABEL,
                "Phase":         "First DFS",
                "Current Node":  root,
                "Visited Nodes": len(seen),
            },
        )
        stack = [[root, 0]]
        while stack:
            frame = stack[-1]
            node, cursor = frame
            nbrs = forward[node]
            while cursor < len(nbrs) and nbrs[cursor] in seen:
                cursor += 1
            if cursor < len(nbrs):
                nxt = nbrs[cursor]
                frame[1] = cursor + 1
                seen.add(nxt)
                trace.emit(
                    f"First DFS: visit node {nxt}.",
                    highlighted_nodes=[nxt],
                    visited_nodes=seen_in_order(),
                    stats={
                        "Algorithm":     LABEL,
                        "Phase":         "First DFS",
                        "Current Node":  nxt,
                        "Visited Nodes": len(seen),
                    },
                )
                stack.append([nxt, 0])
            else:
                stack.pop()
                finish_order.append(node)
                trace.emit(
                    f"First DFS: finish node {node}, add it to the finish order.",
                    highlighted_nodes=[node],
                    visited_nodes=seen_in_order(),
                    stats={
                        "Algorithm":     LABEL,
                        "Phase":         "First DFS",
                        "Finished Node": node,
                        "Finish Order":  format_nodes(finish_order),
                    },
                )

    trace.emit(
        "First DFS complete. Now run a second DFS on the reversed graph in reverse finish order.",
        stats={
            "Algorithm":        LABEL,
            "Phase":            "Second DFS",
            "Finish Order":     format_nodes(finish_order),
            "Components Found": 0,
        },
    )

    # --- pass 2: components on the reversed graph ---
    seen = set()
    components: List[List[int]] = []

    for root in reversed(finish_order):
        if root in seen:
            continue
        component: List[int] = []
        seen.add(root)
        component.append(root)
        _emit_collect(trace, root, component, components, seen_in_order())

        stack = [[root, 0]]
        while stack:
            frame = stack[-1]
            node, cursor = frame
            nbrs = reverse[node]
            while cursor < len(nbrs) and nbrs[cursor] in seen:
                cursor += 1
            if cursor < len(nbrs):
                nxt = nbrs[cursor]
                frame[1] = cursor + 1
                seen.add(nxt)
                component.append(nxt)
                _emit_collect(trace, nxt, component, components, seen_in_order())
                stack.append([nxt, 0])
            else:
                stack.pop()

        components.append(component)
        trace.emit(
            f"Found SCC: {format_nodes(component)}",
            highlighted_nodes=component,
            visited_nodes=seen_in_order(),
            stats={
                "Algorithm":        LABEL,
                "New Component":    format_nodes(component),
                "Components Found": len(components),
                "Nodes Covered":    len(seen),
            },
        )

    trace.emit(
        f"Algorithm complete. Found {len(components)} strongly connected components.",
        visited_nodes=nodes,
        stats={
            "Algorithm":        LABEL,
            "Status":           "Complete",
            "Components Found": len(components),
            "Components":       " | ".join(format_nodes(c) for c in components),
        },
    )
    return trace.build()


def _emit_collect(
    trace: TraceBuilder,
    node: int,
    component: List[int],
    components: List[List[int]],
    visited: List[int],
) -> None:
    trace.emit(
        f"Second DFS: visit node {node}, add it to the current component.",
        highlighted_nodes=[node],
        visited_nodes=visited,
        stats={
            "Algorithm":         LABEL,
            "Phase":             "Second DFS",
            "Current Node":      node,
            "Current Component": format_nodes(component),
            "Components Found":  len(components),
        },
    )


def _adjacency(graph: GraphData):
    forward: Dict[int, List[int]] = {nid: [] for nid in graph.node_ids()}
    reverse: Dict[int, List[int]] = {nid: [] for nid in graph.node_ids()}
    for e in graph.edges:
        forward[e.source].append(e.target)
        reverse[e.target].append(e.source)
        if not e.directed:
            forward[e.target].append(e.source)
            reverse[e.source].append(e.target)
    return forward, reverse
