"""
dijkstra.py — Dijkstra's Shortest-Path Algorithm
==================================================
Label-setting Dijkstra with a linear scan for the closest unvisited node
(O(V²) — fine at classroom sizes, and the scan makes tie-breaking
obvious: the first node in graph order with the smallest distance wins).

Emits a step at:
  1. Initialise distances
  2. Visit the closest unvisited node  →  its distance is now final
  3. Each relaxation attempt           →  UPDATE or NO UPDATE
  4. Target visited                    →  stop immediately
  5. Termination                       →  shortest-path tree / path summary

Edges are walked the way they point: a directed edge only leads out of
its source, an undirected edge out of either end.

Correctness note: Dijkstra requires non-negative weights.  GraphData
rejects non-positive weights before we ever get here.
"""

from typing import Dict, List, Optional, Tuple

from graph import Edge, GraphData
from algorithms.step import (
    AlgorithmStep, INFINITY, INFINITY_SYMBOL, StatValue, TraceBuilder,
    error_step, format_value, is_infinite,
)
from algorithms.summary import (
    excluded_edges, excluded_nodes, format_edges, format_nodes, format_order,
    format_pairs,
)

LABEL = "Dijkstra - Shortest Path"


# ---------------------------------------------------------------------------
# Pseudocode
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def Dijkstra(graph, source, target):",                  # 0
    "    dist ← {v: ∞ for v in V};  dist[source] ← 0",       # 1
    "    prev ← {v: None for v in V}",                       # 2
    "    while some unvisited v has dist[v] < ∞:",            # 3
    "        node ← unvisited v with smallest dist[v]",      # 4
    "        mark node visited",                             # 5
    "        if node == target: break",                      # 6
    "        for (neighbour, w) in out(node):",              # 7
    "            if dist[node] + w < dist[neighbour]:",      # 8
    "                dist[neighbour] ← dist[node] + w",      # 9
    "                prev[neighbour] ← node",                # 10
    "    return path via prev",                              # 11
]


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
def run_dijkstra(
    graph: GraphData,
    source_id: int,
    target_id: Optional[int] = None,
) -> List[AlgorithmStep]:

    nodes = graph.node_ids()
    if not nodes:
        return []
    if not graph.has_node(source_id):
        return [error_step(
            f"Error: source node {source_id} does not exist in the graph.",
            "Error - Invalid source node", algorithm=LABEL,
        )]
    if target_id is not None and not graph.has_node(target_id):
        return [error_step(
            f"Error: target node {target_id} does not exist in the graph.",
            "Error - Invalid target node", algorithm=LABEL,
        )]

    trace = TraceBuilder()

    dist: Dict[int, float]                           = {nid: INFINITY for nid in nodes}
    prev: Dict[int, Optional[Tuple[int, Edge]]]      = {nid: None for nid in nodes}
    dist[source_id] = 0.0
    visited: set           = set()
    visit_order: List[int] = []

    trace.emit(
        f"Initialise distances: source node {source_id} gets 0, "
        f"every other node {INFINITY_SYMBOL}.",
        highlighted_nodes=[source_id],
        node_values=dist,
        stats={
            "Algorithm":    LABEL,
            "Source Node":  source_id,
            "Target Node":  target_id if target_id is not None else "None",
            "Visit Order":  "",
        },
    )

    # --- main loop ---
    while len(visited) < len(nodes):
        current: Optional[int] = None
        smallest = INFINITY
        for nid in nodes:
            if nid not in visited and dist[nid] < smallest:
                smallest = dist[nid]
                current  = nid

        # everything left is unreachable
        if current is None:
            break

        visited.add(current)
        visit_order.append(current)
        settled = [nid for nid in nodes if nid in visited]

        # -- target check: stop before touching any neighbour --
        if current == target_id:
            trace.emit(
                f"Target node {target_id} reached with distance {format_value(dist[current])}.",
                highlighted_nodes=[current],
                visited_nodes=settled,
                node_values=dist,
                stats={
                    "Current Node":   current,
                    "Target Node":    target_id,
                    "Final Distance": format_value(dist[current]),
                    "Visited Nodes":  len(settled),
                    "Visit Order":    format_order(visit_order),
                },
            )
            break

        trace.emit(
            f"Visit node {current} with current distance {format_value(dist[current])}.",
            highlighted_nodes=[current],
            visited_nodes=settled,
            node_values=dist,
            stats={
                "Current Node":    current,
                "Distance":        format_value(dist[current]),
                "Visited Nodes":   len(settled),
                "Remaining Nodes": len(nodes) - len(settled),
                "Visit Order":     format_order(visit_order),
            },
        )

        # -- relax neighbours --
        for edge in graph.outgoing(current):
            nbr = edge.other_end(current)
            if nbr in visited:
                continue

            new_dist = dist[current] + edge.weight
            common: Dict[str, StatValue] = {
                "Visited Nodes":   len(settled),
                "Remaining Nodes": len(nodes) - len(settled),
                "Visit Order":     format_order(visit_order),
            }

            if new_dist < dist[nbr]:
                dist[nbr] = new_dist
                prev[nbr] = (current, edge)
                trace.emit(
                    f"Update distance of node {nbr} to {format_value(new_dist)} via node {current}.",
                    highlighted_nodes=[current, nbr],
                    visited_nodes=settled,
                    highlighted_edges=[(current, nbr)],
                    node_values=dist,
                    stats={
                        "Current Node": current,
                        "Neighbour":    nbr,
                        "New Distance": format_value(new_dist),
                        **common,
                    },
                )
            else:
                trace.emit(
                    f"No update for node {nbr}: its current distance "
                    f"({format_value(dist[nbr])}) is not longer than the new path "
                    f"({format_value(new_dist)}).",
                    highlighted_nodes=[current, nbr],
                    visited_nodes=settled,
                    highlighted_edges=[(current, nbr)],
                    node_values=dist,
                    stats={
                        "Current Node":      current,
                        "Neighbour":         nbr,
                        "Current Distance":  format_value(dist[nbr]),
                        "New Path Distance": format_value(new_dist),
                        **common,
                    },
                )

    _emit_summary(trace, graph, source_id, target_id, dist, prev, visited, visit_order)
    return trace.build()


# ---------------------------------------------------------------------------
# Termination step
# ---------------------------------------------------------------------------
def _emit_summary(
    trace: TraceBuilder,
    graph: GraphData,
    source_id: int,
    target_id: Optional[int],
    dist: Dict[int, float],
    prev: Dict[int, Optional[Tuple[int, Edge]]],
    visited: set,
    visit_order: List[int],
) -> None:
    nodes = graph.node_ids()
    path_pairs: List[Tuple[int, int]] = []
    path_edges: List[Edge]            = []
    path_nodes: List[int]             = []

    if target_id is not None:
        path = _reconstruct(prev, target_id)
        # only a real path if the walk back ends at the source
        if path and path[0] == source_id:
            path_nodes = path
            for a, b in zip(path, path[1:]):
                path_pairs.append((a, b))
                path_edges.append(prev[b][1])
        total = dist[target_id]
        path_found = not is_infinite(total)
    else:
        for nid in nodes:
            link = prev[nid]
            if nid != source_id and link is not None:
                path_pairs.append((link[0], nid))
                path_edges.append(link[1])
        path_nodes = [
            nid for nid in nodes
            if nid == source_id or prev[nid] is not None
        ]
        total = sum(d for d in dist.values() if not is_infinite(d))
        path_found = True

    if target_id is None:
        description = "Algorithm complete. Shortest paths from the source node are highlighted."
    elif path_found:
        description = (
            f"Algorithm complete. Shortest path from {source_id} to {target_id} "
            f"is highlighted with distance {format_value(total)}."
        )
    else:
        description = f"Algorithm complete. No path exists from {source_id} to {target_id}."

    trace.emit(
        description,
        highlighted_nodes=path_nodes,
        visited_nodes=[nid for nid in nodes if nid in visited],
        highlighted_edges=path_pairs,
        node_values=dist,
        stats={
            "Algorithm":      LABEL,
            "Status":         "Complete" if path_found else "Incomplete - No path",
            "Source Node":    source_id,
            "Target Node":    target_id if target_id is not None else "All",
            "Path Found":     "Yes" if path_found else "No",
            "Path Edges":     format_pairs(path_pairs),
            "Total Distance": format_value(total) if path_found else INFINITY_SYMBOL,
            "Visit Order":    format_order(visit_order),
            "Path Nodes":     format_nodes(path_nodes),
            "Excluded Nodes": format_nodes(excluded_nodes(graph, path_nodes)),
            "Excluded Edges": format_edges(excluded_edges(graph, path_edges)),
        },
    )


def _reconstruct(prev: Dict[int, Optional[Tuple[int, Edge]]], target: int) -> List[int]:
    path, cur = [], target
    while cur is not None:
        path.append(cur)
        link = prev[cur]
        cur = link[0] if link is not None else None
    path.reverse()
    return path
