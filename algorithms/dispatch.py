"""
dispatch.py — Algorithm Dispatcher
===================================
The one seam through which every engine is reached.

    from algorithms.dispatch import run_algorithm
    trace = run_algorithm("dijkstra", graph, source_id=1, target_id=4)

Anything the UI should have prevented but might not have (empty graph,
unknown algorithm, no source node, a target that isn't in the graph, a
structurally broken graph) comes back as a ONE-step trace describing the
problem.  Nothing here raises for user input, and nothing here knows how
any algorithm works.
"""

import logging
from typing import List, Optional

from graph import GraphData
from algorithms import get_algorithm
from algorithms.step import AlgorithmStep, error_step

logger = logging.getLogger(__name__)


def run_algorithm(
    name: Optional[str],
    graph: Optional[GraphData],
    source_id: Optional[int] = None,
    target_id: Optional[int] = None,
) -> List[AlgorithmStep]:
    if graph is None:
        return []

    info  = get_algorithm(name)
    label = info.label if info else None

    if graph.is_empty():
        return _reject(
            name,
            "The graph has no nodes. Add nodes to run the algorithm.",
            "Error - Empty graph",
            label,
        )

    if info is None:
        return _reject(name, "Algorithm not recognised.", "Error - Invalid algorithm")

    problems = graph.validate()
    if problems:
        return _reject(
            name,
            f"The graph is invalid: {problems[0]}.",
            "Error - Invalid graph",
            label,
            {"Problems": len(problems)},
        )

    if info.needs_source:
        if source_id is None:
            return _reject(
                name,
                f"{label.split(' - ')[0]} needs a source node. Select a source node.",
                "Error - Source node not selected",
                label,
            )
        # an unknown Prim start is reported by the engine itself
        if info.accepts_target and not graph.has_node(source_id):
            return _reject(
                name,
                f"The source node {source_id} does not exist in the graph.",
                "Error - Invalid source node",
                label,
                {"Source Node": source_id},
            )

    if info.accepts_target and target_id is not None and not graph.has_node(target_id):
        return _reject(
            name,
            f"The target node {target_id} does not exist in the graph.",
            "Error - Invalid target node",
            label,
            {"Source Node": source_id, "Target Node": target_id},
        )

    logger.debug(
        "running %s on %d nodes / %d edges (source=%s, target=%s)",
        info.key, graph.node_count(), graph.edge_count(), source_id, target_id,
    )

    if info.accepts_target:
        return info.fn(graph, source_id, target_id)
    if info.needs_source:
        return info.fn(graph, source_id)
    return info.fn(graph)


def _reject(name, description, status, label=None, extra=None) -> List[AlgorithmStep]:
    logger.warning("rejected %r run: %s", name, status)
    return [error_step(description, status, algorithm=label, extra=extra)]
