"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm

REGISTRY is a dict:
    {
        "dijkstra": AlgoInfo(key, label, fn, pseudocode, needs_source, …),
        …
    }

The set is fixed: the dispatcher (algorithms.dispatch) is the only
caller of `fn`, and it uses `needs_source` / `accepts_target` to decide
which arguments to pass and which preconditions to check.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from algorithms.step      import AlgorithmStep, TraceBuilder, format_value
from algorithms.dijkstra  import run_dijkstra, PSEUDOCODE as _dij_pc, LABEL as _dij_label
from algorithms.prim      import run_prim,     PSEUDOCODE as _prim_pc, LABEL as _prim_label
from algorithms.kruskal   import run_kruskal,  PSEUDOCODE as _kru_pc, LABEL as _kru_label
from algorithms.scc       import run_scc,      PSEUDOCODE as _scc_pc, LABEL as _scc_label


# ---------------------------------------------------------------------------
# AlgoInfo — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                 # registry key, e.g. "dijkstra"
    label:            str                 # label used in stats, e.g. "Dijkstra - Shortest Path"
    fn:               Callable[..., List[AlgorithmStep]]
    pseudocode:       List[str]           # lines for the side-panel
    needs_source:     bool = False        # dispatcher rejects a run without a source node
    accepts_target:   bool = False        # optional target node (early exit)
    tags:             List[str] = field(default_factory=list)
    complexity_time:  str = ""
    complexity_space: str = ""
    description:      str = ""            # one-liner for the UI card

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "pseudocode":       list(self.pseudocode),
            "needs_source":     self.needs_source,
            "accepts_target":   self.accepts_target,
            "tags":             list(self.tags),
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgoInfo] = {

    "dijkstra": AlgoInfo(
        key="dijkstra", label=_dij_label, fn=run_dijkstra, pseudocode=_dij_pc,
        needs_source=True, accepts_target=True,
        tags=["weighted", "shortest-path", "directed"],
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Settles the closest unvisited node each round. Follows edge direction.",
    ),

    "prim": AlgoInfo(
        key="prim", label=_prim_label, fn=run_prim, pseudocode=_prim_pc,
        needs_source=True,
        tags=["weighted", "spanning-tree"],
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Grows one tree from the start node, always taking the cheapest crossing edge.",
    ),

    "kruskal": AlgoInfo(
        key="kruskal", label=_kru_label, fn=run_kruskal, pseudocode=_kru_pc,
        tags=["weighted", "spanning-tree", "union-find"],
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Takes edges cheapest-first, skipping any that would close a cycle.",
    ),

    "scc": AlgoInfo(
        key="scc", label=_scc_label, fn=run_scc, pseudocode=_scc_pc,
        tags=["directed", "components", "traversal"],
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Kosaraju's two-pass DFS. Groups nodes that can all reach each other.",
    ),
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: Any) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None (also for non-string keys)."""
    if not isinstance(key, str):
        return None
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


__all__ = [
    "AlgoInfo",
    "AlgorithmStep",
    "TraceBuilder",
    "REGISTRY",
    "format_value",
    "get_algorithm",
    "list_algorithms",
    "run_dijkstra",
    "run_prim",
    "run_kruskal",
    "run_scc",
]
