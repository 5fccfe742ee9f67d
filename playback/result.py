"""
result.py — Final Result Extraction
=====================================
Reads the LAST step of a trace and turns it into what the results panel
and the "result tree" view draw:

    • label / value rows from the final stats (values already formatted)
    • the solution subgraph: final highlighted edges + nodes
    • status, and whether the run ended on an error

Usage:
    result = ResultTree.from_trace(trace, graph)
    result.rows          # [("Algorithm", "Kruskal - …"), ("Status", "Complete"), …]
    result.edges         # [(1, 2), (2, 3)]
    result.total_weight  # 2
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from graph import GraphData
from algorithms.step import AlgorithmStep, StatValue, format_value


@dataclass
class ResultTree:
    description:  str                        = ""
    status:       Optional[str]              = None
    is_error:     bool                       = False
    rows:         List[Tuple[str, StatValue]] = field(default_factory=list)
    nodes:        List[int]                  = field(default_factory=list)
    edges:        List[Tuple[int, int]]      = field(default_factory=list)
    total_weight: Optional[float]            = None
    total_steps:  int                        = 0

    @classmethod
    def from_trace(
        cls,
        trace: Sequence[AlgorithmStep],
        graph: Optional[GraphData] = None,
    ) -> "ResultTree":
        if not trace:
            return cls()

        last  = trace[-1]
        edges = list(last.highlighted_edges or ())

        if last.highlighted_nodes is not None:
            nodes = list(last.highlighted_nodes)
        else:
            nodes = []
            for s, t in edges:
                for nid in (s, t):
                    if nid not in nodes:
                        nodes.append(nid)

        total = None
        if graph is not None:
            total = 0
            for s, t in edges:
                e = graph.find_link(s, t)
                if e is not None:
                    total += e.weight

        return cls(
            description=last.description,
            status=last.status,
            is_error=last.is_error,
            rows=[(k, format_value(v)) for k, v in (last.stats or {}).items()],
            nodes=nodes,
            edges=edges,
            total_weight=format_value(total) if total is not None else None,
            total_steps=len(trace),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description":  self.description,
            "status":       self.status,
            "is_error":     self.is_error,
            "rows":         [{"label": k, "value": v} for k, v in self.rows],
            "nodes":        list(self.nodes),
            "edges":        [{"source": s, "target": t} for s, t in self.edges],
            "total_weight": self.total_weight,
            "total_steps":  self.total_steps,
        }
