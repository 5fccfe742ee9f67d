"""
step.py — Algorithm Step Snapshot
==================================
Every engine returns a list of AlgorithmStep objects (a "trace").
An AlgorithmStep is a frozen-in-time picture of everything the player
needs to render one frame:

    • Which nodes are emphasised right now / settled so far
    • Which edges are emphasised (endpoint pairs only — the renderer
      looks up direction and weight itself)
    • The running per-node values (Dijkstra distances)
    • A stats panel: ordered label → value rows
    • A plain-English description of what just happened

Design decisions:
  - AlgorithmStep is a plain frozen dataclass.  It is a SNAPSHOT.  The
    engine is the only writer; player / result view are pure readers.
  - Every optional field is None when the step says nothing about it,
    which the wire format turns into "key absent".
  - Engines build their trace with TraceBuilder, which copies every
    mutable argument at emit time so later mutation of the engine's
    working sets never leaks into earlier steps.
  - Unreached distances are float("inf") in memory and "∞" on the wire
    (JSON has no infinity).
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

StatValue = Union[str, int, float]
EdgePair  = Tuple[int, int]

INFINITY        = float("inf")
INFINITY_SYMBOL = "∞"
NONE_LABEL      = "None"


@dataclass(frozen=True)
class AlgorithmStep:
    """
    Attributes:
        description       : Human-readable narration of this step.
        highlighted_nodes : Node ids emphasised at this instant.
        visited_nodes     : Cumulative visited / settled node ids.
        highlighted_edges : (source, target) pairs emphasised at this instant.
        node_values       : {node_id: number} — e.g. running shortest distance.
        stats             : Ordered {label: value} rows for the stats panel.
    """

    description:       str
    highlighted_nodes: Optional[Tuple[int, ...]]      = None
    visited_nodes:     Optional[Tuple[int, ...]]      = None
    highlighted_edges: Optional[Tuple[EdgePair, ...]] = None
    node_values:       Optional[Dict[int, float]]     = None
    stats:             Optional[Dict[str, StatValue]] = None

    @property
    def status(self) -> Optional[str]:
        if not self.stats:
            return None
        status = self.stats.get("Status")
        return str(status) if status is not None else None

    @property
    def is_error(self) -> bool:
        return bool(self.status and self.status.startswith("Error"))

    def to_dict(self) -> Dict[str, Any]:
        """camelCase wire shape consumed by the playback / rendering layer."""
        out: Dict[str, Any] = {"description": self.description}
        if self.highlighted_nodes is not None:
            out["highlightedNodes"] = list(self.highlighted_nodes)
        if self.visited_nodes is not None:
            out["visitedNodes"] = list(self.visited_nodes)
        if self.highlighted_edges is not None:
            out["highlightedEdges"] = [
                {"source": s, "target": t} for s, t in self.highlighted_edges
            ]
        if self.node_values is not None:
            out["nodeValues"] = {
                str(nid): _wire(v) for nid, v in self.node_values.items()
            }
        if self.stats is not None:
            out["stats"] = {k: _wire(v) for k, v in self.stats.items()}
        return out


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------
def is_infinite(value: Any) -> bool:
    return isinstance(value, float) and math.isinf(value)


def format_value(value: Any) -> StatValue:
    """∞ for infinity, 3 instead of 3.0, everything else untouched."""
    if is_infinite(value):
        return INFINITY_SYMBOL
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _wire(value: Any) -> Any:
    if is_infinite(value):
        return INFINITY_SYMBOL
    return value


def join_ids(ids: Iterable[int], sep: str = ", ", empty: str = NONE_LABEL) -> str:
    text = sep.join(str(i) for i in ids)
    return text or empty


# ---------------------------------------------------------------------------
# TraceBuilder — growable step list handed to the caller at the end
# ---------------------------------------------------------------------------
class TraceBuilder:
    """
    Usage inside an engine:
        trace = TraceBuilder()
        trace.emit(
            "Visit node 3 with distance 4.",
            highlighted_nodes=[3],
            visited_nodes=visited,
            node_values=dist,
            stats={"Current Node": 3},
        )
        return trace.build()
    """

    def __init__(self):
        self._steps: List[AlgorithmStep] = []

    def emit(
        self,
        description: str,
        highlighted_nodes: Optional[Iterable[int]] = None,
        visited_nodes: Optional[Iterable[int]] = None,
        highlighted_edges: Optional[Iterable[EdgePair]] = None,
        node_values: Optional[Mapping[int, float]] = None,
        stats: Optional[Mapping[str, StatValue]] = None,
    ) -> AlgorithmStep:
        step = AlgorithmStep(
            description=description,
            highlighted_nodes=tuple(highlighted_nodes) if highlighted_nodes is not None else None,
            visited_nodes=tuple(visited_nodes) if visited_nodes is not None else None,
            highlighted_edges=(
                tuple((s, t) for s, t in highlighted_edges)
                if highlighted_edges is not None else None
            ),
            node_values=dict(node_values) if node_values is not None else None,
            stats=dict(stats) if stats is not None else None,
        )
        self._steps.append(step)
        return step

    def build(self) -> List[AlgorithmStep]:
        return list(self._steps)

    def __len__(self) -> int:
        return len(self._steps)


def error_step(
    description: str,
    status: str,
    algorithm: Optional[str] = None,
    extra: Optional[Mapping[str, StatValue]] = None,
) -> AlgorithmStep:
    """A single terminal step reporting a precondition failure."""
    stats: Dict[str, StatValue] = {}
    if algorithm:
        stats["Algorithm"] = algorithm
    stats["Status"] = status
    if extra:
        stats.update(extra)
    return AlgorithmStep(description=description, stats=stats)
