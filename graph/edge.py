"""
edge.py — Graph Edge
====================
A weighted connection between two node ids.

Design decisions:
  - `source` and `target` are node ids, NOT Node references, so edges
    serialise straight into the {nodes, edges} document.
  - `directed` is stored per edge.  Whether an engine honours it is the
    engine's business: Dijkstra only walks a directed edge forwards,
    Prim and Kruskal look at the underlying undirected connection.
  - Two edges are only equal if they are the same object — parallel
    edges are representable, `GraphData.validate()` reports them.
"""

from typing import Any, Dict, Optional, Tuple


# ---------------------------------------------------------------------------
# Edge
# ---------------------------------------------------------------------------
class Edge:
    """
    Attributes:
        source   : Id of the tail node.
        target   : Id of the head node.
        weight   : Positive numeric cost.
        directed : If False, traversal works in both directions.
    """

    __slots__ = ("source", "target", "weight", "directed")

    def __init__(
        self,
        source: int,
        target: int,
        weight: float = 1.0,
        directed: bool = False,
    ):
        self.source:   int   = source
        self.target:   int   = target
        self.weight:   float = weight
        self.directed: bool  = directed

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def touches(self, node_id: int) -> bool:
        return node_id == self.source or node_id == self.target

    def leaves(self, node_id: int) -> bool:
        """True if the edge can be walked OUT of node_id (respects directedness)."""
        if self.directed:
            return self.source == node_id
        return self.touches(node_id)

    def other_end(self, node_id: int) -> Optional[int]:
        """Given one endpoint, return the other.  None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    def pair(self) -> Tuple[int, int]:
        return (self.source, self.target)

    def is_self_loop(self) -> bool:
        return self.source == self.target

    def same_link(self, other: "Edge") -> bool:
        """
        True if `other` describes the same connection as this edge:
        same endpoints, and not two directed edges pointing opposite ways.
        """
        if {self.source, self.target} != {other.source, other.target}:
            return False
        if self.directed and other.directed:
            return self.pair() == other.pair()
        return True

    def label(self) -> str:
        arrow = " → " if self.directed else " — "
        return f"{self.source}{arrow}{self.target}"

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "source":   self.source,
            "target":   self.target,
            "directed": self.directed,
            "weight":   self.weight,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Edge":
        return cls(
            source=data["source"],
            target=data["target"],
            weight=data.get("weight", 1.0),
            directed=data.get("directed", False),
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Edge({self.label()}, w={self.weight})"
