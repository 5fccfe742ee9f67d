"""
node.py — Graph Node
=====================
A labelled point on the canvas.  Only `id` matters to the algorithms;
`x` / `y` are kept so an exported document can be re-drawn exactly.
"""

from typing import Any, Dict


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Attributes:
        id : Caller-assigned integer identifier (unique, > 0 by convention).
        x  : Canvas x coordinate (display-only).
        y  : Canvas y coordinate (display-only).
    """

    __slots__ = ("id", "x", "y")

    def __init__(self, node_id: int, x: float = 0.0, y: float = 0.0):
        self.id: int  = node_id
        self.x: float = x
        self.y: float = y

    # ------------------------------------------------------------------
    # Editing helpers (collaborator layer only — engines never move nodes)
    # ------------------------------------------------------------------
    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        return cls(node_id=data["id"], x=data.get("x", 0.0), y=data.get("y", 0.0))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
