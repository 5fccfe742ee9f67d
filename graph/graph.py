"""
graph.py — Graph Container
===========================
Single source of truth for the graph.  The editing layer mutates it,
the algorithm engines only read it.

Responsibilities:
  1. Ordered storage of nodes & edges      (iteration order = tie-break order)
  2. Read-only queries for the engines     (node_ids, has_node, outgoing, …)
  3. Editing operations                    (add / move / rename / weight / clear)
  4. Structural validation                 (validate → list of problems)
  5. The {nodes, edges} JSON document      (to_dict / from_dict / *_json)

Design decisions:
  - Nodes and edges live in plain lists, not dicts keyed by id.  Every
    engine breaks ties by "first one found", so insertion order IS part
    of the semantics.
  - A side index `_index[node_id] → Node` keeps lookups O(1).
  - Editing methods raise GraphError; engines never call them.
"""

import json
import math
from numbers import Real
from typing import Any, Dict, Iterable, List, Optional

from graph.node import Node
from graph.edge import Edge


class GraphError(ValueError):
    """An editing operation would break a graph invariant."""


class GraphFormatError(ValueError):
    """A {nodes, edges} document is structurally malformed."""


def _is_node_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_weight(value: Any) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and math.isfinite(value)
        and value > 0
    )


class GraphData:
    """
    Attributes:
        nodes  : [Node] in insertion order
        edges  : [Edge] in insertion order
        _index : {node_id: Node}
    """

    def __init__(
        self,
        nodes: Optional[Iterable[Node]] = None,
        edges: Optional[Iterable[Edge]] = None,
    ):
        self.nodes: List[Node]      = list(nodes or [])
        self.edges: List[Edge]      = list(edges or [])
        self._index: Dict[int, Node] = {}
        for node in self.nodes:
            self._index.setdefault(node.id, node)

    # ==================================================================
    # READ-ONLY QUERIES (what the engines use)
    # ==================================================================
    def node_ids(self) -> List[int]:
        return [n.id for n in self.nodes]

    def has_node(self, node_id: Optional[int]) -> bool:
        return node_id in self._index

    def get_node(self, node_id: int) -> Optional[Node]:
        return self._index.get(node_id)

    def outgoing(self, node_id: int) -> List[Edge]:
        """Edges that can be walked out of node_id, in edge order."""
        return [e for e in self.edges if e.leaves(node_id)]

    def incident(self, node_id: int) -> List[Edge]:
        return [e for e in self.edges if e.touches(node_id)]

    def find_edge(self, a: int, b: int) -> Optional[Edge]:
        """First edge linking a and b, either orientation."""
        for e in self.edges:
            if (e.source == a and e.target == b) or (e.source == b and e.target == a):
                return e
        return None

    def find_link(self, source: int, target: int) -> Optional[Edge]:
        """
        First edge that can carry source → target: a directed edge only in
        its own orientation, an undirected edge either way.
        """
        for e in self.edges:
            if e.source == source and e.target == target:
                return e
            if not e.directed and e.source == target and e.target == source:
                return e
        return None

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def is_empty(self) -> bool:
        return not self.nodes

    def has_directed_edges(self) -> bool:
        return any(e.directed for e in self.edges)

    # ==================================================================
    # EDITING
    # ==================================================================
    def add_node(self, node: Node) -> Node:
        if not _is_node_id(node.id):
            raise GraphError(f"Node id must be an integer, got {node.id!r}")
        if node.id in self._index:
            raise GraphError(f"Node {node.id} already exists")
        self.nodes.append(node)
        self._index[node.id] = node
        return node

    def create_node(self, node_id: int, x: float = 0.0, y: float = 0.0) -> Node:
        """Convenience: create + add in one call."""
        return self.add_node(Node(node_id, x, y))

    def next_node_id(self) -> int:
        return max(self._index, default=0) + 1

    def move_node(self, node_id: int, x: float, y: float) -> None:
        node = self._require(node_id)
        node.move_to(x, y)

    def rename_node(self, old_id: int, new_id: int) -> None:
        """Change a node's id and rewrite every edge that references it."""
        node = self._require(old_id)
        if old_id == new_id:
            return
        if not _is_node_id(new_id):
            raise GraphError(f"Node id must be an integer, got {new_id!r}")
        if new_id in self._index:
            raise GraphError(f"Node {new_id} already exists")
        for e in self.edges:
            if e.source == old_id:
                e.source = new_id
            if e.target == old_id:
                e.target = new_id
        del self._index[old_id]
        node.id = new_id
        self._index[new_id] = node

    def add_edge(self, edge: Edge) -> Edge:
        self._require(edge.source)
        self._require(edge.target)
        if not _is_weight(edge.weight):
            raise GraphError(f"Edge weight must be a positive number, got {edge.weight!r}")
        self.edges.append(edge)
        return edge

    def create_edge(
        self,
        source: int,
        target: int,
        weight: float = 1.0,
        directed: bool = False,
    ) -> Edge:
        return self.add_edge(Edge(source, target, weight=weight, directed=directed))

    def set_weight(self, source: int, target: int, weight: float) -> Edge:
        if not _is_weight(weight):
            raise GraphError(f"Edge weight must be a positive number, got {weight!r}")
        edge = self.find_edge(source, target)
        if edge is None:
            raise GraphError(f"No edge between {source} and {target}")
        edge.weight = weight
        return edge

    def remove_edge(self, edge: Edge) -> None:
        self.edges = [e for e in self.edges if e is not edge]

    def clear(self) -> None:
        self.nodes.clear()
        self.edges.clear()
        self._index.clear()

    def _require(self, node_id: int) -> Node:
        node = self._index.get(node_id)
        if node is None:
            raise GraphError(f"Node {node_id} does not exist")
        return node

    # ==================================================================
    # VALIDATION
    # ==================================================================
    def validate(self) -> List[str]:
        """
        Return every structural problem found, in a stable order.
        An empty list means the engines can run on this graph.
        """
        problems: List[str] = []

        seen_ids = set()
        for node in self.nodes:
            if not _is_node_id(node.id):
                problems.append(f"Node id {node.id!r} is not an integer")
            elif node.id in seen_ids:
                problems.append(f"Duplicate node id {node.id}")
            seen_ids.add(node.id)

        for i, e in enumerate(self.edges):
            for end in (e.source, e.target):
                if end not in seen_ids:
                    problems.append(f"Edge {e.label()} references missing node {end}")
            if not _is_weight(e.weight):
                problems.append(f"Edge {e.label()} has invalid weight {e.weight!r}")
            for earlier in self.edges[:i]:
                if earlier.same_link(e):
                    problems.append(
                        f"Parallel edge {e.label()} duplicates {earlier.label()}"
                    )
                    break

        return problems

    def is_valid(self) -> bool:
        return not self.validate()

    # ==================================================================
    # SERIALISATION — the {nodes, edges} document
    # ==================================================================
    def to_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "edges": [e.to_dict() for e in self.edges],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "GraphData":
        """
        Build a graph from a {nodes, edges} document.

        Only the document's SHAPE is checked here (keys present, ids are
        integers, coordinates / weights are numbers).  Semantic problems
        such as dangling edges are left for validate() so an imported
        graph can still be shown and fixed by the user.
        """
        if not isinstance(data, dict):
            raise GraphFormatError("Graph document must be an object")
        nodes_raw = data.get("nodes")
        edges_raw = data.get("edges")
        if not isinstance(nodes_raw, list) or not isinstance(edges_raw, list):
            raise GraphFormatError("Graph document needs 'nodes' and 'edges' lists")

        nodes = []
        for i, nd in enumerate(nodes_raw):
            if not isinstance(nd, dict) or "id" not in nd:
                raise GraphFormatError(f"nodes[{i}] must be an object with an 'id'")
            if not _is_node_id(nd["id"]):
                raise GraphFormatError(f"nodes[{i}].id must be an integer")
            for coord in ("x", "y"):
                if coord in nd and (isinstance(nd[coord], bool) or not isinstance(nd[coord], Real)):
                    raise GraphFormatError(f"nodes[{i}].{coord} must be a number")
            nodes.append(Node.from_dict(nd))

        edges = []
        for i, ed in enumerate(edges_raw):
            if not isinstance(ed, dict) or "source" not in ed or "target" not in ed:
                raise GraphFormatError(f"edges[{i}] must be an object with 'source' and 'target'")
            if not (_is_node_id(ed["source"]) and _is_node_id(ed["target"])):
                raise GraphFormatError(f"edges[{i}] endpoints must be integer node ids")
            if not isinstance(ed.get("directed", False), bool):
                raise GraphFormatError(f"edges[{i}].directed must be a boolean")
            weight = ed.get("weight", 1.0)
            if isinstance(weight, bool) or not isinstance(weight, Real):
                raise GraphFormatError(f"edges[{i}].weight must be a number")
            edges.append(Edge.from_dict(ed))

        return cls(nodes, edges)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> "GraphData":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise GraphFormatError(f"Invalid JSON: {exc.msg}") from exc
        return cls.from_dict(data)

    def copy(self) -> "GraphData":
        return GraphData.from_dict(self.to_dict())

    # ==================================================================
    # Dunder
    # ==================================================================
    def __repr__(self) -> str:
        return f"GraphData(nodes={len(self.nodes)}, edges={len(self.edges)})"
