"""
graph/
-----
Core data layer.  Public API:

    from graph import GraphData, Node, Edge
    from graph import GraphError, GraphFormatError
"""

from graph.node  import Node
from graph.edge  import Edge
from graph.graph import GraphData, GraphError, GraphFormatError

__all__ = [
    "Node",
    "Edge",
    "GraphData",
    "GraphError",
    "GraphFormatError",
]
