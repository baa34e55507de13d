from .structure import EdgeType
from .vertex import Vertex
from .edges import Edge, DirectedEdge, UndirectedEdge, DirectedWeightedEdge, UndirectedWeightedEdge
from .graph import BaseGraph, DirectedGraph, UndirectedGraph

__all__ = [
    "EdgeType",
    "Vertex",
    "Edge",
    "DirectedEdge",
    "UndirectedEdge",
    "DirectedWeightedEdge",
    "UndirectedWeightedEdge",
    "BaseGraph",
    "DirectedGraph",
    "UndirectedGraph",
]
