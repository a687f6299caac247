"""Public API exports for the grap graph model."""

from .errors import InvalidArgumentError
from .model import Vertex, Edge, Graph
from .analysis import edge, graph, GraphKind

__all__ = [
    "Vertex",
    "Edge",
    "Graph",
    "edge",
    "graph",
    "GraphKind",
    "InvalidArgumentError",
]
