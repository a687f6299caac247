"""
Side-effect-free analysis of graphs and edges.

Use the submodules as namespaces: ``analysis.graph.is_simple(G)``,
``analysis.edge.multiplicity(e, G)``.
"""

from . import edge, graph
from .graph import GraphKind

__all__ = ["edge", "graph", "GraphKind"]
