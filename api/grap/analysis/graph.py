"""
Graph-level queries and derived graphs.

Every function here reads its graph through the read-only ``V``/``E`` views
and returns a fresh value. The complement is a new Graph; the input is
never modified.
"""

from __future__ import annotations

import logging
from enum import Enum

from ..model import Edge, Graph
from . import edge

LOGGER = logging.getLogger(__name__)


class GraphKind(Enum):
    """Classification returned by classify()."""
    SIMPLE = "simple"
    MULTI = "multi"
    PSEUDO = "pseudo"
    LOOPED = "looped"


def order(G: Graph) -> int:
    """The order of a graph is the number of its vertices, |V(G)|."""
    return len(G.V)


def size(G: Graph) -> int:
    """The size of a graph is the number of its edges, |E(G)|."""
    return len(G.E)


vertex_count = order
edge_count = size


def multiplicity(G: Graph) -> int:
    """Maximum multiplicity over the edges of G, 0 when G has no edges."""
    return max((edge.multiplicity(e, G) for e in G.E), default=0)


def has_loops(G: Graph) -> bool:
    return any(edge.is_loop(e) for e in G.E)


def is_simple(G: Graph) -> bool:
    """A simple graph has neither loops nor multiple edges."""
    return not has_loops(G) and multiplicity(G) <= 1


def is_multi(G: Graph) -> bool:
    # An edgeless graph has multiplicity 0 and therefore counts as multi.
    return multiplicity(G) != 1


def is_pseudo(G: Graph) -> bool:
    """A pseudograph has loops and a multiplicity other than 1."""
    return has_loops(G) and multiplicity(G) != 1


def classify(G: Graph) -> GraphKind:
    if is_pseudo(G):
        return GraphKind.PSEUDO
    if is_simple(G):
        return GraphKind.SIMPLE
    if is_multi(G):
        return GraphKind.MULTI
    return GraphKind.LOOPED


def contains_edge(G: Graph, e: Edge) -> bool:
    return any(edge.equal(e, other) for other in G.E)


def is_anti_edge(G: Graph, e: Edge) -> bool:
    """
    An anti-edge is an edge that is not there: no edge of G is equal to it.
    """
    return not contains_edge(G, e)


def complement(G: Graph) -> Graph:
    """
    Graph over the same vertices whose edges are the anti-edges of G.

    Every ordered pair of V x V is tried, self pairs included, so both (u, v)
    and (v, u) can appear and duplicate vertices yield duplicate candidates.
    Candidates are undirected edges.
    """
    C = Graph(directed=G.directed)
    vertices = G.V
    C.add_vertices(vertices)
    for u in vertices:
        for v in vertices:
            candidate = Edge(u, v)
            if is_anti_edge(G, candidate):
                C.add_edge(candidate)
    LOGGER.debug("Built complement of %r: %r", G, C)
    return C
