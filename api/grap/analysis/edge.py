"""
Edge-level queries.

None of these functions modify their arguments.
"""

from __future__ import annotations

from ..model import Edge, Graph


def is_loop(e: Edge) -> bool:
    """A loop is an edge whose end vertices are the same vertex."""
    return e.v1 is e.v2


def is_link(e: Edge) -> bool:
    """A link has two distinct end vertices."""
    return not is_loop(e)


def equal(e1: Edge, e2: Edge) -> bool:
    """
    Edge equivalence used for multiplicity and containment.

    If either edge is directed the endpoints must match in order, even when
    the other edge is undirected. Two undirected edges match in either order.
    An edge without a ``directed`` attribute counts as undirected.
    """
    if getattr(e1, "directed", False) or getattr(e2, "directed", False):
        return e1.v1 is e2.v1 and e1.v2 is e2.v2
    return (e1.v1 is e2.v1 and e1.v2 is e2.v2) or (e1.v1 is e2.v2 and e1.v2 is e2.v1)


def multiplicity(e: Edge, G: Graph) -> int:
    """Number of edges in G equal to e, counting e itself if present."""
    return sum(1 for other in G.E if equal(other, e))


def is_multiple(e: Edge, G: Graph) -> bool:
    return multiplicity(e, G) > 1


def is_simple(e: Edge, G: Graph) -> bool:
    return multiplicity(e, G) == 1
