import logging
from collections.abc import Mapping
from types import BuiltinFunctionType, FunctionType, MethodType, ModuleType
from typing import Any, Iterable, List, Tuple

from ..errors import InvalidArgumentError
from .edge import Edge
from .vertex import Vertex

LOGGER = logging.getLogger(__name__)


def _is_attribute_bearing(v: Any) -> bool:
    # Vertex, mappings, and plain instances with __dict__ or __slots__
    if isinstance(v, (Vertex, Mapping)):
        return True
    if isinstance(v, (type, ModuleType, FunctionType, MethodType, BuiltinFunctionType)):
        return False
    return hasattr(v, "__dict__") or hasattr(type(v), "__slots__")


class Graph:
    """
    Mutable container of vertices and edges.

    Both collections are multisets kept in insertion order: adding the same
    vertex or edge twice stores it twice. Edges are not checked against the
    vertex list. The graph keeps references to what it is given and never
    copies vertices or edges.
    """

    def __init__(self, directed: bool = False):
        self._directed = bool(directed)
        self._vertices: List[Vertex] = []
        self._edges: List[Edge] = []

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def V(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def E(self) -> Tuple[Edge, ...]:
        return tuple(self._edges)

    # -----------------
    # VERTEX OPERATIONS
    # -----------------

    def add_vertex(self, v: Any) -> "Graph":
        if not _is_attribute_bearing(v):
            raise InvalidArgumentError(
                "A vertex must be a Vertex, a mapping, or an object instance with "
                f"__dict__ or __slots__, got {v!r}."
            )
        self._vertices.append(v)
        LOGGER.debug("Added vertex %r (order=%d)", v, len(self._vertices))
        return self

    def add_vertices(self, vertices: Iterable[Any]) -> "Graph":
        # not atomic: vertices added before a failing one stay in the graph
        for v in vertices:
            self.add_vertex(v)
        return self

    # -----------------
    # EDGE OPERATIONS
    # -----------------

    def add_edge(self, e: Any) -> "Graph":
        if getattr(e, "v1", None) is None or getattr(e, "v2", None) is None:
            raise InvalidArgumentError("Illegal argument. An edge must be incident on two vertices.")
        self._edges.append(e)
        LOGGER.debug("Added edge %r (size=%d)", e, len(self._edges))
        return self

    def add_edges(self, edges: Iterable[Any]) -> "Graph":
        for e in edges:
            self.add_edge(e)
        return self

    # -----------------
    # QUERIES
    # -----------------

    def order(self) -> int:
        return len(self._vertices)

    def size(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return (
            f"Graph(order={self.order()}, size={self.size()}, "
            f"directed={self._directed})"
        )
