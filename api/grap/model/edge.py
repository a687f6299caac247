from typing import Any, Tuple

from ..errors import InvalidArgumentError


class Edge:
    """
    A pair of end vertices, ordered when the edge is directed.

    The edge holds references to its endpoints, it never owns or copies them.
    """

    def __init__(self, v1: Any, v2: Any, directed: bool = False):
        if v1 is None or v2 is None:
            raise InvalidArgumentError(
                "Illegal arguments for constructing an Edge. Expected two vertices, "
                "e.g. Edge(v1, v2)."
            )
        self._v1 = v1
        self._v2 = v2
        self._directed = bool(directed)

    @property
    def v1(self) -> Any:
        return self._v1

    @property
    def v2(self) -> Any:
        return self._v2

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def endpoints(self) -> Tuple[Any, Any]:
        return self._v1, self._v2

    @property
    def is_loop(self) -> bool:
        """Both endpoints are the same vertex."""
        return self._v1 is self._v2

    @property
    def is_link(self) -> bool:
        return not self.is_loop

    def __repr__(self) -> str:
        arrow = "->" if self._directed else "--"
        return f"Edge({self._v1!r} {arrow} {self._v2!r})"
