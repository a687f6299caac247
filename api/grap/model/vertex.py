from typing import Any, Optional


class Vertex:
    """
    Basic element of a graph.

    A vertex is an identity carrying an open-ended bag of attributes. The
    supplied mapping is shallow-copied, so mutable values are shared with
    the caller. Attribute keys read and write through ``vertex.<key>`` as
    well as ``vertex.attributes[key]``; both name the same entry. Vertices
    compare by identity only: two vertices built from the same attributes
    are still two vertices.
    """

    def __init__(self, attributes: Optional[dict] = None, **extra: Any):
        self.attributes = dict(attributes or {})
        self.attributes.update(extra)

    def __getattr__(self, name: str) -> Any:
        # only reached when normal lookup fails
        attributes = self.__dict__.get("attributes", {})
        if name in attributes:
            return attributes[name]
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "attributes" or name.startswith("_"):
            super().__setattr__(name, value)
        else:
            self.attributes[name] = value

    def __delattr__(self, name: str) -> None:
        if name in self.__dict__.get("attributes", {}):
            del self.attributes[name]
        else:
            super().__delattr__(name)

    def __repr__(self) -> str:
        return f"Vertex({self.attributes!r})"
