"""
Exceptions raised by the graph model and its serializers.

Absence of a result (no path, no bridge, not k-partite) is never an
error: algorithms return empty collections or False instead.
"""


class GraphError(Exception):
    """Base class for every error raised by nodegraph."""

    pass


class GraphAttributeError(GraphError):
    """Raised when a named attribute cannot be used as requested."""

    pass


class AttributeNotFoundError(GraphAttributeError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f"graph attribute {name!r} doesn't exist")
        self.name = name


class AttributeTypeMismatchError(GraphAttributeError, TypeError):
    def __init__(self, name: str, actual: type, expected: type) -> None:
        super().__init__(
            f"graph attribute {name!r} is of type {actual.__name__} not {expected.__name__}"
        )
        self.name = name
        self.actual = actual
        self.expected = expected


class NodeIndexError(GraphError, IndexError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"graph invalid index {index} for nodes of size {size}")
        self.index = index
        self.size = size


class EncodeError(GraphError):
    """Raised when a graph cannot be written to an interchange format."""

    pass


class DecodeError(GraphError):
    """Raised when an interchange document cannot be turned into nodes."""

    pass


__all__ = [
    "GraphError",
    "GraphAttributeError",
    "AttributeNotFoundError",
    "AttributeTypeMismatchError",
    "NodeIndexError",
    "EncodeError",
    "DecodeError",
]
