"""
Named, heterogeneously typed values attached to nodes, edges and graphs.

Functions:
    use_attribute(attrs, name, kind, fn) - Call fn with the value if it has the expected type
    get_attribute(attrs, name, kind)     - Return the value if it has the expected type
    set_attribute(attrs, name, value)    - Store a value
    delete_attribute(attrs, name)        - Remove a value (no-op when missing)

The algorithms never read attributes; they exist for graph builders and
the serializers.
"""

from collections.abc import Callable, MutableMapping
from typing import Any, TypeAlias, TypeVar

from nodegraph.errors import AttributeNotFoundError, AttributeTypeMismatchError

T = TypeVar("T")

Attributes: TypeAlias = dict[str, Any]


def _has_kind(value: object, kind: type) -> bool:
    # bool never satisfies int or float
    if isinstance(value, bool) and kind in (int, float):
        return False
    return isinstance(value, kind)


def use_attribute(
    attrs: MutableMapping[str, Any], name: str, kind: type[T], fn: Callable[[T], object]
) -> None:
    """
    Calls fn with the named attribute.

    Raises:
        AttributeNotFoundError: If the attribute doesn't exist.
        AttributeTypeMismatchError: If the attribute is not an instance of kind.
    """
    if name not in attrs:
        raise AttributeNotFoundError(name)
    value = attrs[name]
    if not _has_kind(value, kind):
        raise AttributeTypeMismatchError(name, type(value), kind)
    fn(value)


def get_attribute(attrs: MutableMapping[str, Any], name: str, kind: type[T]) -> T:
    """Returns the named attribute, with the same errors as use_attribute."""
    found: list[T] = []
    use_attribute(attrs, name, kind, found.append)
    return found[0]


def set_attribute(attrs: MutableMapping[str, Any], name: str, value: Any) -> None:
    attrs[name] = value


def delete_attribute(attrs: MutableMapping[str, Any], name: str) -> None:
    attrs.pop(name, None)


__all__ = [
    "Attributes",
    "use_attribute",
    "get_attribute",
    "set_attribute",
    "delete_attribute",
]
