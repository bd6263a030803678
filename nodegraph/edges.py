"""
Edge records and edge collections.

A connection between two nodes is stored twice, once on each side, with
complementary directions (OUT on one side, IN on the other; NONE, UNKNOWN
and BOTH are stored identically on both sides). An Edge therefore only
references its target: the source is the node whose adjacency list holds it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from nodegraph.direction import Direction

if TYPE_CHECKING:
    from nodegraph.nodes import Node, NodeSet


@dataclass(eq=False)
class Edge:
    """One side of a relationship with the target node."""

    node: Node
    direction: Direction = Direction.UNKNOWN
    name: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return f"{self.direction} {self.node.name}"


class Edges(list[Edge]):
    """Ordered adjacency list; insertion order is traversal order."""

    def inward(self) -> Edges:
        """Edges tagged exactly IN (BOTH, NONE and UNKNOWN are excluded)."""
        return Edges(edge for edge in self if edge.direction is Direction.IN)

    def outward(self) -> Edges:
        """Edges tagged exactly OUT (BOTH, NONE and UNKNOWN are excluded)."""
        return Edges(edge for edge in self if edge.direction is Direction.OUT)

    def nodes(self) -> list[Node]:
        return [edge.node for edge in self]

    def contains(self, node: Node) -> bool:
        return any(edge.node is node for edge in self)

    def but_not_with(self, node: Node) -> Edges:
        """Edges whose target is any node other than the given one."""
        return Edges(edge for edge in self if edge.node is not node)

    def adjacent_nodes(self) -> NodeSet:
        from nodegraph.nodes import NodeSet

        return NodeSet(edge.node for edge in self)

    def adjacent_to(self, *nodes: Node) -> bool:
        """True only if every given node is the target of some edge."""
        return all(self.contains(node) for node in nodes)


__all__ = ["Edge", "Edges"]
