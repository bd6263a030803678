"""
Nodes and node collections.

Types:
    Node     - Labelled vertex with an adjacency list and attributes
    Nodes    - Ordered node collection with positional access
    NodeSet  - Unordered, identity-keyed node collection
    NodeSets - Ordered collection of node sets (partition classes)

Construction:
    connect_nodes(*nodes) - a → b → c → ...
    mesh_nodes(*nodes)    - every pair linked both ways
    add_edges(*specs)     - batch of EdgeSpec records

Node identity is object identity: two nodes with the same label are
still distinct nodes.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, NamedTuple

from nodegraph.direction import Direction
from nodegraph.edges import Edge, Edges
from nodegraph.errors import NodeIndexError

if TYPE_CHECKING:
    from nodegraph.paths import Path


@dataclass(eq=False, repr=False)
class Node:
    """Base unit of which graphs are formed."""

    name: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    edges: Edges = field(default_factory=Edges)

    def __repr__(self) -> str:
        return f"Node({self.name!r})"

    def __str__(self) -> str:
        return self.name

    def add_edge(self, target: Node) -> None:
        """
        Adds a directed relationship to the target.

            self → target

        The target receives the matching IN record.
        """
        self.edges.append(Edge(target, Direction.OUT))
        target.edges.append(Edge(self, Direction.IN))

    def add_link(self, target: Node) -> None:
        """
        Adds a relationship in both directions as two directed edges.

            self ↔ target : [ self → target, target → self ]

        This stores four records, which is not the same as a single
        BOTH edge.
        """
        self.add_edge(target)
        target.add_edge(self)

    def add_edge_with_direction(self, target: Node, direction: Direction) -> None:
        """
        Adds a relationship with an explicit direction. The complementary
        record is added on the target so the relationship can be walked
        from either side.
        """
        match direction:
            case Direction.OUT:
                self.edges.append(Edge(target, Direction.OUT))
                target.edges.append(Edge(self, Direction.IN))
            case Direction.IN:
                self.edges.append(Edge(target, Direction.IN))
                target.edges.append(Edge(self, Direction.OUT))
            case _:
                self.edges.append(Edge(target, direction))
                target.edges.append(Edge(self, direction))

    # Shortcuts onto the functional API

    def visit(self, fn: Callable[[Node], object]) -> None:
        from nodegraph.traversal import visit

        visit(self, fn)

    def visit_all(self, fn: Callable[[Node], object]) -> None:
        from nodegraph.traversal import visit_all

        visit_all(self, fn)

    def path_to(self, end: Node) -> Path:
        from nodegraph.paths import path_to

        return path_to(self, end)

    def has_path(self, end: Node) -> bool:
        from nodegraph.paths import has_path

        return has_path(self, end)

    def has_cycles(self) -> bool:
        from nodegraph.cycles import has_cycles

        return has_cycles(self)

    def has_cycle_containing(self, node: Node) -> bool:
        from nodegraph.cycles import has_cycle_containing

        return has_cycle_containing(self, node)


class Nodes(list[Node]):
    def names(self) -> list[str]:
        return [node.name for node in self]

    def __str__(self) -> str:
        return ", ".join(self.names())

    def index_of(self, node: Node) -> int:
        """Position of the node (by identity), -1 if absent."""
        for i, other in enumerate(self):
            if other is node:
                return i
        return -1

    def at_index(self, index: int) -> Node:
        if not 0 <= index < len(self):
            raise NodeIndexError(index, len(self))
        return self[index]


class NodeSet(set[Node]):
    """
    Collection of unique nodes, useful for visited tracking, cliques and
    partition classes. Nodes hash by identity.
    """

    def contains(self, node: Node) -> bool:
        return node in self

    def nodes(self) -> list[Node]:
        return list(self)

    def same_as(self, other: NodeSet) -> bool:
        return len(self) == len(other) and all(node in other for node in self)

    def __str__(self) -> str:
        return ", ".join(sorted(node.name for node in self))


class NodeSets(list[NodeSet]):
    def set_not_adjacent_with(self, node: Node) -> NodeSet | None:
        """First set none of whose members is a neighbour of node."""
        for node_set in self:
            if not any(node.edges.contains(member) for member in node_set):
                return node_set
        return None


class EdgeSpec(NamedTuple):
    source: Node
    target: Node
    direction: Direction | None = None


def add_edges(*specs: EdgeSpec) -> None:
    """Adds each spec; a spec without a direction is a plain add_edge."""
    for spec in specs:
        if spec.direction is None:
            spec.source.add_edge(spec.target)
        else:
            spec.source.add_edge_with_direction(spec.target, spec.direction)


def connect_nodes(*nodes: Node) -> None:
    """
    Chains the nodes in order.

        a → b → c → ...
    """
    for x, y in zip(nodes, nodes[1:]):
        x.add_edge(y)


def mesh_nodes(*nodes: Node) -> None:
    """
    Links every pair of nodes in both directions.

            a
         ⤢  ↑  ⤡
        b ←─┼─→ d
         ⤡  ↓  ⤢
            c
    """
    for i, x in enumerate(nodes):
        for y in nodes[i + 1 :]:
            x.add_link(y)


def new_nodes(names: Iterable[str]) -> Nodes:
    return Nodes(Node(name) for name in names)


__all__ = [
    "Node",
    "Nodes",
    "NodeSet",
    "NodeSets",
    "EdgeSpec",
    "add_edges",
    "connect_nodes",
    "mesh_nodes",
    "new_nodes",
]
