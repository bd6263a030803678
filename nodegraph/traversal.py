"""
Depth-first traversal over node relationships.

Functions:
    visit_with_terminator(root, record, direction, fn) - Generalised walk, fn returns False to stop
    visit(root, fn)     - Walk outward edges
    visit_all(root, fn) - Walk every edge, ignoring direction
    visit_order(root, direction) - Nodes in walk order

Edges are walked in adjacency (insertion) order and every node is
visited at most once. The walk uses an explicit stack of edge iterators,
so deep graphs do not hit the interpreter's recursion limit, while the
visitation order stays that of the recursive preorder walk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from nodegraph.direction import Direction
from nodegraph.edges import Edge
from nodegraph.nodes import Node, NodeSet

logger = logging.getLogger(__name__)


def follows(edge: Edge, direction: Direction) -> bool:
    """
    Whether a walk in the given direction crosses the edge.

    IN and OUT walks cross edges with exactly that direction, or BOTH.
    UNKNOWN, NONE and BOTH walks cross every edge.
    """
    if direction in (Direction.IN, Direction.OUT):
        return edge.direction.matches(direction)
    return True


def visit_with_terminator(
    root: Node | None,
    record: NodeSet | None,
    direction: Direction,
    fn: Callable[[Node], bool],
) -> None:
    """
    Walks relationships from the root, depth-first, calling fn on each node.

    Args:
        root: Starting node, the walk is a no-op for None.
        record: Nodes already visited, shared across calls when given.
        direction: Which edges to cross, see `follows`.
        fn: Called once per node; returning False halts the whole walk.
    """
    if root is None:
        return
    if record is None:
        record = NodeSet()
    if root in record:
        return

    record.add(root)
    if not fn(root):
        return

    stack: list[Iterator[Edge]] = [iter(root.edges)]
    while stack:
        edge = next(stack[-1], None)
        if edge is None:
            stack.pop()
            continue
        if not follows(edge, direction) or edge.node in record:
            continue

        record.add(edge.node)
        if not fn(edge.node):
            logger.debug(f"Traversal from {root.name!r} stopped at {edge.node.name!r}")
            return
        stack.append(iter(edge.node.edges))


def _continue(fn: Callable[[Node], object]) -> Callable[[Node], bool]:
    def wrapped(node: Node) -> bool:
        fn(node)
        return True

    return wrapped


def visit(root: Node, fn: Callable[[Node], object]) -> None:
    """
    Walks the outward nodes depth-first.

           root node
           ┌────────         1. Start at root "a"
        1  a           e 5   2. Go to edge node "b"
           ↑ ⤡ 3   4 ⤢ ↑     3. Go to edge node "c"
           |   c ↔ d   |     4. Go to edge node "d"
           ↓ ⤢       ⤡ ↓     5. Go to edge node "e"
        2  b           f 6   6. Go to edge node "f"
    """
    visit_with_terminator(root, None, Direction.OUT, _continue(fn))


def visit_all(root: Node, fn: Callable[[Node], object]) -> None:
    """Walks outward and inward nodes depth-first, as undirected connectivity."""
    visit_with_terminator(root, None, Direction.BOTH, _continue(fn))


def visit_order(root: Node, direction: Direction = Direction.OUT) -> list[Node]:
    """Nodes in the order a walk in the given direction visits them."""
    visited: list[Node] = []
    visit_with_terminator(root, None, direction, _continue(visited.append))
    return visited


__all__ = [
    "follows",
    "visit_with_terminator",
    "visit",
    "visit_all",
    "visit_order",
]
