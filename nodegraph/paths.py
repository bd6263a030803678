"""
Paths and reachability.

A Path is an ordered sequence of nodes, first the start, last the end.
Two paths are considered identical when their rendered labels are equal,
which is only accurate while labels are unique.
"""

from __future__ import annotations

from nodegraph.direction import Direction
from nodegraph.nodes import Node, Nodes
from nodegraph.traversal import visit_with_terminator

_COMPLETES_PATH = (Direction.OUT, Direction.BOTH, Direction.NONE, Direction.UNKNOWN)


class Path(Nodes):
    def __str__(self) -> str:
        return " → ".join(node.name for node in self)

    def identical(self, other: Path) -> bool:
        return str(self) == str(other)

    def contains_node(self, node: Node) -> bool:
        return any(path_node is node for path_node in self)


class Paths(list[Path]):
    def contains_path(self, path: Path) -> bool:
        return any(known.identical(path) for known in self)

    def contains_node(self, node: Node) -> bool:
        return any(path.contains_node(node) for path in self)


def path_to(start: Node, end: Node) -> Path:
    """
    Returns a path from start to end, empty if end is not reachable.

    Walks outward from start; the first visited node with a non-inward
    edge to end closes the path. The path holds the nodes in visitation
    order, so on branching graphs it is a walk rather than a shortest
    path.

        root node       f           end node
        ┌────────     ↗             ┌───────
        a → b → c → e           i → e
                ↓     ↘       ↗
                d       g → h

        Path: a → b → c → e → g → h → i → e

    Nothing is cached, each call walks the graph again.
    """
    path = Path()
    found = False

    def step(node: Node) -> bool:
        nonlocal found
        path.append(node)
        for edge in node.edges:
            if edge.node is end and edge.direction in _COMPLETES_PATH:
                path.append(end)
                found = True
                return False
        return True

    visit_with_terminator(start, None, Direction.OUT, step)

    if not found:
        return Path()
    return path


def has_path(start: Node, end: Node) -> bool:
    return len(path_to(start, end)) > 0


__all__ = ["Path", "Paths", "path_to", "has_path"]
