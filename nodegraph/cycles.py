"""
Cycle membership of a single node.

A cycle is a path whose first node is also its last.

    a → b → c → a   cycle
    a → b → c       no cycle

Both checks are recomputed on every call, one reachability walk per
outward neighbour.
"""

from nodegraph.nodes import Node
from nodegraph.paths import has_path, path_to


def has_cycles(node: Node) -> bool:
    """True if some outward neighbour has a path back to the node."""
    return any(has_path(edge.node, node) for edge in node.edges.outward())


def has_cycle_containing(node: Node, member: Node) -> bool:
    """True if a path back to the node from an outward neighbour goes through member."""
    for edge in node.edges.outward():
        path = path_to(edge.node, node)
        if path and path.contains_node(member):
            return True
    return False


__all__ = ["has_cycles", "has_cycle_containing"]
