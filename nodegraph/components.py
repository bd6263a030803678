"""
Connected components of the underlying undirected graph.
"""

from collections import deque
from collections.abc import Iterable

from nodegraph.nodes import Node


def connected_components(nodes: Iterable[Node]) -> frozenset[frozenset[Node]]:
    """
    Extract connected components, treating every edge record as an
    undirected connection.

    Args:
        nodes: Nodes to start from; components reachable from them are returned.

    Returns:
        frozenset[frozenset[Node]]: set of connected components
    """
    seen: set[Node] = set()
    components = set()

    # Guarantees all the nodes are at least visited once
    for node in nodes:
        if node in seen:
            continue

        component = set()
        # Breadth-first traversal
        queue = deque([node])
        while queue:
            current = queue.popleft()
            if current in seen:
                continue

            component.add(current)
            queue.extend(current.edges.nodes())
            seen.add(current)

        components.add(frozenset(component))
    return frozenset(components)


__all__ = ["connected_components"]
