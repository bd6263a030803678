"""
Bipartite and k-partite classification.

A graph is k-partite when its nodes split into k disjoint classes with no
two adjacent nodes in the same class.

The classes are built greedily in node order: each node joins the first
class it has no neighbour in, or opens a new class. This is an
order-dependent coloring and can answer False for graphs that an optimal
coloring would split.

References:
    https://mathworld.wolfram.com/BipartiteGraph.html
    https://en.wikipedia.org/wiki/Multipartite_graph
"""

import logging
from collections.abc import Iterable

from nodegraph.nodes import Node, NodeSet, NodeSets

logger = logging.getLogger(__name__)


def partition(nodes: Iterable[Node], k: int) -> NodeSets | None:
    """
    Returns the greedy classes of the nodes, or None as soon as more than
    k classes would be needed.
    """
    classes = NodeSets()
    for node in nodes:
        target = classes.set_not_adjacent_with(node)
        if target is not None:
            target.add(node)
            continue

        classes.append(NodeSet([node]))
        logger.debug(f"Class {len(classes)} opened for {node.name!r}")
        if len(classes) > k:
            return None
    return classes


def is_multipartite(nodes: Iterable[Node], k: int) -> bool:
    """True only if the greedy split uses exactly k classes."""
    classes = partition(nodes, k)
    return classes is not None and len(classes) == k


def is_bipartite(nodes: Iterable[Node]) -> bool:
    return is_multipartite(nodes, 2)


__all__ = ["partition", "is_multipartite", "is_bipartite"]
