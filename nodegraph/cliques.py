"""
Greedy clique discovery.

A clique is a subset of nodes such that every two distinct nodes in the
subset are adjacent, i.e. an induced subgraph that is complete.

The search grows one candidate per visited node from its immediate
neighbourhood. It depends on visitation order, is not exhaustive and may
report a single maximal clique per starting node.

References:
    https://en.wikipedia.org/wiki/Clique_(graph_theory)
    https://mathworld.wolfram.com/Clique.html
"""

import logging

from nodegraph.nodes import Node, NodeSet
from nodegraph.traversal import visit_all

logger = logging.getLogger(__name__)

Clique = NodeSet


class Cliques(list[Clique]):
    def contains_clique(self, clique: Clique) -> bool:
        return any(known.same_as(clique) for known in self)

    def contains_node(self, node: Node) -> bool:
        return any(node in clique for clique in self)

    def index_of_node(self, node: Node) -> int | None:
        """Index of the first clique holding the node."""
        for index, clique in enumerate(self):
            if node in clique:
                return index
        return None


def _grow_clique(node: Node) -> Clique:
    clique = Clique([node])
    for edge in node.edges:
        for other in node.edges.but_not_with(edge.node):
            if other.node.edges.adjacent_to(*clique):
                clique.add(other.node)
    return clique


def find_cliques(root: Node, min_size: int) -> Cliques:
    """
    Finds cliques of at least min_size nodes in the graph containing root.

                  b
                ↙   ↖
              c       a
            ↙   ↘   ↗
           e  →   d

        Cliques (3 or more): {c, e, d}

    Cliques found from different starting nodes are reported once,
    regardless of member order.
    """
    cliques = Cliques()

    def inspect(node: Node) -> None:
        if not node.edges:
            return
        clique = _grow_clique(node)
        if len(clique) >= min_size and not cliques.contains_clique(clique):
            logger.debug(f"Clique found from {node.name!r}: {clique}")
            cliques.append(clique)

    visit_all(root, inspect)
    return cliques


__all__ = ["Clique", "Cliques", "find_cliques"]
