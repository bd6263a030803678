"""
Bridge (cut-edge) detection.

A bridge, also called isthmus, cut-edge or cut arc, is an edge whose
deletion increases the number of connected components. Equivalently an
edge is a bridge if and only if it is not contained in any cycle, so a
bridge is never a cycle chord.

The search is a staged heuristic over reachability queries, not a
low-link algorithm. It is exact on trees, on dangling edges feeding into
cycles and on subgraphs joined by a single directed edge. Subgraphs whose
only connection is a pair of opposite edges (or a BOTH edge) are not
reported as bridged.

References:
    https://en.wikipedia.org/wiki/Bridge_(graph_theory)
    https://mathworld.wolfram.com/GraphBridge.html
"""

import logging

from nodegraph.nodes import Node
from nodegraph.paths import Path, Paths, has_path, path_to
from nodegraph.traversal import visit_all

logger = logging.getLogger(__name__)


def find_bridges(root: Node) -> Paths:
    """
    Finds the bridges of the graph containing root, as two-node paths.

               a ← d
             ↙   ↖
        e → b  →  c     Bridges (3): e → b, f → b, d → a
            ↑
            f

        a           e
        ↑ ⤡       ⤢ ↑
        |   c → d   |   Bridges (1): c → d
        ↓ ⤢       ⤡ ↓
        b           f

    Bridges are deduplicated by their rendered labels.
    """
    bridges = Paths()

    def add_unique(path: Path) -> None:
        if path and not bridges.contains_path(path):
            logger.debug(f"Bridge found: {path}")
            bridges.append(path)

    def inspect(node: Node) -> None:
        for edge in node.edges:
            neighbour = edge.node

            if not neighbour.edges:
                continue

            # Dangling edge: the neighbour only knows the node it hangs from.
            #
            #        a ← d
            #      ↙   ↖
            # e → b  →  c       e → b, f → b and d → a dangle
            #     ↑
            #     f
            if len(neighbour.edges) == 1:
                add_unique(path_to(neighbour, neighbour.edges[0].node))
                continue

            # Otherwise an edge from the neighbour is a bridge when there is
            # no way back over the rest of the graph.
            #
            #             d
            #           ↗   ↘
            #  a → b → c  ←  e       a → b and b → c, not the c-d-e cycle
            for far_edge in neighbour.edges:
                if not has_path(far_edge.node, neighbour):
                    add_unique(path_to(neighbour, far_edge.node))

    visit_all(root, inspect)
    logger.debug(f"{len(bridges)} bridge(s) reachable from {root.name!r}")
    return bridges


__all__ = ["find_bridges"]
