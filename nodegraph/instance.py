"""
Graph instances: a named collection of nodes.

Edges live on the nodes, so a graph only owns its node list and its
attributes. Mutation is append-only.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from nodegraph.components import connected_components
from nodegraph.cycles import has_cycles
from nodegraph.nodes import Node, Nodes, NodeSet
from nodegraph.partition import is_bipartite, is_multipartite


class Graph:
    def __init__(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
        nodes: Iterable[Node] | None = None,
    ) -> None:
        self.name = name
        self.attributes: dict[str, Any] = attributes if attributes is not None else {}
        self.nodes = Nodes(nodes or ())

    def __repr__(self) -> str:
        return f"Graph({self.name!r}, nodes=[{self.nodes}])"

    def __len__(self) -> int:
        return len(self.nodes)

    def add_node(self, node: Node | None) -> None:
        if node is None:
            return
        self.nodes.append(node)

    def add_nodes(self, *nodes: Node) -> None:
        self.nodes.extend(nodes)

    def add_edge(self, source: Node | None, target: Node | None) -> None:
        """Adds source → target; absent endpoints are ignored."""
        if source is None or target is None:
            return
        source.add_edge(target)

    def add_edges(self, edges: Mapping[Node, Sequence[Node]]) -> None:
        for source, targets in edges.items():
            for target in targets:
                self.add_edge(source, target)

    def node_at(self, index: int) -> Node:
        return self.nodes.at_index(index)

    def visit(self, fn: Callable[[Node], object]) -> None:
        """
        Calls fn on every node in collection order. This is not a
        traversal; fn may start one with the node's own visit method.
        """
        for node in self.nodes:
            fn(node)

    def dfs(self, fn: Callable[[Node], object]) -> None:
        """
        Depth-first search over outward edges, restarted from each node not
        yet visited so disconnected components are covered.

        https://en.wikipedia.org/wiki/Depth-first_search
        """
        visited = NodeSet()
        for start in self.nodes:
            if start in visited:
                continue
            stack = [start]
            while stack:
                node = stack.pop()
                if node in visited:
                    continue
                fn(node)
                visited.add(node)
                stack.extend(node.edges.outward().nodes())

    def bfs(self, fn: Callable[[Node], object]) -> None:
        """
        Breadth-first search over outward edges, with the same restarts as dfs.

        https://en.wikipedia.org/wiki/Breadth-first_search
        """
        visited = NodeSet()
        for start in self.nodes:
            if start in visited:
                continue
            queue = deque([start])
            while queue:
                node = queue.popleft()
                if node in visited:
                    continue
                fn(node)
                visited.add(node)
                queue.extend(node.edges.outward().nodes())

    def is_acyclic(self) -> bool:
        """
        True if no node lies on a cycle.

        https://mathworld.wolfram.com/AcyclicGraph.html
        """
        return not any(has_cycles(node) for node in self.nodes)

    def is_bipartite(self) -> bool:
        """
        True if the nodes split into two disjoint sets with no two nodes
        of the same set adjacent.
        """
        return is_bipartite(self.nodes)

    def is_multipartite(self, k: int) -> bool:
        return is_multipartite(self.nodes, k)

    def components(self) -> frozenset[frozenset[Node]]:
        return connected_components(self.nodes)

    def component_count(self) -> int:
        return len(self.components())


# A subgraph is a graph holding a subset of another graph's nodes.
Subgraph = Graph


__all__ = ["Graph", "Subgraph"]
