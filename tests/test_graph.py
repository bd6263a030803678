"""
Tests for graph instances: search orders, partitioning and components.
"""

import pytest

from nodegraph import (
    Direction,
    Graph,
    Node,
    NodeIndexError,
    Subgraph,
    connect_nodes,
    new_nodes,
    partition,
)


def names(nodes):
    return [n.name for n in nodes]


def bipartite_graph(extra_edge=False):
    """
        a   b   c
         ↘ ↙ ↘ ↙
          d   e
    """
    a, b, c, d, e = new_nodes("abcde")
    a.add_edge(d)
    b.add_edge(d)
    b.add_edge(e)
    c.add_edge(e)
    if extra_edge:
        d.add_edge(e)
    return Graph("test", nodes=[a, b, c, d, e])


class TestConstruction:
    def test_add_nodes(self):
        graph = Graph("test")
        a, b = Node("a"), Node("b")
        graph.add_node(a)
        graph.add_node(None)
        graph.add_nodes(b)

        assert len(graph) == 2
        assert graph.node_at(1) is b
        assert repr(graph) == "Graph('test', nodes=[a, b])"

    def test_node_at_out_of_range(self):
        graph = Graph("test", nodes=[Node("a")])
        with pytest.raises(NodeIndexError, match="nodes of size 1"):
            graph.node_at(3)

    def test_add_edge_ignores_missing_endpoint(self):
        a = Node("a")
        graph = Graph("test", nodes=[a])
        graph.add_edge(a, None)
        graph.add_edge(None, a)
        assert len(a.edges) == 0

    def test_add_edges_mapping(self):
        a, b, c = new_nodes("abc")
        graph = Graph("test", nodes=[a, b, c])
        graph.add_edges({a: [b, c], b: [c]})

        assert names(a.edges.outward().nodes()) == ["b", "c"]
        assert names(c.edges.inward().nodes()) == ["a", "b"]

    def test_attributes_and_subgraph(self):
        graph = Graph("test", attributes={"kind": "demo"})
        assert graph.attributes == {"kind": "demo"}
        assert Graph("other").attributes == {}
        assert Subgraph is Graph

    def test_visit_is_collection_order(self):
        a, b, c = new_nodes("abc")
        c.add_edge(a)
        graph = Graph("test", nodes=[b, c, a])

        visited = []
        graph.visit(visited.append)
        assert names(visited) == ["b", "c", "a"]


class TestSearch:
    def test_dfs_cycle(self):
        """
            ┌───────────────┐
            ↓               │
            a → b → c → d → e
        """
        graph = Graph("test")
        nodes = new_nodes("abcde")
        graph.add_nodes(*nodes)
        connect_nodes(*nodes, nodes[0])

        visited = []
        graph.dfs(visited.append)
        assert visited == nodes

    def test_dfs_is_last_in_first_out(self):
        a, b, c = new_nodes("abc")
        a.add_edge(b)
        a.add_edge(c)

        visited = []
        Graph("test", nodes=[a, b, c]).dfs(visited.append)
        assert names(visited) == ["a", "c", "b"]

    def test_bfs(self):
        """
                c           h
                ↑           ↑
            a → b → d → f → g
                ↓   |
                e ←─┘
        """
        nodes = new_nodes("abcdefgh")
        a, b, c, d, e, f, g, h = nodes
        a.add_edge(b)
        b.add_edge(c)
        b.add_edge(d)
        b.add_edge(e)
        d.add_edge(e)
        d.add_edge(f)
        f.add_edge(g)
        g.add_edge(h)

        visited = []
        Graph("test", nodes=nodes).bfs(visited.append)
        assert visited == nodes

    def test_searches_restart_on_unvisited_nodes(self):
        a, b, c = new_nodes("abc")
        b.add_edge(a)
        graph = Graph("test", nodes=[a, b, c])

        dfs, bfs = [], []
        graph.dfs(dfs.append)
        graph.bfs(bfs.append)
        assert names(dfs) == ["a", "b", "c"]
        assert names(bfs) == ["a", "b", "c"]


class TestPartitioning:
    def test_bipartite(self):
        graph = bipartite_graph()
        assert graph.is_bipartite()
        assert graph.is_multipartite(2)

        classes = partition(graph.nodes, 2)
        assert sorted(str(c) for c in classes) == ["a, b, c", "d, e"]

    def test_not_bipartite(self):
        graph = bipartite_graph(extra_edge=True)
        assert not graph.is_bipartite()
        assert not graph.is_multipartite(2)
        assert graph.is_multipartite(3)
        assert partition(graph.nodes, 2) is None

    def test_requires_exactly_k_classes(self):
        graph = bipartite_graph()
        assert not graph.is_multipartite(3)
        assert not Graph("empty").is_bipartite()

    def test_triangle_is_not_bipartite(self):
        """
                  b
                ↙   ↖
              c       a
            ↙   ↘   ↗
           e  →   d
        """
        a, b, c, d, e = new_nodes("abcde")
        a.add_edge(b)
        b.add_edge(c)
        c.add_edge(d)
        d.add_edge(a)
        c.add_edge(e)
        e.add_edge(d)

        assert not Graph("test", nodes=[a, b, c, d, e]).is_bipartite()


class TestStructure:
    def test_acyclic(self):
        a, b, c = new_nodes("abc")
        connect_nodes(a, b, c)
        graph = Graph("test", nodes=[a, b, c])
        assert graph.is_acyclic()

        c.add_edge(a)
        assert not graph.is_acyclic()

    def test_components(self):
        a, b, c, d, e = new_nodes("abcde")
        a.add_edge(b)
        c.add_edge(b)
        d.add_edge_with_direction(e, Direction.NONE)

        graph = Graph("test", nodes=[a, b, c, d, e, Node("f")])
        components = graph.components()

        assert graph.component_count() == 3
        assert frozenset([a, b, c]) in components
        assert frozenset([d, e]) in components
