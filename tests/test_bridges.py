"""Tests for nodegraph/bridges.py"""

from nodegraph import Node, find_bridges


def nodes(labels: str) -> list[Node]:
    return [Node(label) for label in labels]


def rendered(root: Node) -> list[str]:
    return sorted(str(bridge) for bridge in find_bridges(root))


class TestFindBridges:
    def test_isolated_node(self):
        assert rendered(Node("a")) == []

    def test_simple_dangling_edge(self):
        # a → b
        a, b = nodes("ab")
        a.add_edge(b)

        bridges = find_bridges(a)
        assert len(bridges) == 1
        assert str(bridges[0]) == "a → b"

    def test_dangling_edge_next_to_cycle(self):
        """
                   c
                 ↗   ↘
            a → b  ←  d
        """
        a, b, c, d = nodes("abcd")
        a.add_edge(b)
        b.add_edge(c)
        c.add_edge(d)
        d.add_edge(b)

        assert rendered(a) == ["a → b"]
        # Any node of the graph can be the root
        assert rendered(c) == ["a → b"]

    def test_nested_dangling_edge_next_to_cycle(self):
        """
                       d
                     ↗   ↘
            a → b → c  ←  e
        """
        a, b, c, d, e = nodes("abcde")
        a.add_edge(b)
        b.add_edge(c)
        c.add_edge(d)
        d.add_edge(e)
        e.add_edge(c)

        assert rendered(a) == ["a → b", "b → c"]

    def test_multiple_dangling_edges_next_to_cycle(self):
        """
                   a ← d
                 ↙   ↖
            e → b  →  c
                ↑
                f
        """
        a, b, c, d, e, f = nodes("abcdef")
        a.add_edge(b)
        b.add_edge(c)
        c.add_edge(a)
        d.add_edge(a)
        e.add_edge(b)
        f.add_edge(b)

        assert rendered(a) == ["d → a", "e → b", "f → b"]

    def test_tree(self):
        """
                  a
                ↙   ↘
               b     c
             ↙   ↘
            d     e
                  ↓
                  f
        """
        a, b, c, d, e, f = nodes("abcdef")
        a.add_edge(b)
        a.add_edge(c)
        b.add_edge(d)
        b.add_edge(e)
        e.add_edge(f)

        assert rendered(a) == ["a → b", "a → c", "b → d", "b → e", "e → f"]
        assert rendered(f) == rendered(a)

    def test_barbell_single_direction(self):
        """
            a           e
            ↑ ⤡       ⤢ ↑
            |   c → d   |
            ↓ ⤢       ⤡ ↓
            b           f
        """
        a, b, c, d, e, f = nodes("abcdef")
        a.add_link(b)
        c.add_link(a)
        c.add_link(b)
        c.add_edge(d)
        d.add_link(e)
        d.add_link(f)
        f.add_link(e)

        assert rendered(a) == ["c → d"]

    def test_barbell_bi_directional(self):
        """
            a           e
            ↑ ⤡       ⤢ ↑
            |   c ↔ d   |
            ↓ ⤢       ⤡ ↓
            b           f

        c ↔ d is two edges; removing one still leaves the other.
        """
        a, b, c, d, e, f = nodes("abcdef")
        a.add_link(b)
        c.add_link(a)
        c.add_link(b)
        c.add_link(d)
        d.add_link(e)
        d.add_link(f)
        f.add_link(e)

        assert rendered(a) == []

    def test_triangle_has_no_bridges(self):
        a, b, c = nodes("abc")
        a.add_edge(b)
        b.add_edge(c)
        c.add_edge(a)

        assert rendered(b) == []

    def test_duplicate_labels_collapse(self):
        """
            a → x
            a → x   (another node with the same label)
        """
        a, x1, x2 = Node("a"), Node("x"), Node("x")
        a.add_edge(x1)
        a.add_edge(x2)

        assert rendered(a) == ["a → x"]
