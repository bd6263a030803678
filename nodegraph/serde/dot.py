"""
Graphviz DOT export.

Only outward edges are written, one line per node that has any:

    digraph {
    	"a" -> { "b" }
    	"b" -> { "c" }
    }

Render with `dot graph.dot -T svg > graph.svg`.
"""

import io
import json
from collections.abc import Sequence
from typing import TextIO

from nodegraph.errors import EncodeError
from nodegraph.nodes import Node


def _quote(label: str) -> str:
    return json.dumps(label, ensure_ascii=False)


def encode_dot(stream: TextIO, nodes: Sequence[Node]) -> None:
    lines = ["digraph {"]
    for node in nodes:
        targets = node.edges.outward().nodes()
        if targets:
            names = " ".join(_quote(target.name) for target in targets)
            lines.append(f"\t{_quote(node.name)} -> {{ {names} }}")
    lines.append("}")

    try:
        stream.write("\n".join(lines) + "\n")
        stream.flush()
    except (OSError, ValueError) as exc:
        raise EncodeError(f"graph failed to encode DOT: {exc}") from exc


def dumps_dot(nodes: Sequence[Node]) -> str:
    buffer = io.StringIO()
    encode_dot(buffer, nodes)
    return buffer.getvalue()


__all__ = ["encode_dot", "dumps_dot"]
