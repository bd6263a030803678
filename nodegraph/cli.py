"""
Structural report for a graph stored in the JSON interchange format.

Usage:
    python -m nodegraph.cli graph.json --min-clique 3 --partitions 2
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path as FilePath

from rich.console import Console
from rich.table import Table
from rich.text import Text

from nodegraph.bridges import find_bridges
from nodegraph.cliques import find_cliques
from nodegraph.constants import (
    DEBUG,
    DEFAULT_MIN_CLIQUE_SIZE,
    DEFAULT_PARTITIONS,
    LOG_FORMAT,
)
from nodegraph.errors import GraphError
from nodegraph.instance import Graph
from nodegraph.nodes import Node
from nodegraph.serde import decode_json, dumps_dot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphReport:
    name: str
    root: str
    node_count: int
    component_count: int
    acyclic: bool
    bipartite: bool
    partitions: int
    multipartite: bool
    bridges: tuple[str, ...]
    cliques: tuple[str, ...]


def find_root(graph: Graph, label: str | None) -> Node | None:
    """First node of the graph, or the first one carrying the label."""
    if label is None:
        return graph.nodes[0] if graph.nodes else None
    return next((node for node in graph.nodes if node.name == label), None)


def analyze(
    graph: Graph,
    root: Node,
    min_clique_size: int = DEFAULT_MIN_CLIQUE_SIZE,
    partitions: int = DEFAULT_PARTITIONS,
) -> GraphReport:
    logger.debug(f"Analyzing {graph.name!r} from {root.name!r}")
    return GraphReport(
        name=graph.name,
        root=root.name,
        node_count=len(graph.nodes),
        component_count=graph.component_count(),
        acyclic=graph.is_acyclic(),
        bipartite=graph.is_bipartite(),
        partitions=partitions,
        multipartite=graph.is_multipartite(partitions),
        bridges=tuple(str(bridge) for bridge in find_bridges(root)),
        cliques=tuple(f"{{{clique}}}" for clique in find_cliques(root, min_clique_size)),
    )


def report_table(report: GraphReport) -> Table:
    table = Table(title=f"{report.name} (root: {report.root})")
    table.add_column("Property", style="bold")
    table.add_column("Value")

    table.add_row("nodes", str(report.node_count))
    table.add_row("components", str(report.component_count))
    table.add_row("acyclic", str(report.acyclic))
    table.add_row("bipartite", str(report.bipartite))
    table.add_row(f"{report.partitions}-partite", str(report.multipartite))
    table.add_row("bridges", Text("\n".join(report.bridges) or "-"))
    table.add_row("cliques", Text("\n".join(report.cliques) or "-"))
    return table


def load_graph(path: FilePath) -> Graph:
    with open(path, "r", encoding="utf-8") as file:
        nodes = decode_json(file)
    return Graph(path.stem, nodes=nodes)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Analyze the structure of a graph")
    parser.add_argument("graph", type=FilePath, help="JSON interchange file")
    parser.add_argument("--root", help="Label of the node to analyze from")
    parser.add_argument(
        "--min-clique",
        type=int,
        default=DEFAULT_MIN_CLIQUE_SIZE,
        help="Smallest clique size to report",
    )
    parser.add_argument(
        "--partitions",
        type=int,
        default=DEFAULT_PARTITIONS,
        help="Number of classes for the k-partite test",
    )
    parser.add_argument("--dot", action="store_true", help="Print the graph as DOT")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug or DEBUG else logging.INFO,
        format=LOG_FORMAT,
    )

    try:
        graph = load_graph(args.graph)
    except (OSError, GraphError) as exc:
        logger.error(f"Cannot load {args.graph}: {exc}")
        return 1

    console = Console()

    if args.dot:
        console.print(dumps_dot(graph.nodes), end="", markup=False, highlight=False)
        return 0

    root = find_root(graph, args.root)
    if root is None:
        logger.error(f"No root node {args.root!r} in {args.graph}")
        return 1

    report = analyze(graph, root, args.min_clique, args.partitions)
    console.print(report_table(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
