"""
Directed and undirected graph model with structural analysis.

**Model** (direction.py, edges.py, nodes.py, attributes.py, instance.py)
    Nodes hold ordered adjacency lists of Edge records; every connection
    is stored on both sides with complementary directions.

**Traversal** (traversal.py)
    Depth-first walk, direction filtered, cycle guarded, stoppable.

**Analysis**
    - paths.py      reachability and path construction
    - cycles.py     cycle membership
    - bridges.py    cut-edge detection (heuristic)
    - cliques.py    greedy clique discovery
    - partition.py  greedy bipartite / k-partite test
    - components.py connected components

Interchange formats live in nodegraph.serde.
"""

from .attributes import (
    Attributes,
    delete_attribute,
    get_attribute,
    set_attribute,
    use_attribute,
)
from .bridges import find_bridges
from .cliques import Clique, Cliques, find_cliques
from .components import connected_components
from .cycles import has_cycle_containing, has_cycles
from .direction import Direction, direction_symbol
from .edges import Edge, Edges
from .errors import (
    AttributeNotFoundError,
    AttributeTypeMismatchError,
    DecodeError,
    EncodeError,
    GraphAttributeError,
    GraphError,
    NodeIndexError,
)
from .instance import Graph, Subgraph
from .nodes import (
    EdgeSpec,
    Node,
    Nodes,
    NodeSet,
    NodeSets,
    add_edges,
    connect_nodes,
    mesh_nodes,
    new_nodes,
)
from .partition import is_bipartite, is_multipartite, partition
from .paths import Path, Paths, has_path, path_to
from .traversal import visit, visit_all, visit_order, visit_with_terminator

__version__ = "0.1.0"

__all__ = [
    # model
    "Direction",
    "direction_symbol",
    "Edge",
    "Edges",
    "EdgeSpec",
    "Node",
    "Nodes",
    "NodeSet",
    "NodeSets",
    "Graph",
    "Subgraph",
    "add_edges",
    "connect_nodes",
    "mesh_nodes",
    "new_nodes",
    # attributes
    "Attributes",
    "use_attribute",
    "get_attribute",
    "set_attribute",
    "delete_attribute",
    # traversal
    "visit_with_terminator",
    "visit",
    "visit_all",
    "visit_order",
    # analysis
    "Path",
    "Paths",
    "path_to",
    "has_path",
    "has_cycles",
    "has_cycle_containing",
    "find_bridges",
    "Clique",
    "Cliques",
    "find_cliques",
    "partition",
    "is_multipartite",
    "is_bipartite",
    "connected_components",
    # errors
    "GraphError",
    "GraphAttributeError",
    "AttributeNotFoundError",
    "AttributeTypeMismatchError",
    "NodeIndexError",
    "EncodeError",
    "DecodeError",
]
