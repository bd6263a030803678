"""
Converters between node collections and interchange formats.

**DOT** (dot.py)
    Line-oriented Graphviz export of outward edges.
    - encode_dot(stream, nodes), dumps_dot(nodes)

**JSON** (json_codec.py)
    Structured export and import of nodes, edges and attributes.
    - encode_json(stream, nodes), dumps_json(nodes)
    - decode_json(stream), loads_json(text)

Both only use the public Node/Edge API.
"""

from .dot import dumps_dot, encode_dot
from .json_codec import decode_json, dumps_json, encode_json, loads_json

__all__ = [
    # DOT
    "encode_dot",
    "dumps_dot",
    # JSON
    "encode_json",
    "dumps_json",
    "decode_json",
    "loads_json",
]
