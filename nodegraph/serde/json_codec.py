"""
JSON interchange format.

    {
        "nodes": [{"name": "a", "attributes": {...}}, ...],
        "edges": [{"from_index": 0, "direction": 3, "to_index": 1}, ...]
    }

Every edge record is written, so both sides of each connection travel in
the document and decoding restores the adjacency lists verbatim.
"""

import io
import json
import logging
from collections.abc import Sequence
from typing import Any, TextIO

from nodegraph.direction import Direction
from nodegraph.edges import Edge
from nodegraph.errors import DecodeError, EncodeError, NodeIndexError
from nodegraph.nodes import Node, Nodes

logger = logging.getLogger(__name__)


def _node_record(node: Node) -> dict[str, Any]:
    record: dict[str, Any] = {}
    if node.name:
        record["name"] = node.name
    if node.attributes:
        record["attributes"] = node.attributes
    return record


def _edge_records(nodes: Nodes) -> list[dict[str, Any]]:
    records: list[dict[str, Any]] = []
    seen: set[str] = set()

    for from_index, node in enumerate(nodes):
        for edge in node.edges:
            to_index = nodes.index_of(edge.node)
            if to_index < 0:
                logger.debug(
                    f"Skipping edge {node.name!r} {edge.direction} {edge.node.name!r}: target not encoded"
                )
                continue

            record: dict[str, Any] = {}
            if edge.name:
                record["name"] = edge.name
            record["from_index"] = from_index
            record["direction"] = int(edge.direction)
            record["to_index"] = to_index
            if edge.attributes:
                record["attributes"] = edge.attributes

            key = json.dumps(record, sort_keys=True)
            if key in seen:
                continue
            seen.add(key)
            records.append(record)

    return records


def encode_json(stream: TextIO, nodes: Sequence[Node]) -> None:
    nodes = Nodes(nodes)
    try:
        document: dict[str, Any] = {}
        if nodes:
            document["nodes"] = [_node_record(node) for node in nodes]
        edges = _edge_records(nodes)
        if edges:
            document["edges"] = edges
        stream.write(json.dumps(document, ensure_ascii=False) + "\n")
    except (TypeError, ValueError, OSError) as exc:
        raise EncodeError(f"graph failed to encode JSON: {exc}") from exc


def dumps_json(nodes: Sequence[Node]) -> str:
    buffer = io.StringIO()
    encode_json(buffer, nodes)
    return buffer.getvalue()


def _list_field(document: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = document.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, dict) for v in value):
        raise DecodeError(f"graph failed to decode JSON: {key!r} must be a list of objects")
    return value


def _is_integer(value: object) -> bool:
    # JSON true/false load as bool, which is an int subclass
    return isinstance(value, int) and not isinstance(value, bool)


def _label_and_attributes(record: dict[str, Any]) -> tuple[str, dict[str, Any]]:
    name = record.get("name", "")
    if not isinstance(name, str):
        raise DecodeError(f"graph failed to decode JSON: name must be a string in {record}")

    attributes = record.get("attributes") or {}
    if not isinstance(attributes, dict):
        raise DecodeError(f"graph failed to decode JSON: attributes must be an object in {record}")
    return name, attributes


def _decode_node(record: dict[str, Any]) -> Node:
    name, attributes = _label_and_attributes(record)
    return Node(name, attributes)


def _decode_edge(record: dict[str, Any], nodes: Nodes) -> tuple[Node, Edge] | None:
    from_index = record.get("from_index", 0)
    to_index = record.get("to_index", 0)
    if not _is_integer(from_index) or not _is_integer(to_index):
        raise DecodeError(f"graph failed to decode JSON: invalid edge indices in {record}")

    value = record.get("direction", Direction.UNKNOWN)
    if not _is_integer(value):
        raise DecodeError(f"graph failed to decode JSON: invalid edge direction in {record}")
    try:
        direction = Direction(value)
    except ValueError as exc:
        raise DecodeError(f"graph failed to decode JSON: {exc}") from exc

    name, attributes = _label_and_attributes(record)

    try:
        source = nodes.at_index(from_index)
        target = nodes.at_index(to_index)
    except NodeIndexError as exc:
        logger.warning(f"Skipping edge record: {exc}")
        return None

    edge = Edge(
        node=target,
        direction=direction,
        name=name,
        attributes=attributes,
    )
    return source, edge


def decode_json(stream: TextIO) -> Nodes:
    try:
        document = json.load(stream)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"graph failed to decode nodes and edges JSON: {exc}") from exc

    if not isinstance(document, dict):
        raise DecodeError("graph failed to decode JSON: document must be an object")

    nodes = Nodes(_decode_node(record) for record in _list_field(document, "nodes"))

    for record in _list_field(document, "edges"):
        decoded = _decode_edge(record, nodes)
        if decoded is not None:
            source, edge = decoded
            source.edges.append(edge)

    logger.debug(f"Decoded {len(nodes)} node(s)")
    return nodes


def loads_json(text: str) -> Nodes:
    return decode_json(io.StringIO(text))


__all__ = ["encode_json", "dumps_json", "decode_json", "loads_json"]
