"""Node stream serialization — JSON round-trip for recorded walks.

Converts nodes to/from JSON-compatible dicts. Useful for:
- Recording a parser's walk once and replaying it through generators
- Fixtures for generator tests without the parser
- Debugging and inspection

All output is deterministic (fixed key order per node, attribute order
preserved) so recordings diff cleanly.

Example:
    from weft.serialization import to_json, from_json

    text = to_json(builder.build())
    replayed = NodeStream(from_json(text))

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Iterable
from typing import Any

from weft.location import SourceLocation
from weft.nodes import AttributeValue, Node, NodeKind


def _attribute_to_json(value: AttributeValue) -> Any:
    if isinstance(value, tuple):
        return list(value)
    return value


def _attribute_from_json(value: Any) -> AttributeValue:
    if isinstance(value, list):
        return tuple(str(item) for item in value)
    if isinstance(value, bool):
        return value
    return str(value)


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node to a JSON-compatible dict.

    Fields holding their default value are left out to keep recordings small.
    """
    result: dict[str, Any] = {"kind": node.kind.name}
    if node.name:
        result["name"] = node.name
    if node.depth:
        result["depth"] = node.depth
    if node.attributes:
        result["attributes"] = {
            key: _attribute_to_json(value) for key, value in node.attributes.items()
        }
    if node.self_closing:
        result["self_closing"] = True
    if node.value:
        result["value"] = node.value
    if node.ancestors:
        result["ancestors"] = list(node.ancestors)
    if node.location is not None:
        loc = node.location
        result["location"] = {"lineno": loc.lineno, "col_offset": loc.col_offset}
        if loc.source_file is not None:
            result["location"]["source_file"] = loc.source_file
    return result


def node_from_dict(data: dict[str, Any]) -> Node:
    """Reconstruct a node from a dict produced by node_to_dict.

    Raises:
        ValueError: If the kind is unknown or a field has the wrong shape
    """
    kind_name = data.get("kind")
    try:
        kind = NodeKind[kind_name]  # type: ignore[misc]
    except KeyError as e:
        raise ValueError(f"Unknown node kind: {kind_name!r}") from e

    location = None
    if (loc := data.get("location")) is not None:
        location = SourceLocation(
            lineno=int(loc["lineno"]),
            col_offset=int(loc["col_offset"]),
            source_file=loc.get("source_file"),
        )

    return Node(
        kind=kind,
        name=str(data.get("name", "")),
        depth=int(data.get("depth", 0)),
        attributes={
            str(key): _attribute_from_json(value)
            for key, value in data.get("attributes", {}).items()
        },
        self_closing=bool(data.get("self_closing", False)),
        value=str(data.get("value", "")),
        ancestors=tuple(str(name) for name in data.get("ancestors", ())),
        location=location,
    )


def to_json(nodes: Iterable[Node], *, indent: int | None = None) -> str:
    """Serialize a node walk to a JSON array.

    Attribute order inside each node is preserved, since it decides the
    order attributes render in.
    """
    return json.dumps([node_to_dict(node) for node in nodes], indent=indent)


def from_json(json_str: str) -> tuple[Node, ...]:
    """Deserialize a JSON array back into nodes.

    Raises:
        ValueError: If the JSON is not an array of node objects
    """
    data = json.loads(json_str)
    if not isinstance(data, list):
        raise ValueError("Expected a JSON array of nodes")
    return tuple(node_from_dict(item) for item in data)


__all__ = ["from_json", "node_from_dict", "node_to_dict", "to_json"]
