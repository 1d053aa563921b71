"""Fluent construction of node sequences.

Parsers that walk a real document emit nodes with consistent depth and
ancestor chains. NodeBuilder produces the same shape by hand, which is what
tests and small programmatic documents need.

Depth follows the usual reader convention: the root element opens and
closes at depth 0, its children (elements and text alike) sit at depth 1.

Example:
    >>> nodes = (
    ...     NodeBuilder()
    ...     .open("div", {"class": "refentry"})
    ...     .text("hi")
    ...     .close()
    ...     .build()
    ... )
    >>> [(n.kind.name, n.name, n.depth) for n in nodes]
    [('OPENING_ELEMENT', 'div', 0), ('TEXT', '', 1), ('CLOSING_ELEMENT', 'div', 0)]
    >>> nodes[1].parent("div")
    True

"""

from __future__ import annotations

from collections.abc import Mapping

from weft.nodes import AttributeValue, Node, NodeKind
from weft.source import NodeStream


class NodeBuilder:
    """Builds a flat node walk while tracking open elements."""

    __slots__ = ("_nodes", "_open")

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._open: list[str] = []

    @property
    def depth(self) -> int:
        """Depth the next node would be emitted at."""
        return len(self._open)

    def _ancestors(self) -> tuple[str, ...]:
        return tuple(reversed(self._open))

    def _leaf(self, kind: NodeKind, value: str = "", name: str = "") -> NodeBuilder:
        self._nodes.append(
            Node(
                kind=kind,
                name=name,
                depth=self.depth,
                value=value,
                ancestors=self._ancestors(),
            )
        )
        return self

    def doctype(self, name: str = "html") -> NodeBuilder:
        return self._leaf(NodeKind.DOCTYPE, name=name)

    def open(
        self,
        name: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        *,
        self_closing: bool = False,
    ) -> NodeBuilder:
        """Open an element. Self-closing elements emit no closing event."""
        self._nodes.append(
            Node(
                kind=NodeKind.OPENING_ELEMENT,
                name=name,
                depth=self.depth,
                attributes=dict(attributes or {}),
                self_closing=self_closing,
                ancestors=self._ancestors(),
            )
        )
        if not self_closing:
            self._open.append(name)
        return self

    def close(self) -> NodeBuilder:
        """Close the innermost open element.

        Raises:
            ValueError: If no element is open
        """
        if not self._open:
            raise ValueError("No open element to close")
        name = self._open.pop()
        self._nodes.append(
            Node(
                kind=NodeKind.CLOSING_ELEMENT,
                name=name,
                depth=self.depth,
                ancestors=self._ancestors(),
            )
        )
        return self

    def close_all(self) -> NodeBuilder:
        """Close every element still open, innermost first."""
        while self._open:
            self.close()
        return self

    def element(
        self,
        name: str,
        text: str | None = None,
        attributes: Mapping[str, AttributeValue] | None = None,
    ) -> NodeBuilder:
        """Open ``name``, add optional text, and close it again."""
        self.open(name, attributes)
        if text is not None:
            self.text(text)
        return self.close()

    def text(self, value: str) -> NodeBuilder:
        return self._leaf(NodeKind.TEXT, value)

    def whitespace(self, value: str = "\n") -> NodeBuilder:
        return self._leaf(NodeKind.WHITESPACE, value)

    def cdata(self, value: str) -> NodeBuilder:
        return self._leaf(NodeKind.CDATA, value)

    def pi(self, target: str, value: str = "") -> NodeBuilder:
        return self._leaf(NodeKind.PROCESSING_INSTRUCTION, value, name=target)

    def comment(self, value: str) -> NodeBuilder:
        return self._leaf(NodeKind.COMMENT, value)

    def build(self) -> tuple[Node, ...]:
        """The nodes added so far."""
        return tuple(self._nodes)

    def stream(self) -> NodeStream:
        """A fresh single-pass source over the nodes added so far."""
        return NodeStream(self.build())


__all__ = ["NodeBuilder"]
