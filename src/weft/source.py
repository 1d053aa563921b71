"""Document sources.

A document source yields the nodes of one document walk, in order, exactly
once. The engine pulls from it with ``advance()`` until it returns None.

Example:
    >>> from weft.nodes import NodeKind
    >>> stream = NodeStream([Node(NodeKind.TEXT, value="hi")])
    >>> stream.advance().value
    'hi'
    >>> stream.advance() is None
    True

Thread Safety:
Sources are single-pass producers. Never pull from one source in two
places at once.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol, runtime_checkable

from weft.nodes import Node


@runtime_checkable
class DocumentSource(Protocol):
    """Protocol for node producers.

    ``advance()`` returns the next node, or None once the walk is over.
    There is no restart and no seek.

    """

    def advance(self) -> Node | None:
        """Return the next node, or None at the end."""
        ...


class NodeStream:
    """Single-pass DocumentSource over any iterable of nodes.

    The iterable is consumed lazily. Once exhausted, ``advance()`` keeps
    returning None; iterating the stream again yields nothing.

    """

    __slots__ = ("_nodes", "_position", "_exhausted")

    def __init__(self, nodes: Iterable[Node]) -> None:
        self._nodes: Iterator[Node] = iter(nodes)
        self._position = 0
        self._exhausted = False

    @property
    def position(self) -> int:
        """Number of nodes produced so far (doctype nodes included)."""
        return self._position

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def advance(self) -> Node | None:
        if self._exhausted:
            return None
        node = next(self._nodes, None)
        if node is None:
            self._exhausted = True
            return None
        self._position += 1
        return node

    def __iter__(self) -> Iterator[Node]:
        while (node := self.advance()) is not None:
            yield node


__all__ = ["DocumentSource", "NodeStream"]
