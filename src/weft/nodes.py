"""Node events for weft.

A document source walks a structured document and emits one Node per step:
an element opening, its text, its closing, and so on. The engine only ever
sees this flat stream; nesting is reconstructed from ``depth`` and the
order of events.

Node kinds:
NodeKind
├── DOCTYPE                  (skipped by the engine)
├── OPENING_ELEMENT          (may defer "after" content)
├── CLOSING_ELEMENT          (resolves deferred content)
├── TEXT
├── WHITESPACE               (ignored)
├── CDATA
├── PROCESSING_INSTRUCTION
└── COMMENT                  (ignored)

Thread Safety:
Nodes are frozen and their attribute mapping is read-only. Safe to share.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from weft.location import SourceLocation

AttributeValue: TypeAlias = str | bool | tuple[str, ...] | list[str]


class NodeKind(Enum):
    """The closed set of event kinds a document walk can produce."""

    DOCTYPE = auto()
    OPENING_ELEMENT = auto()
    CLOSING_ELEMENT = auto()
    TEXT = auto()
    WHITESPACE = auto()
    CDATA = auto()
    PROCESSING_INSTRUCTION = auto()
    COMMENT = auto()


def _freeze_attributes(
    attributes: Mapping[str, AttributeValue],
) -> Mapping[str, AttributeValue]:
    frozen: dict[str, AttributeValue] = {}
    for key, value in attributes.items():
        frozen[key] = tuple(value) if isinstance(value, list) else value
    return MappingProxyType(frozen)


@dataclass(frozen=True, slots=True)
class Node:
    """One step of a document walk.

    Attributes:
        kind: Event kind
        name: Element or instruction name ("" for text-like kinds)
        depth: Nesting level at emission time
        attributes: Read-only attribute mapping (list values become tuples)
        self_closing: Whether an opening element closes itself
        value: Raw text payload for text-like kinds
        ancestors: Names of enclosing elements, innermost first
        location: Where the event came from, when the source knows

    """

    kind: NodeKind
    name: str = ""
    depth: int = 0
    attributes: Mapping[str, AttributeValue] = field(default_factory=dict)
    self_closing: bool = False
    value: str = ""
    ancestors: tuple[str, ...] = ()
    location: SourceLocation | None = None

    def __post_init__(self) -> None:
        if self.depth < 0:
            raise ValueError(f"Node depth must be >= 0, got {self.depth}")
        object.__setattr__(self, "attributes", _freeze_attributes(self.attributes))
        object.__setattr__(self, "ancestors", tuple(self.ancestors))

    # -- Kind predicates -------------------------------------------------------

    @property
    def is_doctype(self) -> bool:
        return self.kind is NodeKind.DOCTYPE

    @property
    def is_opening_element(self) -> bool:
        return self.kind is NodeKind.OPENING_ELEMENT

    @property
    def is_closing_element(self) -> bool:
        return self.kind is NodeKind.CLOSING_ELEMENT

    @property
    def is_text_content(self) -> bool:
        return self.kind is NodeKind.TEXT

    @property
    def is_whitespace(self) -> bool:
        return self.kind is NodeKind.WHITESPACE

    @property
    def is_cdata(self) -> bool:
        return self.kind is NodeKind.CDATA

    @property
    def is_processing_instruction(self) -> bool:
        return self.kind is NodeKind.PROCESSING_INSTRUCTION

    @property
    def is_comment(self) -> bool:
        return self.kind is NodeKind.COMMENT

    # -- Lookups ---------------------------------------------------------------

    def has_attribute(self, name: str) -> bool:
        """Check if the node carries the named attribute."""
        return name in self.attributes

    def attribute(
        self, name: str, default: AttributeValue | None = None
    ) -> AttributeValue | None:
        """Get an attribute value, or ``default`` when it is absent."""
        return self.attributes.get(name, default)

    def parent(self, path: str) -> bool:
        """Check the node's enclosing elements against a dotted path.

        The path lists names innermost first: ``"a.b.c"`` matches when the
        nearest enclosing element is ``a``, inside ``b``, inside ``c``.
        Elements further out are not considered.

        Args:
            path: Dot-separated ancestor names

        Returns:
            True if the ancestor chain starts with those names

        Example:
            >>> node = Node(NodeKind.TEXT, value="strlen",
            ...             ancestors=("methodname", "methodsynopsis", "refsect1"))
            >>> node.parent("methodname.methodsynopsis")
            True
            >>> node.parent("methodsynopsis")
            False
        """
        if not path:
            return False
        names = tuple(path.split("."))
        if "" in names:
            return False
        return self.ancestors[: len(names)] == names

    def export_value(self) -> str:
        """Export ``value`` as a Python string literal.

        Suitable for embedding in generated source text, e.g. an index
        module that is later imported.
        """
        return repr(self.value)


__all__ = [
    "AttributeValue",
    "Node",
    "NodeKind",
]
