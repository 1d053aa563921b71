"""Generator protocol — the consumer side of a run.

Each generator turns the shared node stream into its own output: an HTML
page set, a search index, a data file. The engine calls every generator for
every node, in registration order, and keeps each generator's sinks and
pending closers apart from the others.

Generators may hold cursors across calls within one run ("currently inside
section X"). They must not mutate the nodes they are given.

Example:
    class Titles(BaseGenerator):
        def __init__(self, sinks: StringSinkFactory) -> None:
            self.sinks = sinks

        def stream(self, node: Node) -> Sink:
            return self.sinks.make("titles.txt")

        def render(self, node: Node) -> Content:
            if node.is_text_content and node.parent("title"):
                return node.value + "\\n"
            return ""

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from weft.content import Content
    from weft.nodes import Node
    from weft.sinks import Sink


@runtime_checkable
class Generator(Protocol):
    """Protocol for output generators."""

    def set_up(self) -> None:
        """Called once before the first node of a run."""
        ...

    def tear_down(self) -> None:
        """Called once after the last node, before the final sink closes."""
        ...

    def stream(self, node: Node) -> Sink:
        """Sink to write to, starting with ``node``.

        Called for the first dispatched node of a run and again for every
        node ``should_chunk()`` accepts.
        """
        ...

    def should_chunk(self, node: Node) -> bool:
        """Whether output should move to a new sink at this opening element."""
        ...

    def render(self, node: Node) -> Content:
        """Content for ``node``: text, or a slotable for open/close pairs."""
        ...
