"""Base generator with no-op defaults.

Subclass and override what you need. ``stream()`` has no sensible default
and must be provided.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weft.content import Content
    from weft.nodes import Node
    from weft.sinks import Sink


class BaseGenerator:
    """Generator defaults: no setup, no chunking, renders nothing."""

    def set_up(self) -> None:
        pass

    def tear_down(self) -> None:
        pass

    def stream(self, node: Node) -> Sink:
        raise NotImplementedError(f"{type(self).__name__} must implement stream()")

    def should_chunk(self, node: Node) -> bool:
        return False

    def render(self, node: Node) -> Content:
        return ""
