"""Render factory handed to generators.

Generators build their content units through a Factory rather than by
constructing wrappers directly, so configuration-driven behavior (debug
annotations) applies uniformly.

Example:
    >>> factory = Factory(RenderConfig())
    >>> factory.tag("code", {"class": "parameter"}).before()
    '<code class="parameter">'
    >>> factory.wrapper(before="new Method(", after="),\\n").after()
    '),\\n'

"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from weft.config import RenderConfig
from weft.content import Lazy, Slotable, Text, Wrapper
from weft.nodes import AttributeValue
from weft.render.tag import HtmlTag


class Factory:
    """Builds content units for generators.

    Attributes:
        config: The render configuration in effect

    """

    __slots__ = ("config",)

    def __init__(self, config: RenderConfig) -> None:
        self.config = config

    def wrapper(
        self,
        before: Text = "",
        after: Text = "",
        slot: Slotable | None = None,
    ) -> Wrapper:
        """Create a generic before/after wrapper."""
        return Wrapper(head=before, tail=after, slot=slot)

    def tag(
        self,
        name: str,
        attributes: Mapping[str, AttributeValue] | None = None,
        before: Text = "",
        after: Text = "",
        slot: Slotable | None = None,
    ) -> HtmlTag:
        """Create an HTML element wrapper.

        With ``config.debug`` set, the element is annotated with a
        ``data-weft-node`` attribute naming it.
        """
        attrs = dict(attributes or {})
        if self.config.debug:
            attrs.setdefault("data-weft-node", name)
        return HtmlTag(name=name, attributes=attrs, head=before, tail=after, slot=slot)

    def lazy(self, fn: Callable[[], str]) -> Lazy:
        """Create text resolved at write time."""
        return Lazy(fn)


__all__ = ["Factory"]
