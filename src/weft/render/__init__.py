"""weft render helpers.

Content units that generators return from ``render(node)``.

Available:
- HtmlTag: HTML element as a before/after pair
- Factory: builds tags and wrappers under a RenderConfig

"""

from weft.render.factory import Factory
from weft.render.tag import VOID_TAGS, HtmlTag, render_attributes

__all__ = ["VOID_TAGS", "Factory", "HtmlTag", "render_attributes"]
