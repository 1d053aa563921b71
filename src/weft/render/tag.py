"""HTML element wrapper.

HtmlTag models a single markup element as a slotable: ``before()`` opens the
element and ``after()`` closes it. The engine writes the opening half when
the source element opens and stages the closing half until it closes.

Void elements (``<br>``, ``<img>``, ...) never close: ``after()`` is empty
and any literal fragments or slot are ignored.

Example:
    >>> tag = HtmlTag("a", {"href": "/strlen", "class": ["fn", "link"]})
    >>> tag.before()
    '<a href="/strlen" class="fn link">'
    >>> tag.after()
    '</a>'
    >>> str(HtmlTag("br"))
    '<br>'

Thread Safety:
HtmlTag is frozen; every composition method returns a new instance.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType

from weft.content import Slotable, Text, flatten, join, resolve
from weft.errors import CompositionError
from weft.nodes import AttributeValue
from weft.utils.text import split_tokens

VOID_TAGS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def render_attributes(attributes: Mapping[str, AttributeValue]) -> str:
    """Serialize attributes in insertion order.

    ``False`` drops the attribute, ``True`` renders the bare name, and text
    values are split into trimmed tokens joined by single spaces. Values are
    written as given; callers escape them first when they need to.

    Returns:
        The attribute list with a leading space, or "" when nothing survives

    Example:
        >>> render_attributes({"class": ["a", "b"], "disabled": True,
        ...                    "hidden": False, "title": "x  y"})
        ' class="a b" disabled title="x y"'
    """
    rendered: list[str] = []
    for key, value in attributes.items():
        if value is False:
            continue
        key = key.strip()
        if value is True:
            rendered.append(key)
            continue
        joined = " ".join(split_tokens(value))  # type: ignore[arg-type]
        rendered.append(f'{key}="{joined}"')
    if not rendered:
        return ""
    return " " + " ".join(rendered)


def _merge_value(existing: AttributeValue, incoming: AttributeValue) -> AttributeValue:
    if isinstance(existing, bool) or isinstance(incoming, bool):
        return incoming
    left = [existing] if isinstance(existing, str) else list(existing)
    right = [incoming] if isinstance(incoming, str) else list(incoming)
    return (*left, *right)


@dataclass(frozen=True, slots=True)
class HtmlTag:
    """An HTML element usable as a slotable.

    Attributes:
        name: Tag name
        attributes: Attribute mapping, rendered in insertion order
        head: Literal text written right after the opening tag
        tail: Literal text written right before the closing tag
        slot: Optional slotable nested inside the element

    """

    name: str
    attributes: Mapping[str, AttributeValue] = field(default_factory=dict)
    head: Text = ""
    tail: Text = ""
    slot: Slotable | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    @property
    def is_void(self) -> bool:
        """Whether this is a void element that never closes."""
        return self.name in VOID_TAGS

    def attribute_list(self) -> str:
        """Rendered attribute list, with a leading space when non-empty."""
        return render_attributes(self.attributes)

    def before(self) -> Text:
        opening = f"<{self.name}{self.attribute_list()}>"
        if self.is_void:
            return opening
        if self.slot is None:
            return join(opening, self.head)
        return join(opening, self.head, flatten(self.slot.before()))

    def after(self) -> Text:
        if self.is_void:
            return ""
        closing = f"</{self.name}>"
        if self.slot is None:
            return join(self.tail, closing)
        return join(self.slot.after(), self.tail, closing)

    # -- Composition -----------------------------------------------------------

    def with_attributes(self, attributes: Mapping[str, AttributeValue]) -> HtmlTag:
        """Return a copy with ``attributes`` merged in.

        Keys present on both sides concatenate their values as a list
        (``class="a"`` + ``class="b"`` gives ``class="a b"``). Boolean values
        replace whatever was there.
        """
        merged = dict(self.attributes)
        for key, value in attributes.items():
            merged[key] = _merge_value(merged[key], value) if key in merged else value
        return replace(self, attributes=merged)

    def replace_attributes(self, attributes: Mapping[str, AttributeValue]) -> HtmlTag:
        """Return a copy with the given keys overwritten."""
        return replace(self, attributes={**self.attributes, **attributes})

    def as_tag(self, name: str) -> HtmlTag:
        """Return a copy rendered as a different element."""
        return replace(self, name=name)

    def wrap_slot(self, slot: Slotable | None) -> HtmlTag:
        """Return a copy with ``slot`` nested inside (replacing any slot)."""
        return replace(self, slot=slot)

    def unwrap(self) -> HtmlTag:
        """Return a copy without a nested slot."""
        return replace(self, slot=None)

    def to_string(self) -> str:
        """Flatten the element to a string.

        Raises:
            CompositionError: If a slot is still attached
        """
        if self.slot is not None:
            raise CompositionError("Unable to render a tag with a content wrapper.")
        return resolve(self.before()) + resolve(self.after())

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["VOID_TAGS", "HtmlTag", "render_attributes"]
