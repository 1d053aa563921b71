"""Content units returned by generators.

A generator's ``render(node)`` returns either plain text or a *slotable*: a
before/after pair. The engine writes the before half immediately and stages
the after half until the element's closing event arrives, so generators can
emit "open now, close later" markup without tracking nesting themselves.

Content model:
Content
├── Text
│   ├── str      (written as-is)
│   └── Lazy     (callable, resolved when written)
└── Slotable     (before() now, after() on close)
    ├── Wrapper  (generic before/after pair)
    └── HtmlTag  (weft.render.tag)

Slotables compose through a single slot: a wrapper may wrap one other
slotable, forming a chain but never a tree.

Example:
    >>> outer = Wrapper(head="<div>", tail="</div>")
    >>> inner = Wrapper(head="<p>", tail="</p>")
    >>> both = outer.wrap_slot(inner)
    >>> both.before(), both.after()
    ('<div><p>', '</p></div>')

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Protocol, TypeAlias, runtime_checkable

from weft.errors import CompositionError


@dataclass(frozen=True, slots=True)
class Lazy:
    """Text computed when the engine writes it.

    Closing content is often staged long before it is written. Wrapping it
    in a Lazy defers the computation (and any side effect, such as resetting
    a generator's counter) to the moment the closer is flushed.

    Example:
        >>> calls = []
        >>> text = Lazy(lambda: calls.append(1) or "),")
        >>> calls
        []
        >>> str(text), calls
        ('),', [1])
    """

    fn: Callable[[], str]

    def resolve(self) -> str:
        """Call the wrapped function and return its text."""
        result = self.fn()
        return result if isinstance(result, str) else str(result)

    def __str__(self) -> str:
        return self.resolve()


Text: TypeAlias = str | Lazy


@runtime_checkable
class Slotable(Protocol):
    """Protocol for before/after content pairs.

    ``before()`` may return another slotable; the engine writes it with the
    same algorithm. ``after()`` is staged on the generator's closer stack and
    written when the matching closing event arrives.

    """

    def before(self) -> Content:
        """Content written when the opening event is rendered."""
        ...

    def after(self) -> Text:
        """Content written when the matching closing event arrives."""
        ...


Content: TypeAlias = Text | Slotable


def resolve(text: Text) -> str:
    """Turn a Text value into a plain string."""
    if isinstance(text, Lazy):
        return text.resolve()
    return text


def join(*parts: Text) -> Text:
    """Concatenate text parts, staying lazy if any part is lazy.

    Raises:
        CompositionError: If a part is a slotable rather than text
    """
    for part in parts:
        if not isinstance(part, (str, Lazy)):
            raise CompositionError(
                f"Unable to join {type(part).__name__} into text; "
                "slots must flatten to text."
            )
    if all(isinstance(part, str) for part in parts):
        return "".join(parts)  # type: ignore[arg-type]
    return Lazy(lambda: "".join(resolve(part) for part in parts))


def flatten(content: Content) -> Text:
    """Reduce content to text, writing a slotable's halves back to back.

    Used where a slot's ``before()`` returns another slotable: nested
    inside a wrapper it has no closing event of its own, so it renders
    whole (``HtmlTag("b")`` flattens to ``"<b></b>"``).

    Raises:
        CompositionError: If ``content`` is neither text nor a slotable
    """
    if isinstance(content, (str, Lazy)):
        return content
    if isinstance(content, Slotable):
        return join(flatten(content.before()), content.after())
    raise CompositionError(f"Unable to flatten {type(content).__name__} into text.")


@dataclass(frozen=True, slots=True)
class Wrapper:
    """Generic before/after content pair with an optional nested slot.

    Attributes:
        head: Text written on open
        tail: Text written on close
        slot: Optional slotable nested inside this wrapper

    """

    head: Text = ""
    tail: Text = ""
    slot: Slotable | None = None

    def before(self) -> Text:
        if self.slot is None:
            return self.head
        return join(self.head, flatten(self.slot.before()))

    def after(self) -> Text:
        if self.slot is None:
            return self.tail
        return join(self.slot.after(), self.tail)

    def wrap_slot(self, slot: Slotable | None) -> Wrapper:
        """Return a copy with ``slot`` nested inside (replacing any slot)."""
        return replace(self, slot=slot)

    def unwrap(self) -> Wrapper:
        """Return a copy without a nested slot."""
        return replace(self, slot=None)

    def to_string(self) -> str:
        """Flatten to a single string.

        Raises:
            CompositionError: If a slot is still attached
        """
        if self.slot is not None:
            raise CompositionError("Unable to flatten a wrapper with an attached slot.")
        return resolve(self.before()) + resolve(self.after())

    def __str__(self) -> str:
        return self.to_string()


__all__ = [
    "Content",
    "Lazy",
    "Slotable",
    "Text",
    "Wrapper",
    "flatten",
    "join",
    "resolve",
]
