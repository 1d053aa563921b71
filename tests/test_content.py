"""Tests for content units: Lazy text and the generic Wrapper."""

from __future__ import annotations

import pytest

from weft.content import Lazy, Slotable, Wrapper, flatten, join, resolve
from weft.errors import CompositionError
from weft.render.tag import HtmlTag


class TestLazy:
    def test_not_called_until_resolved(self) -> None:
        calls: list[int] = []
        text = Lazy(lambda: calls.append(1) or "x")
        assert calls == []
        assert text.resolve() == "x"
        assert calls == [1]

    def test_str_resolves(self) -> None:
        assert str(Lazy(lambda: "abc")) == "abc"

    def test_non_string_result_is_stringified(self) -> None:
        assert Lazy(lambda: 42).resolve() == "42"  # type: ignore[arg-type, return-value]

    def test_resolve_helper(self) -> None:
        assert resolve("plain") == "plain"
        assert resolve(Lazy(lambda: "lazy")) == "lazy"


class TestJoin:
    def test_all_strings_join_eagerly(self) -> None:
        assert join("a", "b", "") == "ab"

    def test_any_lazy_stays_lazy(self) -> None:
        calls: list[int] = []
        joined = join("(", Lazy(lambda: calls.append(1) or "x"), ")")
        assert isinstance(joined, Lazy)
        assert calls == []
        assert resolve(joined) == "(x)"

    def test_slotable_part_is_rejected(self) -> None:
        with pytest.raises(CompositionError):
            join("a", Wrapper())  # type: ignore[arg-type]


class TestWrapper:
    """Generic before/after pairs and slot composition."""

    def test_is_slotable(self) -> None:
        assert isinstance(Wrapper(), Slotable)
        assert not isinstance("text", Slotable)

    def test_before_and_after(self) -> None:
        w = Wrapper(head="[", tail="]")
        assert w.before() == "["
        assert w.after() == "]"

    def test_slot_nests_inside(self) -> None:
        w = Wrapper(head="[", tail="]").wrap_slot(Wrapper(head="(", tail=")"))
        assert w.before() == "[("
        assert w.after() == ")]"

    def test_slot_chain(self) -> None:
        inner = Wrapper(head="<", tail=">")
        middle = Wrapper(head="(", tail=")").wrap_slot(inner)
        outer = Wrapper(head="[", tail="]").wrap_slot(middle)
        assert outer.before() == "[(<"
        assert outer.after() == ">)]"

    def test_slot_may_be_a_tag(self) -> None:
        w = Wrapper(head="p1:", tail=",").wrap_slot(HtmlTag("code"))
        assert w.before() == "p1:<code>"
        assert w.after() == "</code>,"

    def test_wrap_slot_returns_new_value(self) -> None:
        base = Wrapper(head="[", tail="]")
        wrapped = base.wrap_slot(Wrapper(head="("))
        assert base.slot is None
        assert wrapped.slot is not None

    def test_wrap_slot_replaces(self) -> None:
        w = Wrapper().wrap_slot(Wrapper(head="a")).wrap_slot(Wrapper(head="b"))
        assert w.before() == "b"

    def test_unwrap(self) -> None:
        w = Wrapper(head="[", tail="]").wrap_slot(Wrapper(head="("))
        assert w.unwrap().slot is None

    def test_lazy_tail_stays_lazy(self) -> None:
        w = Wrapper(head="(", tail=Lazy(lambda: ")"))
        assert isinstance(w.after(), Lazy)


class TestFlattening:
    """Flattening is only allowed once the slot is gone."""

    def test_to_string(self) -> None:
        assert Wrapper(head="[", tail="]").to_string() == "[]"
        assert str(Wrapper(head="a", tail=Lazy(lambda: "b"))) == "ab"

    def test_attached_slot_raises(self) -> None:
        w = Wrapper(head="[", tail="]").wrap_slot(Wrapper())
        with pytest.raises(CompositionError):
            w.to_string()
        with pytest.raises(CompositionError):
            str(w)

    def test_unwrapped_flattens(self) -> None:
        w = Wrapper(head="[", tail="]").wrap_slot(Wrapper())
        assert w.unwrap().to_string() == "[]"


class Bold:
    """A slotable whose opening half is itself a slotable."""

    def before(self) -> HtmlTag:
        return HtmlTag("b")

    def after(self) -> str:
        return "!"


class TestNestedSlotables:
    """A slot whose before() returns a slotable renders it whole."""

    def test_flatten_text(self) -> None:
        assert flatten("x") == "x"
        lazy = Lazy(lambda: "y")
        assert flatten(lazy) is lazy

    def test_flatten_slotable(self) -> None:
        assert flatten(HtmlTag("b")) == "<b></b>"
        assert flatten(Bold()) == "<b></b>!"

    def test_flatten_rejects_other_values(self) -> None:
        with pytest.raises(CompositionError):
            flatten(42)  # type: ignore[arg-type]

    def test_wrapper_slot(self) -> None:
        w = Wrapper(head="[", tail="]").wrap_slot(Bold())
        assert w.before() == "[<b></b>"
        assert w.after() == "!]"

    def test_tag_slot(self) -> None:
        tag = HtmlTag("p").wrap_slot(Bold())
        assert tag.before() == "<p><b></b>"
        assert tag.after() == "!</p>"
