"""Tests for Node events and the node contract."""

from __future__ import annotations

import dataclasses

import pytest

from weft.location import SourceLocation
from weft.nodes import Node, NodeKind


def _text(value: str, *ancestors: str) -> Node:
    return Node(NodeKind.TEXT, value=value, depth=len(ancestors), ancestors=ancestors)


class TestKindPredicates:
    """Exactly one predicate holds for each kind."""

    PREDICATES = {
        NodeKind.DOCTYPE: "is_doctype",
        NodeKind.OPENING_ELEMENT: "is_opening_element",
        NodeKind.CLOSING_ELEMENT: "is_closing_element",
        NodeKind.TEXT: "is_text_content",
        NodeKind.WHITESPACE: "is_whitespace",
        NodeKind.CDATA: "is_cdata",
        NodeKind.PROCESSING_INSTRUCTION: "is_processing_instruction",
        NodeKind.COMMENT: "is_comment",
    }

    @pytest.mark.parametrize("kind", list(NodeKind))
    def test_single_predicate(self, kind: NodeKind) -> None:
        node = Node(kind)
        held = [name for name in self.PREDICATES.values() if getattr(node, name)]
        assert held == [self.PREDICATES[kind]]

    def test_every_kind_has_a_predicate(self) -> None:
        assert set(self.PREDICATES) == set(NodeKind)


class TestNodeConstruction:
    """Immutability and validation."""

    def test_frozen(self) -> None:
        node = Node(NodeKind.TEXT, value="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.value = "y"  # type: ignore[misc]

    def test_attributes_are_read_only(self) -> None:
        node = Node(NodeKind.OPENING_ELEMENT, name="a", attributes={"href": "/x"})
        with pytest.raises(TypeError):
            node.attributes["href"] = "/y"  # type: ignore[index]

    def test_source_mapping_is_copied(self) -> None:
        attrs = {"class": "a"}
        node = Node(NodeKind.OPENING_ELEMENT, name="p", attributes=attrs)
        attrs["class"] = "b"
        assert node.attribute("class") == "a"

    def test_list_values_become_tuples(self) -> None:
        node = Node(NodeKind.OPENING_ELEMENT, name="p", attributes={"class": ["a", "b"]})
        assert node.attribute("class") == ("a", "b")

    def test_negative_depth_rejected(self) -> None:
        with pytest.raises(ValueError, match="depth"):
            Node(NodeKind.TEXT, depth=-1)

    def test_location_is_optional(self) -> None:
        loc = SourceLocation(3, 7, "strlen.xml")
        node = Node(NodeKind.TEXT, value="x", location=loc)
        assert str(node.location) == "strlen.xml:3:7"
        assert Node(NodeKind.TEXT).location is None


class TestAttributes:
    def test_has_attribute(self) -> None:
        node = Node(NodeKind.OPENING_ELEMENT, name="type", attributes={"class": "union"})
        assert node.has_attribute("class")
        assert not node.has_attribute("role")

    def test_attribute_default(self) -> None:
        node = Node(NodeKind.OPENING_ELEMENT, name="type")
        assert node.attribute("class") is None
        assert node.attribute("class", "none") == "none"

    def test_boolean_attribute(self) -> None:
        node = Node(NodeKind.OPENING_ELEMENT, name="input", attributes={"checked": True})
        assert node.attribute("checked") is True


class TestParentPath:
    """Dotted ancestor matching, innermost first."""

    def test_direct_parent(self) -> None:
        node = _text("strlen", "methodname", "methodsynopsis", "refsect1")
        assert node.parent("methodname")

    def test_full_chain(self) -> None:
        node = _text("strlen", "methodname", "methodsynopsis", "refsect1")
        assert node.parent("methodname.methodsynopsis.refsect1")

    def test_prefix_of_chain(self) -> None:
        node = _text("strlen", "methodname", "methodsynopsis", "refsect1", "refentry")
        assert node.parent("methodname.methodsynopsis")

    def test_skipping_a_level_does_not_match(self) -> None:
        node = _text("int", "type", "methodparam", "methodsynopsis")
        assert not node.parent("type.methodsynopsis")

    def test_chain_longer_than_ancestors(self) -> None:
        node = _text("x", "para")
        assert not node.parent("para.refsect1")

    def test_empty_path(self) -> None:
        assert not _text("x", "para").parent("")

    def test_empty_segment(self) -> None:
        assert not _text("x", "para", "sect").parent("para..sect")

    def test_root_node_has_no_parent(self) -> None:
        assert not Node(NodeKind.OPENING_ELEMENT, name="book").parent("book")


class TestExportValue:
    def test_simple(self) -> None:
        assert _text("strlen").export_value() == "'strlen'"

    def test_quotes_are_escaped(self) -> None:
        value = _text("it's").export_value()
        assert eval(value) == "it's"  # noqa: S307

    def test_newlines_are_escaped(self) -> None:
        value = _text("a\nb").export_value()
        assert "\n" not in value
        assert eval(value) == "a\nb"  # noqa: S307
