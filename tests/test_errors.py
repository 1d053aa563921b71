"""Error hierarchy and message formatting."""

import pytest

from weft.errors import (
    CompositionError,
    ConfigError,
    SinkClosedError,
    UnhandledNodeError,
    WeftError,
)
from weft.location import SourceLocation
from weft.nodes import Node, NodeKind

# =========================================================================
# UnhandledNodeError
# =========================================================================


class TestUnhandledNodeError:
    """Verify UnhandledNodeError carries the node and names it."""

    def test_message(self) -> None:
        node = Node(NodeKind.DOCTYPE, name="html")
        err = UnhandledNodeError(node)
        assert "DOCTYPE" in str(err)
        assert "[html]" in str(err)
        assert err.node is node

    def test_message_with_location(self) -> None:
        node = Node(NodeKind.DOCTYPE, name="html", location=SourceLocation(1, 1, "x.xml"))
        assert "x.xml:1:1" in str(UnhandledNodeError(node))


# =========================================================================
# Other errors
# =========================================================================


class TestOtherErrors:
    def test_sink_closed(self) -> None:
        err = SinkClosedError("build/a.html")
        assert "build/a.html" in str(err)

    def test_config_error_with_source(self) -> None:
        err = ConfigError("bad value", source="weft.toml")
        assert str(err) == "weft.toml: bad value"

    def test_config_error_without_source(self) -> None:
        assert str(ConfigError("bad value")) == "bad value"

    @pytest.mark.parametrize(
        "error",
        [
            UnhandledNodeError(Node(NodeKind.TEXT)),
            CompositionError("x"),
            SinkClosedError("x"),
            ConfigError("x"),
        ],
    )
    def test_is_weft_error(self, error: WeftError) -> None:
        assert isinstance(error, WeftError)
