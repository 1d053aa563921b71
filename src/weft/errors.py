"""Exception classes for weft.

Provides standardized exceptions for error handling throughout weft.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weft.nodes import Node


class WeftError(Exception):
    """Base exception for all weft errors.

    Subclass this for specific error categories.
    """

    pass


class UnhandledNodeError(WeftError):
    """A node reached dispatch without a handler for its kind.

    The engine matches node kinds exhaustively, so this signals a
    programming defect. It aborts the whole run for every generator.
    """

    def __init__(self, node: Node) -> None:
        """Initialize with the offending node.

        Args:
            node: The node that could not be dispatched
        """
        self.node = node

        location = f" at {node.location}" if node.location is not None else ""
        super().__init__(
            f"Encountered an unhandled node of kind [{node.kind.name}] "
            f"with the name [{node.name}]{location}."
        )


class CompositionError(WeftError):
    """A content wrapper was used in a way its composition does not allow.

    Raised when flattening a wrapper to a string while a slot is still
    attached. The generator that built the wrapper is at fault.
    """

    pass


class SinkClosedError(WeftError):
    """Write attempted on a sink that has already been closed."""

    def __init__(self, path: str) -> None:
        """Initialize sink error.

        Args:
            path: Identifier of the closed sink
        """
        self.path = path
        super().__init__(f"Unable to write to closed sink [{path}].")


class ConfigError(WeftError):
    """Invalid configuration value or unreadable configuration file."""

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize config error.

        Args:
            message: Description of the problem
            source: Path of the config file involved (optional)
        """
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")
