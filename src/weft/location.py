"""Source location tracking for error messages and debugging.

Document sources may attach a SourceLocation to each node so that failures
raised while dispatching can point back at the input.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a node in its source document.

    All positions are 1-indexed (lineno and col_offset start at 1).

    Attributes:
        lineno: Line number (1-indexed)
        col_offset: Column offset (1-indexed)
        source_file: Source file path (optional, for multi-file builds)

    Examples:
            >>> loc = SourceLocation(1, 1, "manual/en/strlen.xml")
            >>> str(loc)
            'manual/en/strlen.xml:1:1'

    """

    lineno: int
    col_offset: int
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.xml:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create an unknown/placeholder location.

        Use for nodes created synthetically or when location is unavailable.
        """
        return cls(lineno=0, col_offset=0)
