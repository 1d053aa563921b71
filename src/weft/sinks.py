"""Output sinks.

A sink is an append-only, explicitly closed output target. Generators hand
sinks to the engine from ``stream(node)``; the engine writes to the active
sink and closes it exactly once, either at a chunk boundary or when the run
ends.

File-backed sinks belong to the embedding application. This module ships
the protocol and an in-memory implementation that accumulates parts in a
list and joins once, O(n) total.

Example:
    >>> sink = StringSink("build/output/en/index.html")
    >>> sink.write("<h1>")
    >>> sink.write("strlen")
    >>> sink.write("</h1>")
    >>> sink.close()
    >>> sink.getvalue()
    '<h1>strlen</h1>'

"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from weft.config import RenderConfig
from weft.errors import SinkClosedError


@runtime_checkable
class Sink(Protocol):
    """Protocol for output targets.

    ``path`` identifies the sink to downstream readers once the run is over.

    """

    @property
    def path(self) -> str: ...

    @property
    def closed(self) -> bool: ...

    def write(self, text: str) -> None:
        """Append text to the sink."""
        ...

    def close(self) -> None:
        """Close the sink. No writes are accepted afterwards."""
        ...


class StringSink:
    """In-memory sink.

    Appends to a list, joins on demand. The value stays readable after
    ``close()``.

    """

    __slots__ = ("_path", "_parts", "_closed", "close_count")

    def __init__(self, path: str = "<memory>") -> None:
        self._path = path
        self._parts: list[str] = []
        self._closed = False
        self.close_count = 0

    @property
    def path(self) -> str:
        return self._path

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, text: str) -> None:
        """Append text (empty strings are skipped).

        Raises:
            SinkClosedError: If the sink has been closed
        """
        if self._closed:
            raise SinkClosedError(self._path)
        if text:
            self._parts.append(text)

    def close(self) -> None:
        self._closed = True
        self.close_count += 1

    def getvalue(self) -> str:
        """Everything written so far, joined."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"StringSink({self._path!r}, {state})"


class StringSinkFactory:
    """Creates in-memory sinks addressed under the configured output root.

    Every sink made is remembered in creation order so callers can read the
    results after the run.

    Example:
        >>> sinks = StringSinkFactory(RenderConfig(language="de"))
        >>> sinks.make("strlen.html").path
        'build/output/de/strlen.html'

    """

    __slots__ = ("config", "_sinks")

    def __init__(self, config: RenderConfig) -> None:
        self.config = config
        self._sinks: list[StringSink] = []

    def path_for(self, name: str) -> str:
        """Address of a sink named ``name`` under this config."""
        root = self.config.output_directory.rstrip("/")
        return f"{root}/{self.config.language}/{name}"

    def make(self, name: str) -> StringSink:
        """Create and remember a new sink."""
        sink = StringSink(self.path_for(name))
        self._sinks.append(sink)
        return sink

    @property
    def sinks(self) -> tuple[StringSink, ...]:
        """All sinks made so far, oldest first."""
        return tuple(self._sinks)

    def get(self, path: str) -> StringSink | None:
        """Most recent sink with the given path, if any."""
        for sink in reversed(self._sinks):
            if sink.path == path:
                return sink
        return None


__all__ = ["Sink", "StringSink", "StringSinkFactory"]
