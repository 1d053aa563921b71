"""
weft — Fan one document walk out to many outputs

Renders a flat stream of markup events (open, close, text, ...) into any
number of independent outputs in a single pass. Generators return plain
text or before/after wrappers; the engine rebuilds nesting, defers closing
content until the matching close event, and splits output across sinks when
a generator asks to chunk.

Quick Start:
    >>> from weft import NodeBuilder, BaseGenerator, HtmlTag, StringSink, run
    >>>
    >>> class Page(BaseGenerator):
    ...     def __init__(self):
    ...         self.sink = StringSink("page.html")
    ...     def stream(self, node):
    ...         return self.sink
    ...     def render(self, node):
    ...         if node.is_opening_element:
    ...             return HtmlTag(node.name)
    ...         return node.value
    >>>
    >>> page = Page()
    >>> run(NodeBuilder().open("div").text("hi").close().stream(), [page])
    >>> page.sink.getvalue()
    '<div>hi</div>'

Chunking:
    A generator whose ``should_chunk(node)`` returns True at an opening
    element gets a fresh sink from ``stream(node)``; everything staged for
    the old sink is flushed into it first.

"""

from weft.builder import NodeBuilder
from weft.config import RenderConfig
from weft.content import Content, Lazy, Slotable, Text, Wrapper
from weft.engine import Process, run
from weft.errors import (
    CompositionError,
    ConfigError,
    SinkClosedError,
    UnhandledNodeError,
    WeftError,
)
from weft.generators import BaseGenerator, Generator
from weft.location import SourceLocation
from weft.nodes import AttributeValue, Node, NodeKind
from weft.profiling import RunAccumulator, get_run_accumulator, profiled_run
from weft.render import VOID_TAGS, Factory, HtmlTag
from weft.serialization import from_json, to_json
from weft.sinks import Sink, StringSink, StringSinkFactory
from weft.source import DocumentSource, NodeStream

__version__ = "0.1.0"

__all__ = [
    # Engine
    "Process",
    "run",
    # Nodes and sources
    "AttributeValue",
    "DocumentSource",
    "Node",
    "NodeBuilder",
    "NodeKind",
    "NodeStream",
    "SourceLocation",
    # Content
    "Content",
    "Factory",
    "HtmlTag",
    "Lazy",
    "Slotable",
    "Text",
    "VOID_TAGS",
    "Wrapper",
    # Generators and sinks
    "BaseGenerator",
    "Generator",
    "Sink",
    "StringSink",
    "StringSinkFactory",
    # Configuration
    "RenderConfig",
    # Errors
    "CompositionError",
    "ConfigError",
    "SinkClosedError",
    "UnhandledNodeError",
    "WeftError",
    # Profiling and serialization
    "RunAccumulator",
    "from_json",
    "get_run_accumulator",
    "profiled_run",
    "to_json",
]
