"""Event-driven nesting engine.

The engine pulls nodes from a document source once and fans each node out
to every registered generator. From the flat open/close/text stream it
rebuilds each generator's nested output:

- Text-like content is written straight to the generator's active sink.
- A slotable's ``before()`` is written when its element opens; its
  ``after()`` is staged on that generator's closer stack and written when a
  closing event with the same name and depth arrives.
- When a generator asks to chunk at an opening element, every staged
  closer is flushed, the active sink is closed and a new one is acquired.

Per-run state lives in a RunContext created fresh for each ``handle()``
call, so a single Process can be reused for any number of runs.

Chunk Flushing:
A chunk boundary drains the whole closer stack, including closers of
ancestors that are still open in the source document. Their real closing
events later find nothing to match and produce no output. Generators that
chunk mid-element should expect the ancestor markup to be closed at the end
of the previous chunk.

Thread Safety:
A run is single-threaded and synchronous. For a given node every generator
is processed to completion before the engine pulls the next node.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias, assert_never

from weft.content import Content, Lazy, Slotable, Text
from weft.errors import UnhandledNodeError
from weft.nodes import Node, NodeKind
from weft.profiling import get_run_accumulator
from weft.utils.logger import get_logger

if TYPE_CHECKING:
    from weft.generators.protocol import Generator
    from weft.sinks import Sink
    from weft.source import DocumentSource

logger = get_logger(__name__)

TickCallback: TypeAlias = Callable[[Node, int], object]


@dataclass(slots=True)
class GeneratorState:
    """Run state owned by the engine for one generator.

    Attributes:
        generator: The generator this state belongs to
        sink: Active sink, None until the first node is dispatched
        closers: Staged ``after`` content with its opening node, LIFO
        chunks: Number of sinks acquired during the run

    """

    generator: Generator
    sink: Sink | None = None
    closers: list[tuple[Text, Node]] = field(default_factory=list)
    chunks: int = 0


@dataclass(slots=True)
class RunContext:
    """Per-run mutable state.

    Created fresh for each ``handle()`` call and dropped when it returns.
    Generator states are keyed by registration index.

    """

    states: dict[int, GeneratorState]
    nodes: int = 0
    ticks: int = 0
    chunks: int = 0
    closers_flushed: int = 0


class Process:
    """Drives a document source through a set of generators.

    Usage:
        sinks = StringSinkFactory(RenderConfig())
        Process().handle(builder.stream(), [HtmlPages(sinks), Index(sinks)])

    """

    __slots__ = ()

    def handle(
        self,
        source: DocumentSource,
        generators: Iterable[Generator],
        on_tick: TickCallback | None = None,
    ) -> None:
        """Process the source against the given generators.

        Args:
            source: Single-pass node producer
            generators: Generators, dispatched in this order
            on_tick: Optional observer called once per dispatched node with
                the node and a 0-based tick counter

        Raises:
            UnhandledNodeError: If a node kind without a handler is dispatched
            Exception: Anything raised by a generator or sink aborts the run
        """
        ctx = RunContext(states=dict(enumerate(GeneratorState(g) for g in generators)))
        logger.debug("Run started with %d generator(s)", len(ctx.states))

        try:
            for state in ctx.states.values():
                state.generator.set_up()

            while (node := source.advance()) is not None:
                ctx.nodes += 1
                if node.is_doctype:
                    continue

                if on_tick is not None:
                    on_tick(node, ctx.ticks)
                first = ctx.ticks == 0
                ctx.ticks += 1

                for state in ctx.states.values():
                    if first:
                        state.sink = state.generator.stream(node)
                        state.chunks = 1
                    self._dispatch(ctx, state, node)

            for state in ctx.states.values():
                self._finish(ctx, state)
        except Exception:
            logger.debug("Run aborted after %d node(s)", ctx.nodes)
            self._close_sinks(ctx)
            raise

        acc = get_run_accumulator()
        if acc is not None:
            acc.record_run(ctx.nodes, ctx.ticks, ctx.chunks, ctx.closers_flushed)
        logger.debug(
            "Run finished: %d node(s), %d tick(s), %d chunk transition(s)",
            ctx.nodes,
            ctx.ticks,
            ctx.chunks,
        )

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _dispatch(self, ctx: RunContext, state: GeneratorState, node: Node) -> None:
        """Route a node to its handler by kind."""
        match node.kind:
            case NodeKind.OPENING_ELEMENT:
                self._handle_opening_element(ctx, state, node)
            case NodeKind.CLOSING_ELEMENT:
                self._handle_closing_element(ctx, state, node)
            case NodeKind.TEXT | NodeKind.CDATA | NodeKind.PROCESSING_INSTRUCTION:
                self._write(state, state.generator.render(node), node)
            case NodeKind.WHITESPACE | NodeKind.COMMENT:
                pass
            case NodeKind.DOCTYPE:
                # Filtered out before dispatch
                raise UnhandledNodeError(node)
            case _:
                assert_never(node.kind)

    def _handle_opening_element(
        self, ctx: RunContext, state: GeneratorState, node: Node
    ) -> None:
        generator = state.generator
        if generator.should_chunk(node):
            self._flush_closers(ctx, state)
            self._active_sink(state).close()
            state.sink = generator.stream(node)
            state.chunks += 1
            ctx.chunks += 1
            logger.debug(
                "Chunked %s at <%s> (depth %d) into %s",
                type(generator).__name__,
                node.name,
                node.depth,
                state.sink.path,
            )

        self._write(state, generator.render(node), node)

    def _handle_closing_element(
        self, ctx: RunContext, state: GeneratorState, node: Node
    ) -> None:
        if self._matches_next_closer(state, node):
            self._write_next_closer(ctx, state)

    # =========================================================================
    # Closers
    # =========================================================================

    @staticmethod
    def _matches_next_closer(state: GeneratorState, node: Node) -> bool:
        """Whether ``node`` closes the element on top of the closer stack."""
        if not state.closers:
            return False
        opening = state.closers[-1][1]
        return opening.name == node.name and opening.depth == node.depth

    def _write_next_closer(self, ctx: RunContext, state: GeneratorState) -> None:
        if state.closers:
            after, opening = state.closers.pop()
            ctx.closers_flushed += 1
            self._write(state, after, opening)

    def _flush_closers(self, ctx: RunContext, state: GeneratorState) -> None:
        """Write every staged closer, innermost first."""
        while state.closers:
            self._write_next_closer(ctx, state)

    # =========================================================================
    # Writing
    # =========================================================================

    def _write(self, state: GeneratorState, unit: Content, node: Node) -> None:
        """Write a content unit for the generator.

        Text goes straight to the sink. A slotable writes its ``before()``
        now and stages its ``after()`` until the element closes, unless the
        element closes itself.
        """
        if isinstance(unit, Lazy):
            unit = unit.resolve()

        if isinstance(unit, str):
            if unit:
                self._active_sink(state).write(unit)
            return

        if not isinstance(unit, Slotable):
            raise TypeError(
                f"{type(state.generator).__name__}.render() returned "
                f"{type(unit).__name__}; expected str, Lazy or a slotable"
            )

        self._write(state, unit.before(), node)

        if node.self_closing:
            self._write(state, unit.after(), node)
        else:
            state.closers.append((unit.after(), node))

    @staticmethod
    def _active_sink(state: GeneratorState) -> Sink:
        # The first dispatched node always acquires a sink
        assert state.sink is not None
        return state.sink

    # =========================================================================
    # Teardown
    # =========================================================================

    def _finish(self, ctx: RunContext, state: GeneratorState) -> None:
        """Flush, tear down and close one generator at the end of a run."""
        self._flush_closers(ctx, state)
        state.generator.tear_down()
        if state.sink is not None:
            state.sink.close()
            state.sink = None

    @staticmethod
    def _close_sinks(ctx: RunContext) -> None:
        """Best-effort close of every sink still open after a failure."""
        for state in ctx.states.values():
            if state.sink is None or state.sink.closed:
                continue
            try:
                state.sink.close()
            except Exception:
                logger.debug("Failed to close sink %s", state.sink.path, exc_info=True)
            state.sink = None


def run(
    source: DocumentSource,
    generators: Iterable[Generator],
    on_tick: TickCallback | None = None,
) -> None:
    """Run a source through generators with a fresh Process."""
    Process().handle(source, generators, on_tick)


__all__ = ["GeneratorState", "Process", "RunContext", "TickCallback", "run"]
