"""weft RunAccumulator — opt-in profiling for engine runs.

This module provides accumulated metrics while the engine runs:
- Total wall time
- Nodes pulled and ticks dispatched
- Chunk transitions and closers flushed

Zero overhead when disabled (get_run_accumulator() returns None).

Example:
    from weft import Process
    from weft.profiling import profiled_run

    with profiled_run() as metrics:
        Process().handle(source, generators)

    print(metrics.summary())
    # {"total_ms": 3.1, "runs": 1, "nodes": 120, "ticks": 118, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RunAccumulator:
    """Accumulated metrics across engine runs.

    Attributes:
        start_time: Profiling start timestamp.
        runs: Number of completed runs.
        nodes: Nodes pulled from sources, doctype included.
        ticks: Nodes dispatched to generators.
        chunks: Chunk transitions across all generators.
        closers_flushed: Staged closers written, matched or forced.

    """

    start_time: float = field(default_factory=perf_counter)
    runs: int = 0
    nodes: int = 0
    ticks: int = 0
    chunks: int = 0
    closers_flushed: int = 0

    def record_run(self, nodes: int, ticks: int, chunks: int, closers_flushed: int) -> None:
        """Record one finished run."""
        self.runs += 1
        self.nodes += nodes
        self.ticks += ticks
        self.chunks += chunks
        self.closers_flushed += closers_flushed

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of run metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "runs": self.runs,
            "nodes": self.nodes,
            "ticks": self.ticks,
            "chunks": self.chunks,
            "closers_flushed": self.closers_flushed,
        }


_accumulator: ContextVar[RunAccumulator | None] = ContextVar(
    "run_accumulator",
    default=None,
)


def get_run_accumulator() -> RunAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_run() -> Iterator[RunAccumulator]:
    """Context manager for profiled runs.

    Creates a RunAccumulator and makes it available via
    get_run_accumulator() for the duration of the with block.

    Yields:
        RunAccumulator that will be populated by engine runs.

    """
    acc = RunAccumulator()
    token: Token[RunAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = ["RunAccumulator", "get_run_accumulator", "profiled_run"]
