"""Tests for weft.profiling — run profiling API."""

from weft import NodeBuilder, StringSink, run
from weft.generators import BaseGenerator
from weft.profiling import (
    RunAccumulator,
    get_run_accumulator,
    profiled_run,
)


class Sinkhole(BaseGenerator):
    def __init__(self) -> None:
        self.sink = StringSink()

    def stream(self, node):  # type: ignore[no-untyped-def]
        return self.sink


def _run() -> None:
    run(NodeBuilder().element("p", "x").stream(), [Sinkhole()])


class TestGetRunAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_run_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_run():
            pass
        assert get_run_accumulator() is None


class TestProfiledRun:
    def test_yields_accumulator(self) -> None:
        with profiled_run() as acc:
            assert isinstance(acc, RunAccumulator)

    def test_accumulator_available_inside_context(self) -> None:
        with profiled_run() as acc:
            assert get_run_accumulator() is acc

    def test_records_run(self) -> None:
        with profiled_run() as acc:
            _run()
        assert acc.runs == 1
        assert acc.nodes == 3
        assert acc.ticks == 3

    def test_records_multiple_runs(self) -> None:
        with profiled_run() as acc:
            _run()
            _run()
        assert acc.runs == 2
        assert acc.ticks == 6

    def test_no_recording_outside_context(self) -> None:
        with profiled_run() as acc:
            pass
        _run()
        assert acc.runs == 0


class TestSummary:
    def test_summary_keys(self) -> None:
        with profiled_run() as acc:
            _run()
        summary = acc.summary()
        assert set(summary) == {"total_ms", "runs", "nodes", "ticks", "chunks", "closers_flushed"}
        assert summary["runs"] == 1
        assert summary["total_ms"] >= 0
