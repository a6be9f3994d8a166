"""Unit tests for metrics service."""

from sort_visualizer.core.steps import Step, StepKind, compare, exchanged, progress
from sort_visualizer.schemas import MetricsSnapshot
from sort_visualizer.services.metrics import (
    MetricsTracker,
    complexity_for,
    exchange_label,
)

from ..factories import FakeClock


def test_exchange_label() -> None:
    assert exchange_label("insertion") == "Shifts"
    assert exchange_label("merge") == "Shifts"
    assert exchange_label("quick") == "Swaps"
    assert exchange_label("counting") == "Swaps"


def test_complexity_for() -> None:
    assert complexity_for("merge") == ("O(n log n)", "O(n)")
    assert complexity_for("counting") == ("O(n+k)", "O(k)")
    assert complexity_for("unknown") == ("", "")


def test_observe_accumulates_counters() -> None:
    tracker = MetricsTracker("bubble")
    tracker.observe(compare(0, 1))
    tracker.observe(compare(0, 1, 2, count=2))
    tracker.observe(exchanged(0, 1, value=10))

    assert tracker.comparisons == 3
    assert tracker.exchanges == 1


def test_progress_is_clamped() -> None:
    tracker = MetricsTracker()
    tracker.observe(progress(1.7))
    assert tracker.progress == 1.0
    tracker.observe(progress(-0.2))
    assert tracker.progress == 0.0


def test_listener_receives_snapshots() -> None:
    received: list[MetricsSnapshot] = []
    tracker = MetricsTracker("heap", listener=received.append)

    tracker.observe(compare(0, 1))
    tracker.observe(Step(StepKind.FRAME))  # nothing changed, no notification

    assert len(received) == 1
    assert received[0].comparisons == 1
    assert received[0].exchange_label == "Swaps"
    assert received[0].time_complexity == "O(n log n)"


def test_listener_failure_is_ignored() -> None:
    def broken(snapshot):
        raise RuntimeError("ui gone")

    tracker = MetricsTracker(listener=broken)
    tracker.observe(compare(0, 1))
    assert tracker.comparisons == 1


def test_elapsed_time_runs_until_stopped() -> None:
    clock = FakeClock()
    tracker = MetricsTracker(clock=clock)
    assert tracker.elapsed_ms == 0

    tracker.begin()
    clock.advance(1.5)
    assert tracker.elapsed_ms == 1500

    tracker.stop()
    clock.advance(3.0)
    assert tracker.elapsed_ms == 1500


def test_reset_zeroes_and_switches_algorithm() -> None:
    tracker = MetricsTracker("bubble")
    tracker.begin()
    tracker.observe(compare(0, 1, progress=0.5))
    tracker.reset(algorithm="insertion")

    snapshot = tracker.snapshot()
    assert snapshot.comparisons == 0
    assert snapshot.progress == 0.0
    assert snapshot.elapsed_ms == 0
    assert snapshot.exchange_label == "Shifts"
