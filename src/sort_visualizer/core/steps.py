"""Step records yielded by the algorithm generators.

Every yielded Step is a suspension point.  The driver feeds it to the
metrics observer, plays its tone, and (when `render` is set) draws a frame
and waits for the pacing delay.  Before resuming the generator the driver
checks cancellation, so no mutation happens after a run is abandoned.
"""

from collections.abc import Generator
from dataclasses import dataclass
from enum import Enum

from sort_visualizer.schemas.defaults import (
    FINALE_BASE_HZ,
    FINALE_SCALE,
    TONE_BASE_HZ,
)


class StepKind(str, Enum):
    COMPARE = "compare"  # elements tagged comparing, comparison counted
    SWAP = "swap"  # elements tagged swapping, exchange about to happen
    EXCHANGE = "exchange"  # two records exchanged
    SHIFT = "shift"  # one record moved one slot (insertion)
    WRITE = "write"  # one slot written from a temporary buffer (merge)
    TALLY = "tally"  # keys counted into a histogram (radix/counting)
    PLACE = "place"  # record placed into an output buffer (radix/counting)
    SETTLE = "settle"  # slot tagged sorted by the finalization pass
    FRAME = "frame"  # redraw only
    PROGRESS = "progress"  # progress update only


@dataclass(frozen=True)
class Step:
    """One suspension point.

    Attributes:
        kind: What happened just before the suspension.
        indices: Slots involved, for observers that care.
        comparisons: Comparisons to add to the tally.
        exchanges: Swaps/shifts/writes to add to the tally.
        tone: Frequency (Hz) to play, or None.
        progress: New progress fraction, or None to leave it.
        render: Draw a frame and wait; False means notify only.
        delay_ms: Overrides the speed preset delay for this frame.
    """

    kind: StepKind
    indices: tuple[int, ...] = ()
    comparisons: int = 0
    exchanges: int = 0
    tone: float | None = None
    progress: float | None = None
    render: bool = True
    delay_ms: int | None = None


# What every algorithm returns: a generator of suspension points.
StepStream = Generator[Step, None, None]


def tone_for(value: int) -> float:
    """Tone keyed to a moved value."""
    return TONE_BASE_HZ + value


def finale_tone_for(value: int) -> float:
    return FINALE_BASE_HZ + FINALE_SCALE * value


# --- Factories for the common shapes --------------------------------------


def compare(*indices: int, count: int = 1, progress: float | None = None) -> Step:
    return Step(StepKind.COMPARE, indices, comparisons=count, progress=progress)


def swap(*indices: int) -> Step:
    return Step(StepKind.SWAP, indices)


def exchanged(*indices: int, value: int, render: bool = False) -> Step:
    return Step(
        StepKind.EXCHANGE, indices, exchanges=1, tone=tone_for(value), render=render
    )


def frame(*indices: int) -> Step:
    return Step(StepKind.FRAME, indices)


def progress(fraction: float) -> Step:
    return Step(StepKind.PROGRESS, progress=fraction, render=False)
