"""Live metrics for the running algorithm.

Counters are driven by the steps the algorithms yield; the tracker never
touches the array.  Pure helpers (`exchange_label`, `complexity_for`) are
shared with the comparison report so both agree on labels and annotations.
"""

import logging
import time
from collections.abc import Callable

from sort_visualizer.core.constants import ALGORITHM_INFO, SHIFT_ALGORITHMS
from sort_visualizer.core.steps import Step
from sort_visualizer.schemas import MetricsSnapshot
from sort_visualizer.schemas.defaults import DEFAULT_ALGORITHM

logger = logging.getLogger(__name__)

MetricsListener = Callable[[MetricsSnapshot], None]


def exchange_label(algorithm: str) -> str:
    """'Shifts' for algorithms that move one slot at a time, else 'Swaps'."""
    return "Shifts" if algorithm in SHIFT_ALGORITHMS else "Swaps"


def complexity_for(algorithm: str) -> tuple[str, str]:
    """Return the (time, space) complexity annotations, or blanks if unknown."""
    info = ALGORITHM_INFO.get(algorithm)
    if info is None:
        return "", ""
    return info.time_complexity, info.space_complexity


class MetricsTracker:
    """Comparison/exchange counters, elapsed time and progress.

    Implements the step observer protocol used by the driver.  Every change
    is pushed to `listener` as a fresh `MetricsSnapshot`.
    """

    def __init__(
        self,
        algorithm: str = DEFAULT_ALGORITHM,
        clock: Callable[[], float] = time.monotonic,
        listener: MetricsListener | None = None,
    ) -> None:
        self.algorithm = algorithm
        self.listener = listener
        self._clock = clock
        self.comparisons = 0
        self.exchanges = 0
        self.progress = 0.0
        self._started_at: float | None = None
        self._stopped_at: float | None = None

    @property
    def exchange_label(self) -> str:
        return exchange_label(self.algorithm)

    @property
    def complexity(self) -> tuple[str, str]:
        return complexity_for(self.algorithm)

    @property
    def elapsed_ms(self) -> int:
        if self._started_at is None:
            return 0
        end = self._clock() if self._stopped_at is None else self._stopped_at
        return max(0, int((end - self._started_at) * 1000))

    def begin(self, started_at: float | None = None) -> None:
        """Start the elapsed timer. Counters are left as they are."""
        self._started_at = self._clock() if started_at is None else started_at
        self._stopped_at = None
        self._notify()

    def stop(self) -> None:
        """Freeze the elapsed timer."""
        if self._started_at is not None and self._stopped_at is None:
            self._stopped_at = self._clock()
            self._notify()

    def reset(self, algorithm: str | None = None) -> None:
        """Zero everything, optionally switching the algorithm annotations."""
        if algorithm is not None:
            self.algorithm = algorithm
        self.comparisons = 0
        self.exchanges = 0
        self.progress = 0.0
        self._started_at = None
        self._stopped_at = None
        self._notify()

    def observe(self, step: Step) -> None:
        changed = False
        if step.comparisons:
            self.comparisons += step.comparisons
            changed = True
        if step.exchanges:
            self.exchanges += step.exchanges
            changed = True
        if step.progress is not None:
            self.progress = min(1.0, max(0.0, step.progress))
            changed = True
        if changed:
            self._notify()

    def snapshot(self) -> MetricsSnapshot:
        time_complexity, space_complexity = self.complexity
        return MetricsSnapshot(
            algorithm=self.algorithm,
            comparisons=self.comparisons,
            exchanges=self.exchanges,
            elapsed_ms=self.elapsed_ms,
            progress=self.progress,
            exchange_label=self.exchange_label,
            time_complexity=time_complexity,
            space_complexity=space_complexity,
        )

    def _notify(self) -> None:
        if self.listener is None:
            return
        try:
            self.listener(self.snapshot())
        except Exception:
            logger.debug("Metrics listener failed; ignored", exc_info=True)
