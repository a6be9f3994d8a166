"""Visualizer session - the control surface a UI or CLI talks to.

This module contains the stateful session that owns the configuration, the
array, the metrics tracker, the run controller and the step driver.  It
handles array (re)generation, custom input, starting runs, and the
pause/reset cancellation paths.
"""

import asyncio
import logging
import random
import time
from collections.abc import Callable, Iterable

from sort_visualizer.core.algorithms import ALGORITHMS, build_steps, mark_all_sorted
from sort_visualizer.core.constants import VISUAL_MODE_NAMES
from sort_visualizer.core.control import RunController
from sort_visualizer.core.driver import RenderFn, RunOutcome, SleepFn, StepDriver, ToneFn
from sort_visualizer.core.elements import SortArray
from sort_visualizer.core.errors import (
    AlreadyRunning,
    InvalidSize,
    UnknownAlgorithm,
    UnknownVisualMode,
)
from sort_visualizer.schemas import RunSummary, VisualizerConfig
from sort_visualizer.schemas.defaults import MAX_ARRAY_SIZE, MIN_ARRAY_SIZE
from sort_visualizer.services.metrics import MetricsListener, MetricsTracker

logger = logging.getLogger(__name__)


class VisualizerSession:
    """Stateful sorting session with injected collaborators.

    Args:
        config: Initial configuration; a fresh array of `config.array_size`
            elements is generated immediately.
        render: Receives a snapshot of the elements at every frame.
        play_tone: Receives a frequency (Hz) when sound is enabled.
        on_metrics: Receives a `MetricsSnapshot` whenever a metric changes.
        sleep: Awaitable delay in seconds, `asyncio.sleep` by default.
        clock: Monotonic clock in seconds.
    """

    def __init__(
        self,
        config: VisualizerConfig | None = None,
        *,
        render: RenderFn | None = None,
        play_tone: ToneFn | None = None,
        on_metrics: MetricsListener | None = None,
        sleep: SleepFn = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or VisualizerConfig()
        self.rng = random.Random(self.config.seed)
        self.array = SortArray()
        self.controller = RunController(clock=clock)
        self.metrics = MetricsTracker(
            self.config.algorithm, clock=clock, listener=on_metrics
        )
        self._play_tone = play_tone
        self.driver = StepDriver(
            self.array,
            self.metrics,
            render=render,
            play_tone=self._emit_tone,
            pacing=lambda: self.config.delay_ms,
            sleep=sleep,
        )
        self.last_run: RunSummary | None = None

        self.array.generate(self.config.array_size, self.rng)

    # --- State ------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self.controller.running

    @property
    def is_paused(self) -> bool:
        return self.controller.paused

    def _ensure_idle(self, action: str) -> None:
        if self.controller.running:
            raise AlreadyRunning(f"Cannot {action} while a run is live")

    # --- Array ------------------------------------------------------------

    def generate(self, size: int | None = None) -> None:
        """Replace the array with `size` random values and clear the metrics.

        Raises:
            AlreadyRunning: If a run is live.
            InvalidSize: If `size` is outside [1, 1000].
        """
        self._ensure_idle("generate a new array")
        if size is None:
            size = self.config.array_size
        if not MIN_ARRAY_SIZE <= size <= MAX_ARRAY_SIZE:
            raise InvalidSize(size)
        if size != self.config.array_size:
            self.config = self.config.updated(array_size=size)

        self.array.generate(size, self.rng)
        self.metrics.reset()
        logger.info(f"Generated new array of {size} elements")
        self.driver.render()

    def set_custom(self, values: str | Iterable[object]) -> None:
        """Replace the array with user values.

        The configured size follows the custom length (capped at 1000), so a
        later `reset()` regenerates the same number of elements.  Invalid
        input leaves the array and the metrics untouched.

        Raises:
            AlreadyRunning: If a run is live.
            EmptyOrInvalidInput: If no positive integer could be parsed.
        """
        self._ensure_idle("set a custom array")
        self.array.set_custom(values)
        size = min(len(self.array), MAX_ARRAY_SIZE)
        if size != self.config.array_size:
            self.config = self.config.updated(array_size=size)
        self.metrics.reset()
        logger.info(f"Custom array loaded ({len(self.array)} elements)")
        self.driver.render()

    # --- Runs -------------------------------------------------------------

    async def start(self) -> RunOutcome:
        """Sort the current array with the selected algorithm.

        Completed runs are followed by the finalization pass.  A pause or
        reset during the run ends it quietly with `RunOutcome.ABORTED`.

        Raises:
            AlreadyRunning: If a run is live.
        """
        run_id = self.controller.start()
        token = self.controller.token_for(run_id)
        algorithm = self.config.algorithm
        self.metrics.begin(self.controller.started_at)
        logger.info(
            f"Run {run_id} started: {algorithm} on {len(self.array)} elements"
        )

        try:
            outcome = await self.driver.run(build_steps(algorithm, self.array), token)
            if outcome is RunOutcome.COMPLETED:
                outcome = await self.driver.run(mark_all_sorted(self.array), token)
        finally:
            current = self.controller.finish(run_id)
            if current:
                self.metrics.stop()

        if not current:
            logger.debug(f"Run {run_id} superseded; summary dropped")
            return outcome
        self.last_run = RunSummary(
            run_id=run_id,
            algorithm=algorithm,
            size=len(self.array),
            outcome=outcome.value,
            metrics=self.metrics.snapshot(),
        )
        if outcome is RunOutcome.COMPLETED:
            logger.info(
                f"Run {run_id} complete: {self.metrics.comparisons} comparisons, "
                f"{self.metrics.exchanges} {self.metrics.exchange_label.lower()}"
            )
        else:
            logger.debug(f"Run {run_id} aborted")
        return outcome

    def pause(self) -> bool:
        """Stop the live run at its next suspension point, keeping the array."""
        paused = self.controller.pause()
        if paused:
            self.metrics.stop()
            logger.info(f"Run {self.controller.token} paused")
        return paused

    def reset(self) -> None:
        """Abandon any run and regenerate the array at the configured size."""
        self.controller.reset()
        logger.info("Session reset")
        self.generate()

    # --- Selection & presentation -----------------------------------------

    def select_algorithm(self, key: str) -> None:
        """Switch algorithms; regenerates the array like `reset()`.

        Raises:
            AlreadyRunning: If a run is live.
            UnknownAlgorithm: If `key` is not registered.
        """
        self._ensure_idle("change algorithm")
        if key not in ALGORITHMS:
            raise UnknownAlgorithm(key)
        self.config = self.config.updated(algorithm=key)
        self.metrics.reset(algorithm=key)
        logger.info(f"Algorithm set to {key}")
        self.reset()

    def select_visual_mode(self, key: str) -> None:
        if key not in VISUAL_MODE_NAMES:
            raise UnknownVisualMode(key)
        self.config = self.config.updated(visual_mode=key)
        self.driver.render()

    def set_speed(self, index: int) -> None:
        """Change pacing; a live run picks it up at its next frame."""
        self.config = self.config.updated(speed=index)
        logger.debug(f"Speed set to {self.config.speed_preset.label}")

    def set_sound(self, enabled: bool) -> None:
        self.config = self.config.updated(sound_enabled=enabled)

    def apply_config(self, config: VisualizerConfig) -> None:
        """Adopt a loaded preset and regenerate the array from it.

        Raises:
            AlreadyRunning: If a run is live.
        """
        self._ensure_idle("apply a preset")
        self.config = config
        self.rng = random.Random(config.seed)
        self.metrics.reset(algorithm=config.algorithm)
        logger.info(f"Applied preset '{config.name}'")
        self.reset()

    def _emit_tone(self, frequency: float) -> None:
        if self.config.sound_enabled and self._play_tone is not None:
            self._play_tone(frequency)
