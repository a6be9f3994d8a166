"""Step driver - advances an algorithm generator one suspension point at a time.

The driver is the only place that resumes algorithm generators.  Before every
resume it asks the cancellation token whether the run may proceed; when it
may not, it closes the generator (GeneratorExit unwinds any `yield from`
recursion without further mutation) and reports `RunOutcome.ABORTED`.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Protocol

from sort_visualizer.core.control import CancellationToken
from sort_visualizer.core.elements import Element, SortArray
from sort_visualizer.core.steps import Step, StepStream

logger = logging.getLogger(__name__)

RenderFn = Callable[[list[Element]], None]
ToneFn = Callable[[float], None]
SleepFn = Callable[[float], Awaitable[None]]


class RunOutcome(str, Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"


class StepObserver(Protocol):
    """Receives every step before it is rendered (e.g. the metrics tracker)."""

    def observe(self, step: Step) -> None: ...


class StepDriver:
    """Feeds steps to the observer and collaborators, paced by `sleep`.

    Args:
        array: The array the algorithms mutate; snapshots go to `render`.
        observer: Notified of every step, rendered or not.
        render: Frame callback, or None for headless runs.
        play_tone: Tone callback, or None for silence.
        pacing: Returns the current frame delay in ms; read at every frame so
            speed changes apply mid-run.
        sleep: Awaitable delay in seconds.
    """

    def __init__(
        self,
        array: SortArray,
        observer: StepObserver,
        render: RenderFn | None = None,
        play_tone: ToneFn | None = None,
        pacing: Callable[[], int] = lambda: 0,
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        self.array = array
        self.observer = observer
        self._render = render
        self._play_tone = play_tone
        self._pacing = pacing
        self._sleep = sleep
        self.frames = 0

    async def run(self, steps: StepStream, token: CancellationToken) -> RunOutcome:
        """Drive `steps` to completion or until `token` is cancelled."""
        try:
            while True:
                if token.cancelled:
                    return self._abort(token)
                try:
                    step = next(steps)
                except StopIteration:
                    return RunOutcome.COMPLETED
                self._dispatch(step)
                if step.render:
                    self.render()
                    await self._sleep(self._delay_for(step) / 1000)
        finally:
            steps.close()

    def drain(
        self, steps: StepStream, token: CancellationToken | None = None
    ) -> RunOutcome:
        """Synchronous variant of `run` with no pacing, for headless runs."""
        try:
            while True:
                if token is not None and token.cancelled:
                    return self._abort(token)
                try:
                    step = next(steps)
                except StopIteration:
                    return RunOutcome.COMPLETED
                self._dispatch(step)
                if step.render:
                    self.render()
        finally:
            steps.close()

    def render(self) -> None:
        """Hand a snapshot of the array to the render collaborator."""
        self.frames += 1
        if self._render is None:
            return
        try:
            self._render(self.array.snapshot())
        except Exception:
            logger.debug("Render callback failed; frame dropped", exc_info=True)

    def _dispatch(self, step: Step) -> None:
        self.observer.observe(step)
        if step.tone is None or self._play_tone is None:
            return
        try:
            self._play_tone(step.tone)
        except Exception:
            logger.debug("Tone callback failed; ignored", exc_info=True)

    def _delay_for(self, step: Step) -> int:
        return self._pacing() if step.delay_ms is None else step.delay_ms

    def _abort(self, token: CancellationToken) -> RunOutcome:
        logger.debug(f"Run {token.run_id} abandoned at a suspension point")
        return RunOutcome.ABORTED
