"""Run controller: run tokens and the pause flag.

Every `start()` issues a new token. A run may mutate the array only while its
token is current and the session is not paused; `reset()`/`cancel()` advance
the token so any in-flight run is abandoned at its next suspension point.
At most one run is live at a time, which is the only concurrency guarantee
the engine relies on.
"""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from sort_visualizer.core.errors import AlreadyRunning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CancellationToken:
    """Handle given to the step driver; the only thing algorithms' host asks."""

    controller: "RunController"
    run_id: int

    @property
    def cancelled(self) -> bool:
        return self.controller.is_cancelled(self.run_id)


class RunController:
    """Owns the process-lifetime run token and pause flag.

    Attributes:
        running: True while the current token's run is live.
        paused: Set by `pause()`, cleared by `start()`/`reset()`.
        started_at: Clock reading taken by the last `start()`.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._token: int = 0
        self.running: bool = False
        self.paused: bool = False
        self.started_at: float | None = None

    @property
    def token(self) -> int:
        return self._token

    def start(self) -> int:
        """Issue a new run token.

        Returns:
            The token identifying the new run.

        Raises:
            AlreadyRunning: If a run is live.
        """
        if self.running:
            raise AlreadyRunning(f"Run {self._token} is still live")
        self._token += 1
        self.paused = False
        self.running = True
        self.started_at = self._clock()
        logger.debug(f"Run {self._token} started")
        return self._token

    def pause(self) -> bool:
        """Stop the live run, keeping the array as it is.

        The token is not advanced; a later `start()` begins a new run over the
        partially sorted array rather than resuming the old one.

        Returns:
            False if nothing was running.
        """
        if not self.running:
            return False
        self.paused = True
        self.running = False
        logger.debug(f"Run {self._token} paused")
        return True

    def cancel(self) -> int:
        """Invalidate any in-flight run."""
        self._token += 1
        self.running = False
        return self._token

    def reset(self) -> int:
        """Invalidate any in-flight run and clear the pause flag."""
        token = self.cancel()
        self.paused = False
        logger.debug(f"Controller reset, token now {token}")
        return token

    def is_cancelled(self, token: int) -> bool:
        return self.paused or token != self._token

    def is_live(self, token: int) -> bool:
        return self.running and not self.is_cancelled(token)

    def finish(self, token: int) -> bool:
        """Return to idle if `token` is still current.

        A stale run finishing after a newer start must not touch the flags.
        """
        if token != self._token:
            return False
        self.running = False
        return True

    def token_for(self, run_id: int) -> CancellationToken:
        return CancellationToken(self, run_id)
