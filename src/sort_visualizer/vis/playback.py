"""Playback engine - bridges the UI state modules and the sorting session.

The session does the work; this class translates button clicks into session
calls, reports rejected operations through `ActiveView.message`, and owns the
async play loop the page mounts with `solara.lab.use_task`.
"""

import asyncio
import logging
from typing import TYPE_CHECKING

from sort_visualizer.core.errors import SortVisualizerError
from sort_visualizer.services.config_manager import load_preset, save_preset
from sort_visualizer.services.session import VisualizerSession

if TYPE_CHECKING:
    from sort_visualizer.vis.state.active import ActiveView
    from sort_visualizer.vis.state.config import UIConfig

logger = logging.getLogger(__name__)


class PlaybackEngine:
    """Stateful UI controller with dependency injection.

    Args:
        config: UI configuration state.
        active: Active frame/metrics state.
        session: The session every action is forwarded to.
    """

    def __init__(
        self,
        config: "UIConfig",
        active: "ActiveView",
        session: VisualizerSession,
    ) -> None:
        self.config = config
        self.active = active
        self.session = session

        self.active.show_metrics(session.metrics.snapshot())
        session.driver.render()

    def _guarded(self, action, *args) -> bool:
        """Run a session action, turning rejections into a UI message."""
        try:
            action(*args)
        except (SortVisualizerError, ValueError) as e:
            logger.warning(f"{action.__name__} rejected: {e}")
            self.active.message.value = str(e)
            return False
        self.active.message.value = None
        return True

    # --- Run control ------------------------------------------------------

    def start_run(self) -> None:
        """Flag the page's play loop to start a run over the current array."""
        if self.active.is_playing.value:
            return
        self.active.message.value = None
        self.active.is_playing.value = True

    async def play_loop(self) -> None:
        """Run the session to completion while `is_playing` is set.

        Triggered by SortController when is_playing transitions to True.
        """
        if not self.active.is_playing.value:
            return

        logger.info("Play loop started")
        try:
            outcome = await self.session.start()
            logger.info(f"Play loop finished: {outcome.value}")
            self.active.is_playing.value = False
        except asyncio.CancelledError:
            logger.debug("Play loop task cancelled gracefully.")
            raise
        except SortVisualizerError as e:
            self.active.message.value = str(e)
            self.active.is_playing.value = False
        except Exception as e:
            logger.error(f"Error in play loop: {e}", exc_info=True)
            self.active.is_playing.value = False

    def pause(self) -> None:
        self.session.pause()
        self.active.is_playing.value = False

    def reset(self) -> None:
        self.session.reset()
        self.active.is_playing.value = False
        self.active.message.value = None

    # --- Array ------------------------------------------------------------

    def generate(self) -> None:
        self._guarded(self.session.generate, int(self.config.array_size.value))

    def set_array_size(self, size: int) -> None:
        """Slider callback: regenerate at the new size when idle."""
        self.config.array_size.value = int(size)
        if not self.session.is_running:
            self.generate()

    def apply_custom(self) -> None:
        if self._guarded(self.session.set_custom, self.config.custom_values.value):
            self.config.array_size.value = self.session.config.array_size

    # --- Selection & presentation -----------------------------------------

    def select_algorithm(self, key: str) -> None:
        if self._guarded(self.session.select_algorithm, key):
            self.config.algorithm.value = key
        else:
            self.config.algorithm.value = self.session.config.algorithm

    def set_visual_mode(self, key: str) -> None:
        if self._guarded(self.session.select_visual_mode, key):
            self.config.visual_mode.value = key

    def set_speed(self, index: int) -> None:
        if self._guarded(self.session.set_speed, int(index)):
            self.config.speed.value = int(index)

    def set_sound(self, enabled: bool) -> None:
        self.session.set_sound(bool(enabled))
        self.config.sound_enabled.value = bool(enabled)

    # --- Presets ----------------------------------------------------------

    def load_preset(self, filename: str) -> None:
        """Load a preset file into the UI config and the session."""
        logger.info(f"Loading preset: {filename}")
        try:
            config = load_preset(filename)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading preset {filename}: {e}")
            self.active.message.value = f"Could not load {filename}"
            return
        if self._guarded(self.session.apply_config, config):
            self.config.from_visualizer_config(config)

    def save_preset(self, filename: str) -> str | None:
        """Persist the current UI config as a preset; returns the path."""
        try:
            config = self.config.to_visualizer_config()
            path = save_preset(config.updated(name=filename.removesuffix(".json")), filename)
        except (OSError, ValueError) as e:
            logger.error(f"Error saving preset {filename}: {e}")
            self.active.message.value = f"Could not save {filename}"
            return None
        return str(path)
