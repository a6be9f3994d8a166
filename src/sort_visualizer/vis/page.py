"""Root page for the Solara application.

Logic is distributed across `vis/components` and `vis/state`.
"""

import logging
from pathlib import Path

import solara

from sort_visualizer.core.constants import ALGORITHM_INFO
from sort_visualizer.vis.components import (
    AlgorithmSelector,
    ArrayCanvas,
    ArrayControls,
    MetricsRow,
    PlaybackControls,
    PresetControls,
    RunButtons,
    SortController,
)
from sort_visualizer.vis.state.active import active_view
from sort_visualizer.vis.state.config import ui_config

# --- Logging Configuration ---
logger = logging.getLogger("sort_visualizer")
logger.setLevel(logging.INFO)
if logger.handlers:
    logger.handlers.clear()

Path("outputs").mkdir(exist_ok=True)
file_handler = logging.FileHandler("outputs/visualizer.log")
file_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)
stream_handler = logging.StreamHandler()
stream_handler.setFormatter(
    logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
)

logger.addHandler(file_handler)
logger.addHandler(stream_handler)


@solara.component
def ConfigPanel():
    with solara.Column():
        with solara.Card("Algorithm", style="margin-bottom: 6px;"):
            AlgorithmSelector()
            info = ALGORITHM_INFO[ui_config.algorithm.value]
            solara.Markdown(info.description, style="font-size: 0.85rem; opacity: 0.8;")
        with solara.Card("Run", style="margin-bottom: 6px;"):
            RunButtons()
        with solara.Card("Array", style="margin-bottom: 6px;"):
            ArrayControls()
        with solara.Card("Playback", style="margin-bottom: 6px;"):
            PlaybackControls()
        with solara.Card("Presets"):
            PresetControls()


@solara.component
def Page():
    # Mount the controller (handles the play loop when is_playing becomes True)
    SortController()

    with solara.Sidebar():
        ConfigPanel()

    with solara.Column(style="height: 100vh; outline: none;"):
        solara.Title("Sorting Algorithm Visualizer")

        if active_view.message.value:
            solara.Warning(active_view.message.value)

        MetricsRow(active_view.metrics.value)
        ArrayCanvas(active_view.elements.value, ui_config.visual_mode.value)
