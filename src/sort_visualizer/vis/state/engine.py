"""Singleton PlaybackEngine instance.

Wires the UI state modules (config, active) into one session and its engine.
Lives in vis/state because it depends on UI state objects.
"""

from sort_visualizer.services.session import VisualizerSession
from sort_visualizer.vis.playback import PlaybackEngine
from sort_visualizer.vis.state.active import active_view
from sort_visualizer.vis.state.config import ui_config

# Audio synthesis is not provided by the web UI, so no tone collaborator.
session = VisualizerSession(
    ui_config.to_visualizer_config(),
    render=active_view.show_frame,
    on_metrics=active_view.show_metrics,
)

# Singleton instance with default state modules injected
engine = PlaybackEngine(ui_config, active_view, session)
