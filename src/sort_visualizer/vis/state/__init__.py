"""State management package for the visualization layer.

This package provides modular state management split by concern:
- config: UI-bound configuration parameters
- active: Frame and metrics pushed by the session
- engine: The session/engine singletons wired to the two above
"""

from sort_visualizer.vis.state.active import ActiveView, active_view
from sort_visualizer.vis.state.config import UIConfig, ui_config

__all__ = [
    "UIConfig",
    "ui_config",
    "ActiveView",
    "active_view",
]
