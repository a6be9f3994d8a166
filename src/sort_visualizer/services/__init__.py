"""Services package for session orchestration.

This package contains:
- session.py: VisualizerSession, the control surface for UIs and the CLI
- metrics.py: MetricsTracker and label/complexity helpers
- report.py: Headless algorithm comparison report
- config_manager.py: Preset file loading/saving
"""

from sort_visualizer.services.metrics import MetricsTracker
from sort_visualizer.services.report import compare_algorithms
from sort_visualizer.services.session import VisualizerSession

__all__ = ["VisualizerSession", "MetricsTracker", "compare_algorithms"]
