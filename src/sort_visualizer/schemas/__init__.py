"""Schemas package.

- config.py: Configuration models (VisualizerConfig, SpeedPreset)
- data.py: Metrics and run models (MetricsSnapshot, RunSummary, AlgorithmReport)
"""

from .config import (
    AlgorithmKey,
    SpeedPreset,
    VisualizerConfig,
    VisualModeKey,
    speed_presets,
)
from .data import (
    AlgorithmReport,
    MetricsSnapshot,
    RunSummary,
)

__all__ = [
    "AlgorithmKey",
    "VisualModeKey",
    "SpeedPreset",
    "VisualizerConfig",
    "speed_presets",
    "MetricsSnapshot",
    "RunSummary",
    "AlgorithmReport",
]
