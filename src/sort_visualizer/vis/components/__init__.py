"""Expose all components from submodules for cleaner importing."""

from .canvas import ArrayCanvas
from .cards import MetricCard, MetricsRow
from .controls import (
    AlgorithmSelector,
    ArrayControls,
    PlaybackControls,
    PresetControls,
    RunButtons,
)
from .system import SortController

__all__ = [
    "ArrayCanvas",
    "MetricCard",
    "MetricsRow",
    "AlgorithmSelector",
    "ArrayControls",
    "PlaybackControls",
    "PresetControls",
    "RunButtons",
    "SortController",
]
