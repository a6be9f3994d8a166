"""Configuration schemas for the visualizer."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from sort_visualizer.schemas.defaults import (
    DEFAULT_ALGORITHM,
    DEFAULT_ARRAY_SIZE,
    DEFAULT_SOUND_ENABLED,
    DEFAULT_SPEED_INDEX,
    DEFAULT_VISUAL_MODE,
    MAX_ARRAY_SIZE,
    MIN_ARRAY_SIZE,
    SPEED_PRESETS,
)

AlgorithmKey = Literal[
    "bubble",
    "selection",
    "insertion",
    "merge",
    "quick",
    "heap",
    "radix",
    "counting",
]
VisualModeKey = Literal["bars", "dots", "blocks", "particles"]

# ---------------------------------------------------------------------------
# UI metadata helpers, attached to each Field via json_schema_extra.
# Keys:
#   ui_group  – sidebar card heading
#   ui_label  – human-readable control label
#   ui_format – rendering hint (int | bool | choice | speed)
# ---------------------------------------------------------------------------


def _ui(group: str, label: str, fmt: str = "int") -> dict:
    """Build json_schema_extra dict for a config field."""
    return {"ui_group": group, "ui_label": label, "ui_format": fmt}


class SpeedPreset(BaseModel):
    """One entry of the ordered pacing presets."""

    label: str
    delay_ms: int = Field(..., ge=0, description="Wait after each frame (ms)")

    model_config = ConfigDict(frozen=True)


def speed_presets() -> list[SpeedPreset]:
    """Return the pacing presets, slowest first."""
    return [SpeedPreset(label=label, delay_ms=ms) for label, ms in SPEED_PRESETS]


class VisualizerConfig(BaseModel):
    """Root configuration for a visualizer session.

    `visual_mode` only affects rendering; `speed` and `sound_enabled` may be
    changed while a run is live. Everything else is read when a run starts.
    """

    name: str = "Custom"
    array_size: int = Field(
        DEFAULT_ARRAY_SIZE,
        ge=MIN_ARRAY_SIZE,
        le=MAX_ARRAY_SIZE,
        description="Number of elements generated for a new array",
        json_schema_extra=_ui("Array", "Array Size", "int"),
    )
    speed: int = Field(
        DEFAULT_SPEED_INDEX,
        ge=0,
        le=len(SPEED_PRESETS) - 1,
        description="Index into the speed presets (0 = slowest)",
        json_schema_extra=_ui("Playback", "Speed", "speed"),
    )
    sound_enabled: bool = Field(
        DEFAULT_SOUND_ENABLED,
        description="Play a tone for every exchange",
        json_schema_extra=_ui("Playback", "Sound", "bool"),
    )
    algorithm: AlgorithmKey = Field(
        DEFAULT_ALGORITHM,
        description="Sorting algorithm to animate",
        json_schema_extra=_ui("Algorithm", "Algorithm", "choice"),
    )
    visual_mode: VisualModeKey = Field(
        DEFAULT_VISUAL_MODE,
        description="How elements are drawn (rendering only)",
        json_schema_extra=_ui("Playback", "Visual Mode", "choice"),
    )
    seed: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def speed_preset(self) -> SpeedPreset:
        label, delay_ms = SPEED_PRESETS[self.speed]
        return SpeedPreset(label=label, delay_ms=delay_ms)

    @property
    def delay_ms(self) -> int:
        return self.speed_preset.delay_ms

    def updated(self, **changes) -> "VisualizerConfig":
        """Return a validated copy with `changes` applied.

        Unlike `model_copy(update=...)` this re-runs field validation.
        """
        return VisualizerConfig(**{**self.model_dump(), **changes})
