"""Control components for the visualizer sidebar."""

import solara

from sort_visualizer.core.constants import ALGORITHM_NAMES, VISUAL_MODE_NAMES
from sort_visualizer.schemas import VisualizerConfig
from sort_visualizer.schemas.defaults import MAX_ARRAY_SIZE, MIN_ARRAY_SIZE, SPEED_PRESETS
from sort_visualizer.services.config_manager import list_presets
from sort_visualizer.vis.state.active import active_view
from sort_visualizer.vis.state.config import ui_config
from sort_visualizer.vis.state.engine import engine

_KEY_BY_NAME = {name: key for key, name in ALGORITHM_NAMES.items()}
_MODE_BY_NAME = {name: key for key, name in VISUAL_MODE_NAMES.items()}


def _label(field: str) -> str:
    """Control label from the field's UI metadata."""
    return VisualizerConfig.model_fields[field].json_schema_extra["ui_label"]


@solara.component
def RunButtons():
    """Start / Pause / Reset / New Array."""
    is_playing = active_view.is_playing.value
    with solara.Row():
        solara.Button(
            label="Running..." if is_playing else "Start",
            icon_name="mdi-play",
            on_click=engine.start_run,
            color="primary",
            disabled=is_playing,
        )
        solara.Button(
            "Pause", icon_name="mdi-pause", on_click=engine.pause, disabled=not is_playing
        )
        solara.Button("Reset", icon_name="mdi-refresh", on_click=engine.reset, text=True)
    solara.Button(
        "New Array",
        icon_name="mdi-shuffle-variant",
        on_click=engine.generate,
        disabled=is_playing,
        block=True,
        text=True,
    )


@solara.component
def AlgorithmSelector():
    is_playing = active_view.is_playing.value
    solara.Select(
        label=_label("algorithm"),
        values=list(ALGORITHM_NAMES.values()),
        value=ALGORITHM_NAMES[ui_config.algorithm.value],
        on_value=lambda name: engine.select_algorithm(_KEY_BY_NAME[name]),
        disabled=is_playing,
    )


@solara.component
def PlaybackControls():
    """Speed, sound and visual mode; all usable mid-run."""
    speed = ui_config.speed.value
    solara.SliderInt(
        label=f"{_label('speed')}: {SPEED_PRESETS[speed][0]}",
        value=speed,
        min=0,
        max=len(SPEED_PRESETS) - 1,
        on_value=engine.set_speed,
    )
    solara.Checkbox(
        label=_label("sound_enabled"),
        value=ui_config.sound_enabled.value,
        on_value=engine.set_sound,
    )
    solara.ToggleButtonsSingle(
        value=VISUAL_MODE_NAMES[ui_config.visual_mode.value],
        values=list(VISUAL_MODE_NAMES.values()),
        on_value=lambda name: engine.set_visual_mode(_MODE_BY_NAME[name]),
    )


@solara.component
def ArrayControls():
    """Array size slider and custom value input."""
    is_playing = active_view.is_playing.value
    solara.SliderInt(
        label=_label("array_size"),
        value=ui_config.array_size.value,
        min=MIN_ARRAY_SIZE,
        max=MAX_ARRAY_SIZE,
        on_value=engine.set_array_size,
        disabled=is_playing,
    )
    with solara.Row(style="align-items: center;"):
        solara.InputText(
            label="Custom values (e.g. 5, 3, 8, 1)",
            value=ui_config.custom_values,
            continuous_update=False,
        )
        solara.Button("Apply", on_click=engine.apply_custom, disabled=is_playing, small=True)


@solara.component
def PresetControls():
    """Load a preset from presets/ or save the current settings as one."""
    presets, set_presets = solara.use_state(list_presets())
    selected, set_selected = solara.use_state(None)
    save_name, set_save_name = solara.use_state("")

    def save():
        if save_name:
            engine.save_preset(save_name)
            set_presets(list_presets())

    solara.Select(label="Preset", values=presets, value=selected, on_value=set_selected)
    with solara.Row():
        solara.Button(
            "Load",
            icon_name="mdi-folder-open",
            on_click=lambda: engine.load_preset(selected) if selected else None,
            disabled=active_view.is_playing.value or not selected,
            small=True,
            text=True,
        )
        solara.InputText(label="Save as", value=save_name, on_value=set_save_name)
        solara.Button("Save", icon_name="mdi-content-save", on_click=save, small=True, text=True)
