"""Sync guard tests - detect config parameter drift.

Every field in VisualizerConfig must be wired through UIConfig.  If you add
a field to VisualizerConfig, these tests fail until the UI state carries it.
"""

from sort_visualizer.schemas import VisualizerConfig
from sort_visualizer.vis.state.config import UIConfig

# Fields handled specially by UIConfig
_UICONFIG_SKIP = {"name", "seed"}


def test_uiconfig_has_all_config_fields():
    ui = UIConfig()
    missing = [
        name
        for name in VisualizerConfig.model_fields
        if name not in _UICONFIG_SKIP and not hasattr(ui, name)
    ]
    assert not missing, f"UIConfig is missing reactive fields: {missing}"


def test_round_trip_through_ui_state():
    ui = UIConfig()
    config = VisualizerConfig(
        name="Round Trip",
        array_size=123,
        speed=4,
        sound_enabled=False,
        algorithm="heap",
        visual_mode="blocks",
        seed=9,
    )
    ui.from_visualizer_config(config)
    assert ui.to_visualizer_config() == config


def test_slider_floats_are_coerced():
    ui = UIConfig()
    ui.array_size.value = 40.0
    assert ui.to_visualizer_config().array_size == 40


def test_ui_fields_carry_metadata():
    """Every reactive field needs a sidebar group and label."""
    for name, info in VisualizerConfig.model_fields.items():
        if name in _UICONFIG_SKIP:
            continue
        extra = info.json_schema_extra or {}
        assert extra.get("ui_group"), f"{name} has no ui_group"
        assert extra.get("ui_label"), f"{name} has no ui_label"
