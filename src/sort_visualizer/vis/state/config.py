"""UI Configuration state - reactive parameters bound to sidebar controls.

Wraps VisualizerConfig with Solara reactivity: every model field except
`name` and `seed` becomes a `solara.reactive` attribute of the same name.
"""

import solara

from sort_visualizer.schemas import VisualizerConfig


class UIConfig:
    """Reactive UI configuration parameters."""

    def __init__(self):
        default = VisualizerConfig()

        # Special handling for preset metadata
        self.selected_preset = solara.reactive("Custom")
        self.seed: solara.Reactive[int | None] = solara.reactive(None)
        self.custom_values = solara.reactive("")

        self._create_reactive_fields(default)

    def _create_reactive_fields(self, model: VisualizerConfig):
        """Create a reactive attribute for every leaf field of the model."""
        for name in type(model).model_fields:
            if name in ("seed", "name"):
                continue
            setattr(self, name, solara.reactive(getattr(model, name)))

    def to_visualizer_config(self) -> VisualizerConfig:
        """Convert reactive state to a validated VisualizerConfig."""
        data = {"name": self.selected_preset.value, "seed": self.seed.value}
        for name, field in VisualizerConfig.model_fields.items():
            if name in data or not hasattr(self, name):
                continue
            val = getattr(self, name).value
            # Sliders may hand back floats
            if field.annotation is int and val is not None:
                try:
                    val = int(val)
                except (ValueError, TypeError):
                    pass
            data[name] = val
        return VisualizerConfig(**data)

    def from_visualizer_config(self, config: VisualizerConfig) -> None:
        """Apply a VisualizerConfig to the reactive state."""
        self.selected_preset.value = config.name or "Custom"
        self.seed.value = config.seed
        for name in type(config).model_fields:
            if name in ("seed", "name"):
                continue
            if hasattr(self, name):
                getattr(self, name).value = getattr(config, name)


# Singleton instance
ui_config = UIConfig()
