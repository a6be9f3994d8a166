"""Active session state - the frame on screen and the live metrics."""

import solara

from sort_visualizer.core.elements import Element
from sort_visualizer.schemas import MetricsSnapshot


class ActiveView:
    """Reactive mirror of what the session last pushed to its collaborators.

    The session writes here through its render and metrics callbacks; UI
    components only read.
    """

    def __init__(self):
        # --- Frame ---
        self.elements: solara.Reactive[list[Element]] = solara.reactive([])
        self.frame_count = solara.reactive(0)

        # --- Metrics ---
        self.metrics: solara.Reactive[MetricsSnapshot | None] = solara.reactive(None)

        # --- Run Flags ---
        self.is_playing = solara.reactive(False)
        self.message: solara.Reactive[str | None] = solara.reactive(None)

    def show_frame(self, elements: list[Element]) -> None:
        self.elements.value = elements
        self.frame_count.value = self.frame_count.value + 1

    def show_metrics(self, snapshot: MetricsSnapshot) -> None:
        self.metrics.value = snapshot

    def reset(self) -> None:
        """Clear all active state."""
        self.elements.value = []
        self.frame_count.value = 0
        self.metrics.value = None
        self.is_playing.value = False
        self.message.value = None


# Singleton instance
active_view = ActiveView()
