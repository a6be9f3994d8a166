import solara
import solara.lab

from sort_visualizer.vis.state.active import active_view
from sort_visualizer.vis.state.engine import engine


@solara.component
def SortController():
    """Invisible component to handle the play loop."""
    # raise_error=False: cancellation on pause/reset must not surface as an error
    solara.lab.use_task(
        engine.play_loop,
        dependencies=[active_view.is_playing.value],
        raise_error=False,
    )
    return solara.Div(style="display: none;")
