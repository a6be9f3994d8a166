"""Array canvas component."""

import solara

from sort_visualizer.core.elements import Element
from sort_visualizer.vis.render import draw_array


@solara.component
def ArrayCanvas(elements: list[Element], mode: str):
    """Draw the latest frame pushed by the session."""
    fig = draw_array(elements, mode)
    solara.FigureMatplotlib(fig, format="png")
