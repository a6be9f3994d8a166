"""Matplotlib rendering of one array frame.

Pure functions: given a list of elements and a visual mode, build a Figure.
The solara canvas component wraps the result in `solara.FigureMatplotlib`.
"""

from dataclasses import dataclass

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from sort_visualizer.core.constants import STATE_COLORS, VISUAL_MODE_NAMES
from sort_visualizer.core.elements import Element
from sort_visualizer.core.errors import UnknownVisualMode
from sort_visualizer.schemas.defaults import CUSTOM_VALUE_CAP, VALUE_MIN, VALUE_SPAN


@dataclass
class FrameStyle:
    """Figure styling shared by every mode."""

    figsize: tuple[int, int] = (10, 4)
    dpi: int = 100
    background: str = "#FCFCF9"
    shadow: str = "#13343B"
    shadow_alpha: float = 0.25


def element_colors(elements: list[Element]) -> list[str]:
    """Fill colour per element, keyed by its state tag."""
    return [STATE_COLORS[e.state.value] for e in elements]


def _draw_bars(ax: Axes, x, values, colors, style: FrameStyle) -> None:
    ax.bar(x, values, width=0.85, color=colors)


def _draw_dots(ax: Axes, x, values, colors, style: FrameStyle) -> None:
    ax.scatter(x, values, c=colors, s=24, zorder=2)


def _draw_blocks(ax: Axes, x, values, colors, style: FrameStyle) -> None:
    # Offset shadow behind each bar gives the extruded look.
    shifted = [i + 0.18 for i in x]
    ax.bar(shifted, values, width=0.8, color=style.shadow, alpha=style.shadow_alpha)
    ax.bar(x, values, width=0.8, color=colors, edgecolor=style.shadow, linewidth=0.4)


def _draw_particles(ax: Axes, x, values, colors, style: FrameStyle) -> None:
    sizes = [8 + v / 4 for v in values]
    ax.scatter(x, values, c=colors, s=sizes, alpha=0.75, linewidths=0)


_DRAWERS = {
    "bars": _draw_bars,
    "dots": _draw_dots,
    "blocks": _draw_blocks,
    "particles": _draw_particles,
}


def draw_array(
    elements: list[Element], mode: str = "bars", style: FrameStyle | None = None
) -> Figure:
    """Render `elements` in `mode`.

    An empty list yields an empty, labelled figure instead of failing.

    Raises:
        UnknownVisualMode: If `mode` is not a known visual mode.
    """
    if mode not in VISUAL_MODE_NAMES:
        raise UnknownVisualMode(mode)
    style = style or FrameStyle()

    fig = Figure(figsize=style.figsize, dpi=style.dpi)
    fig.patch.set_facecolor(style.background)
    ax = fig.subplots()
    ax.set_facecolor(style.background)
    ax.set_xticks([])
    for side in ("top", "right", "left"):
        ax.spines[side].set_visible(False)

    if not elements:
        ax.set_yticks([])
        ax.text(0.5, 0.5, "No data", ha="center", va="center", transform=ax.transAxes)
        return fig

    x = list(range(len(elements)))
    values = [e.value for e in elements]
    _DRAWERS[mode](ax, x, values, element_colors(elements), style)

    ax.set_xlim(-1, len(elements))
    ax.set_ylim(0, max(max(values), VALUE_MIN + VALUE_SPAN, CUSTOM_VALUE_CAP) * 1.05)
    ax.set_title(VISUAL_MODE_NAMES[mode], fontsize=10, loc="left", color="#626C71")
    return fig
