import solara

from sort_visualizer.schemas import MetricsSnapshot


@solara.component
def MetricCard(
    label: str, value: str, color_variant: str = "primary"
) -> solara.Element:
    """Display a primary metric with visual hierarchy."""
    style = "padding: 12px; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); background-color: white;"
    border = (
        "4px solid #1FB8CD"
        if color_variant == "primary"
        else "4px solid #5D878F"
        if color_variant == "success"
        else "4px solid #FFC185"
    )

    with solara.Column(style=f"{style} border-left: {border}; margin: 4px;"):
        solara.HTML(
            tag="div",
            style="font-size: 0.8rem; color: #666; text-transform: uppercase; letter-spacing: 0.5px;",
            unsafe_innerHTML=label,
        )
        solara.HTML(
            tag="div",
            style="font-size: 1.8rem; font-weight: 500;",
            unsafe_innerHTML=value,
        )


def format_elapsed(ms: int) -> str:
    """Render elapsed time as e.g. '1.25s' or '840ms'."""
    return f"{ms / 1000:.2f}s" if ms >= 1000 else f"{ms}ms"


@solara.component
def MetricsRow(metrics: MetricsSnapshot | None) -> solara.Element:
    """Comparisons, exchanges, time, progress and complexity cards."""
    if metrics is None:
        solara.Markdown("No metrics yet.")
        return

    with solara.Row(style="flex-wrap: wrap;"):
        MetricCard("Comparisons", f"{metrics.comparisons:,}")
        MetricCard(metrics.exchange_label, f"{metrics.exchanges:,}")
        MetricCard("Time", format_elapsed(metrics.elapsed_ms), "warning")
        MetricCard("Progress", f"{metrics.progress:.0%}", "success")
        MetricCard(
            "Complexity",
            f"{metrics.time_complexity} / {metrics.space_complexity}",
            "warning",
        )
    solara.ProgressLinear(value=metrics.progress * 100)
