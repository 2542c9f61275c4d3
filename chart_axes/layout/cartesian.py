"""Complete axis and grid layout for a cartesian chart."""

from __future__ import annotations

from typing import Any, List, TypedDict

from chart_axes.config.chart_style import DEFAULT_STYLE, ChartStyleConfig
from chart_axes.config.settings import ChartSettings
from chart_axes.layout.axes import AxisOption, build_axes
from chart_axes.layout.grid import GridOption, build_grid
from chart_axes.models.data_types import AxesFormatters, ChartModel
from chart_axes.rendering.context import RenderingContext


class CartesianLayout(TypedDict):
    grid: GridOption
    xAxis: AxisOption
    yAxis: List[AxisOption]


def build_cartesian_layout(
    chart_model: ChartModel,
    settings: ChartSettings,
    formatters: AxesFormatters,
    ctx: RenderingContext,
    style: ChartStyleConfig = DEFAULT_STYLE,
) -> CartesianLayout:
    """Build grid padding and axes in one pass.

    Args:
        chart_model: Computed chart model.
        settings: Parsed chart settings.
        formatters: Tick label formatters per axis slot.
        ctx: Rendering context for colors, font and text measurement.
        style: Layout constants.

    Returns:
        Grid, X axis and Y axes descriptors for the renderer.
    """
    axes = build_axes(chart_model, settings, formatters, ctx, style)
    return {
        "grid": build_grid(settings, style),
        "xAxis": axes["xAxis"],
        "yAxis": axes["yAxis"],
    }


def to_jsonable(option: Any) -> Any:
    """Drop callables (label formatters) so the layout can be dumped as JSON."""
    if isinstance(option, dict):
        return {key: to_jsonable(value) for key, value in option.items() if not callable(value)}
    if isinstance(option, (list, tuple)):
        return [to_jsonable(value) for value in option]
    return option
