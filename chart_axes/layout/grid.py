"""Plot area padding."""

from __future__ import annotations

from typing import TypedDict

from chart_axes.config.chart_style import DEFAULT_STYLE, ChartStyleConfig
from chart_axes.config.settings import ChartSettings


class GridOption(TypedDict, total=False):
    """Renderer grid payload; a missing side is auto-fitted."""

    containLabel: bool
    top: int
    left: int
    right: int
    bottom: int


def build_grid(settings: ChartSettings, style: ChartStyleConfig = DEFAULT_STYLE) -> GridOption:
    """Return plot area padding leaving room for axis titles.

    The same title padding is used on every side since all axis titles
    share one font.
    """
    grid: GridOption = {"containLabel": True, "top": 0}

    if settings.has_y_axis_name:
        grid["left"] = style.axis_name_offset
        grid["right"] = style.axis_name_offset

    if settings.x_axis_display.is_visible:
        grid["bottom"] = style.axis_name_offset

    return grid
