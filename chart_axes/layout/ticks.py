# chart_axes/layout/ticks.py
"""
Space reservation for axis tick labels and axis titles.

Tick labels are measured with the rendering context so that axis titles
can be drawn just outside them:
- Y axes reserve the width of their widest extreme label
- The X axis reserves a height that depends on label rotation
"""

import logging

import numpy as np

from chart_axes.config.chart_style import DEFAULT_STYLE, ChartStyleConfig
from chart_axes.config.settings import AxisDisplay, ChartSettings
from chart_axes.models.data_types import AxisFormatter, ChartModel, Extent, FontStyle
from chart_axes.rendering.context import RenderingContext


logger = logging.getLogger(__name__)

SQRT_2 = np.sqrt(2)


def tick_font_style(ctx: RenderingContext, style: ChartStyleConfig = DEFAULT_STYLE) -> FontStyle:
    """Font used for tick labels on every axis."""
    return FontStyle(
        size=style.AXIS_TICKS_SIZE,
        weight=style.AXIS_TICKS_WEIGHT,
        family=ctx.font_family,
    )


# ==================== TICK GEOMETRY ====================


def y_ticks_width(
    extent: Extent,
    formatter: AxisFormatter,
    settings: ChartSettings,
    ctx: RenderingContext,
    style: ChartStyleConfig = DEFAULT_STYLE,
) -> float:
    """
    Width reserved for the tick labels of a metric axis.

    Only the extent bounds are measured; label width is assumed to be
    largest at the extremes.

    Args:
        extent: (min, max) of the series plotted on this axis
        formatter: Tick label formatter of this axis
        settings: Chart settings
        ctx: Rendering context used for text measurement

    Returns:
        Width in pixels, 0 when tick labels are hidden
    """
    # NOTE: gated on the X axis flag, not a Y axis one. Looks like a defect
    # but existing layouts depend on it, so keep the coupling.
    if not settings.x_axis_display.is_visible:
        return 0

    font = tick_font_style(ctx, style)
    extent_min, extent_max = extent
    min_width = ctx.measure_text(formatter(extent_min), font)
    max_width = ctx.measure_text(formatter(extent_max), font)
    return max(min_width, max_width)


def x_ticks_height(
    chart_model: ChartModel,
    settings: ChartSettings,
    formatter: AxisFormatter,
    ctx: RenderingContext,
    style: ChartStyleConfig = DEFAULT_STYLE,
) -> float:
    """
    Height reserved for the tick labels of the dimension axis.

    Rotated modes measure every row of the dataset, so the cost is linear
    in the number of rows. Callers rendering on every frame should memoize
    by dataset.

    Args:
        chart_model: Chart model providing the dataset and dimension key
        settings: Chart settings
        formatter: Dimension axis formatter
        ctx: Rendering context used for text measurement

    Returns:
        Height in pixels
    """
    display = settings.x_axis_display

    if display is AxisDisplay.HIDDEN:
        return 0
    if display in (AxisDisplay.SHOWN, AxisDisplay.COMPACT):
        return style.AXIS_TICKS_SIZE
    if display is AxisDisplay.UNRECOGNIZED:
        logger.warning(
            f'Unexpected "graph.x_axis.axis_enabled" value {settings.x_axis_display_raw!r}'
        )
        return style.AXIS_TICKS_SIZE

    font = tick_font_style(ctx, style)
    tick_widths = np.fromiter(
        (ctx.measure_text(formatter(value), font) for value in chart_model.dimension_values),
        dtype=float,
    )
    max_tick_width = float(tick_widths.max()) if tick_widths.size else 0.0

    if display is AxisDisplay.ROTATE_90:
        return max_tick_width
    # AxisDisplay.ROTATE_45
    return max_tick_width / SQRT_2


# ==================== NAME GAPS ====================


def y_name_gap(
    extent: Extent,
    formatter: AxisFormatter,
    settings: ChartSettings,
    ctx: RenderingContext,
    style: ChartStyleConfig = DEFAULT_STYLE,
) -> float:
    """Offset between a metric axis and its title; 0 without a title."""
    if not settings.has_y_axis_name:
        return 0

    gap = y_ticks_width(extent, formatter, settings, ctx, style) + style.AXIS_NAME_PADDING
    logger.debug(f"Y axis name gap for extent {extent}: {gap}")
    return gap


def x_name_gap(
    chart_model: ChartModel,
    settings: ChartSettings,
    formatter: AxisFormatter,
    ctx: RenderingContext,
    style: ChartStyleConfig = DEFAULT_STYLE,
) -> float:
    """Offset between the dimension axis and its title."""
    gap = x_ticks_height(chart_model, settings, formatter, ctx, style) + style.AXIS_NAME_PADDING
    logger.debug(f"X axis name gap ({settings.x_axis_display.value}): {gap}")
    return gap
