# chart_axes/layout/axes.py
"""
Axis option assembly.

Merges resolved ranges, name gaps and styling into declarative axis
descriptors for the renderer: one dimension (X) axis and zero to two
metric (Y) axes.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple, TypedDict

from chart_axes.config.chart_style import DEFAULT_STYLE, ChartStyleConfig
from chart_axes.config.settings import AxisDisplay, ChartSettings
from chart_axes.layout.ranges import resolve_ranges
from chart_axes.layout.ticks import x_name_gap, y_name_gap
from chart_axes.models.data_types import (
    AxesFormatters,
    AxisFormatter,
    AxisRange,
    ChartModel,
    Extent,
)
from chart_axes.rendering.context import RenderingContext

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_EPOCH = re.compile(r"^\s*-?\d+(\.\d+)?\s*$")


class AxisOption(TypedDict, total=False):
    """Renderer axis payload. Optional keys are omitted when unset."""

    type: str
    position: str
    min: float
    max: float
    name: Optional[str]
    nameGap: float
    nameLocation: str
    nameTextStyle: Dict[str, Any]
    boundaryGap: List[float]
    axisTick: Dict[str, Any]
    axisLine: Dict[str, Any]
    axisLabel: Dict[str, Any]
    splitLine: Dict[str, Any]


class CartesianAxes(TypedDict):
    xAxis: AxisOption
    yAxis: List[AxisOption]


# ==================== TICK VALUE PARSING ====================


def parse_leading_int(value: str) -> float:
    """Parse the integer prefix of ``value``; NaN when there is none."""
    match = _LEADING_INT.match(str(value))
    if match is None:
        return math.nan
    return int(match.group(1))


def normalize_timestamp(value: str) -> str:
    """
    Normalize a time tick value to ``YYYY-MM-DDTHH:MM:SS``.

    Numeric text is read as epoch milliseconds (UTC), anything else as an
    ISO 8601 string keeping its wall clock time. Unparseable values are
    returned unchanged.
    """
    text = str(value).strip()
    try:
        if _EPOCH.match(text):
            parsed = datetime.fromtimestamp(float(text) / 1000, tz=timezone.utc)
        else:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except (ValueError, OverflowError, OSError):
        logger.debug(f"Could not parse time tick value {value!r}")
        return text
    return parsed.strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True)
class DimensionLabelFormatter:
    """
    Tick label formatter of the dimension axis.

    The renderer always hands tick values over as text, even on numeric
    axes, so values are converted back before the user formatter runs.
    Labels are padded with spaces to keep adjacent ticks apart.
    """

    formatter: AxisFormatter
    axis_type: str
    is_numeric: bool

    def __call__(self, value: str) -> str:
        value_to_format: Any = value
        if self.axis_type == "time":
            value_to_format = normalize_timestamp(value)
        elif self.is_numeric:
            value_to_format = parse_leading_int(value)

        return f" {self.formatter(value_to_format)} "


# ==================== AXIS PROPERTIES ====================


def get_x_axis_type(settings: ChartSettings) -> str:
    if settings.x_scale == "timeseries":
        return "time"
    if settings.x_scale == "linear":
        return "value"
    return "category"


def get_rotate_angle(settings: ChartSettings) -> Optional[int]:
    if settings.x_axis_display is AxisDisplay.ROTATE_45:
        return 45
    if settings.x_axis_display is AxisDisplay.ROTATE_90:
        return 90
    return None


def _axis_name_option(
    ctx: RenderingContext,
    name_gap: float,
    name: Optional[str],
    style: ChartStyleConfig,
) -> AxisOption:
    return {
        "name": name,
        "nameGap": name_gap,
        "nameLocation": style.AXIS_NAME_LOCATION,
        "nameTextStyle": {
            "color": ctx.get_color(style.TEXT_COLOR),
            "fontSize": style.AXIS_NAME_SIZE,
            "fontWeight": style.AXIS_NAME_WEIGHT,
            "fontFamily": ctx.font_family,
        },
    }


def _ticks_option(ctx: RenderingContext, style: ChartStyleConfig) -> Dict[str, Any]:
    return {
        "hideOverlap": True,
        "color": ctx.get_color(style.TEXT_COLOR),
        "fontSize": style.AXIS_TICKS_SIZE,
        "fontWeight": style.AXIS_TICKS_WEIGHT,
        "fontFamily": ctx.font_family,
    }


# ==================== AXIS BUILDERS ====================


def build_dimension_axis(
    chart_model: ChartModel,
    settings: ChartSettings,
    formatter: AxisFormatter,
    ctx: RenderingContext,
    style: ChartStyleConfig = DEFAULT_STYLE,
) -> AxisOption:
    """Build the X axis descriptor."""
    axis_type = get_x_axis_type(settings)
    name_gap = x_name_gap(chart_model, settings, formatter, ctx, style)

    axis_label: Dict[str, Any] = {"show": settings.x_axis_display.is_visible}
    rotate = get_rotate_angle(settings)
    if rotate is not None:
        axis_label["rotate"] = rotate
    axis_label.update(_ticks_option(ctx, style))
    axis_label["formatter"] = DimensionLabelFormatter(
        formatter=formatter,
        axis_type=axis_type,
        is_numeric=chart_model.dimension_model.column.is_numeric,
    )

    axis: AxisOption = _axis_name_option(ctx, name_gap, settings.x_title_text, style)
    axis["axisTick"] = {"show": False}
    # Value axes let data touch the plot edge
    if axis_type != "value":
        axis["boundaryGap"] = list(style.BOUNDARY_GAP)
    axis["splitLine"] = {"show": False}
    axis["type"] = axis_type
    axis["axisLabel"] = axis_label
    axis["axisLine"] = {"lineStyle": {"color": ctx.get_color(style.TEXT_COLOR)}}
    return axis


def build_metric_axis(
    settings: ChartSettings,
    position: str,
    axis_range: AxisRange,
    extent: Extent,
    formatter: AxisFormatter,
    ctx: RenderingContext,
    style: ChartStyleConfig = DEFAULT_STYLE,
) -> AxisOption:
    """Build a Y axis descriptor placed on ``position`` ("left" or "right")."""
    name_gap = y_name_gap(extent, formatter, settings, ctx, style)

    axis: AxisOption = {}
    axis.update(axis_range)
    axis.update(_axis_name_option(ctx, name_gap, settings.y_title_text, style))
    axis["splitLine"] = {
        "lineStyle": {
            "type": style.SPLIT_LINE_DASH,
            "color": ctx.get_color(style.BORDER_COLOR),
        },
    }
    axis["position"] = position
    axis["axisLabel"] = {**_ticks_option(ctx, style), "formatter": formatter}
    return axis


def build_metric_axes(
    chart_model: ChartModel,
    settings: ChartSettings,
    formatters: AxesFormatters,
    ctx: RenderingContext,
    style: ChartStyleConfig = DEFAULT_STYLE,
) -> List[AxisOption]:
    """
    Build the Y axis descriptors.

    Each side is included only when it has both a formatter and an
    extent, which covers single, dual and axis-less charts.
    """
    left_range, right_range = resolve_ranges(chart_model.y_axis_extents, settings)
    left_extent, right_extent = chart_model.y_axis_extents

    slots: Tuple[Tuple[str, AxisRange, Optional[Extent], Optional[AxisFormatter]], ...] = (
        ("left", left_range, left_extent, formatters.left),
        ("right", right_range, right_extent, formatters.right),
    )

    axes: List[AxisOption] = []
    for position, axis_range, extent, formatter in slots:
        if formatter is None or extent is None:
            continue
        axes.append(build_metric_axis(settings, position, axis_range, extent, formatter, ctx, style))

    logger.debug(f"Built {len(axes)} metric axes")
    return axes


def build_axes(
    chart_model: ChartModel,
    settings: ChartSettings,
    formatters: AxesFormatters,
    ctx: RenderingContext,
    style: ChartStyleConfig = DEFAULT_STYLE,
) -> CartesianAxes:
    """Build the dimension axis and metric axes descriptors."""
    return {
        "xAxis": build_dimension_axis(chart_model, settings, formatters.bottom, ctx, style),
        "yAxis": build_metric_axes(chart_model, settings, formatters, ctx, style),
    }
