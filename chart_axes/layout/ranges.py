"""Metric axis range resolution."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from chart_axes.config.settings import ChartSettings
from chart_axes.models.data_types import AxisRange, Extent

logger = logging.getLogger(__name__)


def normalized_range() -> AxisRange:
    return {"min": 0, "max": 1}


def get_custom_axis_range(
    extent: Extent,
    custom_min: Optional[float],
    custom_max: Optional[float],
) -> AxisRange:
    """Return the custom bounds that widen ``extent``.

    A bound inside the series extent would crop data, so it is dropped and
    the renderer computes a rounded bound instead.
    """
    extent_min, extent_max = extent
    axis_range: AxisRange = {}
    if custom_min is not None and custom_min < extent_min:
        axis_range["min"] = custom_min
    if custom_max is not None and custom_max > extent_max:
        axis_range["max"] = custom_max
    return axis_range


def resolve_ranges(
    y_axis_extents: Tuple[Optional[Extent], Optional[Extent]],
    settings: ChartSettings,
) -> Tuple[AxisRange, AxisRange]:
    """Compute the (left, right) metric axis ranges.

    Normalized stacking always wins over auto and custom ranges.
    """
    if settings.is_normalized:
        return normalized_range(), normalized_range()

    if settings.y_auto_range:
        return {}, {}

    left, right = y_axis_extents
    ranges = (
        get_custom_axis_range(left, settings.y_min, settings.y_max) if left is not None else {},
        get_custom_axis_range(right, settings.y_min, settings.y_max) if right is not None else {},
    )
    logger.debug(f"Resolved custom axis ranges: {ranges}")
    return ranges
