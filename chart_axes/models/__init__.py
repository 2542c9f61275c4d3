"""Models package for cartesian axis layout.

This package contains the read-only inputs of a layout pass and the
exceptions raised when building them.
"""
from .data_types import (
    AxesFormatters,
    AxisFormatter,
    AxisRange,
    ChartLayoutError,
    ChartModel,
    ColumnInfo,
    DimensionModel,
    Extent,
    FontStyle,
    InvalidChartModelError,
)

__all__ = [
    "AxesFormatters",
    "AxisFormatter",
    "AxisRange",
    "ChartLayoutError",
    "ChartModel",
    "ColumnInfo",
    "DimensionModel",
    "Extent",
    "FontStyle",
    "InvalidChartModelError",
]
