"""Layout package for cartesian charts.

This package contains range resolution, tick geometry, grid padding and
axis option assembly.
"""
from .axes import build_axes, build_dimension_axis, build_metric_axes
from .cartesian import build_cartesian_layout, to_jsonable
from .grid import build_grid
from .ranges import resolve_ranges
from .ticks import x_name_gap, x_ticks_height, y_name_gap, y_ticks_width

__all__ = [
    "build_axes",
    "build_cartesian_layout",
    "build_dimension_axis",
    "build_grid",
    "build_metric_axes",
    "resolve_ranges",
    "to_jsonable",
    "x_name_gap",
    "x_ticks_height",
    "y_name_gap",
    "y_ticks_width",
]
