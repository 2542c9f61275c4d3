"""Configuration module for cartesian axis layout."""

from .chart_style import ChartStyleConfig, DEFAULT_STYLE
from .settings import AxisDisplay, ChartSettings

__all__ = ["ChartStyleConfig", "DEFAULT_STYLE", "AxisDisplay", "ChartSettings"]
