"""
Style configuration for cartesian axis layout.

Centralizes all magic numbers used when reserving space for axis
ticks and titles.
"""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ChartStyleConfig:
    """
    Configuration for axis styling and spacing.

    Sizes are in pixels unless otherwise noted.
    """

    # ==================== Tick Labels ====================
    # Also used as the fixed height reserved for unrotated X ticks
    AXIS_TICKS_SIZE: int = 12
    AXIS_TICKS_WEIGHT: int = 700

    # ==================== Axis Titles ====================
    AXIS_NAME_SIZE: int = 12
    AXIS_NAME_WEIGHT: int = 700
    AXIS_NAME_PADDING: int = 20  # Between tick labels and title
    AXIS_NAME_LOCATION: str = "middle"

    # ==================== Dimension Axis ====================
    BOUNDARY_GAP: Tuple[float, float] = (0.02, 0.02)  # Ratio per side

    # ==================== Metric Axes ====================
    SPLIT_LINE_DASH: int = 5

    # ==================== Colors ====================
    # Names resolved through the rendering context
    TEXT_COLOR: str = "text-dark"
    BORDER_COLOR: str = "border"

    @property
    def axis_name_offset(self) -> int:
        """Padding reserved around the plot for a title."""
        return self.AXIS_NAME_SIZE + self.AXIS_NAME_PADDING


# Default configuration instance
DEFAULT_STYLE = ChartStyleConfig()
