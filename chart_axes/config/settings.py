# chart_axes/config/settings.py
"""
Visualization settings snapshot consumed by the layout engine.

Raw settings arrive as a flat mapping of dotted keys. ``ChartSettings``
parses them once into typed fields so the layout functions never deal
with malformed values: anything that cannot be understood falls back
to the default (auto) behavior.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional


# ==================== SETTINGS KEYS ====================

STACK_TYPE = "stackable.stack_type"
Y_AUTO_RANGE = "graph.y_axis.auto_range"
Y_MIN = "graph.y_axis.min"
Y_MAX = "graph.y_axis.max"
X_SCALE = "graph.x_axis.scale"
X_AXIS_ENABLED = "graph.x_axis.axis_enabled"
Y_LABELS_ENABLED = "graph.y_axis.labels_enabled"
Y_TITLE_TEXT = "graph.y_axis.title_text"
X_TITLE_TEXT = "graph.x_axis.title_text"


class AxisDisplay(Enum):
    """Visibility and tick layout mode of the dimension axis."""

    HIDDEN = "hidden"
    SHOWN = "shown"
    COMPACT = "compact"
    ROTATE_45 = "rotate-45"
    ROTATE_90 = "rotate-90"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: Any) -> "AxisDisplay":
        """Map a raw ``graph.x_axis.axis_enabled`` value to a mode."""
        if value is True or value == "shown":
            return cls.SHOWN
        if not value:
            return cls.HIDDEN
        if value == "compact":
            return cls.COMPACT
        if value == "rotate-45":
            return cls.ROTATE_45
        if value == "rotate-90":
            return cls.ROTATE_90
        return cls.UNRECOGNIZED

    @property
    def is_visible(self) -> bool:
        # Unknown modes are truthy strings upstream, so the axis stays on
        return self is not AxisDisplay.HIDDEN

    @property
    def is_rotated(self) -> bool:
        return self in (AxisDisplay.ROTATE_45, AxisDisplay.ROTATE_90)


def _as_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class ChartSettings:
    """
    Immutable, typed view of the settings used for axis layout.

    Attributes:
        stack_type: Stacking mode ("stacked", "normalized" or None)
        y_auto_range: Let the renderer pick the metric axis range
        y_min: Custom lower bound for metric axes
        y_max: Custom upper bound for metric axes
        x_scale: Dimension scale ("timeseries", "linear", "ordinal", ...)
        x_axis_display: Dimension axis visibility and tick layout mode
        x_axis_display_raw: Original value behind ``x_axis_display``
        y_labels_enabled: Whether metric axis titles are shown
        y_title_text: Metric axis title
        x_title_text: Dimension axis title
    """

    stack_type: Optional[str] = None
    y_auto_range: bool = True
    y_min: Optional[float] = None
    y_max: Optional[float] = None
    x_scale: Optional[str] = None
    x_axis_display: AxisDisplay = AxisDisplay.SHOWN
    x_axis_display_raw: Any = True
    y_labels_enabled: bool = True
    y_title_text: Optional[str] = None
    x_title_text: Optional[str] = None

    @property
    def is_normalized(self) -> bool:
        return self.stack_type == "normalized"

    @property
    def has_y_axis_name(self) -> bool:
        """Metric axis title is enabled and has text."""
        return self.y_labels_enabled and self.y_title_text is not None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ChartSettings":
        """Create from a flat mapping of dotted setting keys."""
        raw_display = d.get(X_AXIS_ENABLED, True)
        return cls(
            stack_type=_as_text(d.get(STACK_TYPE)),
            y_auto_range=_as_bool(d.get(Y_AUTO_RANGE), True),
            y_min=_as_number(d.get(Y_MIN)),
            y_max=_as_number(d.get(Y_MAX)),
            x_scale=_as_text(d.get(X_SCALE)),
            x_axis_display=AxisDisplay.parse(raw_display),
            x_axis_display_raw=raw_display,
            y_labels_enabled=_as_bool(d.get(Y_LABELS_ENABLED), True),
            y_title_text=_as_text(d.get(Y_TITLE_TEXT)),
            x_title_text=_as_text(d.get(X_TITLE_TEXT)),
        )
