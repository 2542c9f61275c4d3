"""
Pytest fixtures for Chart Axes tests.

Provides:
- Deterministic rendering contexts (fixed-width text measurement)
- Chart models for category, numeric and time dimensions
- Settings builders
"""
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from chart_axes.config.settings import ChartSettings
from chart_axes.models.data_types import AxesFormatters, ChartModel, ColumnInfo, DimensionModel
from chart_axes.rendering.context import RenderingContext, palette_color_getter


# ==================== CONSTANTS ====================

CHAR_WIDTH = 7  # Pixels per character for the fake measurer

PALETTE = {
    "text-dark": "#111111",
    "border": "#EEEEEE",
}


def fixed_width_measure(text, style):
    """Each character is CHAR_WIDTH pixels wide regardless of font."""
    return float(len(text) * CHAR_WIDTH)


# ==================== CONTEXT FIXTURES ====================

@pytest.fixture
def ctx():
    """Rendering context with fixed-width text measurement."""
    return RenderingContext(
        get_color=palette_color_getter(PALETTE),
        measure_text=fixed_width_measure,
        font_family="Lato",
    )


@pytest.fixture
def make_ctx():
    """Factory for contexts with a custom measurer."""
    def _make(measure_text):
        return RenderingContext(
            get_color=palette_color_getter(PALETTE),
            measure_text=measure_text,
            font_family="Lato",
        )
    return _make


# ==================== SETTINGS FIXTURES ====================

@pytest.fixture
def make_settings():
    """Build ChartSettings from dotted keys."""
    def _make(**overrides):
        return ChartSettings.from_dict(overrides)
    return _make


@pytest.fixture
def manual_settings():
    """Manual range mode with custom bounds that widen a (10, 90) extent."""
    return ChartSettings.from_dict({
        "graph.y_axis.auto_range": False,
        "graph.y_axis.min": 0,
        "graph.y_axis.max": 100,
    })


# ==================== CHART MODEL FIXTURES ====================

@pytest.fixture
def category_chart():
    """3 rows with a text dimension and a single (left) metric axis."""
    return ChartModel(
        dataset=(
            {"category": "Widget", "count": 10},
            {"category": "Gizmo", "count": 90},
            {"category": "Doohickey", "count": 45},
        ),
        dimension_model=DimensionModel(
            data_key="category",
            column=ColumnInfo(name="category", base_type="type/Text"),
        ),
        y_axis_extents=((10.0, 90.0), None),
    )


@pytest.fixture
def numeric_chart():
    """Numeric dimension with both metric axes in use."""
    return ChartModel(
        dataset=(
            {"year": 2021, "sales": 1000, "margin": 0.1},
            {"year": 2022, "sales": 2500, "margin": 0.3},
        ),
        dimension_model=DimensionModel(
            data_key="year",
            column=ColumnInfo(name="year", base_type="type/Integer"),
        ),
        y_axis_extents=((1000.0, 2500.0), (0.1, 0.3)),
    )


@pytest.fixture
def empty_chart():
    """No rows and no metric extents."""
    return ChartModel(
        dataset=(),
        dimension_model=DimensionModel(data_key="x", column=ColumnInfo(name="x")),
        y_axis_extents=(None, None),
    )


@pytest.fixture
def formatters():
    """str() formatters for every slot."""
    return AxesFormatters(bottom=str, left=str, right=str)
