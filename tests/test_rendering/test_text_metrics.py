"""
Tests for text measurement backends and the rendering context.

Tests cover:
- OpenCVTextMeasurer: scaling with font size and weight
- PillowTextMeasurer: default font fallback
- default_rendering_context / palette_color_getter
"""
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from chart_axes.models.data_types import FontStyle
from chart_axes.rendering.context import (
    DEFAULT_PALETTE,
    RenderingContext,
    default_rendering_context,
    palette_color_getter,
)
from chart_axes.rendering.text_metrics import OpenCVTextMeasurer, PillowTextMeasurer


REGULAR = FontStyle(size=12, weight=400, family="Lato")
BOLD = FontStyle(size=12, weight=700, family="Lato")
LARGE = FontStyle(size=24, weight=400, family="Lato")


@pytest.fixture(params=[OpenCVTextMeasurer, PillowTextMeasurer])
def measurer(request):
    return request.param()


class TestMeasurers:
    """Behavior shared by every measurer."""

    def test_empty_text_is_zero(self, measurer):
        assert measurer("", REGULAR) == 0.0

    def test_returns_float(self, measurer):
        assert isinstance(measurer("1,000", REGULAR), float)

    def test_longer_text_is_wider(self, measurer):
        assert measurer("1,000,000", REGULAR) > measurer("10", REGULAR)

    def test_larger_font_is_wider(self, measurer):
        assert measurer("January", LARGE) > measurer("January", REGULAR)


class TestOpenCVTextMeasurer:
    """Test OpenCVTextMeasurer specifics."""

    def test_bold_is_not_narrower(self):
        measurer = OpenCVTextMeasurer()
        assert measurer("Revenue", BOLD) >= measurer("Revenue", REGULAR)

    def test_uses_scaled_hershey_font(self):
        measurer = OpenCVTextMeasurer()
        with patch("chart_axes.rendering.text_metrics.cv2.getTextSize", return_value=((40, 10), 3)) as get_size:
            assert measurer("abc", LARGE) == 40.0
        _, _, scale, thickness = get_size.call_args.args
        assert scale == pytest.approx(24 / OpenCVTextMeasurer.BASE_PIXEL_SIZE)
        assert thickness == 1


class TestPillowTextMeasurer:
    """Test PillowTextMeasurer specifics."""

    def test_unknown_family_falls_back(self):
        measurer = PillowTextMeasurer()
        style = FontStyle(size=12, weight=400, family="surely-not-a-font-file")
        assert measurer("Gizmo", style) > 0

    def test_fonts_are_reused(self):
        measurer = PillowTextMeasurer()
        measurer("a", REGULAR)
        measurer("b", REGULAR)
        assert list(measurer._fonts) == [("Lato", 12)]


class TestRenderingContext:
    """Test context helpers."""

    def test_palette_lookup(self):
        get_color = palette_color_getter({"border": "#ABCDEF"})
        assert get_color("border") == "#ABCDEF"
        assert get_color("unknown") == "#000000"

    def test_default_context(self):
        ctx = default_rendering_context()
        assert isinstance(ctx, RenderingContext)
        assert ctx.font_family == "Lato"
        assert ctx.get_color("text-dark") == DEFAULT_PALETTE["text-dark"]
        assert isinstance(ctx.measure_text, OpenCVTextMeasurer)

    def test_default_context_overrides(self):
        measurer = PillowTextMeasurer()
        ctx = default_rendering_context("Inter", measurer=measurer, palette={"text-dark": "#000001"})
        assert ctx.measure_text is measurer
        assert ctx.get_color("text-dark") == "#000001"
