"""Rendering context threaded through every layout function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from chart_axes.models.data_types import FontStyle
from chart_axes.rendering.text_metrics import OpenCVTextMeasurer

ColorGetter = Callable[[str], str]
TextMeasurer = Callable[[str, FontStyle], float]

DEFAULT_PALETTE: Mapping[str, str] = {
    "text-dark": "#4C5773",
    "text-medium": "#949AAB",
    "text-light": "#B8BBC3",
    "border": "#EEECEC",
}
FALLBACK_COLOR = "#000000"


@dataclass(frozen=True)
class RenderingContext:
    """Color lookup, font family and text measurement for one render.

    Supplied fresh per render; nothing in the layout engine keeps it.
    """

    get_color: ColorGetter
    measure_text: TextMeasurer
    font_family: str


def palette_color_getter(palette: Mapping[str, str]) -> ColorGetter:
    """Return a color lookup over ``palette`` with a black fallback."""

    def get_color(name: str) -> str:
        return palette.get(name, FALLBACK_COLOR)

    return get_color


def default_rendering_context(
    font_family: str = "Lato",
    measurer: TextMeasurer | None = None,
    palette: Mapping[str, str] | None = None,
) -> RenderingContext:
    """Build a context with the default palette and an OpenCV text measurer."""
    return RenderingContext(
        get_color=palette_color_getter(palette or DEFAULT_PALETTE),
        measure_text=measurer or OpenCVTextMeasurer(),
        font_family=font_family,
    )
