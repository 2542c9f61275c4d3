"""Rendering package for cartesian axis layout.

This package contains the rendering context and text measurement backends.
"""
from .context import (
    DEFAULT_PALETTE,
    RenderingContext,
    default_rendering_context,
    palette_color_getter,
)
from .text_metrics import OpenCVTextMeasurer, PillowTextMeasurer

__all__ = [
    "DEFAULT_PALETTE",
    "RenderingContext",
    "default_rendering_context",
    "palette_color_getter",
    "OpenCVTextMeasurer",
    "PillowTextMeasurer",
]
