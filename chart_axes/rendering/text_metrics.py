# chart_axes/rendering/text_metrics.py
"""
Text measurement backends.

The layout engine only needs ``measure_text(text, style) -> width``. Two
measurers are provided, one backed by OpenCV's Hershey fonts (no font
files needed) and one backed by Pillow (real TrueType metrics when the
font family can be loaded).
"""

import logging
from typing import Dict, Tuple

import cv2
from PIL import ImageFont

from chart_axes.models.data_types import FontStyle


logger = logging.getLogger(__name__)

BOLD_WEIGHT = 600


class OpenCVTextMeasurer:
    """
    Measure text with ``cv2.getTextSize``.

    Hershey fonts are vector fonts, so any pixel size can be emulated by
    scaling. The font family is ignored.
    """

    # Pixel height of FONT_HERSHEY_SIMPLEX at scale 1.0
    BASE_PIXEL_SIZE = 22

    def __init__(self, font_face: int = cv2.FONT_HERSHEY_SIMPLEX):
        self.font_face = font_face

    def __call__(self, text: str, style: FontStyle) -> float:
        if not text:
            return 0.0
        scale = style.size / self.BASE_PIXEL_SIZE
        thickness = 2 if style.weight >= BOLD_WEIGHT else 1
        (width, _height), _baseline = cv2.getTextSize(text, self.font_face, scale, thickness)
        return float(width)


class PillowTextMeasurer:
    """
    Measure text with Pillow font metrics.

    ``style.family`` is tried as a TrueType font name or path; when it
    cannot be loaded Pillow's bundled default font is used at the same
    size. Loaded fonts are kept per measurer instance.
    """

    def __init__(self):
        self._fonts: Dict[Tuple[str, int], ImageFont.FreeTypeFont] = {}

    def _font(self, family: str, size: int):
        key = (family, size)
        if key not in self._fonts:
            try:
                self._fonts[key] = ImageFont.truetype(family, size)
            except OSError:
                logger.debug(f"Font '{family}' not found, using Pillow default font")
                self._fonts[key] = ImageFont.load_default(size=size)
        return self._fonts[key]

    def __call__(self, text: str, style: FontStyle) -> float:
        if not text:
            return 0.0
        return float(self._font(style.family, style.size).getlength(text))
