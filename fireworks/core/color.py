"""
Color conversion for particle rendering
"""

import colorsys
import numpy as np
from typing import Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)


def wrap_hue(h: float) -> float:
    """Wrap a hue in degrees into [0, 360)"""
    return h % 360.0


def hsl_to_rgb(h: float, s: float, l: float) -> Color:
    """
    Convert HSL to RGB (0-255).

    Args:
        h: Hue in degrees, any value (wrapped modulo 360)
        s: Saturation in percent (0-100)
        l: Lightness in percent (0-100)
    """
    r, g, b = colorsys.hls_to_rgb(
        wrap_hue(h) / 360.0,
        float(np.clip(l / 100.0, 0, 1)),
        float(np.clip(s / 100.0, 0, 1)),
    )
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)))


def parse_color(value) -> Color:
    """Accept an (r, g, b) sequence or a '#rrggbb' string"""
    if isinstance(value, str):
        text = value.lstrip('#')
        if len(text) != 6:
            raise ValueError(f"Invalid color: {value!r}")
        return (int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16))

    rgb = tuple(int(c) for c in value)
    if len(rgb) != 3 or any(c < 0 or c > 255 for c in rgb):
        raise ValueError(f"Invalid color: {value!r}")
    return rgb
