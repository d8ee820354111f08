"""
Render surfaces - the only drawing capability the show needs.

A surface can clear itself to a color and draw filled circles with an
opacity. Particles never talk to a graphics library directly; hosts hand the
show a surface and the show issues circle commands against it.

Provided surfaces:
- RasterSurface: numpy RGB canvas, exportable through Pillow
- RecordingSurface: keeps the command list (headless hosts, tests)
"""

import numpy as np
from PIL import Image
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Tuple

from .color import Color, BLACK
from .physics import Vec2


class Surface(ABC):
    """Abstract drawing target"""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)

    def resize(self, width: int, height: int) -> None:
        self.width = int(width)
        self.height = int(height)

    @abstractmethod
    def clear(self, color: Color = BLACK) -> None:
        """Fill the whole surface with a color"""
        pass

    def draw_circle(self, center: Vec2, radius: float, color: Color, alpha: float = 1.0) -> bool:
        """
        Draw a filled circle.

        Alpha is clamped to [0, 1]. Circles with a non-positive radius or
        alpha are skipped.

        Returns:
            True if the circle was drawn
        """
        alpha = min(1.0, max(0.0, alpha))
        if radius <= 0 or alpha <= 0:
            return False
        self._fill_circle(center, float(radius), color, alpha)
        return True

    @abstractmethod
    def _fill_circle(self, center: Vec2, radius: float, color: Color, alpha: float) -> None:
        pass


# =============================================================================
# Raster Surface
# =============================================================================

class RasterSurface(Surface):
    """
    In-memory RGB canvas.

    Circles are alpha blended over the existing pixels ("alpha" blend mode:
    out = src * a + dst * (1 - a)).
    """

    def __init__(self, width: int, height: int, background: Color = BLACK):
        super().__init__(width, height)
        self.background = background
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.clear(background)

    def resize(self, width: int, height: int) -> None:
        super().resize(width, height)
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.clear(self.background)

    def clear(self, color: Color = BLACK) -> None:
        self.pixels[:, :] = color

    def _fill_circle(self, center: Vec2, radius: float, color: Color, alpha: float) -> None:
        h, w = self.pixels.shape[:2]
        cx, cy = center.x, center.y

        x0 = max(0, int(np.floor(cx - radius)))
        x1 = min(w, int(np.ceil(cx + radius)) + 1)
        y0 = max(0, int(np.floor(cy - radius)))
        y1 = min(h, int(np.ceil(cy + radius)) + 1)
        if x0 >= x1 or y0 >= y1:
            return

        # Pixel centers inside the circle
        yy, xx = np.ogrid[y0:y1, x0:x1]
        mask = (xx + 0.5 - cx) ** 2 + (yy + 0.5 - cy) ** 2 <= radius * radius

        if not mask.any():
            # Sub-pixel circle: light the pixel under the center
            px, py = int(np.floor(cx)), int(np.floor(cy))
            if not (x0 <= px < x1 and y0 <= py < y1):
                return
            mask = np.zeros((y1 - y0, x1 - x0), dtype=bool)
            mask[py - y0, px - x0] = True

        region = self.pixels[y0:y1, x0:x1].astype(np.float32)
        src = np.array(color, dtype=np.float32)
        region[mask] = src * alpha + region[mask] * (1.0 - alpha)
        self.pixels[y0:y1, x0:x1] = np.clip(region, 0, 255).astype(np.uint8)

    def to_image(self) -> Image.Image:
        """Snapshot the canvas as a Pillow image"""
        return Image.fromarray(self.pixels.copy(), 'RGB')

    def to_array(self) -> np.ndarray:
        return self.pixels.copy()


# =============================================================================
# Recording Surface
# =============================================================================

@dataclass(frozen=True)
class CircleCommand:
    """One filled circle issued against a surface"""
    center: Tuple[float, float]
    radius: float
    color: Color
    alpha: float


class RecordingSurface(Surface):
    """Surface that stores draw commands instead of pixels"""

    def __init__(self, width: int = 800, height: int = 600):
        super().__init__(width, height)
        self.commands: List[CircleCommand] = []
        self.clear_color: Color = None
        self.clear_count = 0

    def clear(self, color: Color = BLACK) -> None:
        self.commands = []
        self.clear_color = color
        self.clear_count += 1

    def _fill_circle(self, center: Vec2, radius: float, color: Color, alpha: float) -> None:
        self.commands.append(CircleCommand(center.to_tuple(), radius, color, alpha))
