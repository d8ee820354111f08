"""
Live Fireworks Window

Runs a FireworksShow in a pygame window at its configured frame rate.

Controls:
    LEFT CLICK  - Launch a rocket at the pointer
    A           - Toggle automatic launches
    B           - Burst of staggered rockets
    C           - Clear all rockets
    SPACE       - Pause/resume
    I           - Show/hide info
    H           - Show/hide help
    S           - Save current frame as PNG
    ESC/Q       - Quit

Requires: pygame (pip install pygame)
"""

import math
from typing import Any, Tuple

from .color import Color, BLACK
from .physics import Vec2
from .simulation import FireworksShow
from .surface import Surface

# Try to import pygame
try:
    import pygame
    from pygame.locals import *
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False
    pygame = None


# =============================================================================
# Pygame Surface Adapter
# =============================================================================

class PygameSurface(Surface):
    """Surface backed by a pygame display or off-screen surface"""

    def __init__(self, target: Any):
        width, height = target.get_size()
        super().__init__(width, height)
        self.target = target

    def retarget(self, target: Any) -> None:
        """Point at a new pygame surface (after a window resize)"""
        self.target = target
        self.resize(*target.get_size())

    def clear(self, color: Color = BLACK) -> None:
        self.target.fill(color)

    def _fill_circle(self, center: Vec2, radius: float, color: Color, alpha: float) -> None:
        radius = max(radius, 1.0)

        if alpha >= 1.0:
            pygame.draw.circle(self.target, color, (center.x, center.y), radius)
            return

        # Per-draw alpha needs an intermediate SRCALPHA surface
        size = int(math.ceil(radius * 2)) + 2
        stamp = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(stamp, (*color, int(alpha * 255)), (size / 2, size / 2), radius)
        self.target.blit(stamp, (center.x - size / 2, center.y - size / 2))


# =============================================================================
# Window
# =============================================================================

class FireworksWindow:
    """
    Interactive fireworks window.

    Example:
        show = FireworksShow(ShowConfig(seed=1))
        FireworksWindow(show).run()
    """

    def __init__(self, show: FireworksShow, title: str = "Fireworks"):
        if not PYGAME_AVAILABLE:
            raise ImportError(
                "pygame is required for the live window. Install with: pip install pygame"
            )

        self.show = show
        self.title = title
        self.paused = False
        self.show_info = True
        self.show_help = False
        self.saved_frames = 0

        self._init_pygame()

    def _init_pygame(self):
        pygame.init()
        pygame.display.set_caption(self.title)

        self.screen = pygame.display.set_mode(
            (self.show.width, self.show.height),
            pygame.RESIZABLE
        )
        self.surface = PygameSurface(self.screen)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 20)

    def run(self):
        """Run the window main loop: one tick and one render per frame"""
        running = True

        while running:
            self.clock.tick(self.show.config.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    running = self._handle_key(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.show.launch_at(event.pos[0])
                elif event.type == pygame.VIDEORESIZE:
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE
                    )
                    self.surface.retarget(self.screen)
                    self.show.resize(event.w, event.h)

            if not self.paused:
                self.show.tick()

            self.show.render(self.surface)

            if self.show_info:
                self._render_info()
            if self.show_help:
                self._render_help()

            pygame.display.flip()

        pygame.quit()

    def _handle_key(self, key: int) -> bool:
        """Handle keyboard input. Returns False to quit."""
        if key in (K_ESCAPE, K_q):
            return False

        elif key == K_a:
            self.show.toggle_auto_launch()
        elif key == K_b:
            self.show.burst()
        elif key == K_c:
            self.show.clear(self.surface)
        elif key == K_SPACE:
            self.paused = not self.paused
        elif key == K_i:
            self.show_info = not self.show_info
        elif key == K_h:
            self.show_help = not self.show_help
        elif key == K_s:
            self._save_frame()

        return True

    def _render_info(self):
        lines = [
            f"Frame: {self.show.frame_count}",
            f"FPS: {self.clock.get_fps():.0f}",
            f"Rockets: {self.show.rocket_count}",
            f"Particles: {self.show.particle_count}",
            f"Auto: {'ON' if self.show.auto_launch else 'OFF'}",
        ]
        if self.paused:
            lines.append("PAUSED")

        y = 10
        for line in lines:
            self._render_text(line, (10, y))
            y += 18

    def _render_help(self):
        help_text = [
            "CONTROLS:",
            "",
            "CLICK      Launch rocket",
            "A          Toggle auto launch",
            "B          Burst",
            "C          Clear",
            "SPACE      Pause/Resume",
            "I          Toggle info",
            "S          Save frame",
            "H          Hide this help",
            "ESC/Q      Quit",
        ]

        overlay = pygame.Surface((260, len(help_text) * 20 + 20), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))

        x = (self.show.width - 260) // 2
        y = (self.show.height - len(help_text) * 20) // 2
        self.screen.blit(overlay, (x, y))

        for i, line in enumerate(help_text):
            self._render_text(line, (x + 20, y + 10 + i * 20), color=(255, 255, 255))

    def _render_text(
        self,
        text: str,
        pos: Tuple[int, int],
        color: Tuple[int, int, int] = (200, 200, 200)
    ):
        """Render text with shadow"""
        shadow = self.font.render(text, True, (0, 0, 0))
        self.screen.blit(shadow, (pos[0] + 1, pos[1] + 1))
        self.screen.blit(self.font.render(text, True, color), pos)

    def _save_frame(self):
        filename = f"fireworks_{self.show.frame_count:06d}.png"
        pygame.image.save(self.screen, filename)
        self.saved_frames += 1
        print(f"Saved: {filename}")


# =============================================================================
# Convenience Functions
# =============================================================================

def run_window(show: FireworksShow, title: str = "Fireworks") -> None:
    """Open a live window for a show"""
    FireworksWindow(show, title).run()


def check_pygame_available() -> bool:
    """Check if pygame is available for the live window"""
    return PYGAME_AVAILABLE
